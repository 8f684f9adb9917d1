"""
Time control input model.

TimeControlSpec holds the validated parameters of one pacing request. Validation
runs on construction, so every spec that exists is safe to hand to the
calculator: no zero divisors, no percentage without an opening move count.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional


_MAX_SECONDS = timedelta.max.days * 24 * 60 * 60


class ConfigurationError(ValueError):
    """Invalid or contradictory time control parameters."""


def _require_int(name: str, value) -> None:
    # bool is an int subclass; reject it so `True` never means one move
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer (got {value!r})")


@dataclass(frozen=True)
class TimeControlSpec:
    starting_minutes: int
    increment_seconds: int
    total_moves: int = 40
    lichess_mode: bool = False  # increment is not credited on the first move
    display_interval: int = 1
    opening_moves: Optional[int] = None
    opening_percentage: Optional[int] = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise ConfigurationError naming the offending parameter(s)."""
        _require_int("minutes", self.starting_minutes)
        _require_int("increment", self.increment_seconds)
        _require_int("moves", self.total_moves)
        _require_int("display", self.display_interval)
        if self.starting_minutes < 0:
            raise ConfigurationError(f"minutes must be >= 0 (got {self.starting_minutes})")
        if self.increment_seconds < 0:
            raise ConfigurationError(f"increment must be >= 0 (got {self.increment_seconds})")
        if self.total_moves < 1:
            raise ConfigurationError(f"moves must be >= 1 (got {self.total_moves})")
        if self.display_interval < 1:
            raise ConfigurationError(f"display must be >= 1 (got {self.display_interval})")
        # the percentage split scales total time by up to 100 before dividing
        if self._total_seconds() * 100 > _MAX_SECONDS:
            raise ConfigurationError(
                f"minutes ({self.starting_minutes}) and increment ({self.increment_seconds}) "
                f"give more total time than can be represented"
            )

        if self.opening_percentage is not None:
            _require_int("percentage", self.opening_percentage)
            if not 0 <= self.opening_percentage <= 100:
                raise ConfigurationError(f"percentage must be between 0 and 100 (got {self.opening_percentage})")
            if self.opening_moves is None:
                raise ConfigurationError("percentage requires opening: give the number of opening moves the percentage covers")

        if self.opening_moves is not None:
            _require_int("opening", self.opening_moves)
            if self.opening_moves < 0:
                raise ConfigurationError(f"opening must be >= 0 (got {self.opening_moves})")
            if self.opening_moves >= self.total_moves:
                raise ConfigurationError(
                    f"opening ({self.opening_moves}) must be less than moves ({self.total_moves})"
                )
            if self.opening_percentage is not None and self.opening_moves == 0:
                raise ConfigurationError("opening must be > 0 when percentage is given")
            if 2 * self.total_moves - self.opening_moves == 0:
                raise ConfigurationError(
                    f"opening ({self.opening_moves}) and moves ({self.total_moves}) leave no time to split"
                )

    def _total_seconds(self) -> int:
        return self.starting_minutes * 60 + self.increment_seconds * self.credited_increments

    @property
    def starting_time(self) -> timedelta:
        return timedelta(minutes=self.starting_minutes)

    @property
    def increment(self) -> timedelta:
        return timedelta(seconds=self.increment_seconds)

    @property
    def credited_increments(self) -> int:
        """How many increments the clock receives over the whole game."""
        return self.total_moves - 1 if self.lichess_mode else self.total_moves

    def label(self) -> str:
        """Time control as players write it, e.g. '90+30 (lichess)'."""
        text = f"{self.starting_minutes}+{self.increment_seconds}"
        if self.lichess_mode:
            text += " (lichess)"
        return text

    def to_dict(self) -> dict:
        return {
            "minutes": self.starting_minutes,
            "increment": self.increment_seconds,
            "moves": self.total_moves,
            "lichess": self.lichess_mode,
            "display": self.display_interval,
            "opening": self.opening_moves,
            "percentage": self.opening_percentage,
        }
