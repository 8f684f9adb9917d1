"""
Total-time derivation and the per-move PacingPlan.

- derive_total_time(): starting clock plus every increment the game will credit.
- build_plan(): resolves the pacing policy once and freezes its split into a PacingPlan.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from .pacing_policies import resolve_policy
from .timecontrol import TimeControlSpec


@dataclass(frozen=True)
class PacingPlan:
    total_time: timedelta
    opening_time_per_move: timedelta  # zero without an opening phase
    remaining_time_per_move: timedelta
    opening_move_count: int
    policy: str

    @property
    def has_opening_phase(self) -> bool:
        return self.opening_move_count > 0

    def time_for_move(self, move_index: int) -> timedelta:
        """Budget for move `move_index` (1-based)."""
        if move_index <= self.opening_move_count:
            return self.opening_time_per_move
        return self.remaining_time_per_move

    def to_dict(self) -> dict:
        return {
            "policy": self.policy,
            "total_time_s": self.total_time.total_seconds(),
            "opening_moves": self.opening_move_count,
            "opening_time_per_move_s": self.opening_time_per_move.total_seconds(),
            "remaining_time_per_move_s": self.remaining_time_per_move.total_seconds(),
        }


def derive_total_time(spec: TimeControlSpec) -> timedelta:
    return spec.starting_time + spec.increment * spec.credited_increments


def build_plan(spec: TimeControlSpec) -> PacingPlan:
    total_time = derive_total_time(spec)
    policy = resolve_policy(spec.opening_moves, spec.opening_percentage)
    split = policy.split(total_time, spec.total_moves)
    return PacingPlan(
        total_time=total_time,
        opening_time_per_move=split.opening_time_per_move,
        remaining_time_per_move=split.remaining_time_per_move,
        opening_move_count=split.opening_move_count,
        policy=policy.name,
    )
