from __future__ import annotations

from datetime import timedelta

from .base import PacingPolicy, PhaseSplit


class SpeedRatioPolicy(PacingPolicy):
    """Opening moves are played twice as fast as the remaining moves.

    With o opening moves out of m, both phases exhaust the total time when
    total = t*o + 2*t*(m - o), so t = total / (2m - o).
    """

    name = "speed-ratio"

    def __init__(self, opening_moves: int) -> None:
        self.opening_moves = opening_moves

    def split(self, total_time: timedelta, total_moves: int) -> PhaseSplit:
        opening_time_per_move = total_time / (2 * total_moves - self.opening_moves)
        return PhaseSplit(
            opening_move_count=self.opening_moves,
            opening_time_per_move=opening_time_per_move,
            remaining_time_per_move=2 * opening_time_per_move,
        )

    def __repr__(self) -> str:
        return f"SpeedRatioPolicy(opening_moves={self.opening_moves})"
