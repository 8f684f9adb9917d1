from __future__ import annotations

from datetime import timedelta

from .base import PacingPolicy, PhaseSplit


class FlatPolicy(PacingPolicy):
    """No opening phase: every move gets the same share of the total time."""

    name = "flat"

    def split(self, total_time: timedelta, total_moves: int) -> PhaseSplit:
        return PhaseSplit(
            opening_move_count=0,
            opening_time_per_move=timedelta(0),
            remaining_time_per_move=total_time / total_moves,
        )
