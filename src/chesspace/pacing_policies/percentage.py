from __future__ import annotations

from datetime import timedelta

from .base import PacingPolicy, PhaseSplit


class PercentageSplitPolicy(PacingPolicy):
    """Reserve a fixed percentage of the total time for the opening moves."""

    name = "percentage"

    def __init__(self, opening_moves: int, percentage: int) -> None:
        self.opening_moves = opening_moves
        self.percentage = percentage

    def split(self, total_time: timedelta, total_moves: int) -> PhaseSplit:
        opening_block = total_time * self.percentage / 100
        return PhaseSplit(
            opening_move_count=self.opening_moves,
            opening_time_per_move=opening_block / self.opening_moves,
            remaining_time_per_move=(total_time - opening_block) / (total_moves - self.opening_moves),
        )

    def __repr__(self) -> str:
        return f"PercentageSplitPolicy(opening_moves={self.opening_moves}, percentage={self.percentage})"
