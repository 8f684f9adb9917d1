"""
Pacing policy abstractions for splitting the total clock time across moves.

Each policy decides how much time an opening move and a remaining (post-opening)
move may consume, given the total time available and the number of moves.
Exactly one policy is resolved per time control; see resolve_policy().
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class PhaseSplit:
    """Per-move durations for the opening phase and the rest of the game."""

    opening_move_count: int
    opening_time_per_move: timedelta
    remaining_time_per_move: timedelta


class PacingPolicy:
    """Interface for turning total time into per-move durations."""

    name: str

    def split(self, total_time: timedelta, total_moves: int) -> PhaseSplit:
        raise NotImplementedError
