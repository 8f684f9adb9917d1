"""
Running-clock simulation.

simulate() walks moves 1..=total_moves, crediting the increment and then
charging the plan's budget for each move. The clock is never clamped: a
negative reading means the requested pacing does not fit the time control,
and it is reported as such.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from itertools import accumulate
from typing import List, Optional, Tuple

from .pacing import PacingPlan
from .timecontrol import TimeControlSpec


@dataclass(frozen=True)
class ScheduleEntry:
    move_index: int
    remaining_clock: timedelta


@dataclass(frozen=True)
class Schedule:
    entries: Tuple[ScheduleEntry, ...]  # one per move, in order
    display_interval: int = 1

    def displayed(self) -> List[ScheduleEntry]:
        """Entries whose move index is a multiple of the display interval."""
        return [e for e in self.entries if e.move_index % self.display_interval == 0]

    def first_negative(self) -> Optional[ScheduleEntry]:
        for e in self.entries:
            if e.remaining_clock < timedelta(0):
                return e
        return None

    @property
    def final_clock(self) -> timedelta:
        return self.entries[-1].remaining_clock


def simulate(spec: TimeControlSpec, plan: PacingPlan) -> Schedule:
    def advance(clock: timedelta, move_index: int) -> timedelta:
        if not (spec.lichess_mode and move_index == 1):
            clock += spec.increment
        return clock - plan.time_for_move(move_index)

    moves = range(1, spec.total_moves + 1)
    clocks = accumulate(moves, advance, initial=spec.starting_time)
    next(clocks)  # starting clock, before any move
    entries = tuple(ScheduleEntry(i, clock) for i, clock in zip(moves, clocks))
    return Schedule(entries=entries, display_interval=spec.display_interval)
