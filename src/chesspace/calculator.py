"""
End-to-end pacing calculation: TimeControlSpec -> PacingPlan -> Schedule.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

from .pacing import PacingPlan, build_plan
from .schedule import Schedule, simulate
from .timecontrol import TimeControlSpec

log = logging.getLogger("calculator")


@dataclass(frozen=True)
class PacingResult:
    spec: TimeControlSpec
    plan: PacingPlan
    schedule: Schedule

    def summary(self) -> dict:
        return {
            "time_control": self.spec.to_dict(),
            "plan": self.plan.to_dict(),
            "schedule": [
                {"move": e.move_index, "clock_s": e.remaining_clock.total_seconds()}
                for e in self.schedule.displayed()
            ],
        }


def calculate(spec: TimeControlSpec) -> PacingResult:
    plan = build_plan(spec)
    log.debug(
        "Plan for %s: policy=%s total=%s opening=%s x%d remaining=%s",
        spec.label(),
        plan.policy,
        plan.total_time,
        plan.opening_time_per_move,
        plan.opening_move_count,
        plan.remaining_time_per_move,
    )
    schedule = simulate(spec, plan)
    negative = schedule.first_negative()
    if negative is not None:
        log.warning(
            "Clock drops below zero at move %d (%.1fs): the pacing does not fit %s",
            negative.move_index,
            negative.remaining_clock.total_seconds(),
            spec.label(),
        )
    return PacingResult(spec=spec, plan=plan, schedule=schedule)
