"""
Rendering of a PacingResult.

- render_text(): the human-readable pacing table printed by the CLI.
- render_json(): the same data as a JSON document for scripting.

Clock readings are rounded to whole seconds for display only; the schedule
itself keeps sub-second precision.
"""
from __future__ import annotations

from datetime import timedelta
import json
from typing import List

from .calculator import PacingResult


def break_duration_to_min(d: timedelta) -> tuple[int, float]:
    """Split a duration into whole minutes and the remaining (fractional) seconds."""
    total = d.total_seconds()
    minutes = int(total / 60)
    return minutes, total - minutes * 60


def _format_seconds(seconds: float) -> str:
    if float(seconds).is_integer():
        return f"{int(seconds):02d}"
    return f"{seconds:04.1f}"


def format_total_time(d: timedelta) -> str:
    minutes, seconds = break_duration_to_min(d)
    return f"{minutes}:{_format_seconds(seconds)}min"


def format_clock(d: timedelta) -> str:
    """Clock reading as M:SS rounded to the nearest second; negative readings get a leading '-'."""
    whole = round(d.total_seconds())
    sign = "-" if whole < 0 else ""
    minutes, seconds = divmod(abs(whole), 60)
    return f"{sign + str(minutes):>2}:{seconds:02d}"


def render_lines(result: PacingResult) -> List[str]:
    plan = result.plan
    lines = [
        f"timecontrol: {result.spec.label()}",
        f"total time: {format_total_time(plan.total_time)}",
    ]
    if plan.has_opening_phase:
        lines.append(
            f"time per opening move: {plan.opening_time_per_move.total_seconds():.1f}s ({plan.opening_move_count} moves)"
        )
        lines.append(f"time per remaining move: {plan.remaining_time_per_move.total_seconds():.1f}s")
    else:
        lines.append(f"time per move: {plan.remaining_time_per_move.total_seconds():.1f}s")
    for entry in result.schedule.displayed():
        lines.append(f"{entry.move_index:>2}: {format_clock(entry.remaining_clock)}")
    return lines


def render_text(result: PacingResult) -> str:
    return "\n".join(render_lines(result)) + "\n"


def render_json(result: PacingResult) -> str:
    data = result.summary()
    for row, entry in zip(data["schedule"], result.schedule.displayed()):
        row["clock"] = format_clock(entry.remaining_clock).strip()
    return json.dumps(data, indent=2) + "\n"
