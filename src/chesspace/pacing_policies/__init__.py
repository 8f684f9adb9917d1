from __future__ import annotations

from typing import Optional

from ..timecontrol import ConfigurationError
from .base import PacingPolicy, PhaseSplit
from .flat import FlatPolicy
from .percentage import PercentageSplitPolicy
from .speed_ratio import SpeedRatioPolicy

__all__ = [
    "PacingPolicy",
    "PhaseSplit",
    "FlatPolicy",
    "PercentageSplitPolicy",
    "SpeedRatioPolicy",
    "resolve_policy",
]


def resolve_policy(opening_moves: Optional[int], percentage: Optional[int]) -> PacingPolicy:
    """Pick the policy implied by which opening parameters are present.

    A percentage without an opening move count has no meaningful policy.
    """
    if opening_moves is not None and percentage is not None:
        return PercentageSplitPolicy(opening_moves, percentage)
    if opening_moves is not None:
        return SpeedRatioPolicy(opening_moves)
    if percentage is not None:
        raise ConfigurationError("percentage requires opening")
    return FlatPolicy()
