"""
Target policies — How a parameter's measured percentage turns into a 0-100 score.

The catalog encodes the policy in the numeric target:
  - 100 → maximize toward 100% (higher is better)
  - 0   → minimize toward 0%   (fewer incidents is better)
  - 50  → satisfy at half      (reaching 50% is already full credit)
Any other target has no defined semantics and scores 0.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from .models import Parameter


class TargetPolicy(Enum):
    MAXIMIZE_TO_TARGET = "maximize"
    MINIMIZE_TO_ZERO = "minimize"
    SATISFY_AT_HALF = "satisfy_at_half"
    UNKNOWN = "unknown"

    @classmethod
    def from_target(cls, target: float) -> "TargetPolicy":
        if target == 100:
            return cls.MAXIMIZE_TO_TARGET
        if target == 0:
            return cls.MINIMIZE_TO_ZERO
        if target == 50:
            return cls.SATISFY_AT_HALF
        return cls.UNKNOWN


def _maximize(percentage: float) -> float:
    return min(percentage, 100.0)


def _minimize(percentage: float) -> float:
    return max(0.0, 100.0 - percentage)


def _satisfy_at_half(percentage: float) -> float:
    if percentage >= 50:
        return 100.0
    return (percentage / 50) * 100


def _unknown(percentage: float) -> float:
    return 0.0


_POLICY_SCORERS: dict[TargetPolicy, Callable[[float], float]] = {
    TargetPolicy.MAXIMIZE_TO_TARGET: _maximize,
    TargetPolicy.MINIMIZE_TO_ZERO: _minimize,
    TargetPolicy.SATISFY_AT_HALF: _satisfy_at_half,
    TargetPolicy.UNKNOWN: _unknown,
}


def percentage_of(parameter: Parameter) -> float:
    """Raw numerator/denominator ratio in percent; 0 when there is no data."""
    if parameter.denominator == 0:
        return 0.0
    return (parameter.numerator / parameter.denominator) * 100


def score_parameter(parameter: Parameter) -> float:
    """
    Score a single parameter on a 0-100 scale.

    A zero denominator means "no data" and always scores 0, whatever the target.
    """
    if parameter.denominator == 0:
        return 0.0

    policy = TargetPolicy.from_target(parameter.target)
    return _POLICY_SCORERS[policy](percentage_of(parameter))
