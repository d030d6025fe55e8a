"""
Scoring Engine — Computes the 0-100 Cyber Capability Index from parameter measurements.

Scoring model:
  - Each parameter scores 0-100 according to its target policy.
  - Its contribution to the index is score × weightage / 100.
  - The index is the sum of contributions; catalog weightages sum to 100.
  - Category scores are weightage-weighted averages of parameter scores.
  - Improvement areas simulate bringing each lagging parameter to its target
    and rank the resulting gain in the index.

The engine never mutates its input and holds no state.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional, Sequence

from ..config import IMPROVEMENT_AREA_LIMIT
from .maturity import MATURITY_TIERS, describe_tier, lookup_tier
from .models import CategoryScore, CCIResult, ImprovementArea, Parameter
from .policies import TargetPolicy, score_parameter

logger = logging.getLogger("cci_calculator.scoring")


def weighted_score(parameter: Parameter) -> float:
    """Contribution of one parameter to the total index."""
    return score_parameter(parameter) * parameter.weightage / 100


def basic_total_score(parameters: Sequence[Parameter]) -> float:
    """Total index only: no maturity, category or improvement calculation."""
    return sum(weighted_score(p) for p in parameters)


def with_recomputed_scores(parameters: Sequence[Parameter]) -> list[Parameter]:
    """Return copies whose cached self_assessment_score is refreshed."""
    return [
        replace(p, self_assessment_score=score_parameter(p))
        for p in parameters
    ]


def _warn_unknown_targets(parameters: Sequence[Parameter]) -> None:
    for p in parameters:
        if TargetPolicy.from_target(p.target) is TargetPolicy.UNKNOWN:
            logger.warning(
                f"[{p.measure_id}] Unrecognized target {p.target!r} "
                f"for parameter {p.id}; scoring as 0"
            )


def compute_index(
    parameters: Sequence[Parameter],
    organization: str = "Your Organization",
    improvement_limit: int = IMPROVEMENT_AREA_LIMIT,
    assessed_at: Optional[datetime] = None,
) -> CCIResult:
    """
    Compute the full assessment result.

    Args:
        parameters: Ordered parameter snapshot. Not modified.
        organization: Name recorded on the result.
        improvement_limit: How many improvement areas to keep.
        assessed_at: Assessment timestamp; defaults to now (UTC).

    Returns:
        CCIResult with total score, maturity tier, category scores and
        ranked improvement areas.
    """
    parameters = list(parameters)
    _warn_unknown_targets(parameters)
    total_score = basic_total_score(parameters)

    tier = lookup_tier(total_score, MATURITY_TIERS)

    result = CCIResult(
        total_score=total_score,
        maturity_level=tier.level,
        maturity_description=describe_tier(tier),
        category_scores=compute_category_scores(parameters),
        improvement_areas=rank_improvement_areas(
            parameters, total_score, limit=improvement_limit,
        ),
        organization=organization,
        assessed_at=(assessed_at or datetime.now(timezone.utc)).isoformat(),
    )

    logger.debug(
        f"Index computed over {len(parameters)} parameters: "
        f"{total_score:.2f} ({tier.level})"
    )
    return result


def compute_category_scores(parameters: Sequence[Parameter]) -> list[CategoryScore]:
    """
    Weighted average score per top-level category, in first-appearance order.
    Parameters without a framework category are left out.
    """
    # --- Group by category ---
    grouped: dict[str, list[Parameter]] = {}
    for p in parameters:
        if p.category:
            grouped.setdefault(p.category, []).append(p)

    scores = []
    for name, members in grouped.items():
        total_weight = sum(p.weightage for p in members)
        score = 0.0
        if total_weight > 0:
            score = sum(score_parameter(p) * p.weightage for p in members) / total_weight
        scores.append(CategoryScore(
            name=name,
            score=score,
            weightage=total_weight,
            parameter_count=len(members),
        ))
    return scores


def rank_improvement_areas(
    parameters: Sequence[Parameter],
    total_score: Optional[float] = None,
    limit: int = IMPROVEMENT_AREA_LIMIT,
) -> list[ImprovementArea]:
    """
    Rank parameters by the index gain of bringing each one to its target.

    Each candidate is evaluated on a hypothetical copy of the input where only
    that parameter's numerator is set to hit the target ratio exactly. This is
    one full recomputation per candidate, O(N²) overall.
    """
    parameters = list(parameters)
    if total_score is None:
        total_score = basic_total_score(parameters)

    candidates = []
    for index, param in enumerate(parameters):
        current_score = score_parameter(param)
        gap = max(0.0, param.target - current_score)
        if gap <= 0:
            continue

        improved = list(parameters)
        improved[index] = replace(
            param, numerator=param.denominator * param.target / 100,
        )
        impact = basic_total_score(improved) - total_score

        candidates.append(ImprovementArea(
            measure_id=param.measure_id,
            title=param.title,
            current_score=current_score,
            impact=impact,
        ))

    # sorted() is stable, so equal impacts keep input order
    candidates = sorted(candidates, key=lambda a: a.impact, reverse=True)
    return candidates[:limit]
