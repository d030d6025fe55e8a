"""Scoring package — Cyber Capability Index calculation and maturity lookup."""

from .engine import (
    basic_total_score,
    compute_category_scores,
    compute_index,
    rank_improvement_areas,
    weighted_score,
    with_recomputed_scores,
)
from .maturity import MATURITY_TIERS, lookup_tier
from .models import CategoryScore, CCIResult, ImprovementArea, MaturityTier, Parameter
from .policies import TargetPolicy, percentage_of, score_parameter

__all__ = [
    "compute_index",
    "basic_total_score",
    "compute_category_scores",
    "rank_improvement_areas",
    "weighted_score",
    "with_recomputed_scores",
    "score_parameter",
    "percentage_of",
    "TargetPolicy",
    "lookup_tier",
    "MATURITY_TIERS",
    "Parameter",
    "CCIResult",
    "CategoryScore",
    "ImprovementArea",
    "MaturityTier",
]
