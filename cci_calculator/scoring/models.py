"""
Scoring data models — Defines structured types for the scoring engine input and output.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Optional


# Browser-exported assessments use camelCase keys; accept both spellings.
UNCATEGORIZED = "Uncategorized"

_KEY_ALIASES = {
    "measureId": "measure_id",
    "selfAssessmentScore": "self_assessment_score",
    "frameworkCategory": "framework_category",
    "controlInfo": "control_info",
    "implementationEvidence": "implementation_evidence",
    "auditorComments": "auditor_comments",
    "numeratorHelp": "numerator_help",
    "denominatorHelp": "denominator_help",
}


@dataclass(frozen=True)
class Parameter:
    """
    One measurable control of the assessment catalog.
    Instances are immutable snapshots; use with_values() to derive edits.
    """
    id: int
    measure_id: str                          # Control family code, e.g. "ID.AM.S1"
    title: str = ""
    target: float = 100                      # 100 maximize, 0 minimize, 50 plateau
    weightage: float = 0.0                   # Share of the total index, in percent
    numerator: float = 0.0
    denominator: float = 1.0
    self_assessment_score: float = 0.0       # Display cache, never trusted by the engine
    framework_category: Optional[str] = None  # "Protect: Awareness and Training"

    # Descriptive fields, carried through to reports only
    description: str = ""
    formula: str = ""
    control_info: str = ""
    implementation_evidence: str = ""
    auditor_comments: str = ""
    numerator_help: str = ""
    denominator_help: str = ""

    @property
    def category(self) -> Optional[str]:
        """Top-level category: framework_category text before the first ':'."""
        if not self.framework_category:
            return None
        return self.framework_category.split(":")[0].strip() or UNCATEGORIZED

    def with_values(self, **changes: Any) -> "Parameter":
        return replace(self, **changes)

    @classmethod
    def normalize_keys(cls, data: dict) -> dict:
        """Map camelCase keys to field names and drop unknown keys."""
        names = cls.__dataclass_fields__
        normalized = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name in names:
                normalized[name] = value
        return normalized

    @classmethod
    def from_dict(cls, data: dict) -> "Parameter":
        return cls(**cls.normalize_keys(data))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "measure_id": self.measure_id,
            "title": self.title,
            "target": self.target,
            "weightage": self.weightage,
            "numerator": self.numerator,
            "denominator": self.denominator,
            "self_assessment_score": self.self_assessment_score,
            "framework_category": self.framework_category,
            "description": self.description,
            "formula": self.formula,
            "control_info": self.control_info,
            "implementation_evidence": self.implementation_evidence,
            "auditor_comments": self.auditor_comments,
            "numerator_help": self.numerator_help,
            "denominator_help": self.denominator_help,
        }


@dataclass(frozen=True)
class MaturityTier:
    """A named, inclusive band of total scores."""
    level: str
    min_score: float
    max_score: float

    def contains(self, score: float) -> bool:
        return self.min_score <= score <= self.max_score


@dataclass
class CategoryScore:
    """Weighted average score for one top-level framework category."""
    name: str
    score: float = 0.0
    weightage: float = 0.0
    parameter_count: int = 0

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "score": round(self.score, 2),
            "weightage": self.weightage,
            "parameter_count": self.parameter_count,
        }


@dataclass
class ImprovementArea:
    """A parameter whose improvement to target would lift the total score."""
    measure_id: str
    title: str
    current_score: float
    impact: float

    def to_dict(self) -> dict:
        return {
            "measure_id": self.measure_id,
            "title": self.title,
            "current_score": round(self.current_score, 2),
            "impact": round(self.impact, 2),
        }


@dataclass
class CCIResult:
    """Complete scoring result for one assessment."""
    total_score: float = 0.0
    maturity_level: str = "Fail"
    maturity_description: str = ""
    category_scores: list[CategoryScore] = field(default_factory=list)
    improvement_areas: list[ImprovementArea] = field(default_factory=list)
    organization: str = "Your Organization"
    assessed_at: str = ""

    @property
    def is_failing(self) -> bool:
        return self.maturity_level == "Fail"

    def to_dict(self) -> dict:
        return {
            "organization": self.organization,
            "assessed_at": self.assessed_at,
            "total_score": round(self.total_score, 2),
            "maturity_level": self.maturity_level,
            "maturity_description": self.maturity_description,
            "category_scores": [c.to_dict() for c in self.category_scores],
            "improvement_areas": [a.to_dict() for a in self.improvement_areas],
        }
