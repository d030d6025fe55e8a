"""
Configuration module for the CCI Self-Assessment Calculator.
Defines tunable parameters, output locations, and operational settings.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path


# ─── Scoring Settings ───────────────────────────────────────────────────────

IMPROVEMENT_AREA_LIMIT = 4        # Improvement areas kept on a result
TOTAL_WEIGHTAGE = 100             # Catalog weightages are expected to sum to this

DEFAULT_ORGANIZATION = "Your Organization"


# ─── Sample Data Settings ───────────────────────────────────────────────────

SAMPLE_DENOMINATOR_MAX = 100              # Denominators drawn from 1..N
SAMPLE_SUCCESS_RANGE = (0.7, 1.0)         # Ratio range for higher/plateau targets
SAMPLE_INCIDENT_RANGE = (0.0, 0.1)        # Ratio range for lower-is-better targets


# ─── Draft Storage ──────────────────────────────────────────────────────────

DRAFTS_DIR = Path.home() / ".cci_calculator"
DRAFTS_FILE_NAME = "drafts.json"


# ─── Output Configuration ───────────────────────────────────────────────────

REPORT_FORMATS = ["json", "csv", "markdown", "executive"]


@dataclass
class OutputConfig:
    """Output directory and format settings."""
    base_dir: str = ""
    timestamp: str = ""
    formats: list[str] = field(default_factory=lambda: list(REPORT_FORMATS))

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        if not self.base_dir:
            self.base_dir = os.path.join(
                os.getcwd(),
                f"cci_assessment_{self.timestamp}"
            )

    @property
    def assessment_dir(self) -> Path:
        return Path(self.base_dir)

    @property
    def json_dir(self) -> Path:
        return self.assessment_dir / "json"

    @property
    def csv_dir(self) -> Path:
        return self.assessment_dir / "csv"

    @property
    def reports_dir(self) -> Path:
        return self.assessment_dir / "reports"

    def create_directories(self):
        for d in [self.json_dir, self.csv_dir, self.reports_dir]:
            d.mkdir(parents=True, exist_ok=True)


# ─── Master Configuration ───────────────────────────────────────────────────

@dataclass
class AssessmentConfig:
    """Top-level configuration for an assessment run."""
    organization: str = DEFAULT_ORGANIZATION
    improvement_limit: int = IMPROVEMENT_AREA_LIMIT
    drafts_path: str = ""         # Empty means DRAFTS_DIR / DRAFTS_FILE_NAME
    sample_seed: int | None = None
    output: OutputConfig = field(default_factory=OutputConfig)
    verbose: bool = False

    @property
    def drafts_file(self) -> Path:
        if self.drafts_path:
            return Path(self.drafts_path).expanduser()
        return DRAFTS_DIR / DRAFTS_FILE_NAME

    @classmethod
    def from_file(cls, path: str | Path) -> "AssessmentConfig":
        """Load configuration from a JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        config = cls()
        if "output" in data:
            for k, v in data["output"].items():
                if hasattr(config.output, k):
                    setattr(config.output, k, v)
        config.organization = data.get("organization", DEFAULT_ORGANIZATION)
        config.improvement_limit = int(data.get("improvement_limit", IMPROVEMENT_AREA_LIMIT))
        config.drafts_path = data.get("drafts_path", "")
        config.sample_seed = data.get("sample_seed")
        config.verbose = data.get("verbose", False)
        return config
