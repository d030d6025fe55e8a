"""
JSON exporter — Produces the full raw JSON output of an assessment.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from .. import __version__
from ..scoring import CCIResult, Parameter, score_parameter, weighted_score


def export_json(
    result: CCIResult,
    parameters: Sequence[Parameter],
    output_dir: Path,
    assessment_id: str,
) -> Path:
    """
    Write the full assessment result to a JSON file.

    Returns:
        Path to the created JSON file.
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    payload = {
        "metadata": {
            "engine": "CCI Self-Assessment Calculator",
            "version": __version__,
            "assessment_id": assessment_id,
            "generated_utc": datetime.now(timezone.utc).isoformat(),
        },
        "scoring": result.to_dict(),
        "parameters": [parameter_row(p) for p in parameters],
    }

    filepath = output_dir / f"cci_assessment_{assessment_id}.json"

    with open(filepath, "w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2, default=str, ensure_ascii=False)

    return filepath


def parameter_row(parameter: Parameter) -> dict:
    """Parameter fields plus its freshly computed scores."""
    row = parameter.to_dict()
    row["self_assessment_score"] = round(score_parameter(parameter), 2)
    row["weighted_score"] = round(weighted_score(parameter), 2)
    return row
