"""
CSV exporter — Produces structured CSV summaries of parameters and scores.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Sequence

from ..scoring import CCIResult, Parameter, score_parameter, weighted_score


def export_csv(
    result: CCIResult,
    parameters: Sequence[Parameter],
    output_dir: Path,
    assessment_id: str,
) -> list[Path]:
    """
    Write CSV files for parameters, category scores and the overall summary.

    Returns:
        List of created CSV file paths.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    created = []

    # --- Parameters CSV ---
    params_path = output_dir / f"parameters_{assessment_id}.csv"
    PARAMETER_FIELDS = [
        "id", "measure_id", "title", "framework_category", "target",
        "weightage", "numerator", "denominator", "score", "weighted_score",
        "implementation_evidence", "auditor_comments",
    ]

    with open(params_path, "w", newline="", encoding="utf-8-sig") as fh:
        writer = csv.DictWriter(fh, fieldnames=PARAMETER_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for p in parameters:
            row = {field: getattr(p, field, "") for field in PARAMETER_FIELDS}
            row["framework_category"] = p.framework_category or ""
            row["score"] = round(score_parameter(p), 2)
            row["weighted_score"] = round(weighted_score(p), 2)
            writer.writerow(row)
    created.append(params_path)

    # --- Category Scores CSV ---
    categories_path = output_dir / f"category_scores_{assessment_id}.csv"
    CATEGORY_FIELDS = ["category", "score", "weightage", "parameter_count"]

    with open(categories_path, "w", newline="", encoding="utf-8-sig") as fh:
        writer = csv.DictWriter(fh, fieldnames=CATEGORY_FIELDS)
        writer.writeheader()
        for cs in result.category_scores:
            writer.writerow({
                "category": cs.name,
                "score": round(cs.score, 2),
                "weightage": cs.weightage,
                "parameter_count": cs.parameter_count,
            })
    created.append(categories_path)

    # --- Summary Row CSV ---
    summary_path = output_dir / f"assessment_summary_{assessment_id}.csv"
    with open(summary_path, "w", newline="", encoding="utf-8-sig") as fh:
        writer = csv.writer(fh)
        writer.writerow(["metric", "value"])
        writer.writerow(["organization", result.organization])
        writer.writerow(["assessed_at", result.assessed_at])
        writer.writerow(["total_score", round(result.total_score, 2)])
        writer.writerow(["maturity_level", result.maturity_level])
        writer.writerow(["parameters_assessed", len(parameters)])
        for i, area in enumerate(result.improvement_areas, 1):
            writer.writerow([f"improvement_area_{i}", f"{area.measure_id} (+{area.impact:.2f})"])
    created.append(summary_path)

    return created
