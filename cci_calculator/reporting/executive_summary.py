"""
Executive summary — One-page strategic summary for leadership audiences.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from ..scoring import CCIResult
from .markdown_report import build_environment


def _posture_statement(score: float) -> str:
    if score >= 81:
        return (
            "The cybersecurity posture is **strong**. Continue maintaining "
            "current controls while addressing the targeted improvements below."
        )
    elif score >= 61:
        return (
            "The cybersecurity posture is **adequate but has notable gaps**. "
            "Priority work on the improvement areas below is recommended "
            "before the next reporting period."
        )
    elif score >= 51:
        return (
            "The cybersecurity posture meets **only the bare minimum**. "
            "Several controls are below target and need a remediation plan."
        )
    return (
        "The cybersecurity posture is **below the regulatory cut-off**. "
        "Immediate executive engagement and remediation are required."
    )


def export_executive_summary(
    result: CCIResult,
    output_dir: Path,
    assessment_id: str,
) -> Path:
    """
    Generate a concise executive summary in Markdown.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    filepath = output_dir / f"executive_summary_{assessment_id}.md"

    template = build_environment().get_template("executive_summary.md.j2")
    content = template.render(
        assessment_id=assessment_id,
        generated_date=datetime.now(timezone.utc).strftime("%Y-%m-%d"),
        result=result,
        posture=_posture_statement(result.total_score),
        weakest=sorted(result.category_scores, key=lambda c: c.score),
    )

    with open(filepath, "w", encoding="utf-8") as fh:
        fh.write(content)

    return filepath
