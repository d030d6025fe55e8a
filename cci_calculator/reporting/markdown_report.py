"""
Markdown technical report — Full parameter-by-parameter report rendered via Jinja2.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from .. import __version__
from ..frameworks import group_by_category
from ..scoring import CCIResult, Parameter, TargetPolicy, score_parameter, weighted_score

_POLICY_LABELS = {
    TargetPolicy.MAXIMIZE_TO_TARGET: "Higher is better",
    TargetPolicy.MINIMIZE_TO_ZERO: "Lower is better",
    TargetPolicy.SATISFY_AT_HALF: "Full credit at 50%",
    TargetPolicy.UNKNOWN: "Unrecognized target",
}


def _status_icon(score: float) -> str:
    if score >= 90:
        return "🟢"
    elif score >= 70:
        return "🟡"
    elif score >= 50:
        return "🟠"
    return "🔴"


def build_environment() -> Environment:
    env = Environment(
        loader=PackageLoader("cci_calculator.reporting", "templates"),
        autoescape=select_autoescape([]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.globals["score_of"] = score_parameter
    env.globals["weighted_of"] = weighted_score
    env.globals["status_icon"] = _status_icon
    env.globals["policy_label"] = lambda p: _POLICY_LABELS[TargetPolicy.from_target(p.target)]
    return env


def export_markdown(
    result: CCIResult,
    parameters: Sequence[Parameter],
    output_dir: Path,
    assessment_id: str,
) -> Path:
    """
    Generate a comprehensive Markdown technical report.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    filepath = output_dir / f"technical_report_{assessment_id}.md"

    content = render_markdown(result, parameters, assessment_id)

    with open(filepath, "w", encoding="utf-8") as fh:
        fh.write(content)

    return filepath


def render_markdown(
    result: CCIResult,
    parameters: Sequence[Parameter],
    assessment_id: str,
) -> str:
    template = build_environment().get_template("technical_report.md.j2")
    return template.render(
        assessment_id=assessment_id,
        version=__version__,
        generated_utc=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC"),
        result=result,
        parameters=list(parameters),
        by_category=group_by_category(parameters),
    )
