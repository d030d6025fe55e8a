"""
Framework alignment — Maps parameters to SEBI CSCRF functions and sub-categories.
"""

from __future__ import annotations

from typing import Sequence

from .scoring.models import UNCATEGORIZED, Parameter


# ---------------------------------------------------------------------------
# CSCRF functions, keyed by measure id prefix
# ---------------------------------------------------------------------------
CSCRF_FUNCTIONS = {
    "GV": "Governance",
    "ID": "Identify",
    "PR": "Protect",
    "DE": "Detect",
    "RS": "Respond",
    "RC": "Recover",
}

# ---------------------------------------------------------------------------
# Sub-categories, keyed by "<function>.<category>" prefix
# ---------------------------------------------------------------------------
CSCRF_SUBCATEGORIES = {
    "GV.OC": "Governance: Organizational Context",
    "GV.RM": "Governance: Risk Management Strategy",
    "GV.RR": "Governance: Roles and Responsibilities",
    "GV.PO": "Governance: Policy",
    "GV.SC": "Governance: Supply Chain Risk Management",
    "ID.AM": "Identify: Asset Management",
    "ID.RA": "Identify: Risk Assessment",
    "PR.AA": "Protect: Identity Management, Authentication, and Access Control",
    "PR.AT": "Protect: Awareness and Training",
    "PR.DS": "Protect: Data Security",
    "PR.IP": "Protect: Information Protection",
    "PR.MA": "Protect: Maintenance",
    "DE.CM": "Detect: Continuous Monitoring",
    "DE.DP": "Detect: Detection Processes",
    "RS.RP": "Respond: Response Planning",
    "RS.MA": "Respond: Incident Management",
    "RS.CO": "Respond: Communications",
    "RS.AN": "Respond: Analysis and Mitigation",
    "RS.MI": "Respond: Analysis and Mitigation",
    "RC.RP": "Recover: Recovery Planning",
    "RC.IM": "Recover: Improvements",
}

GOVERNANCE_KEYWORDS = ("governance", "policy", "compliance")
OTHER = "Other"


def derive_framework_category(measure_id: str) -> str:
    """
    Framework category label for a measure id.

    "PR.AT.S1" → "Protect: Awareness and Training". Combined ids
    ("ID.AM.S1, ID.AM.S2") use the first one. A known function with an
    unlisted sub-category gets the bare function name ("DE.AE.S1" → "Detect").
    Free-text ids map to "Governance" when they name governance, policy or
    compliance, otherwise to "Other".
    """
    first = (measure_id or "").split(",")[0].strip().upper()

    if "." not in first:
        lowered = first.lower()
        if first.startswith("GV") or any(k in lowered for k in GOVERNANCE_KEYWORDS):
            return CSCRF_FUNCTIONS["GV"]
        return OTHER

    function, category = first.split(".")[:2]
    label = CSCRF_SUBCATEGORIES.get(f"{function}.{category}")
    if label:
        return label
    return CSCRF_FUNCTIONS.get(function, OTHER)


def group_by_category(parameters: Sequence[Parameter]) -> dict[str, list[Parameter]]:
    """
    Group parameters by their full framework category label, in
    first-appearance order. Parameters without a label go last under
    "Uncategorized".
    """
    grouped: dict[str, list[Parameter]] = {}
    uncategorized = []
    for p in parameters:
        label = (p.framework_category or "").strip()
        if label:
            grouped.setdefault(label, []).append(p)
        else:
            uncategorized.append(p)
    if uncategorized:
        grouped.setdefault(UNCATEGORIZED, []).extend(uncategorized)
    return grouped
