"""
Parameter catalog — The SEBI CSCRF Cyber Capability Index measures.

Provides the static initial catalog (23 parameters, weightages summing to 100)
and a sample-data generator for demonstrations.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import replace
from typing import Optional

from .config import (
    SAMPLE_DENOMINATOR_MAX,
    SAMPLE_INCIDENT_RANGE,
    SAMPLE_SUCCESS_RANGE,
    TOTAL_WEIGHTAGE,
)
from .frameworks import derive_framework_category
from .scoring.models import Parameter
from .scoring.policies import TargetPolicy

logger = logging.getLogger("cci_calculator.catalog")


# ---------------------------------------------------------------------------
# Catalog definition
# ---------------------------------------------------------------------------
_CATALOG: tuple[dict, ...] = (
    {
        "id": 1, "measure_id": "GV.RR.S4", "title": "Security Budget Measure",
        "target": 100, "weightage": 8,
        "framework_category": "Governance: Roles and Responsibilities",
        "description": "Percentage (%) of the organisation's information system budget devoted to information security.",
        "formula": "(Information security budget / total organisation's information technology budget) × 100",
        "numerator_help": "Total information security budget including tools, personnel, training and audits",
        "denominator_help": "Total IT budget including software, hardware, IT personnel and IT services",
    },
    {
        "id": 2, "measure_id": "DE.CM.S5", "title": "Vulnerability Measure",
        "target": 100, "weightage": 18,
        "framework_category": "Detect: Continuous Monitoring",
        "description": "Percentage of vulnerabilities mitigated pertaining to organization in a specified time frame.",
        "formula": "(Number of vulnerabilities mitigated / Number of vulnerabilities identified) × 100",
        "numerator_help": "Vulnerabilities remediated within the specified timeframe",
        "denominator_help": "Vulnerabilities identified through VAPT, scanning and other methods",
    },
    {
        "id": 3, "measure_id": "PR.AT.S1", "title": "Security Training Measure",
        "target": 100, "weightage": 5,
        "framework_category": "Protect: Awareness and Training",
        "description": "Percentage (%) of information system security personnel that have received security training within the past one year.",
        "formula": "(Security personnel trained within the past year / total security personnel) × 100",
        "numerator_help": "Security personnel who completed required training in the last 12 months",
        "denominator_help": "Total number of information security personnel",
    },
    {
        "id": 4, "measure_id": "PR.AA.S12", "title": "Remote Access Control Measure",
        "target": 100, "weightage": 2,
        "description": "Percentage (%) of remote users logging through MFA.",
        "formula": "(Number of remote users logging through MFA / total number of remote users) × 100",
    },
    {
        "id": 5, "measure_id": "DE.CM.S1", "title": "Audit Record Review Measure",
        "target": 100, "weightage": 2,
        "description": "Percentage (%) of critical systems integrated with SIEM.",
        "formula": "(Critical systems integrated with SIEM / total critical systems) × 100",
    },
    {
        "id": 6, "measure_id": "DE.CM.S5", "title": "Configuration Changes Measure",
        "target": 100, "weightage": 2,
        "description": "Percentage (%) approved and implemented configuration changes identified in the latest automated baseline configuration.",
        "formula": "(Approved and implemented configuration changes / total configuration changes identified) × 100",
    },
    {
        "id": 7, "measure_id": "RS.MA.S3", "title": "Contingency Plan Testing Measure",
        "target": 100, "weightage": 4,
        "description": "Percentage (%) of information systems that have conducted contingency plan testing at least once in a year.",
        "formula": "(Systems with contingency plan tested in the year / systems in the inventory) × 100",
    },
    {
        "id": 8, "measure_id": "PR.AA.S7", "title": "User Accounts Measure",
        "target": 100, "weightage": 3,
        "framework_category": "Protect: Identity Management, Authentication, and Access Control",
        "description": "Percentage (%) of privileged access through PIM.",
        "formula": "(Number of systems accessed through PIM / total number of systems) × 100",
        "numerator_help": "Systems whose privileged access is managed through PIM",
        "denominator_help": "Systems that require privileged access",
    },
    {
        "id": 9, "measure_id": "RS.CO.S2", "title": "Incident Response Measure",
        "target": 100, "weightage": 2,
        "description": "Percentage (%) of incidents reported within required time frame.",
        "formula": "(Number of incidents reported on time / total number of reported incidents) × 100",
    },
    {
        "id": 10, "measure_id": "PR.MA.S1", "title": "Maintenance Measure",
        "target": 100, "weightage": 5,
        "description": "Percentage (%) of system components that undergo maintenance in accordance with planned maintenance schedules.",
        "formula": "(Components maintained on schedule / total system components) × 100",
    },
    {
        "id": 11, "measure_id": "PR.AA.S14", "title": "Media Sanitization Measure",
        "target": 100, "weightage": 2,
        "description": "Percentage (%) of media that passes sanitization procedures testing.",
        "formula": "(Media passing sanitization testing / total media disposed or released for reuse) × 100",
    },
    {
        "id": 12, "measure_id": "PR.AA.S10", "title": "Physical Security Incidents Measure",
        "target": 0, "weightage": 1,
        "description": "Percentage (%) of physical security incidents allowing unauthorized entry into facilities containing information systems.",
        "formula": "(Incidents allowing unauthorized entry / total physical security incidents) × 100",
    },
    {
        "id": 13, "measure_id": "GV.RR.S5", "title": "Planning Measure",
        "target": 100, "weightage": 1,
        "description": "Percentage of employees granted system access only after signing a confidentiality and integrity agreement.",
        "formula": "(Users granted access after signing the agreement / total users granted access) × 100",
    },
    {
        "id": 14, "measure_id": "PR.AA.S10", "title": "Personnel Security Screening Measure",
        "target": 100, "weightage": 1,
        "description": "Percentage (%) of individuals screened before being granted access to organizational information and information systems.",
        "formula": "(Number of individuals screened / total individuals with access) × 100",
    },
    {
        "id": 15, "measure_id": "ID.RA.S2", "title": "Risk Assessment Measure",
        "target": 100, "weightage": 5,
        "framework_category": "Identify: Risk Assessment",
        "description": "Percentage of organization's information systems, and assets covered under risk assessment.",
        "formula": "(Systems and assets covered under risk assessment / total systems and assets) × 100",
    },
    {
        "id": 16, "measure_id": "GV.SC.S3", "title": "Service Acquisition Contract Measure",
        "target": 100, "weightage": 3,
        "description": "Percentage (%) of system and service acquisition contracts that include security requirements and/or specifications.",
        "formula": "(Contracts with security requirements / total acquisition contracts) × 100",
    },
    {
        "id": 17, "measure_id": "PR.DS.S4", "title": "System and Communication Protection Measure",
        "target": 100, "weightage": 1,
        "description": "Percentage of mobile computers and devices that perform all cryptographic operations.",
        "formula": "(Devices performing all cryptographic operations / total mobile computers and devices) × 100",
    },
    {
        "id": 18, "measure_id": "GV.RM.S1, GV.RM.S2", "title": "Risk Management",
        "target": 100, "weightage": 8,
        "description": "Percentage (%) of organization information systems, and assets covered under risk management.",
        "formula": "(Systems and assets covered under risk management / total systems and assets) × 100",
    },
    {
        "id": 19, "measure_id": "ID.AM.S1, ID.AM.S2", "title": "Critical Assets Identified",
        "target": 50, "weightage": 9,
        "description": "Percentage (%) of the critical systems identified by REs among all other IT systems.",
        "formula": "(Number of critical systems identified / total IT systems integrated with SOC) × 100",
    },
    {
        "id": 20, "measure_id": "RS.MA.S5", "title": "CSK Events",
        "target": 100, "weightage": 4,
        "description": "Number of CSK reported events closed in timely manner.",
        "formula": "(CSK reported events closed in 15 days / total CSK reported events) × 100",
    },
    {
        "id": 21, "measure_id": "GV.PO.S1", "title": "Cybersecurity Policy Document",
        "target": 100, "weightage": 4,
        "description": "Develop, document, periodically update, and implement cybersecurity policies and procedures for organizational information systems.",
        "formula": "Non-quantifiable measure",
    },
    {
        "id": 22, "measure_id": "SOC efficacy", "title": "SOC efficacy",
        "target": 100, "weightage": 5,
        "description": "How effective is our SOC operational?",
        "formula": "As specified in SOC efficacy (Annexure-N)",
    },
    {
        "id": 23, "measure_id": "Automated compliance with CSCRF", "title": "Automated compliance with CSCRF",
        "target": 100, "weightage": 5,
        "description": "Develop an automated tool (preferably integrated with log aggregator) to submit compliance with CSCRF.",
        "formula": "(Standards with automated compliance / total CSCRF standards) × 100",
        "numerator_help": "CSCRF standards whose compliance tracking is automated",
        "denominator_help": "Total CSCRF standards applicable to the organization",
    },
)


def _build_parameter(entry: dict) -> Parameter:
    param = Parameter(numerator=0, denominator=1, **entry)
    if not param.framework_category:
        param = replace(param, framework_category=derive_framework_category(param.measure_id))
    return param


def initial_parameters() -> list[Parameter]:
    """The initial catalog with empty measurements (0 / 1)."""
    return [_build_parameter(entry) for entry in _CATALOG]


def reset_parameters() -> list[Parameter]:
    """Full reset: discard all entered values and start from the catalog."""
    logger.info("Resetting assessment to the initial catalog")
    return initial_parameters()


def catalog_weightage(parameters: Optional[list[Parameter]] = None) -> float:
    """Sum of weightages; a well-formed catalog totals TOTAL_WEIGHTAGE."""
    parameters = parameters if parameters is not None else initial_parameters()
    total = sum(p.weightage for p in parameters)
    if not math.isclose(total, TOTAL_WEIGHTAGE):
        logger.warning(f"Catalog weightages sum to {total}, expected {TOTAL_WEIGHTAGE}")
    return total


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------

def _auditor_comment(percentage: float) -> str:
    if percentage >= 90:
        return "Excellent implementation. Meets or exceeds all requirements."
    elif percentage >= 70:
        return "Good implementation. Minor improvements recommended."
    elif percentage >= 50:
        return "Satisfactory implementation. Several areas need attention."
    return "Inadequate implementation. Immediate remediation required."


def generate_sample_data(rng: Optional[random.Random] = None) -> list[Parameter]:
    """
    Fill the catalog with plausible random measurements for demonstrations.

    Lower-is-better parameters get a small incident ratio; all others land
    in the 70-100% band. Denominators are never zero.
    """
    rng = rng or random.Random()
    sample = []
    for param in initial_parameters():
        denominator = rng.randint(1, SAMPLE_DENOMINATOR_MAX)
        if TargetPolicy.from_target(param.target) is TargetPolicy.MINIMIZE_TO_ZERO:
            low, high = SAMPLE_INCIDENT_RANGE
        else:
            low, high = SAMPLE_SUCCESS_RANGE
        ratio = rng.uniform(low, high)
        numerator = math.floor(denominator * ratio)

        sample.append(replace(
            param,
            numerator=numerator,
            denominator=denominator,
            auditor_comments=_auditor_comment(numerator / denominator * 100),
        ))
    return sample
