"""
Assessment input loading — Reads parameter values from JSON files.

Accepted layouts:
    [ {parameter}, ... ]
    { "organization": "...", "parameters": [ {parameter}, ... ] }

Parameter objects may use snake_case or the web tool's camelCase keys.
Entries that only carry values (id + numerator/denominator) are merged onto
the catalog definition with the same id.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import replace
from pathlib import Path
from typing import Any, Optional

from .catalog import initial_parameters
from .scoring.models import Parameter

logger = logging.getLogger("cci_calculator.inputs")

_NUMERIC_FIELDS = ("numerator", "denominator", "target", "weightage")


class AssessmentInputError(ValueError):
    """Raised when an assessment file cannot be turned into parameters."""


def load_assessment(path: str | Path) -> tuple[Optional[str], list[Parameter]]:
    """
    Load an assessment file.

    Returns:
        (organization or None, parameters in file order)
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise AssessmentInputError(f"Assessment file not found: {path}") from None
    except json.JSONDecodeError as e:
        raise AssessmentInputError(f"{path} is not valid JSON: {e}") from e

    organization = None
    if isinstance(data, dict):
        organization = data.get("organization")
        entries = data.get("parameters")
    else:
        entries = data

    if not isinstance(entries, list):
        raise AssessmentInputError(f"{path}: expected a list of parameters")

    parameters = parse_parameters(entries)
    logger.info(f"Loaded {len(parameters)} parameters from {path}")
    return organization, parameters


def parse_parameters(entries: list[Any]) -> list[Parameter]:
    """Validate raw entries and merge them onto the catalog by id."""
    catalog = {p.id: p for p in initial_parameters()}
    parameters = []

    for position, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise AssessmentInputError(f"Parameter #{position} is not an object")
        if "id" not in entry:
            raise AssessmentInputError(f"Parameter #{position} has no id")

        fields = Parameter.normalize_keys(entry)
        for name in _NUMERIC_FIELDS:
            if name in fields:
                value = fields[name]
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise AssessmentInputError(
                        f"Parameter {fields['id']}: {name} must be a number"
                    )
                if math.isnan(value) or value < 0:
                    raise AssessmentInputError(
                        f"Parameter {fields['id']}: {name} must be a non-negative number"
                    )

        base = catalog.get(fields["id"])
        if base is None:
            if "measure_id" not in fields:
                raise AssessmentInputError(
                    f"Parameter {fields['id']} is not in the catalog and has no measure id"
                )
            parameters.append(Parameter(**fields))
            continue

        # Catalog definition, overridden by whatever the file provides
        parameters.append(replace(base, **fields))

    return parameters
