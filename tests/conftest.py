# tests/conftest.py

"""
Pytest Fixtures - Shared parameter builders and file locations for all tests
"""

import pytest

from cci_calculator.scoring import Parameter


def make_param(
    id=1,
    numerator=0,
    denominator=100,
    target=100,
    weightage=10,
    measure_id=None,
    title=None,
    framework_category=None,
):
    """Build a Parameter with just the fields a test cares about."""
    return Parameter(
        id=id,
        measure_id=measure_id or f"PR.T.S{id}",
        title=title or f"Test Measure {id}",
        numerator=numerator,
        denominator=denominator,
        target=target,
        weightage=weightage,
        framework_category=framework_category,
    )


@pytest.fixture
def param_factory():
    return make_param


@pytest.fixture
def two_half_weight_params():
    """Two parameters with weightage 50 each, scoring 80 and 60."""
    return [
        make_param(id=1, numerator=80, denominator=100, weightage=50),
        make_param(id=2, numerator=60, denominator=100, weightage=50),
    ]


@pytest.fixture
def drafts_file(tmp_path):
    return tmp_path / "drafts" / "drafts.json"
