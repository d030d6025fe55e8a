# tests/test_policies.py
import logging

import pytest

from cci_calculator.scoring import TargetPolicy, percentage_of, score_parameter, weighted_score
from conftest import make_param


class TestTargetPolicy:
    @pytest.mark.parametrize(
        "target, policy",
        [
            (100, TargetPolicy.MAXIMIZE_TO_TARGET),
            (0, TargetPolicy.MINIMIZE_TO_ZERO),
            (50, TargetPolicy.SATISFY_AT_HALF),
            (75, TargetPolicy.UNKNOWN),
            (100.0, TargetPolicy.MAXIMIZE_TO_TARGET),
        ],
    )
    def test_policy_from_target(self, target, policy):
        assert TargetPolicy.from_target(target) is policy


class TestScoreParameter:
    def test_higher_is_better_half_way(self):
        p = make_param(numerator=50, denominator=100, target=100, weightage=10)
        assert score_parameter(p) == 50
        assert weighted_score(p) == 5

    def test_higher_is_better_clamped_at_100(self):
        p = make_param(numerator=150, denominator=100, target=100)
        assert score_parameter(p) == 100

    def test_lower_is_better_zero_incidents_is_perfect(self):
        p = make_param(numerator=0, denominator=20, target=0, weightage=10)
        assert percentage_of(p) == 0
        assert score_parameter(p) == 100
        assert weighted_score(p) == 10

    def test_lower_is_better_floored_at_zero(self):
        p = make_param(numerator=30, denominator=20, target=0)
        assert score_parameter(p) == 0

    def test_lower_is_better_partial(self):
        p = make_param(numerator=25, denominator=100, target=0)
        assert score_parameter(p) == 75

    def test_plateau_above_half_is_full_credit(self):
        p = make_param(numerator=60, denominator=100, target=50)
        assert score_parameter(p) == 100

    def test_plateau_exactly_half_is_full_credit(self):
        p = make_param(numerator=50, denominator=100, target=50)
        assert score_parameter(p) == 100

    def test_plateau_below_half_ramps_linearly(self):
        p = make_param(numerator=20, denominator=100, target=50)
        assert score_parameter(p) == pytest.approx(40)

    def test_exact_boundaries(self):
        assert score_parameter(make_param(numerator=100, denominator=100, target=100)) == 100
        assert score_parameter(make_param(numerator=0, denominator=100, target=100)) == 0
        assert score_parameter(make_param(numerator=100, denominator=100, target=0)) == 0
        assert score_parameter(make_param(numerator=0, denominator=100, target=50)) == 0

    @pytest.mark.parametrize("target", [100, 0, 50, 42])
    def test_zero_denominator_scores_zero(self, target):
        p = make_param(numerator=7, denominator=0, target=target)
        assert score_parameter(p) == 0
        assert weighted_score(p) == 0

    def test_unknown_target_scores_zero_silently(self, caplog):
        p = make_param(numerator=90, denominator=100, target=75, measure_id="GV.XX.S1")
        with caplog.at_level(logging.WARNING):
            assert score_parameter(p) == 0
        assert caplog.records == []

    def test_cached_score_is_ignored(self):
        p = make_param(numerator=10, denominator=100).with_values(self_assessment_score=99)
        assert score_parameter(p) == 10
