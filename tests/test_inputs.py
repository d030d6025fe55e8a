# tests/test_inputs.py
import json

import pytest

from cci_calculator.inputs import AssessmentInputError, load_assessment, parse_parameters


def _write(tmp_path, payload, name="assessment.json"):
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestLoadAssessment:
    def test_values_merge_onto_catalog(self, tmp_path):
        path = _write(tmp_path, {
            "organization": "Acme Securities",
            "parameters": [{"id": 2, "numerator": 45, "denominator": 50}],
        })
        organization, (param,) = load_assessment(path)
        assert organization == "Acme Securities"
        assert param.measure_id == "DE.CM.S5"
        assert param.weightage == 18
        assert (param.numerator, param.denominator) == (45, 50)

    def test_plain_list_and_camel_case(self, tmp_path):
        path = _write(tmp_path, [
            {"id": 12, "numerator": 1, "denominator": 10, "auditorComments": "One breach"},
        ])
        organization, (param,) = load_assessment(path)
        assert organization is None
        assert param.target == 0
        assert param.auditor_comments == "One breach"

    def test_custom_parameter_outside_catalog(self, tmp_path):
        path = _write(tmp_path, [
            {"id": 99, "measureId": "RC.RP.S1", "title": "Recovery", "target": 100,
             "weightage": 5, "numerator": 1, "denominator": 2},
        ])
        _, (param,) = load_assessment(path)
        assert param.measure_id == "RC.RP.S1"

    def test_missing_file(self, tmp_path):
        with pytest.raises(AssessmentInputError, match="not found"):
            load_assessment(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[", encoding="utf-8")
        with pytest.raises(AssessmentInputError, match="not valid JSON"):
            load_assessment(path)

    def test_parameters_must_be_a_list(self, tmp_path):
        path = _write(tmp_path, {"parameters": {"id": 1}})
        with pytest.raises(AssessmentInputError, match="list of parameters"):
            load_assessment(path)


class TestParseParameters:
    @pytest.mark.parametrize(
        "entry, message",
        [
            ("oops", "not an object"),
            ({"numerator": 1}, "has no id"),
            ({"id": 1, "numerator": "ten"}, "must be a number"),
            ({"id": 1, "denominator": True}, "must be a number"),
            ({"id": 1, "numerator": -1}, "non-negative"),
            ({"id": 77, "numerator": 1}, "no measure id"),
        ],
    )
    def test_rejects_invalid_entries(self, entry, message):
        with pytest.raises(AssessmentInputError, match=message):
            parse_parameters([entry])

    def test_keeps_file_order(self):
        params = parse_parameters([{"id": 5}, {"id": 1}, {"id": 3}])
        assert [p.id for p in params] == [5, 1, 3]

    def test_input_error_is_value_error(self):
        assert issubclass(AssessmentInputError, ValueError)
