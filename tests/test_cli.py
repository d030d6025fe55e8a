# tests/test_cli.py
import json

import pytest

from cci_calculator.__main__ import build_config, main, parse_args
from cci_calculator.drafts import DraftStore


@pytest.fixture
def config_file(tmp_path, drafts_file):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "organization": "Config Org",
        "drafts_path": str(drafts_file),
        "output": {"formats": ["json"]},
    }), encoding="utf-8")
    return path


class TestBuildConfig:
    def test_cli_overrides_config_file(self, config_file, tmp_path):
        args = parse_args([
            "--config", str(config_file), "--sample", "--seed", "5",
            "--output-dir", str(tmp_path / "out"), "--formats", "csv", "markdown",
        ])
        config = build_config(args)
        assert config.organization == "Config Org"
        assert config.sample_seed == 5
        assert config.output.base_dir == str(tmp_path / "out")
        assert config.output.formats == ["csv", "markdown"]

    def test_defaults_without_config(self):
        config = build_config(parse_args([]))
        assert config.improvement_limit == 4
        assert config.output.formats == ["json", "csv", "markdown", "executive"]


class TestAssessCommand:
    def test_sample_run_writes_reports(self, tmp_path, config_file, capsys):
        out = tmp_path / "out"
        code = main([
            "--config", str(config_file), "--sample", "--seed", "3",
            "--output-dir", str(out), "--formats", "json", "csv", "markdown", "executive",
        ])
        assert code == 0
        assert len(list((out / "json").glob("cci_assessment_*.json"))) == 1
        assert len(list((out / "csv").glob("*.csv"))) == 3
        assert len(list((out / "reports").glob("*.md"))) == 2
        captured = capsys.readouterr().out
        assert "Config Org" in captured
        assert "ASSESSMENT COMPLETE" in captured

    def test_input_file_organization_is_used(self, tmp_path, config_file):
        assessment = tmp_path / "assessment.json"
        assessment.write_text(json.dumps({
            "organization": "File Org",
            "parameters": [{"id": 1, "numerator": 8, "denominator": 10}],
        }), encoding="utf-8")
        out = tmp_path / "out"
        code = main([
            "--config", str(config_file), "--input", str(assessment),
            "--output-dir", str(out),
        ])
        assert code == 0
        (report,) = (out / "json").glob("*.json")
        payload = json.loads(report.read_text(encoding="utf-8"))
        assert payload["scoring"]["organization"] == "File Org"
        assert payload["scoring"]["total_score"] == pytest.approx(6.4)

    def test_no_source_is_an_error(self, config_file, capsys):
        assert main(["--config", str(config_file)]) == 1
        assert "No parameters to score" in capsys.readouterr().out

    def test_bad_input_file_is_an_error(self, tmp_path, config_file, capsys):
        assert main(["--config", str(config_file), "--input", str(tmp_path / "x.json")]) == 1
        assert "not found" in capsys.readouterr().out

    def test_save_draft_after_scoring(self, tmp_path, config_file, drafts_file):
        code = main([
            "--config", str(config_file), "--sample", "--seed", "1",
            "--organization", "Acme", "--output-dir", str(tmp_path / "out"), "--save-draft",
        ])
        assert code == 0
        assert len(DraftStore.load(drafts_file).get("acme").parameters) == 23


class TestDraftCommands:
    def test_save_list_show_remove(self, config_file, drafts_file, capsys):
        cfg = ["--config", str(config_file)]

        assert main(cfg + ["draft", "save", "Acme", "--sample", "--seed", "9"]) == 0
        assert DraftStore.load(drafts_file).get("Acme") is not None

        assert main(cfg + ["draft", "list"]) == 0
        assert "Acme" in capsys.readouterr().out

        assert main(cfg + ["draft", "show", "acme"]) == 0
        assert "Maturity Level" in capsys.readouterr().out

        assert main(cfg + ["draft", "remove", "Acme"]) == 0
        assert main(cfg + ["draft", "remove", "Acme"]) == 1

    def test_save_without_source_fails(self, config_file, capsys):
        assert main(["--config", str(config_file), "draft", "save", "Acme"]) == 1
        assert "Nothing to save" in capsys.readouterr().out

    def test_score_saved_draft(self, tmp_path, config_file):
        cfg = ["--config", str(config_file)]
        assert main(cfg + ["draft", "save", "Acme", "--sample", "--seed", "2"]) == 0
        assert main(cfg + ["--draft", "ACME", "--output-dir", str(tmp_path / "out")]) == 0

    def test_unknown_draft_fails(self, config_file):
        assert main(["--config", str(config_file), "--draft", "Nobody"]) == 1
