"""
tests/e2e/test_cli.py
──────────────────────────────────────────────────────────────────────────────
Command-line tests: arguments are parsed with the real parser and run() is
driven against the catalog-only pipeline fixture.
"""
from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from checkajob.domain.exceptions import ConfigurationError
from checkajob.interfaces.cli import _build_parser, _print_result_json, run


@pytest.fixture
def run_cli(pipeline):
    def _run(*argv: str) -> int:
        args = _build_parser().parse_args(list(argv))
        with patch("checkajob.interfaces.cli.build_pipeline", return_value=pipeline):
            return run(args)
    return _run


class TestRun:
    def test_json_output(self, run_cli, capsys):
        code = run_cli("-d", "hang a shelf in my bedroom", "--offline", "--json")
        assert code == 0
        body = json.loads(capsys.readouterr().out)
        assert body["decision"] == "DIY"
        assert body["score"] == 40

    def test_text_output(self, run_cli, capsys):
        code = run_cli("-d", "hang a shelf", "--offline")
        assert code == 0
        out = capsys.readouterr().out
        assert "Decision : DIY" in out
        assert "Score: 40/100" in out

    def test_list_jobs(self, run_cli, capsys):
        assert run_cli("--list-jobs") == 0
        out = capsys.readouterr().out
        for key in ("hang_shelf", "replace_tap_washer", "paint_wall", "fit_light_fixture"):
            assert key in out

    def test_batch_file(self, run_cli, capsys, tmp_path):
        jobs = tmp_path / "jobs.txt"
        jobs.write_text("# comment\nhang a shelf\n\npaint the hallway\n", encoding="utf-8")
        assert run_cli("-f", str(jobs), "--offline", "--json") == 0
        out = capsys.readouterr().out
        assert out.count('"decision"') == 2

    def test_missing_file_exits_2(self, run_cli, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            run_cli("-f", str(tmp_path / "nope.txt"), "--offline")
        assert exc_info.value.code == 2

    def test_no_input_returns_2(self, run_cli):
        assert run_cli("--offline") == 2

    def test_pipeline_failure_returns_1(self, capsys):
        args = _build_parser().parse_args(["-d", "hang a shelf"])
        with patch(
            "checkajob.interfaces.cli.build_pipeline",
            side_effect=ConfigurationError("Unknown LLM_PROVIDER 'bogus'"),
        ):
            assert run(args) == 1
        assert "Pipeline initialisation failed" in capsys.readouterr().err


class TestPrinters:
    def test_json_printer_takes_assessment_only(self, pipeline, capsys):
        _print_result_json(pipeline.assess({"description": "paint the hallway"}))
        body = json.loads(capsys.readouterr().out)
        assert body["decision"] == "DIY"
        assert "description" not in body
