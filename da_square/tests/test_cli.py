from __future__ import annotations

import json

from typer.testing import CliRunner

from da_square.cli import plan

runner = CliRunner()


def test_place_json():
    result = runner.invoke(plan.app, ["place", "1", "128", "128", "128", "--json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["sharesUsed"] == 385
    assert [b["index"] for b in data["blobs"]] == [2, 130, 258]
    assert [(b["row"], b["col"]) for b in data["blobs"]] == [(0, 2), (1, 2), (2, 2)]


def test_place_table_with_square_size():
    result = runner.invoke(plan.app, ["place", "3", "5", "7", "--square-size", "4"])
    assert result.exit_code == 0, result.output
    assert "shares used: 12" in result.output
    # index 8 in a 4-wide square is row 2, col 0
    assert "2,0" in result.output


def test_place_zero_threshold_fails():
    result = runner.invoke(plan.app, ["place", "0", "10", "--threshold", "0"])
    assert result.exit_code == 2
    assert "invalid_divisor" in result.output


def test_width_json():
    result = runner.invoke(plan.app, ["width", "129", "--threshold", "64", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"shareCount": 129, "threshold": 64, "width": 4, "minSquareSize": 16}


def test_width_uses_env_threshold(monkeypatch):
    monkeypatch.setenv("ANIMICA_DA_SUBTREE_ROOT_THRESHOLD", "1")
    result = runner.invoke(plan.app, ["width", "5"])
    assert result.exit_code == 0, result.output
    assert "subtree width: 4" in result.output
    assert "min square size: 4" in result.output


def test_config_command():
    result = runner.invoke(plan.app, ["config"])
    assert result.exit_code == 0
    assert "layout.subtree_root_threshold: 64" in result.output


def test_place_json_failure_reports_problem_detail():
    result = runner.invoke(plan.app, ["place", "0", "10", "--threshold", "0", "--json"])
    assert result.exit_code == 2
    assert '"type": "urn:animica:da:invalid_divisor"' in result.output
    assert '"status": 400' in result.output
    assert '"step": "subtree_width"' in result.output
