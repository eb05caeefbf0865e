"""CLI tests for search, show and validate."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from lazykeys import cli

runner = CliRunner()


def _write_records(path: Path, records: list) -> Path:
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


def _records() -> list[dict]:
    return [
        {"keys": "<leader>ff", "description": "Find files", "category": "search"},
        {"keys": "gd", "description": "Goto definition", "category": "lsp"},
    ]


def test_search_prints_ranked_matches(tmp_path: Path) -> None:
    data = _write_records(tmp_path / "bindings.json", _records())

    result = runner.invoke(cli.app, ["search", "goto", "--data", str(data)])

    assert result.exit_code == 0, result.stdout
    assert "Goto definition" in result.stdout
    assert "Find files" not in result.stdout


def test_search_reports_no_matches(tmp_path: Path) -> None:
    data = _write_records(tmp_path / "bindings.json", _records())

    result = runner.invoke(cli.app, ["search", "zzzz", "--data", str(data)])

    assert result.exit_code == 0
    assert "No matches found" in result.stdout


def test_search_uses_bundled_data() -> None:
    result = runner.invoke(cli.app, ["search", "lazygit", "--limit", "3"])

    assert result.exit_code == 0, result.stdout
    assert "Lazygit" in result.stdout


def test_show_prints_every_step() -> None:
    result = runner.invoke(cli.app, ["show", "<C-w>v"])

    assert result.exit_code == 0, result.stdout
    assert "step 1/2" in result.stdout
    assert "step 2/2" in result.stdout
    assert "Ctrl+w" in result.stdout


def test_show_legend() -> None:
    result = runner.invoke(cli.app, ["show", "<leader>ff", "--legend"])

    assert result.exit_code == 0, result.stdout
    assert "step" not in result.stdout
    assert "Space" in result.stdout


def test_show_rejects_bad_notation() -> None:
    result = runner.invoke(cli.app, ["show", "<C-w"])

    assert result.exit_code == 1
    assert "Invalid key sequence" in result.stdout


def test_validate_accepts_bundled_data() -> None:
    result = runner.invoke(cli.app, ["validate"])

    assert result.exit_code == 0
    assert "OK:" in result.stdout


def test_validate_reports_bad_record(tmp_path: Path) -> None:
    records = _records()
    records[1]["keys"] = "<>"
    data = _write_records(tmp_path / "bindings.json", records)

    result = runner.invoke(cli.app, ["validate", "--data", str(data)])

    assert result.exit_code == 1
    assert "Record 1" in result.stdout


def test_missing_data_file_exits(tmp_path: Path) -> None:
    result = runner.invoke(cli.app, ["search", "x", "--data", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "Failed to load keybindings" in result.stdout
