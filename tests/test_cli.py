# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the change-version command line."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

from change_version.cli.app import app
from change_version.discovery import walker as walker_module

Snapshot = Callable[[Path], dict[Path, bytes]]


@pytest.fixture
def in_project(project_tree: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(project_tree)
    return project_tree


def test_cli_rewrites_project(in_project: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["4.5.0", "4.5.1"])

    assert result.exit_code == 0
    assert "Updated 3 file(s)" in result.output
    assert (in_project / "README").read_text(encoding="utf-8") == "Release v4.5.1\n"
    assert (in_project / "node_modules" / "lib.css").read_text(encoding="utf-8") == "/* v4.5.0 */\n"


@pytest.mark.parametrize("flag", ["--dry", "--dry-run"])
def test_cli_dry_run_aliases(in_project: Path, snapshot: Snapshot, flag: str) -> None:
    before = snapshot(in_project)
    runner = CliRunner()
    result = runner.invoke(app, [flag, "4.5.0", "4.5.1"])

    assert result.exit_code == 0
    assert "Dry run complete; 3 file(s) would change" in result.output
    assert snapshot(in_project) == before


def test_cli_verbose_lists_files(in_project: Path) -> None:
    root = in_project.resolve()
    runner = CliRunner()
    result = runner.invoke(app, ["4.5.0", "4.5.1", "--verbose", "--dry-run"])

    assert result.exit_code == 0
    assert f"FILE: {root / 'README'}" in result.output
    assert f"SKIPPED: {root / 'docs' / 'notes.txt'}" in result.output
    assert f"EXCLUDED: {root / 'data.bin'}" in result.output
    assert "lib.css" not in result.output


@pytest.mark.parametrize("arguments", [[], ["4.5.0"], ["4.5.0", "--verbose"], ["", "4.5.1"]])
def test_cli_missing_arguments_is_usage_error(in_project: Path, snapshot: Snapshot, arguments: list[str]) -> None:
    before = snapshot(in_project)
    runner = CliRunner()
    result = runner.invoke(app, arguments)

    assert result.exit_code == 1
    assert "USAGE: change-version old_version new_version [--verbose] [--dry[-run]]" in result.output
    assert "Got arguments:" in result.output
    assert snapshot(in_project) == before


def test_cli_traversal_error_exits_nonzero(in_project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_list(directory: Path) -> list[str]:
        raise PermissionError(13, "Permission denied", str(directory))

    monkeypatch.setattr(walker_module, "_list_directory", fake_list)

    runner = CliRunner()
    result = runner.invoke(app, ["4.5.0", "4.5.1"])

    assert result.exit_code == 1
    assert "ERROR while traversing directory!:" in result.output
    assert "Permission denied" in result.output


def test_cli_rewrite_error_exits_nonzero(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "bad.txt").write_text("4.5.0", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    def failing_read(path: Path) -> bytes:
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(Path, "read_bytes", failing_read)

    runner = CliRunner()
    result = runner.invoke(app, ["4.5.0", "4.5.1"])

    assert result.exit_code == 1
    assert "ERROR while rewriting file!:" in result.output


def test_cli_ignores_extra_positional_values(in_project: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["4.5.0", "4.5.1", "stray", "--verbose"])

    assert result.exit_code == 0
    assert (in_project / "README").read_text(encoding="utf-8") == "Release v4.5.1\n"


def test_cli_usage_error_reports_extra_values(in_project: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["", "4.5.1", "stray"])

    assert result.exit_code == 1
    assert "Got arguments: ['', '4.5.1', 'stray']" in result.output


def test_cli_help_mentions_project_root() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"], env={"COLUMNS": "200", "TERMINAL_WIDTH": "200"})

    normalized = " ".join(result.output.replace("│", " ").split())
    assert result.exit_code == 0
    assert "from the project root" in normalized
