"""Tests for the dictsense entry point: version, help, global options."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from dictsense.cli.main import app

runner = CliRunner()


def test_version_flag() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.startswith("dictsense ")


def test_version_command() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "dictsense" in result.output


def test_help_lists_commands() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("lookup", "set", "create", "complete", "scan", "select", "status", "watch"):
        assert command in result.output


def test_log_level_option_applies(doc_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[str, bool]] = []

    def fake_setup(level: str = "WARNING", *, explicit: bool = False) -> None:
        calls.append((level, explicit))

    monkeypatch.setattr("dictsense.cli.main.setup_logging", fake_setup)
    result = runner.invoke(
        app,
        ["--log-level", "DEBUG", "lookup", "ui.submit", "--document", str(doc_path),
         "--workspace", str(doc_path.parent)],
    )
    assert result.exit_code == 0
    assert calls == [("DEBUG", True)]
