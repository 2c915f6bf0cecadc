"""Tests for dictsense status command."""

from __future__ import annotations

from pathlib import Path

import yaml
from typer.testing import CliRunner

from dictsense.cli.main import app

runner = CliRunner()


def _args(doc_path: Path, *args: str) -> list[str]:
    return [*args, "--document", str(doc_path), "--workspace", str(doc_path.parent)]


def test_status_shows_counts(doc_path: Path) -> None:
    result = runner.invoke(app, _args(doc_path, "status"))
    assert result.exit_code == 0
    assert "Entries:" in result.output
    assert "4" in result.output
    assert "Top-level keys: 2" in result.output
    assert 'd("a.b.c")' in result.output
    assert "Unsupported" not in result.output


def test_status_lists_unsupported_values(tmp_path: Path) -> None:
    doc = tmp_path / "dictionary.json"
    doc.write_text('{"a": "x", "count": 3, "flags": [true]}', encoding="utf-8")
    result = runner.invoke(app, _args(doc, "status"))
    assert result.exit_code == 0
    assert "Unsupported values (not strings): 2" in result.output
    assert "count" in result.output
    assert "flags" in result.output


def test_status_uses_configured_reference_function(doc_path: Path) -> None:
    (doc_path.parent / "dictsense.yaml").write_text(
        yaml.dump({"reference": {"function": "t"}}), encoding="utf-8"
    )
    result = runner.invoke(app, _args(doc_path, "status"))
    assert result.exit_code == 0
    assert 't("a.b.c")' in result.output


def test_status_invalid_config_exits_1(doc_path: Path) -> None:
    (doc_path.parent / "dictsense.yaml").write_text(
        yaml.dump({"watch": {"interval": -1}}), encoding="utf-8"
    )
    result = runner.invoke(app, _args(doc_path, "status"))
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_status_no_document(tmp_path: Path) -> None:
    result = runner.invoke(app, ["status", "--workspace", str(tmp_path)])
    assert result.exit_code == 1
    assert "dictsense select" in result.output
