"""Tests for dictsense scan."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from dictsense.cli.main import app

runner = CliRunner()


def _args(doc_path: Path, *args: str) -> list[str]:
    return [*args, "--document", str(doc_path), "--workspace", str(doc_path.parent)]


def _source(directory: Path, name: str, text: str) -> Path:
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


def test_scan_all_present(doc_path: Path) -> None:
    src = _source(doc_path.parent, "a.ts", 'd("ui.submit");\nd("errors.required");\n')
    result = runner.invoke(app, _args(doc_path, "scan", str(src)))
    assert result.exit_code == 0
    assert "References: 2" in result.output
    assert "Missing: 0" in result.output


def test_scan_reports_missing_and_exits_1(doc_path: Path) -> None:
    src = _source(doc_path.parent, "a.ts", 'd("ui.submit");\nd("ui.gone");\n')
    result = runner.invoke(app, _args(doc_path, "scan", str(src)))
    assert result.exit_code == 1
    assert "ui.gone" in result.output
    assert "missing" in result.output
    assert "Missing: 1" in result.output


def test_scan_multiple_files(doc_path: Path) -> None:
    a = _source(doc_path.parent, "a.ts", 'd("ui.cancel")')
    b = _source(doc_path.parent, "b.ts", 'd("ui.dialogs.confirm") + d("nope")')
    result = runner.invoke(app, _args(doc_path, "scan", str(a), str(b)))
    assert result.exit_code == 1
    assert "References: 3" in result.output
    assert "Missing: 1" in result.output


def test_scan_skips_unreadable_source(doc_path: Path) -> None:
    result = runner.invoke(app, _args(doc_path, "scan", str(doc_path.parent / "none.ts")))
    assert result.exit_code == 0
    assert "Skipped" in result.output
    assert "References: 0" in result.output
