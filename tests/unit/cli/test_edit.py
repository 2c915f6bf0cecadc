"""Tests for dictsense set / create commands."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from dictsense.cli.main import app

runner = CliRunner()


def _args(doc_path: Path, *args: str) -> list[str]:
    return [*args, "--document", str(doc_path), "--workspace", str(doc_path.parent)]


# ---------------------------------------------------------------------------
# dictsense set
# ---------------------------------------------------------------------------


def test_set_updates_only_the_value(doc_path: Path, sample_text: str) -> None:
    result = runner.invoke(app, _args(doc_path, "set", "ui.submit", "Send"))
    assert result.exit_code == 0
    assert "Updated value for ui.submit" in result.output

    text = doc_path.read_text(encoding="utf-8")
    assert text == sample_text.replace('"submit": "Submit"', '"submit": "Send"')


def test_set_escapes_quotes(doc_path: Path) -> None:
    result = runner.invoke(app, _args(doc_path, "set", "ui.cancel", 'Say "no"'))
    assert result.exit_code == 0
    assert json.loads(doc_path.read_text(encoding="utf-8"))["ui"]["cancel"] == 'Say "no"'


def test_set_same_value_is_unchanged(doc_path: Path, sample_text: str) -> None:
    result = runner.invoke(app, _args(doc_path, "set", "ui.submit", "Submit"))
    assert result.exit_code == 0
    assert "Unchanged" in result.output
    assert doc_path.read_text(encoding="utf-8") == sample_text


def test_set_empty_value_rejected(doc_path: Path, sample_text: str) -> None:
    result = runner.invoke(app, _args(doc_path, "set", "ui.submit", ""))
    assert result.exit_code == 1
    assert "cannot be empty" in result.output
    assert doc_path.read_text(encoding="utf-8") == sample_text


def test_set_missing_key_suggests_create(doc_path: Path, sample_text: str) -> None:
    result = runner.invoke(app, _args(doc_path, "set", "ui.nope", "x"))
    assert result.exit_code == 1
    assert "key not found" in result.output
    assert "dictsense create ui.nope" in result.output
    assert doc_path.read_text(encoding="utf-8") == sample_text


def test_set_container_path_is_not_found(doc_path: Path) -> None:
    result = runner.invoke(app, _args(doc_path, "set", "ui.dialogs", "x"))
    assert result.exit_code == 1
    assert "key not found" in result.output


# ---------------------------------------------------------------------------
# dictsense create
# ---------------------------------------------------------------------------


def test_create_adds_key_to_existing_object(doc_path: Path) -> None:
    result = runner.invoke(app, _args(doc_path, "create", "ui.dialogs.cancel", "Stop"))
    assert result.exit_code == 0
    assert "Created new key: ui.dialogs.cancel" in result.output

    data = json.loads(doc_path.read_text(encoding="utf-8"))
    assert data["ui"]["dialogs"] == {"cancel": "Stop", "confirm": "Are you sure?"}


def test_create_builds_missing_parents(doc_path: Path) -> None:
    result = runner.invoke(app, _args(doc_path, "create", "forms.login.title", "Sign in"))
    assert result.exit_code == 0

    data = json.loads(doc_path.read_text(encoding="utf-8"))
    assert data["forms"] == {"login": {"title": "Sign in"}}
    assert data["ui"]["submit"] == "Submit"


def test_create_then_lookup(doc_path: Path) -> None:
    runner.invoke(app, _args(doc_path, "create", "errors.min", "Too short"))
    result = runner.invoke(app, _args(doc_path, "lookup", "errors.min"))
    assert result.exit_code == 0
    assert "Too short" in result.output


def test_create_existing_key_suggests_set(doc_path: Path, sample_text: str) -> None:
    result = runner.invoke(app, _args(doc_path, "create", "ui.submit", "Again"))
    assert result.exit_code == 1
    assert "already exists" in result.output
    assert "dictsense set ui.submit" in result.output
    assert doc_path.read_text(encoding="utf-8") == sample_text


def test_create_under_a_value_fails(doc_path: Path, sample_text: str) -> None:
    result = runner.invoke(app, _args(doc_path, "create", "ui.submit.label", "x"))
    assert result.exit_code == 1
    assert "Cannot find a location" in result.output
    assert doc_path.read_text(encoding="utf-8") == sample_text


def test_create_invalid_path(doc_path: Path) -> None:
    result = runner.invoke(app, _args(doc_path, "create", "ui..x", "x"))
    assert result.exit_code == 1
    assert "Invalid key path" in result.output


def test_create_empty_value_rejected(doc_path: Path) -> None:
    result = runner.invoke(app, _args(doc_path, "create", "ui.new", ""))
    assert result.exit_code == 1
    assert "cannot be empty" in result.output
