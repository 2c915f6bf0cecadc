"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from dictsense.document.store import DocumentStore

SAMPLE_TEXT = """{
  "ui": {
    "submit": "Submit",
    "cancel": "Cancel",
    "dialogs": {
      "confirm": "Are you sure?"
    }
  },
  "errors": {
    "required": "This field is required"
  }
}
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT


@pytest.fixture
def doc_path(tmp_path: Path) -> Path:
    """dictionary.json in tmp_path holding SAMPLE_TEXT."""
    path = tmp_path / "dictionary.json"
    path.write_text(SAMPLE_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def store(doc_path: Path) -> DocumentStore:
    """Store with the sample document loaded."""
    s = DocumentStore()
    s.load(doc_path)
    return s


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the user's global config and DICTSENSE_* env vars out of tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setattr("dictsense.config._GLOBAL_CONFIG_PATH", home / "config.yaml")
    monkeypatch.delenv("DICTSENSE_DOCUMENT", raising=False)
    monkeypatch.delenv("DICTSENSE_INDENT", raising=False)
