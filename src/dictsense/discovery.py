"""Locating the dictionary document for a workspace.

Resolution order (locate_document):
  1. Selection made with ``dictsense select``, if that file still exists
  2. document.path from config (dictsense.yaml / DICTSENSE_DOCUMENT)
  3. Selection remembered from an earlier workspace search
  4. Recursive workspace search for document.name; a hit is stored as a
     search selection so later runs skip the search

Selections made explicitly (``dictsense select``) must carry the configured
document name.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from dictsense.config import DictsenseConfig

logger = logging.getLogger(__name__)

STATE_DIR = ".dictsense"
STATE_FILE = "state.yaml"

SOURCE_SELECT = "select"
SOURCE_SEARCH = "search"

# Directories never searched for the document
_SKIP_DIRS: frozenset[str] = frozenset(
    [".git", ".hg", ".svn", "node_modules", ".venv", "venv", "__pycache__", STATE_DIR]
)


class DiscoveryError(ValueError):
    """Raised when a selected document path is not acceptable."""


def state_path_for(workspace: Path) -> Path:
    return workspace / STATE_DIR / STATE_FILE


def find_document(root: Path, name: str = "dictionary.json") -> Path | None:
    """Return the first file called *name* below *root* (sorted walk), or None."""
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in _SKIP_DIRS)
        if name in filenames:
            return Path(dirpath) / name
    return None


def validate_selection(path: Path, name: str = "dictionary.json") -> Path:
    """Return *path* resolved, or raise DiscoveryError if it is not a usable document."""
    if path.name != name:
        raise DiscoveryError(f"Please select a file named {name} (got '{path.name}')")
    if not path.is_file():
        raise DiscoveryError(f"File not found: '{path}'")
    return path.resolve()


def _read_state(state_path: Path) -> dict[str, Any]:
    if not state_path.exists():
        return {}
    try:
        data = yaml.safe_load(state_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Ignoring unreadable state file %s: %s", state_path, exc)
        return {}
    if not isinstance(data, dict) or not data.get("document"):
        return {}
    return data


def load_selection(state_path: Path) -> Path | None:
    """Return the stored document path, or None if nothing usable is stored."""
    data = _read_state(state_path)
    return Path(str(data["document"])) if data else None


def store_selection(state_path: Path, document: Path, *, source: str = SOURCE_SELECT) -> None:
    """Remember *document*; *source* records whether a user or a search chose it."""
    state_path.parent.mkdir(parents=True, exist_ok=True)
    state_path.write_text(
        yaml.safe_dump({"document": str(document), "source": source}, sort_keys=False),
        encoding="utf-8",
    )


def locate_document(workspace: Path, cfg: DictsenseConfig) -> Path | None:
    """Resolve the document for *workspace* (see module docstring)."""
    state_path = state_path_for(workspace)
    state = _read_state(state_path)
    stored = Path(str(state["document"])) if state else None
    if stored is not None and not stored.is_file():
        stored = None

    # State files without a source were written by ``select``
    if stored is not None and state.get("source", SOURCE_SELECT) == SOURCE_SELECT:
        return stored

    if cfg.document.path:
        configured = Path(cfg.document.path)
        if not configured.is_absolute():
            configured = workspace / configured
        return configured

    if stored is not None:
        return stored

    found = find_document(workspace, cfg.document.name)
    if found is not None:
        logger.info("Found %s; remembering it for %s", found, workspace)
        store_selection(state_path, found.resolve(), source=SOURCE_SEARCH)
    return found
