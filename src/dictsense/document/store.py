"""Document store — owner of the dictionary text, tree, and index.

One store is created per active document. It reads the file, parses it,
builds the index, and swaps all three in at once. A failed (re)load raises
and leaves the previous good state untouched.

Edits are computed by the text patcher against the loaded text, written to
disk atomically (temp file → rename), and followed by a reload before the
result is returned, so the index always describes the text on disk.

Usage:
    store = DocumentStore()
    store.load(Path("src/i18n/dictionary.json"))
    store.lookup("ui.submit")            # IndexEntry | None
    store.update("ui.submit", "Send")    # EditResult
    store.create("ui.cancel", "Stop")    # EditResult
    store.completions("ui.")             # list[Completion]
"""

from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from dictsense.document.completer import complete_segments
from dictsense.document.indexer import build_index, find_unsupported
from dictsense.document.models import (
    Completion,
    DocumentLoadError,
    DocumentParseError,
    DocumentReadError,
    EditResult,
    IndexEntry,
    PatchResult,
)
from dictsense.document.patcher import DEFAULT_INDENT, create_key, update_value

logger = logging.getLogger(__name__)


class DocumentStore:
    """Holds the current document state and serves reads and edits."""

    def __init__(self, *, indent: str = DEFAULT_INDENT) -> None:
        self.indent = indent
        self._path: Path | None = None
        self._raw_text: str = ""
        self._tree: dict[str, object] = {}
        self._index: dict[str, IndexEntry] = {}
        self._signature: tuple[int, int] | None = None
        self._failed_signature: tuple[int, int] | None = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def loaded(self) -> bool:
        return self._path is not None

    @property
    def raw_text(self) -> str:
        return self._raw_text

    @property
    def tree(self) -> Mapping[str, object]:
        return MappingProxyType(self._tree)

    def load(self, path: Path) -> None:
        """Load the document at *path* and make it the current document.

        Raises:
            DocumentReadError: If the file is missing, unreadable, or not UTF-8.
            DocumentParseError: If the text is not a JSON object.
        """
        path = Path(path)
        raw_text, signature = _read(path)
        tree = _parse(path, raw_text)
        index = build_index(tree, raw_text)

        self._path = path
        self._raw_text = raw_text
        self._tree = tree
        self._index = index
        self._signature = signature
        self._failed_signature = None
        logger.info("Loaded %s (%d entries)", path, len(index))

    def reload(self) -> None:
        """Re-read the current document from disk.

        Raises:
            RuntimeError: If no document has been loaded.
            DocumentLoadError: As for load(); previous state is kept.
        """
        if self._path is None:
            raise RuntimeError("No document loaded")
        self.load(self._path)

    def refresh(self) -> bool:
        """Reload if the file changed on disk since the last load.

        Returns True if a reload happened. A file that has vanished counts
        as unchanged; the last good state is kept. A version of the file that
        failed to load raises once and is then treated as unchanged.
        """
        if self._path is None:
            return False
        try:
            signature = _signature(self._path.stat())
        except OSError:
            return False
        if signature in (self._signature, self._failed_signature):
            return False
        logger.debug("Change detected in %s", self._path)
        try:
            self.reload()
        except DocumentLoadError:
            self._failed_signature = signature
            raise
        return True

    def dispose(self) -> None:
        """Forget the current document."""
        self._path = None
        self._raw_text = ""
        self._tree = {}
        self._index = {}
        self._signature = None
        self._failed_signature = None

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, path: str) -> IndexEntry | None:
        return self._index.get(path)

    def lookup(self, path: str) -> IndexEntry | None:
        """Return the indexed leaf at dotted *path*, or None."""
        return self.get(path)

    def current_index(self) -> dict[str, IndexEntry]:
        """Return a snapshot of the full index."""
        return dict(self._index)

    def completions(self, partial_path: str) -> list[Completion]:
        return complete_segments(self._index, partial_path)

    def unsupported_leaves(self) -> list[str]:
        return find_unsupported(self._tree)

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def update(self, path: str, new_value: str) -> EditResult:
        """Set the value of an existing leaf."""
        patch = update_value(self._index, self._raw_text, path, new_value)
        return self._commit(path, patch)

    def create(self, path: str, new_value: str) -> EditResult:
        """Create a leaf, adding any missing intermediate objects."""
        patch = create_key(self._tree, self._raw_text, path, new_value, indent=self.indent)
        return self._commit(path, patch)

    def _commit(self, path: str, patch: PatchResult) -> EditResult:
        if not patch.ok or patch.text is None:
            logger.info("Edit of '%s' refused: %s", path, patch.detail)
            return EditResult(path=path, failure=patch.failure, detail=patch.detail)
        if self._path is None:
            raise RuntimeError("No document loaded")

        write_atomic(self._path, patch.text)
        self.reload()
        return EditResult(path=path, entry=self.get(path))


# ---------------------------------------------------------------------------
# File helpers
# ---------------------------------------------------------------------------


def write_atomic(path: Path, content: str) -> None:
    """Write *content* to *path* atomically (temp → rename).

    Line endings are written exactly as given. A symlinked *path* is written
    through to its target, and an existing file keeps its permission bits.
    """
    target = Path(path).resolve()
    fd, tmp_path = tempfile.mkstemp(dir=target.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        if target.exists():
            shutil.copymode(target, tmp_path)
        os.replace(tmp_path, target)
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def _signature(stat: os.stat_result) -> tuple[int, int]:
    return stat.st_mtime_ns, stat.st_size


def _read(path: Path) -> tuple[str, tuple[int, int]]:
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            raw_text = f.read()
        signature = _signature(path.stat())
    except FileNotFoundError:
        raise DocumentReadError(str(path), "file not found") from None
    except IsADirectoryError:
        raise DocumentReadError(str(path), "is a directory") from None
    except UnicodeDecodeError as exc:
        raise DocumentReadError(str(path), f"not valid UTF-8 ({exc.reason})") from None
    except OSError as exc:
        raise DocumentReadError(str(path), exc.strerror or str(exc)) from None
    return raw_text, signature


def _parse(path: Path, raw_text: str) -> dict[str, object]:
    try:
        tree = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise DocumentParseError(str(path), exc.msg, exc.lineno, exc.colno) from None
    if not isinstance(tree, dict):
        raise DocumentParseError(str(path), "top-level value must be an object")
    return tree
