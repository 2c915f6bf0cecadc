"""Domain models for the dictionary document layer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

PATH_SEPARATOR = "."


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class DocumentLoadError(Exception):
    """Base class for failures while (re)loading the dictionary document."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class DocumentReadError(DocumentLoadError):
    """The document file is missing, unreadable, or not UTF-8 text."""


class DocumentParseError(DocumentLoadError):
    """The document is not a JSON object.

    Attributes:
        line: 1-based line of the syntax error, if known.
        column: 1-based column of the syntax error, if known.
    """

    def __init__(
        self, path: str, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        super().__init__(path, message)
        self.line = line
        self.column = column


class InvalidPathError(ValueError):
    """A dotted path is empty or contains an empty segment."""


# ---------------------------------------------------------------------------
# Index + resolver values
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class IndexEntry:
    path: str
    value: str
    line: int    # zero-based line of the value's opening quote
    column: int  # zero-based column of the value's opening quote
    start: int | None = None  # character offset of the value literal; None if unplaced
    end: int | None = None


@dataclass(frozen=True)
class ParentInfo:
    """Outcome of walking a dotted path down the container tree.

    Attributes:
        container: Deepest existing container reached (read-only view).
        existing_path: Segments consumed to reach *container*.
        missing_segments: Intermediate segments that do not exist yet,
            excluding the final leaf key.
    """

    container: Mapping[str, object]
    existing_path: list[str] = field(default_factory=list)
    missing_segments: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Completion:
    segment: str
    preview: str | None = None  # value of the first leaf under this segment
    more: int = 0               # further leaves sharing the prefix
    has_children: bool = False

    @property
    def detail(self) -> str:
        """Human-readable hint, e.g. ``→ Submit (+2 more)``."""
        if self.preview is None:
            return ""
        suffix = f" (+{self.more} more)" if self.more > 0 else ""
        return f"→ {self.preview}{suffix}"


# ---------------------------------------------------------------------------
# Edit outcomes
# ---------------------------------------------------------------------------


class EditFailure(str, Enum):
    NOT_FOUND = "not_found"
    STALE_LINE_MISMATCH = "stale_line_mismatch"
    INSERTION_POINT_NOT_FOUND = "insertion_point_not_found"
    KEY_EXISTS = "key_exists"
    INVALID_PATH = "invalid_path"


@dataclass(frozen=True)
class PatchResult:
    """New document text, or the reason no text was produced."""

    text: str | None = None
    failure: EditFailure | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def failed(cls, failure: EditFailure, detail: str = "") -> PatchResult:
        return cls(text=None, failure=failure, detail=detail)


@dataclass(frozen=True)
class EditResult:
    """Outcome of a store-level edit, observed after the mandatory reload."""

    path: str
    entry: IndexEntry | None = None
    failure: EditFailure | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def split_path(path: str) -> list[str]:
    """Split a dotted path into segments.

    Raises:
        InvalidPathError: If *path* is empty or has an empty segment
            (``"a..b"``, ``".a"``, ``"a."``).
    """
    segments = path.split(PATH_SEPARATOR)
    if not path or any(not s for s in segments):
        raise InvalidPathError(f"Invalid dotted path: '{path}'")
    return segments


def join_path(segments: list[str]) -> str:
    return PATH_SEPARATOR.join(segments)
