"""Dictionary document layer — index, resolver, completer, patcher, store."""

from dictsense.document.completer import complete_segments
from dictsense.document.indexer import build_index, find_unsupported
from dictsense.document.models import (
    Completion,
    DocumentLoadError,
    DocumentParseError,
    DocumentReadError,
    EditFailure,
    EditResult,
    IndexEntry,
    ParentInfo,
    PatchResult,
)
from dictsense.document.patcher import create_key, update_value
from dictsense.document.resolver import resolve
from dictsense.document.store import DocumentStore

__all__ = [
    "Completion",
    "DocumentLoadError",
    "DocumentParseError",
    "DocumentReadError",
    "DocumentStore",
    "EditFailure",
    "EditResult",
    "IndexEntry",
    "ParentInfo",
    "PatchResult",
    "build_index",
    "complete_segments",
    "create_key",
    "find_unsupported",
    "resolve",
    "update_value",
]
