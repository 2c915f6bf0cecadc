"""Tree indexer — flattens the document tree into dotted-path leaf entries.

Each entry records the leaf's string value and the zero-based line/column of
the value's opening quote. Positions come from the span scan of the same raw
text the tree was parsed from (see ``spans.py``).

Leaves that are not strings (numbers, booleans, arrays, null) are skipped and
logged; they never abort the build. A leaf whose span cannot be found (tree
and text out of step) still gets an entry, placed on a best-effort line
derived from its depth with no offsets. Such an entry can be looked up but
never patched.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

from dictsense.document.models import IndexEntry
from dictsense.document.spans import LineMap, ObjectSpan, ScalarSpan, scan_spans

logger = logging.getLogger(__name__)


def build_index(tree: Mapping[str, object], raw_text: str) -> dict[str, IndexEntry]:
    """Return ``{dotted_path: IndexEntry}`` for every string leaf of *tree*.

    Insertion order follows document order (depth-first).
    """
    index: dict[str, IndexEntry] = {}
    if not tree:
        return index

    try:
        root: ObjectSpan | None = scan_spans(raw_text)
    except json.JSONDecodeError as exc:
        logger.warning("Span scan failed (%s); positions fall back to depth", exc)
        root = None
    lines = LineMap(raw_text)

    def _walk(node: Mapping[str, object], span: ObjectSpan | None, prefix: str, depth: int) -> None:
        for key, value in node.items():
            path = f"{prefix}.{key}" if prefix else key
            member = span.members.get(key) if span is not None else None
            child_span = member.value if member is not None else None

            if isinstance(value, Mapping):
                _walk(
                    value,
                    child_span if isinstance(child_span, ObjectSpan) else None,
                    path,
                    depth + 1,
                )
                continue

            if not isinstance(value, str):
                logger.warning(
                    "Skipping non-string leaf '%s' (%s)", path, type(value).__name__
                )
                continue

            if isinstance(child_span, ScalarSpan) and child_span.value == value:
                line, column = lines.position(child_span.start)
                index[path] = IndexEntry(
                    path=path,
                    value=value,
                    line=line,
                    column=column,
                    start=child_span.start,
                    end=child_span.end,
                )
            else:
                logger.warning("No source span for '%s'; using depth %d as line", path, depth)
                index[path] = IndexEntry(path=path, value=value, line=depth, column=0)

    _walk(tree, root, "", 0)
    return index


def find_unsupported(tree: Mapping[str, object], prefix: str = "") -> list[str]:
    """Return dotted paths of leaves that are neither strings nor objects."""
    found: list[str] = []
    for key, value in tree.items():
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, Mapping):
            found.extend(find_unsupported(value, path))
        elif not isinstance(value, str):
            found.append(path)
    return found
