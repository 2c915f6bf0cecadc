"""Text patcher — format-preserving edits of the dictionary document.

Edits are splices at character offsets taken from the span scan; the
document is never re-serialised, so whitespace, member order, and unrelated
content are left exactly as they were.

update_value:
  Replaces the value literal of an indexed leaf. The literal at the recorded
  offsets must still decode to the indexed value, otherwise the edit is
  refused as stale and no text is produced.

create_key:
  Inserts the missing containers plus the final ``"key": "value"`` pair as
  the first member of the deepest existing container. Multi-line containers
  get one line per new member, indented one unit deeper than the line that
  opens the container per level. Single-line containers get an inline
  insertion. The result is always valid JSON: a trailing comma is added only
  when the container already had members.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

from dictsense.document.models import (
    EditFailure,
    IndexEntry,
    InvalidPathError,
    PatchResult,
    join_path,
    split_path,
)
from dictsense.document.resolver import resolve
from dictsense.document.spans import LineMap, ObjectSpan, find_object, scan_spans

logger = logging.getLogger(__name__)

DEFAULT_INDENT = "  "


def encode_string(value: str) -> str:
    """Render *value* as a JSON string literal (non-ASCII kept as-is)."""
    return json.dumps(value, ensure_ascii=False)


# ---------------------------------------------------------------------------
# update_value
# ---------------------------------------------------------------------------


def update_value(
    index: Mapping[str, IndexEntry], raw_text: str, path: str, new_value: str
) -> PatchResult:
    """Return *raw_text* with the leaf at *path* set to *new_value*.

    Fails with NOT_FOUND if *path* is not indexed, and with
    STALE_LINE_MISMATCH if the text at the indexed position no longer holds
    the indexed value.
    """
    entry = index.get(path)
    if entry is None:
        return PatchResult.failed(EditFailure.NOT_FOUND, f"'{path}' is not in the index")

    if entry.start is None or entry.end is None:
        return PatchResult.failed(
            EditFailure.STALE_LINE_MISMATCH, f"'{path}' has no recorded source position"
        )

    literal = raw_text[entry.start:entry.end]
    try:
        current = json.loads(literal)
    except json.JSONDecodeError:
        current = None
    if current != entry.value:
        logger.warning(
            "Stale position for '%s' at line %d: found %r", path, entry.line + 1, literal
        )
        return PatchResult.failed(
            EditFailure.STALE_LINE_MISMATCH,
            f"Line {entry.line + 1} no longer holds the value of '{path}'",
        )

    text = raw_text[:entry.start] + encode_string(new_value) + raw_text[entry.end:]
    return PatchResult(text=text)


# ---------------------------------------------------------------------------
# create_key
# ---------------------------------------------------------------------------


def create_key(
    tree: Mapping[str, object],
    raw_text: str,
    path: str,
    new_value: str,
    *,
    indent: str = DEFAULT_INDENT,
) -> PatchResult:
    """Return *raw_text* with a new leaf at *path*, creating missing containers.

    Failures:
        INVALID_PATH: *path* has an empty segment.
        KEY_EXISTS: a leaf or container already sits at *path*.
        INSERTION_POINT_NOT_FOUND: a prefix of *path* is a leaf, or the
            container cannot be located in *raw_text*.
    """
    try:
        segments = split_path(path)
    except InvalidPathError as exc:
        return PatchResult.failed(EditFailure.INVALID_PATH, str(exc))

    info = resolve(tree, segments)
    key = segments[-1]

    if not info.missing_segments and key in info.container:
        return PatchResult.failed(EditFailure.KEY_EXISTS, f"'{path}' already exists")
    if info.missing_segments and info.missing_segments[0] in info.container:
        blocker = join_path(info.existing_path + info.missing_segments[:1])
        return PatchResult.failed(
            EditFailure.INSERTION_POINT_NOT_FOUND,
            f"'{blocker}' is a value, not an object",
        )

    try:
        root = scan_spans(raw_text)
    except json.JSONDecodeError as exc:
        return PatchResult.failed(EditFailure.INSERTION_POINT_NOT_FOUND, str(exc))
    container = find_object(root, info.existing_path)
    if container is None:
        where = join_path(info.existing_path) or "(root)"
        return PatchResult.failed(
            EditFailure.INSERTION_POINT_NOT_FOUND, f"Object '{where}' not found in text"
        )

    insertion = _render_insertion(
        raw_text, container, info.missing_segments, key, new_value, indent
    )
    if container.members:
        pos = container.start + 1
        text = raw_text[:pos] + insertion + raw_text[pos:]
    else:
        # Empty object: its interior is whitespace only and is replaced
        text = raw_text[:container.start + 1] + insertion + raw_text[container.end - 1:]
    return PatchResult(text=text)


def _render_insertion(
    raw_text: str,
    container: ObjectSpan,
    missing: list[str],
    key: str,
    value: str,
    indent: str,
) -> str:
    leaf = f"{encode_string(key)}: {encode_string(value)}"
    interior = raw_text[container.start:container.end]

    if "\n" not in interior:
        body = leaf
        for segment in reversed(missing):
            body = f"{encode_string(segment)}: {{{body}}}"
        return f"{body}, " if container.members else body

    newline = "\r\n" if "\r\n" in raw_text else "\n"
    lines = LineMap(raw_text)
    base = _leading_whitespace(raw_text, lines.line_start(container.start))

    block: list[str] = []
    current = base + indent
    for segment in missing:
        block.append(f"{current}{encode_string(segment)}: {{")
        current += indent
    block.append(f"{current}{leaf}")
    for depth in range(len(missing), 0, -1):
        block.append(f"{base}{indent * depth}}}")

    rendered = newline + newline.join(block)
    if container.members:
        return rendered + ","
    closing = _leading_whitespace(raw_text, lines.line_start(container.end - 1))
    return rendered + newline + closing


def _leading_whitespace(text: str, line_start: int) -> str:
    end = line_start
    while end < len(text) and text[end] in " \t":
        end += 1
    return text[line_start:end]
