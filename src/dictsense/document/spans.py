"""Position-tracking scan of a JSON object document.

``json.loads`` yields structure but no positions. This module walks the raw
text once and records, for every object member, the character span of its
key and of its value. Indexing and patching both work from these spans, so a
leaf is always located by its place in the grammar and never by searching for
its rendered text.

Strings are decoded with the stdlib ``json.decoder.scanstring`` and all other
scalars with ``JSONDecoder.raw_decode``, so decoded values are exactly what
``json.loads`` produces for the same text.

Usage:
    root = scan_spans(text)
    node = root.members["ui"].value     # ObjectSpan
    leaf = node.members["submit"].value # ScalarSpan
    text[leaf.start:leaf.end]           # '"Go"'
"""

from __future__ import annotations

import bisect
import json
import re
from dataclasses import dataclass, field
from json.decoder import scanstring

_WS_RE = re.compile(r"[ \t\n\r]*")


@dataclass
class ScalarSpan:
    value: object
    start: int
    end: int  # exclusive


@dataclass
class ObjectSpan:
    start: int  # offset of "{"
    end: int    # offset after "}"
    members: dict[str, MemberSpan] = field(default_factory=dict)


@dataclass
class MemberSpan:
    key: str
    key_start: int
    value: ObjectSpan | ScalarSpan


class _Scanner:
    def __init__(self, text: str) -> None:
        self.text = text
        self._decoder = json.JSONDecoder()

    def skip(self, pos: int) -> int:
        return _WS_RE.match(self.text, pos).end()

    def expect(self, pos: int, char: str) -> None:
        if self.text[pos:pos + 1] != char:
            raise json.JSONDecodeError(f"Expecting '{char}'", self.text, pos)

    def value(self, pos: int) -> ObjectSpan | ScalarSpan:
        char = self.text[pos:pos + 1]
        if char == "{":
            return self.object(pos)
        if char == '"':
            decoded, end = scanstring(self.text, pos + 1)
            return ScalarSpan(decoded, pos, end)
        try:
            decoded, end = self._decoder.raw_decode(self.text, pos)
        except json.JSONDecodeError:
            raise json.JSONDecodeError("Expecting value", self.text, pos) from None
        return ScalarSpan(decoded, pos, end)

    def object(self, start: int) -> ObjectSpan:
        node = ObjectSpan(start=start, end=start)
        pos = self.skip(start + 1)
        if self.text[pos:pos + 1] == "}":
            node.end = pos + 1
            return node

        while True:
            self.expect(pos, '"')
            key, pos_after_key = scanstring(self.text, pos + 1)
            key_start = pos
            pos = self.skip(pos_after_key)
            self.expect(pos, ":")
            pos = self.skip(pos + 1)
            child = self.value(pos)
            # Duplicate keys: the last one wins, matching json.loads
            node.members[key] = MemberSpan(key=key, key_start=key_start, value=child)
            pos = self.skip(child.end)
            char = self.text[pos:pos + 1]
            if char == ",":
                pos = self.skip(pos + 1)
                continue
            if char == "}":
                node.end = pos + 1
                return node
            raise json.JSONDecodeError("Expecting ',' delimiter", self.text, pos)


def scan_spans(text: str) -> ObjectSpan:
    """Scan *text* and return the span tree of its root object.

    Raises:
        json.JSONDecodeError: If the text is not a JSON object.
    """
    scanner = _Scanner(text)
    pos = scanner.skip(0)
    scanner.expect(pos, "{")
    root = scanner.object(pos)
    end = scanner.skip(root.end)
    if end != len(text):
        raise json.JSONDecodeError("Extra data", text, end)
    return root


def find_object(root: ObjectSpan, segments: list[str]) -> ObjectSpan | None:
    """Return the object span at *segments* below *root*, or None."""
    node: ObjectSpan | ScalarSpan = root
    for segment in segments:
        if not isinstance(node, ObjectSpan) or segment not in node.members:
            return None
        node = node.members[segment].value
    return node if isinstance(node, ObjectSpan) else None


class LineMap:
    """Convert character offsets into zero-based (line, column) pairs."""

    def __init__(self, text: str) -> None:
        self._starts = [0]
        self._starts.extend(m.end() for m in re.finditer("\n", text))

    def position(self, offset: int) -> tuple[int, int]:
        line = bisect.bisect_right(self._starts, offset) - 1
        return line, offset - self._starts[line]

    def line_start(self, offset: int) -> int:
        return self._starts[bisect.bisect_right(self._starts, offset) - 1]
