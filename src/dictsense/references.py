"""Dictionary references in source text — ``d("a.b.c")`` calls.

Only the call name is configurable; quotes may be single or double.

Usage:
    key_at_position('t = d("ui.submit")', 8)        # "ui.submit"
    partial_path_before('t = d("ui.su')              # "ui.su"
    find_references(source_text)                     # [Reference(...), ...]
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_FUNCTION = "d"


@dataclass(frozen=True)
class Reference:
    path: str
    line: int    # zero-based
    column: int  # zero-based offset of the call name


@lru_cache(maxsize=16)
def _call_re(function: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(function)}\(['\"]([^'\"]+)['\"]\)")


@lru_cache(maxsize=16)
def _open_call_re(function: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(function)}\(['\"]([^'\"]*)$")


def key_at_position(line_text: str, column: int, function: str = DEFAULT_FUNCTION) -> str | None:
    """Return the dotted path of the reference call spanning *column*.

    Both ends of the call text count as inside it.
    """
    for match in _call_re(function).finditer(line_text):
        if match.start() <= column <= match.end():
            return match.group(1)
    return None


def partial_path_before(line_prefix: str, function: str = DEFAULT_FUNCTION) -> str | None:
    """Return the path typed so far in an unterminated call ending *line_prefix*."""
    match = _open_call_re(function).search(line_prefix)
    return match.group(1) if match else None


def find_references(text: str, function: str = DEFAULT_FUNCTION) -> list[Reference]:
    """Return every reference call in *text*, in document order."""
    pattern = _call_re(function)
    refs: list[Reference] = []
    for line_no, line in enumerate(text.split("\n")):
        for match in pattern.finditer(line):
            refs.append(Reference(path=match.group(1), line=line_no, column=match.start()))
    return refs
