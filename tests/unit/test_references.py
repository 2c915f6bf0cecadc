"""Tests for references.py — d("...") extraction from source text."""

from __future__ import annotations

import pytest

from dictsense.references import (
    Reference,
    find_references,
    key_at_position,
    partial_path_before,
)

LINE = 'label = d("ui.submit") + d(\'ui.cancel\')'


@pytest.mark.parametrize("column", [8, 12, 22])
def test_key_at_position_inside_first_call(column: int) -> None:
    assert key_at_position(LINE, column) == "ui.submit"


def test_key_at_position_second_call() -> None:
    assert key_at_position(LINE, LINE.index("ui.cancel")) == "ui.cancel"


def test_key_at_position_outside_calls() -> None:
    assert key_at_position(LINE, 2) is None
    assert key_at_position("no references here", 3) is None


def test_key_at_position_ignores_longer_names() -> None:
    assert key_at_position('add("ui.submit")', 6) is None


def test_key_at_position_custom_function() -> None:
    assert key_at_position('t("a.b")', 3, function="t") == "a.b"
    assert key_at_position('d("a.b")', 3, function="t") is None


@pytest.mark.parametrize(
    ("prefix", "expected"),
    [
        ('x = d("ui.su', "ui.su"),
        ('x = d("ui.', "ui."),
        ("x = d('", ""),
        ('x = d("done") + d("err', "err"),
        ('x = d("done")', None),
        ("x = y", None),
    ],
)
def test_partial_path_before(prefix: str, expected: str | None) -> None:
    assert partial_path_before(prefix) == expected


def test_find_references() -> None:
    text = 'a = d("one")\n\n  b = d("two.x"), d("three")\n'
    assert find_references(text) == [
        Reference(path="one", line=0, column=4),
        Reference(path="two.x", line=2, column=6),
        Reference(path="three", line=2, column=18),
    ]
