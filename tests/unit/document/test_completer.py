"""Tests for document/completer.py."""

from __future__ import annotations

from dictsense.document.completer import complete_segments
from dictsense.document.models import Completion, IndexEntry


def _index(*pairs: tuple[str, str]) -> dict[str, IndexEntry]:
    return {p: IndexEntry(path=p, value=v, line=i, column=0) for i, (p, v) in enumerate(pairs)}


INDEX = _index(
    ("ui.submit", "Submit"),
    ("ui.subtitle", "Subtitle"),
    ("ui.dialogs.confirm", "Are you sure?"),
    ("ui.dialogs.cancel", "Cancel"),
    ("errors.required", "Required"),
    ("title", "App"),
)


def _segments(completions: list[Completion]) -> list[str]:
    return [c.segment for c in completions]


def test_root_level_candidates_sorted() -> None:
    assert _segments(complete_segments(INDEX, "")) == ["errors", "title", "ui"]


def test_typed_segment_does_not_narrow() -> None:
    assert _segments(complete_segments(INDEX, "ti")) == ["errors", "title", "ui"]


def test_children_of_prefix() -> None:
    result = complete_segments(INDEX, "ui.")
    assert _segments(result) == ["dialogs", "submit", "subtitle"]


def test_nested_prefix() -> None:
    assert _segments(complete_segments(INDEX, "ui.dialogs.c")) == ["cancel", "confirm"]


def test_has_children_flags_containers() -> None:
    by_segment = {c.segment: c for c in complete_segments(INDEX, "ui.")}
    assert by_segment["dialogs"].has_children is True
    assert by_segment["submit"].has_children is False


def test_preview_and_more_count() -> None:
    by_segment = {c.segment: c for c in complete_segments(INDEX, "ui.")}
    dialogs = by_segment["dialogs"]
    assert dialogs.preview == "Are you sure?"
    assert dialogs.more == 1
    assert dialogs.detail == "→ Are you sure? (+1 more)"

    submit = by_segment["submit"]
    assert submit.preview == "Submit"
    assert submit.more == 0  # "subtitle" shares the text prefix but not the path
    assert submit.detail == "→ Submit"


def test_unknown_prefix_yields_nothing() -> None:
    assert complete_segments(INDEX, "nope.") == []


def test_empty_index() -> None:
    assert complete_segments({}, "") == []


def test_every_key_reachable_from_its_parent() -> None:
    for key in INDEX:
        parts = key.split(".")
        for depth in range(len(parts)):
            partial = ".".join(parts[:depth] + [""])
            assert parts[depth] in _segments(complete_segments(INDEX, partial))
