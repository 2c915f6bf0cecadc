"""Segment completer — next-segment candidates for a partially typed path."""

from __future__ import annotations

from collections.abc import Mapping

from dictsense.document.models import PATH_SEPARATOR, Completion, IndexEntry


def complete_segments(
    index: Mapping[str, IndexEntry], partial_path: str
) -> list[Completion]:
    """Return the candidate segments that can follow the parent of *partial_path*.

    The last segment of *partial_path* is the one being typed and does not
    narrow the candidates; filtering by it is left to the caller. With no
    parent prefix, candidates are the first segments of every key.

    Each candidate carries a preview (the first leaf value under it), the
    number of further leaves sharing that prefix, and whether it is a
    container. Candidates are sorted by segment.
    """
    parts = partial_path.split(PATH_SEPARATOR)
    parent = PATH_SEPARATOR.join(parts[:-1])
    parent_prefix = f"{parent}{PATH_SEPARATOR}" if parent else ""

    segments: set[str] = set()
    for key in index:
        if not key.startswith(parent_prefix):
            continue
        next_segment = key[len(parent_prefix):].split(PATH_SEPARATOR, 1)[0]
        if next_segment:
            segments.add(next_segment)

    completions: list[Completion] = []
    for segment in sorted(segments):
        full = f"{parent_prefix}{segment}"
        child_prefix = f"{full}{PATH_SEPARATOR}"
        values = [
            entry.value
            for key, entry in index.items()
            if key == full or key.startswith(child_prefix)
        ]
        completions.append(
            Completion(
                segment=segment,
                preview=values[0] if values else None,
                more=max(len(values) - 1, 0),
                has_children=any(key.startswith(child_prefix) for key in index),
            )
        )
    return completions
