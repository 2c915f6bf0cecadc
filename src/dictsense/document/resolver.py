"""Path resolver — how much of a dotted path already exists in the tree."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from dictsense.document.models import ParentInfo


def resolve(tree: Mapping[str, object], segments: list[str]) -> ParentInfo:
    """Walk *segments* (all but the last) through nested containers.

    Stops at the first segment that is missing or names a leaf. The final
    segment is the key to look up or create and is never consumed, so
    ``len(existing_path) + len(missing_segments) + 1 == len(segments)``.

    The tree is never mutated; ``container`` is a read-only view.

    Raises:
        ValueError: If *segments* is empty.
    """
    if not segments:
        raise ValueError("Cannot resolve an empty path")

    current = tree
    consumed = 0
    for segment in segments[:-1]:
        child = current.get(segment)
        if not isinstance(child, Mapping):
            break
        current = child
        consumed += 1

    return ParentInfo(
        container=MappingProxyType(current) if isinstance(current, dict) else current,
        existing_path=list(segments[:consumed]),
        missing_segments=list(segments[consumed:-1]),
    )

