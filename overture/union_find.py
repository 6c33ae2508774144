"""Union-find over a list of parent indices."""

from __future__ import annotations

from collections.abc import MutableSequence


def union_find(parents: MutableSequence[int], x: int) -> int:
    """Return the representative of `x`, compressing the path on the way."""
    root = x
    while parents[root] != root:
        root = parents[root]
    while parents[x] != x:
        parent = parents[x]
        parents[x] = root
        x = parent
    return root


def union_merge(parents: MutableSequence[int], x: int, y: int) -> None:
    """Merge the class of `x` into the class of `y`."""
    x = union_find(parents, x)
    y = union_find(parents, y)
    parents[x] = y