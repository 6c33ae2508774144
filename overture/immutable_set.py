"""Immutable sets kept as sorted tuples and interned in a pool, so equal sets are identical."""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .hash import hash_uint64
from .hash_table import HashFunc, HashSet

CmpFunc = Callable[[Any, Any], int]


def _default_cmp(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


class ImmutableSet:
    """Sorted, duplicate-free sequence of elements; build through an ImmutableSetPool."""

    __slots__ = ("elems",)

    def __init__(self, elems: Iterable[Any]) -> None:
        self.elems: tuple[Any, ...] = tuple(elems)

    def find(self, elem: Any, cmp: CmpFunc = _default_cmp) -> Any:
        """Binary-search for `elem`; return the stored element or None."""
        lo, hi = 0, len(self.elems)
        while lo < hi:
            mid = (lo + hi) // 2
            order = cmp(elem, self.elems[mid])
            if order == 0:
                return self.elems[mid]
            if order < 0:
                hi = mid
            else:
                lo = mid + 1
        return None

    def __iter__(self) -> Iterator[Any]:
        return iter(self.elems)

    def __len__(self) -> int:
        return len(self.elems)

    def __repr__(self) -> str:
        return f"ImmutableSet({list(self.elems)!r})"


class ImmutableSetPool:
    """Interns immutable sets so that equal contents yield the same object."""

    def __init__(self, hash_func: HashFunc, cmp: CmpFunc = _default_cmp) -> None:
        self._elem_hash = hash_func
        self._cmp = cmp
        self._sets = HashSet(self._hash_set, self._is_equal)

    def _hash_set(self, h: int, immutable_set: ImmutableSet) -> int:
        h = hash_uint64(h, len(immutable_set))
        for elem in immutable_set:
            h = self._elem_hash(h, elem)
        return h

    def _is_equal(self, left: ImmutableSet, right: ImmutableSet) -> bool:
        return len(left) == len(right) and all(
            self._cmp(a, b) == 0 for a, b in zip(left, right)
        )

    def insert(self, elems: Iterable[Any]) -> ImmutableSet:
        """Sort and deduplicate `elems`, then return the interned set."""
        ordered = sorted(elems, key=functools.cmp_to_key(self._cmp))
        unique: list[Any] = []
        for elem in ordered:
            if not unique or unique[-1] != elem:
                unique.append(elem)
        return self.insert_sorted(unique)

    def insert_sorted(self, elems: Iterable[Any]) -> ImmutableSet:
        """Return the interned set for elements that are already sorted and unique."""
        candidate = ImmutableSet(elems)
        found = self._sets.find(candidate)
        if found is not None:
            return found
        self._sets.insert(candidate)
        return candidate

    def merge(self, first: ImmutableSet, second: ImmutableSet) -> ImmutableSet:
        """Return the interned union of two sets from this pool."""
        merged: list[Any] = []
        left, right = first.elems, second.elems
        i = j = 0
        while i < len(left) and j < len(right):
            order = self._cmp(left[i], right[j])
            if order <= 0:
                merged.append(left[i])
                i += 1
                if order == 0:
                    j += 1
            else:
                merged.append(right[j])
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return self.insert_sorted(merged)

    def find(self, immutable_set: ImmutableSet, elem: Any) -> Any:
        """Look up `elem` in `immutable_set` using this pool's comparison."""
        return immutable_set.find(elem, self._cmp)

    def reset(self) -> None:
        """Forget every interned set."""
        self._sets.clear()

    def __len__(self) -> int:
        return len(self._sets)