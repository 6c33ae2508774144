"""Stack in which every element can be pushed at most once, even after being popped."""

from __future__ import annotations

import operator
from typing import Any

from .hash import hash_uint64
from .hash_table import EqualFunc, HashFunc, HashSet


def _default_hash(h: int, elem: Any) -> int:
    return hash_uint64(h, hash(elem))


class UniqueStack:
    """Stack that remembers every element ever pushed and refuses repeats."""

    def __init__(self, hash_func: HashFunc = _default_hash, is_equal: EqualFunc = operator.eq) -> None:
        self._elems: list[Any] = []
        self._seen = HashSet(hash_func, is_equal)

    def push(self, elem: Any) -> bool:
        """Push `elem` unless it was pushed before; return whether it was pushed."""
        if not self._seen.insert(elem):
            return False
        self._elems.append(elem)
        return True

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._elems:
            raise IndexError("pop from an empty stack")
        return self._elems.pop()

    def last(self) -> Any:
        """Return the top element without removing it."""
        if not self._elems:
            raise IndexError("last of an empty stack")
        return self._elems[-1]

    def clear(self) -> None:
        """Empty the stack and forget every element seen."""
        self._elems.clear()
        self._seen.clear()

    def __len__(self) -> int:
        return len(self._elems)

    def __bool__(self) -> bool:
        return bool(self._elems)