"""Priority queue giving fast access to its greatest element."""

from __future__ import annotations

import operator
from typing import Any

from .heap import LessThan, heap_pop, heap_push


class PriorityQueue:
    """Queue ordered by `is_less_than`; the greatest element comes out first."""

    def __init__(self, is_less_than: LessThan = operator.lt) -> None:
        self._is_less_than = is_less_than
        self._elems: list[Any] = []

    def push(self, elem: Any) -> None:
        """Add an element."""
        heap_push(self._elems, elem, self._is_less_than)

    def pop(self) -> Any:
        """Remove and return the greatest element."""
        if not self._elems:
            raise IndexError("pop from an empty queue")
        return heap_pop(self._elems, self._is_less_than)

    def top(self) -> Any:
        """Return the greatest element without removing it."""
        if not self._elems:
            raise IndexError("top of an empty queue")
        return self._elems[0]

    def clear(self) -> None:
        """Remove every element."""
        self._elems.clear()

    def __len__(self) -> int:
        return len(self._elems)

    def __bool__(self) -> bool:
        return bool(self._elems)