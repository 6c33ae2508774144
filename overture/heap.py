"""Binary max-heap operations on plain lists, parameterised by a less-than function."""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from typing import Any

LessThan = Callable[[Any, Any], bool]


def heap_push(heap: MutableSequence[Any], elem: Any, is_less_than: LessThan = operator.lt) -> None:
    """Push `elem` onto `heap`, keeping the greatest element at index 0."""
    heap.append(elem)
    i = len(heap) - 1
    while i > 0:
        parent = (i - 1) // 2
        if is_less_than(elem, heap[parent]):
            break
        heap[i] = heap[parent]
        i = parent
    heap[i] = elem


def heap_pop(heap: MutableSequence[Any], is_less_than: LessThan = operator.lt) -> Any:
    """Remove and return the greatest element of `heap`."""
    if not heap:
        raise IndexError("pop from an empty heap")
    top = heap[0]
    count = len(heap)
    last = count - 1
    i = 0
    while True:
        left = 2 * i + 1
        right = 2 * i + 2
        largest = last
        if left < count and is_less_than(heap[largest], heap[left]):
            largest = left
        if right < count and is_less_than(heap[largest], heap[right]):
            largest = right
        heap[i] = heap[largest]
        if largest == last:
            break
        i = largest
    heap.pop()
    return top


def heap_sort(items: MutableSequence[Any], is_less_than: LessThan = operator.lt) -> None:
    """Sort `items` in place in ascending order using heap sort."""
    heap: list[Any] = []
    for item in items:
        heap_push(heap, item, is_less_than)
    for i in reversed(range(len(items))):
        items[i] = heap_pop(heap, is_less_than)