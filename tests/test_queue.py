import pytest

from overture.queue import PriorityQueue


def test_queue_pops_in_descending_order():
    n = 100
    queue = PriorityQueue()
    for i in range(n):
        queue.push(i)
    assert len(queue) == n
    for i in reversed(range(n)):
        assert queue.top() == i
        assert queue.pop() == i
    assert len(queue) == 0
    assert not queue


def test_min_queue_with_custom_comparator():
    queue = PriorityQueue(lambda a, b: a > b)
    for value in [5, 3, 9, 1]:
        queue.push(value)
    assert [queue.pop() for _ in range(4)] == [1, 3, 5, 9]


def test_clear_empties_queue():
    queue = PriorityQueue()
    queue.push(1)
    queue.push(2)
    queue.clear()
    assert len(queue) == 0
    with pytest.raises(IndexError):
        queue.top()


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        PriorityQueue().pop()