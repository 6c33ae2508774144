import pytest

from overture.hash import hash_uint32
from overture.immutable_set import ImmutableSet, ImmutableSetPool


def hash_int(h, i):
    return hash_uint32(h, i)


def cmp_int(i, j):
    return i - j


@pytest.fixture
def pool():
    return ImmutableSetPool(hash_int, cmp_int)


@pytest.mark.parametrize(
    "elems",
    [[1, 2, 3], [1, 2, 3, 1], [3, 2, 1], [1, 3, 2], [2, 3, 1], [2, 1, 3], [3, 1, 2]],
)
def test_insert_interns_permutations(pool, elems):
    one_two_three = pool.insert([1, 2, 3])
    assert pool.insert(elems) is one_two_three
    assert list(one_two_three) == [1, 2, 3]


def test_find_and_merge(pool):
    one_two_three = pool.insert([1, 2, 3])
    one_two_three_four = pool.insert([1, 2, 3, 4])
    assert one_two_three is not one_two_three_four
    assert len(one_two_three_four) == 4

    assert pool.find(one_two_three, 1) == 1
    assert pool.find(one_two_three, 2) == 2
    assert pool.find(one_two_three, 3) == 3
    assert pool.find(one_two_three, 4) is None

    assert pool.merge(one_two_three, one_two_three) is one_two_three
    assert pool.merge(one_two_three, one_two_three_four) is one_two_three_four
    assert pool.merge(one_two_three_four, one_two_three) is one_two_three_four
    four = pool.insert([4])
    assert pool.merge(one_two_three, four) is one_two_three_four
    assert pool.merge(four, one_two_three) is one_two_three_four


def test_pool_counts_distinct_sets(pool):
    pool.insert([1, 2])
    pool.insert([2, 1])
    pool.insert([3])
    assert len(pool) == 2
    pool.reset()
    assert len(pool) == 0


def test_empty_set_is_interned(pool):
    empty = pool.insert([])
    assert pool.insert([]) is empty
    assert len(empty) == 0
    assert pool.merge(empty, empty) is empty


def test_immutable_set_find_default_cmp():
    s = ImmutableSet([1, 5, 9])
    assert s.find(5) == 5
    assert s.find(6) is None