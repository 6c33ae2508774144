from overture.union_find import union_find, union_merge


def test_union_find_doubling_merges():
    parent_count = 16
    parents = list(range(parent_count))
    for i in range(parent_count):
        assert union_find(parents, i) == i

    step = 1
    while step < parent_count:
        step *= 2
        for i in range(0, parent_count - step + 1, step):
            union_merge(parents, i + (step - 1), i)
        for i in range(0, parent_count - step + 1, step):
            for j in range(i, i + step):
                assert union_find(parents, i) == union_find(parents, j)

    roots = {union_find(parents, i) for i in range(parent_count)}
    assert len(roots) == 1


def test_merge_makes_representatives_equal():
    parents = list(range(4))
    union_merge(parents, 0, 1)
    assert union_find(parents, 0) == union_find(parents, 1)
    assert union_find(parents, 2) == 2
    assert union_find(parents, 0) != union_find(parents, 2)