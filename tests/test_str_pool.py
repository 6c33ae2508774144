from overture.str_pool import StrPool


def _fresh(text):
    return "".join(list(text))


def test_insert_same_string_same_object():
    pool = StrPool()
    first = pool.insert(_fresh("foo"))
    second = pool.insert(_fresh("foo"))
    assert first is second


def test_different_strings_differ():
    pool = StrPool()
    assert pool.insert(_fresh("bar")) is not pool.insert(_fresh("foo"))
    assert len(pool) == 2


def test_numbers():
    pool = StrPool()
    numbers = [pool.insert(_fresh(str(i))) for i in range(10)]
    for i in range(10):
        assert pool.insert(f"{i:d}") is numbers[i]
    assert len(pool) == 10


def test_find():
    pool = StrPool()
    assert pool.find("x") is None
    stored = pool.insert(_fresh("xyz"))
    assert pool.find(_fresh("xyz")) is stored
    assert "xyz" in pool
    assert "abc" not in pool


def test_empty_string():
    pool = StrPool()
    assert pool.insert("") == ""
    assert len(pool) == 1