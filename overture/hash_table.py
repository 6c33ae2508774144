"""Open-addressing hash table with linear probing, and the map and set built on it."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator, MutableMapping, MutableSet
from typing import Any

from .hash import hash_init
from .primes import MAX_PRIME, mod_prime, next_prime

OCCUPIED_FLAG = 0x80000000
MAX_LOAD_FACTOR = 70  # percent
DEFAULT_CAPACITY = 4

EqualFunc = Callable[[Any, Any], bool]
HashFunc = Callable[[int, Any], int]


def _tag(hash_value: int) -> int:
    return (hash_value & 0xFFFFFFFF) | OCCUPIED_FLAG


class HashTable:
    """Low-level table of buckets; growth is left to the caller."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY, is_equal: EqualFunc = operator.eq) -> None:
        capacity = next_prime(capacity)
        self.is_equal = is_equal
        self.hashes: list[int] = [0] * capacity
        self.keys: list[Any] = [None] * capacity
        self.values: list[Any] = [None] * capacity

    @property
    def capacity(self) -> int:
        return len(self.hashes)

    def _next_bucket(self, idx: int) -> int:
        return idx + 1 if idx + 1 < self.capacity else 0

    def is_occupied(self, idx: int) -> bool:
        """Return whether the bucket at `idx` holds an element."""
        return bool(self.hashes[idx] & OCCUPIED_FLAG)

    def _scan(self, key: Any, tagged: int) -> tuple[int | None, bool]:
        idx = mod_prime(tagged, self.capacity)
        for _ in range(self.capacity):
            if not self.is_occupied(idx):
                return idx, False
            if self.hashes[idx] == tagged and self.is_equal(self.keys[idx], key):
                return idx, True
            idx = self._next_bucket(idx)
        return None, False

    def insert(self, key: Any, value: Any, hash_value: int) -> bool:
        """Store a key and value; return False if an equal key is already present."""
        tagged = _tag(hash_value)
        idx, found = self._scan(key, tagged)
        if found:
            return False
        if idx is None:
            raise RuntimeError("hash table is full")
        self.hashes[idx] = tagged
        self.keys[idx] = key
        self.values[idx] = value
        return True

    def find(self, key: Any, hash_value: int) -> int | None:
        """Return the bucket index holding `key`, or None."""
        idx, found = self._scan(key, _tag(hash_value))
        return idx if found else None

    def remove(self, key: Any, hash_value: int) -> bool:
        """Remove `key`, shifting later probe entries back; return whether it was present."""
        idx = self.find(key, hash_value)
        if idx is None:
            return False
        next_idx = self._next_bucket(idx)
        while next_idx != idx and self.is_occupied(next_idx):
            ideal = mod_prime(self.hashes[next_idx], self.capacity)
            if (next_idx > idx and (ideal <= idx or ideal > next_idx)) or (
                next_idx < idx and idx >= ideal > next_idx
            ):
                self.keys[idx] = self.keys[next_idx]
                self.values[idx] = self.values[next_idx]
                self.hashes[idx] = self.hashes[next_idx]
                idx = next_idx
            next_idx = self._next_bucket(next_idx)
        self.hashes[idx] = 0
        self.keys[idx] = None
        self.values[idx] = None
        return True

    def clear(self) -> None:
        """Empty every bucket, keeping the capacity."""
        capacity = self.capacity
        self.hashes = [0] * capacity
        self.keys = [None] * capacity
        self.values = [None] * capacity

    def needs_rehash(self, elem_count: int) -> bool:
        """Return whether `elem_count` elements exceed the maximum load factor."""
        return elem_count * 100 >= self.capacity * MAX_LOAD_FACTOR

    def rehash(self, capacity: int) -> None:
        """Move every element into a table of the given capacity."""
        capacity = next_prime(capacity)
        hashes = [0] * capacity
        keys: list[Any] = [None] * capacity
        values: list[Any] = [None] * capacity
        for tagged, key, value in zip(self.hashes, self.keys, self.values):
            if not tagged & OCCUPIED_FLAG:
                continue
            idx = mod_prime(tagged, capacity)
            for _ in range(capacity):
                if not hashes[idx] & OCCUPIED_FLAG:
                    break
                idx = idx + 1 if idx + 1 < capacity else 0
            else:
                raise ValueError(f"capacity {capacity} is too small for the elements")
            hashes[idx] = tagged
            keys[idx] = key
            values[idx] = value
        self.hashes, self.keys, self.values = hashes, keys, values

    def grow(self) -> None:
        """Rehash into a larger table."""
        capacity = self.capacity
        if capacity < MAX_PRIME:
            self.rehash(next_prime(capacity + 1))
        else:
            self.rehash(capacity + (capacity >> 1))

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs in bucket order."""
        for tagged, key, value in zip(self.hashes, self.keys, self.values):
            if tagged & OCCUPIED_FLAG:
                yield key, value


class HashMap(MutableMapping):
    """Hash map keyed by a user hash function of the form hash_func(h, key)."""

    def __init__(
        self,
        hash_func: HashFunc,
        is_equal: EqualFunc = operator.eq,
        capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        self._hash_func = hash_func
        self._table = HashTable(capacity, is_equal)
        self._count = 0

    def _hash(self, key: Any) -> int:
        return self._hash_func(hash_init(), key)

    @property
    def capacity(self) -> int:
        return self._table.capacity

    def insert(self, key: Any, value: Any) -> bool:
        """Insert a new entry; return False, leaving the map unchanged, if the key exists."""
        if not self._table.insert(key, value, self._hash(key)):
            return False
        if self._table.needs_rehash(self._count):
            self._table.grow()
        self._count += 1
        return True

    def find(self, key: Any) -> Any:
        """Return the value for `key`, or None."""
        idx = self._table.find(key, self._hash(key))
        return None if idx is None else self._table.values[idx]

    def remove(self, key: Any) -> bool:
        """Remove `key`; return whether it was present."""
        if self._table.remove(key, self._hash(key)):
            self._count -= 1
            return True
        return False

    def clear(self) -> None:
        self._table.clear()
        self._count = 0

    def __getitem__(self, key: Any) -> Any:
        idx = self._table.find(key, self._hash(key))
        if idx is None:
            raise KeyError(key)
        return self._table.values[idx]

    def __setitem__(self, key: Any, value: Any) -> None:
        idx = self._table.find(key, self._hash(key))
        if idx is None:
            self.insert(key, value)
        else:
            self._table.values[idx] = value

    def __delitem__(self, key: Any) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def __contains__(self, key: Any) -> bool:
        return self._table.find(key, self._hash(key)) is not None

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in self._table)

    def __len__(self) -> int:
        return self._count


class HashSet(MutableSet):
    """Hash set using a user hash function of the form hash_func(h, elem)."""

    def __init__(
        self,
        hash_func: HashFunc,
        is_equal: EqualFunc = operator.eq,
        capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        self._hash_func = hash_func
        self._table = HashTable(capacity, is_equal)
        self._count = 0

    def _hash(self, elem: Any) -> int:
        return self._hash_func(hash_init(), elem)

    @property
    def capacity(self) -> int:
        return self._table.capacity

    def insert(self, elem: Any) -> bool:
        """Insert `elem`; return False if an equal element is already present."""
        if not self._table.insert(elem, None, self._hash(elem)):
            return False
        if self._table.needs_rehash(self._count):
            self._table.grow()
        self._count += 1
        return True

    def find(self, elem: Any) -> Any:
        """Return the stored element equal to `elem`, or None."""
        idx = self._table.find(elem, self._hash(elem))
        return None if idx is None else self._table.keys[idx]

    def add(self, elem: Any) -> None:
        self.insert(elem)

    def discard(self, elem: Any) -> bool:
        """Remove `elem` if present; return whether it was removed."""
        if self._table.remove(elem, self._hash(elem)):
            self._count -= 1
            return True
        return False

    def clear(self) -> None:
        self._table.clear()
        self._count = 0

    def __contains__(self, elem: Any) -> bool:
        return self._table.find(elem, self._hash(elem)) is not None

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in self._table)

    def __len__(self) -> int:
        return self._count