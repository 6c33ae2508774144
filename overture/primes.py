"""Primes used as hash table capacities."""

from __future__ import annotations

MIN_PRIME = 7
MAX_PRIME = 1048583

PRIMES: tuple[int, ...] = (
    MIN_PRIME,
    17,
    31,
    67,
    257,
    1031,
    4093,
    8191,
    16381,
    32381,
    65539,
    131071,
    262147,
    524287,
    MAX_PRIME,
)


def next_prime(i: int) -> int:
    """Return the first listed prime not below `i`, or `i` itself past the list."""
    return next((p for p in PRIMES if i <= p), i)


def mod_prime(i: int, divisor: int) -> int:
    """Return `i` modulo `divisor`."""
    if divisor == 0:
        raise ZeroDivisionError("divisor must not be zero")
    return i % divisor