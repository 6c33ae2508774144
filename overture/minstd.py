"""The minstd random number generator (multiplier 48271, modulus 2**31 - 1)."""

from __future__ import annotations

from collections.abc import Iterator

_MULTIPLIER = 48271
_LOW31 = 0x7FFFFFFF
_MASK32 = 0xFFFFFFFF


def minstd_gen(state: int) -> int:
    """Advance the generator from `state`; the result is both the value and the new state."""
    p = (state & _MASK32) * _MULTIPLIER
    x = ((p & _LOW31) + (p >> 31)) & _MASK32
    return ((x & _LOW31) + (x >> 31)) & _MASK32


def minstd_stream(seed: int) -> Iterator[int]:
    """Yield successive generator values starting from `seed`."""
    state = seed
    while True:
        state = minstd_gen(state)
        yield state