"""Bit manipulation helpers working on 64-bit and 32-bit unsigned values."""

from __future__ import annotations

import math
import struct

UINT64_MASK = (1 << 64) - 1
UINT32_MASK = (1 << 32) - 1


def make_bitmask(bits: int) -> int:
    """Return a 64-bit mask with the given number of low bits set."""
    if not 0 <= bits <= 64:
        raise ValueError(f"bit count must be between 0 and 64, got {bits}")
    return (1 << bits) - 1


def sign_extend(val: int, bit_count: int) -> int:
    """Sign-extend the low `bit_count` bits of `val` to a 64-bit unsigned value."""
    if not 1 <= bit_count <= 64:
        raise ValueError(f"bit count must be between 1 and 64, got {bit_count}")
    mask = 1 << (bit_count - 1)
    return ((val & UINT64_MASK) ^ mask) - mask & UINT64_MASK


def double_to_bits(x: float) -> int:
    """Reinterpret a double-precision number as a 64-bit unsigned integer."""
    return struct.unpack("<Q", struct.pack("<d", x))[0]


def float_to_bits(x: float) -> int:
    """Reinterpret a number, rounded to single precision, as a 32-bit unsigned integer."""
    try:
        packed = struct.pack("<f", x)
    except OverflowError:
        packed = struct.pack("<f", math.copysign(math.inf, x))
    return struct.unpack("<I", packed)[0]


def bits_to_double(x: int) -> float:
    """Reinterpret a 64-bit unsigned integer as a double-precision number."""
    return struct.unpack("<d", struct.pack("<Q", x & UINT64_MASK))[0]


def bits_to_float(x: int) -> float:
    """Reinterpret a 32-bit unsigned integer as a single-precision number."""
    return struct.unpack("<f", struct.pack("<I", x & UINT32_MASK))[0]