"""FNV-1a hashing for bytes, words, floating-point numbers and strings."""

from __future__ import annotations

from .bits import double_to_bits, float_to_bits

_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193
_MASK32 = 0xFFFFFFFF


def hash_init() -> int:
    """Return the initial hash value."""
    return _FNV_OFFSET


def hash_uint8(h: int, x: int) -> int:
    """Mix one byte into the hash."""
    return ((h ^ (x & 0xFF)) * _FNV_PRIME) & _MASK32


def hash_uint16(h: int, x: int) -> int:
    """Mix a 16-bit word into the hash, high byte first."""
    x &= 0xFFFF
    return hash_uint8(hash_uint8(h, x >> 8), x)


def hash_uint32(h: int, x: int) -> int:
    """Mix a 32-bit word into the hash, high half first."""
    x &= _MASK32
    return hash_uint16(hash_uint16(h, x >> 16), x)


def hash_uint64(h: int, x: int) -> int:
    """Mix a 64-bit word into the hash, high half first."""
    x &= 0xFFFFFFFFFFFFFFFF
    return hash_uint32(hash_uint32(h, x >> 32), x)


def hash_float(h: int, x: float) -> int:
    """Mix the single-precision bit pattern of a number into the hash."""
    return hash_uint32(h, float_to_bits(x))


def hash_double(h: int, x: float) -> int:
    """Mix the double-precision bit pattern of a number into the hash."""
    return hash_uint64(h, double_to_bits(x))


def hash_string(h: int, s: str | bytes) -> int:
    """Mix every byte of a string (UTF-8 encoded if text) into the hash."""
    data = s.encode("utf-8") if isinstance(s, str) else s
    for byte in data:
        h = hash_uint8(h, byte)
    return h