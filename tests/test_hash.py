import pytest

from overture.bits import double_to_bits, float_to_bits
from overture.hash import (
    hash_double,
    hash_float,
    hash_init,
    hash_string,
    hash_uint8,
    hash_uint16,
    hash_uint32,
    hash_uint64,
)


def test_hash_init_is_fnv_offset_basis():
    assert hash_init() == 0x811C9DC5


def test_empty_string_keeps_initial_hash():
    assert hash_string(hash_init(), "") == hash_init()


@pytest.mark.parametrize("text, expected", [("a", 0xE40C292C), ("foobar", 0xBF9CF968)])
def test_fnv1a_reference_vectors(text, expected):
    assert hash_string(hash_init(), text) == expected


def test_string_is_bytewise():
    h = hash_init()
    assert hash_string(h, "ab") == hash_uint8(hash_uint8(h, ord("a")), ord("b"))


def test_str_and_bytes_agree():
    assert hash_string(hash_init(), "héllo") == hash_string(hash_init(), "héllo".encode("utf-8"))


def test_uint8_truncates_input():
    assert hash_uint8(hash_init(), 0x141) == hash_uint8(hash_init(), 0x41)


def test_wider_hashes_are_composed_of_narrower_ones():
    h = hash_init()
    assert hash_uint16(h, 0x00AB) == hash_uint8(hash_uint8(h, 0), 0xAB)
    assert hash_uint32(h, 0x1234) == hash_uint16(hash_uint16(h, 0), 0x1234)
    assert hash_uint64(h, 0xDEADBEEF) == hash_uint32(hash_uint32(h, 0), 0xDEADBEEF)


def test_negative_values_wrap_like_unsigned():
    h = hash_init()
    assert hash_uint32(h, -1) == hash_uint32(h, 0xFFFFFFFF)


def test_floating_point_hashes_use_bit_patterns():
    h = hash_init()
    assert hash_double(h, 2.5) == hash_uint64(h, double_to_bits(2.5))
    assert hash_float(h, 2.5) == hash_uint32(h, float_to_bits(2.5))


@pytest.mark.parametrize("x", [0, 1, 255, 65535, 2**32 - 1, 2**64 - 1])
def test_results_fit_in_32_bits(x):
    assert 0 <= hash_uint64(hash_init(), x) < 2**32
    assert 0 <= hash_uint32(hash_init(), x) < 2**32