from ipaddress import IPv4Address, IPv6Address

import pytest

from bfrtkit.encoding import (
    to_bool,
    to_bytes,
    to_int_array,
    to_ipv4,
    to_ipv6,
    to_text,
    to_u32,
    to_u64,
    to_u128,
)
from bfrtkit.errors import ByteConversionError


def test_bool_encoding_is_single_byte():
    assert to_bytes(True) == bytes([1])
    assert to_bytes(False) == bytes([0])


def test_ipv4_address_to_bytes():
    assert to_bytes(IPv4Address("10.0.0.2")) == bytes([10, 0, 0, 2])


def test_ipv6_address_to_bytes():
    octets = bytes([255, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1])
    assert to_bytes(IPv6Address(octets)) == octets


def test_to_ipv4_from_bytes():
    assert to_ipv4(bytes([192, 168, 0, 1])).packed == bytes([192, 168, 0, 1])


def test_to_ipv6_from_bytes():
    octets = bytes([255, 255, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 255, 1])
    assert to_ipv6(octets).packed == octets


def test_to_ipv4_wrong_length():
    with pytest.raises(ByteConversionError) as info:
        to_ipv4(bytes([1, 2, 3]))
    assert info.value.target == "Ipv4Addr"


def test_to_ipv6_wrong_length():
    with pytest.raises(ByteConversionError) as info:
        to_ipv6(bytes(4))
    assert info.value.target == "Ipv6Addr"


@pytest.mark.parametrize("width", [8, 16, 32, 64, 128])
def test_width_sets_length(width):
    assert len(to_bytes(1, width)) == width // 8


@pytest.mark.parametrize("value", [0, 1, 255, 65535, 2**32 - 1])
def test_u32_round_trip(value):
    assert to_u32(to_bytes(value, 32)) == value


@pytest.mark.parametrize("value", [0, 2**40 + 7, 2**64 - 1])
def test_u64_round_trip(value):
    assert to_u64(to_bytes(value, 64)) == value


@pytest.mark.parametrize("value", [3, 2**100 + 5, 2**128 - 1])
def test_u128_round_trip(value):
    assert to_u128(to_bytes(value, 128)) == value


def test_leading_zeros_are_accepted():
    assert to_u32(bytes(4) + to_bytes(77, 32)) == 77


def test_short_data_decodes():
    assert to_u32(to_bytes(200, 8)) == 200


def test_too_wide_for_u32():
    with pytest.raises(ByteConversionError):
        to_u32(to_bytes(2**32, 64))


def test_too_wide_for_u64():
    with pytest.raises(ByteConversionError):
        to_u64(to_bytes(2**64, 128))


def test_negative_is_twos_complement():
    assert to_bytes(-1, 8) == bytes([0xFF])


def test_overflow_raises():
    with pytest.raises(ByteConversionError):
        to_bytes(256, 8)


def test_bad_width_raises():
    with pytest.raises(ValueError):
        to_bytes(1, 12)


def test_unsupported_type_raises():
    with pytest.raises(TypeError):
        to_bytes(object())


def test_text_round_trip():
    assert to_text(to_bytes("BF_SPEED_100G")) == "BF_SPEED_100G"


def test_text_invalid_utf8():
    with pytest.raises(ByteConversionError):
        to_text(bytes([0xFF, 0xFE]))


def test_to_bool():
    assert to_bool(bytes(3)) is False
    assert to_bool(bytes([0, 0, 2])) is True
    assert to_bool(b"") is False


def test_int_array_round_trip():
    assert to_int_array(to_bytes([1, 2, 3, 2**32 - 1])) == [1, 2, 3, 2**32 - 1]


def test_int_array_length_is_four_per_item():
    assert len(to_bytes([7, 8, 9])) == 12


def test_int_array_bad_length():
    with pytest.raises(ByteConversionError):
        to_int_array(bytes(5))


def test_int_array_item_overflow():
    with pytest.raises(ByteConversionError):
        to_bytes([2**32])