"""Conversion between Python values and the big-endian byte strings of the switch."""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address

from .errors import ByteConversionError

__all__ = [
    "to_bytes",
    "to_u32",
    "to_u64",
    "to_u128",
    "to_text",
    "to_bool",
    "to_ipv4",
    "to_ipv6",
    "to_int_array",
]


def _u32_bytes(item: object) -> bytes:
    if isinstance(item, bool) or not isinstance(item, int):
        raise TypeError(f"integer array items must be int, not {type(item).__name__}")
    try:
        return item.to_bytes(4, "big")
    except OverflowError as exc:
        raise ByteConversionError("u32", f"{item} does not fit") from exc


def to_bytes(value, width: int = 32) -> bytes:
    """Encode ``value`` as bytes.

    Integers are written big-endian in ``width`` bits (two's complement when
    negative); booleans become one byte; strings are UTF-8; addresses are
    their packed form; a list or tuple of integers is an array of u32.
    """
    if isinstance(value, bool):
        return b"\x01" if value else b"\x00"
    if isinstance(value, int):
        if width <= 0 or width % 8:
            raise ValueError(f"width must be a positive multiple of 8, not {width}")
        try:
            return value.to_bytes(width // 8, "big", signed=value < 0)
        except OverflowError as exc:
            raise ByteConversionError(f"{width}-bit integer", f"{value} does not fit") from exc
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (IPv4Address, IPv6Address)):
        return value.packed
    if isinstance(value, (list, tuple)):
        return b"".join(_u32_bytes(item) for item in value)
    raise TypeError(f"cannot encode {type(value).__name__} as bytes")


def _to_unsigned(data: bytes, width: int) -> int:
    value = int.from_bytes(bytes(data), "big")
    if value.bit_length() > width:
        raise ByteConversionError(f"u{width}", f"{len(data)} bytes hold a value wider than {width} bits")
    return value


def to_u32(data: bytes) -> int:
    """Decode a big-endian unsigned integer of at most 32 bits."""
    return _to_unsigned(data, 32)


def to_u64(data: bytes) -> int:
    """Decode a big-endian unsigned integer of at most 64 bits."""
    return _to_unsigned(data, 64)


def to_u128(data: bytes) -> int:
    """Decode a big-endian unsigned integer of at most 128 bits."""
    return _to_unsigned(data, 128)


def to_text(data: bytes) -> str:
    """Decode UTF-8 text."""
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ByteConversionError("str", str(exc)) from exc


def to_bool(data: bytes) -> bool:
    """Return whether any byte is non-zero."""
    return any(data)


def to_ipv4(data: bytes) -> IPv4Address:
    """Decode exactly four bytes as an IPv4 address."""
    if len(data) != 4:
        raise ByteConversionError("Ipv4Addr", f"expected 4 bytes, got {len(data)}")
    return IPv4Address(bytes(data))


def to_ipv6(data: bytes) -> IPv6Address:
    """Decode exactly sixteen bytes as an IPv6 address."""
    if len(data) != 16:
        raise ByteConversionError("Ipv6Addr", f"expected 16 bytes, got {len(data)}")
    return IPv6Address(bytes(data))


def to_int_array(data: bytes) -> list[int]:
    """Decode consecutive big-endian u32 values."""
    data = bytes(data)
    if len(data) % 4:
        raise ByteConversionError("u32 array", f"length {len(data)} is not a multiple of 4")
    return [int.from_bytes(data[start:start + 4], "big") for start in range(0, len(data), 4)]