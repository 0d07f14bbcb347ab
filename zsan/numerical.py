"""Encodings of numbers found in text, one family for each stream mode.

Each mode knows which kinds of numbers the whole text holds:

* unsigned integer: only non-negative integers;
* integer: integers, some of them negative;
* unsigned decimal: non-negative numbers, some with a fractional part;
* decimal: numbers with signs and fractional parts.

A compressor returns the encoded bytes, or ``None`` when encoding the number
would not pay off and the original text should be kept. Every encoded number
starts with a byte whose top two bits are ``11``. A decompressor takes the
buffer that starts at such a byte and returns the restored text and the
number of bytes it used.
"""

from __future__ import annotations

from .markers import NUMERICAL_HOLDER_FLAG
from .vle import (
    decode_0,
    decode_1,
    decode_4,
    decode_5,
    decode_6,
    encode_0,
    encode_1,
    encode_4,
    encode_5,
    encode_6,
)

_INTEGER_NEGATIVE_FLAG = 0b_0010_0000

_DECIMAL_NEGATIVE_FLAG = 0b_0010_0000
_DECIMAL_FRACTION_FLAG = 0b_0001_0000
_DECIMAL_PLACES_MASK = 0b_0000_1111

_UNSIGNED_DECIMAL_FRACTION_FLAG = 0b_0010_0000


def _flag_first(encoded: bytes, flags: int) -> bytes:
    return bytes([encoded[0] | flags]) + encoded[1:]


def _first_byte(data: bytes) -> int:
    if not data:
        raise ValueError("cannot decode an empty buffer")
    return data[0]


def _render(value: int, decimal_places: int = 0) -> bytes:
    """Write `value` scaled down by `decimal_places` digits as ASCII."""
    digits = str(value) if value else ""
    if not decimal_places:
        return digits.encode("ascii")
    padded = digits.zfill(decimal_places + 1)
    return f"{padded[:-decimal_places]}.{padded[-decimal_places:]}".encode("ascii")


def compress_unsigned_integer(value: int, negative: bool, decimal_places: int) -> bytes | None:
    """Encode a non-negative integer, or return None if it is not worth it."""
    if value < 10 or 31 < value < 100:
        return None
    return _flag_first(encode_6(value), NUMERICAL_HOLDER_FLAG)


def decompress_unsigned_integer(data: bytes) -> tuple[bytes, int]:
    """Decode a number written by `compress_unsigned_integer`."""
    _first_byte(data)
    value, used = decode_6(data)
    return _render(value), used


def compress_integer(value: int, negative: bool, decimal_places: int) -> bytes | None:
    """Encode an integer that may be negative, or return None if it is not worth it."""
    if not negative and (value < 10 or 31 < value < 100):
        return None
    flags = NUMERICAL_HOLDER_FLAG | (_INTEGER_NEGATIVE_FLAG if negative else 0)
    return _flag_first(encode_5(value), flags)


def decompress_integer(data: bytes) -> tuple[bytes, int]:
    """Decode a number written by `compress_integer`."""
    first = _first_byte(data)
    sign = b"-" if first & _INTEGER_NEGATIVE_FLAG else b""
    value, used = decode_5(data)
    return sign + _render(value), used


def compress_unsigned_decimal(value: int, negative: bool, decimal_places: int) -> bytes | None:
    """Encode a non-negative number with up to 15 decimal places, or return None."""
    if decimal_places == 0 and value < 100:
        return None
    if decimal_places > 0:
        flags = NUMERICAL_HOLDER_FLAG | _UNSIGNED_DECIMAL_FRACTION_FLAG | (decimal_places << 1)
        return _flag_first(encode_1(value), flags)
    return _flag_first(encode_4(value), NUMERICAL_HOLDER_FLAG)


def decompress_unsigned_decimal(data: bytes) -> tuple[bytes, int]:
    """Decode a number written by `compress_unsigned_decimal`."""
    first = _first_byte(data)
    if first & _UNSIGNED_DECIMAL_FRACTION_FLAG:
        value, used = decode_1(data)
        decimal_places = (first >> 1) & _DECIMAL_PLACES_MASK
    else:
        value, used = decode_4(data)
        decimal_places = 0
    return _render(value, decimal_places), used


def compress_decimal(value: int, negative: bool, decimal_places: int) -> bytes | None:
    """Encode a number with sign and up to 15 decimal places, or return None."""
    if not negative and decimal_places == 0 and value < 100:
        return None
    flags = (
        NUMERICAL_HOLDER_FLAG
        | (_DECIMAL_NEGATIVE_FLAG if negative else 0)
        | (_DECIMAL_FRACTION_FLAG if decimal_places > 0 else 0)
    )
    if decimal_places > 0:
        return bytes([flags | decimal_places]) + encode_0(value)
    return _flag_first(encode_4(value), flags)


def decompress_decimal(data: bytes) -> tuple[bytes, int]:
    """Decode a number written by `compress_decimal`."""
    first = _first_byte(data)
    sign = b"-" if first & _DECIMAL_NEGATIVE_FLAG else b""
    if first & _DECIMAL_FRACTION_FLAG:
        value, used = decode_0(data[1:])
        used += 1
        decimal_places = first & _DECIMAL_PLACES_MASK
    else:
        value, used = decode_4(data)
        decimal_places = 0
    return sign + _render(value, decimal_places), used