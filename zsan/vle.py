"""Variable-length integer encodings used by the compressed stream.

Every variant stores the value least-significant bits first. After the first
byte, each byte carries seven value bits, and its high bit says that another
byte follows. The variants differ only in how many bits the first byte gives
to the value. This leaves room for marker flags in the top bits of that byte.
"""

from __future__ import annotations

U64_MAX = (1 << 64) - 1

_VALUE_BITS = 7
_CONTINUE_FLAG = 1 << _VALUE_BITS
_VALUE_MASK = _CONTINUE_FLAG - 1


def _check_value(value: int) -> None:
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"value {value} is outside the unsigned 64-bit range")


def _encode_tail(value: int, out: bytearray) -> None:
    """Append `value` as seven-bit groups, at least one byte."""
    while True:
        chunk = value & _VALUE_MASK
        value >>= _VALUE_BITS
        if value:
            out.append(chunk | _CONTINUE_FLAG)
        else:
            out.append(chunk)
            return


def _decode_tail(data: bytes, index: int, result: int, shift: int) -> tuple[int, int]:
    """Continue decoding seven-bit groups from `index`; return (value, bytes used)."""
    while True:
        if index >= len(data):
            raise ValueError("truncated variable-length integer")
        byte = data[index]
        result |= (byte & _VALUE_MASK) << shift
        if not byte & _CONTINUE_FLAG:
            return result, index + 1
        shift += _VALUE_BITS
        index += 1


def _encode_prefixed(value: int, width: int) -> bytes:
    _check_value(value)
    bits = width - 1
    flag = 1 << bits
    first = value & (flag - 1)
    rest = value >> bits
    if not rest:
        return bytes([first])
    out = bytearray([first | flag])
    _encode_tail(rest, out)
    return bytes(out)


def _decode_prefixed(data: bytes, width: int) -> tuple[int, int]:
    if not data:
        raise ValueError("cannot decode an empty buffer")
    bits = width - 1
    flag = 1 << bits
    first = data[0]
    result = first & (flag - 1)
    if not first & flag:
        return result, 1
    return _decode_tail(data, 1, result, bits)


def encode_0(value: int) -> bytes:
    """Encode with plain seven-bit groups."""
    _check_value(value)
    out = bytearray()
    _encode_tail(value, out)
    return bytes(out)


def decode_0(data: bytes) -> tuple[int, int]:
    """Decode `encode_0` output; return (value, bytes consumed)."""
    return _decode_tail(data, 0, 0, 0)


def encode_1(value: int) -> bytes:
    """Encode with one value bit in the first byte, which always has a successor."""
    _check_value(value)
    out = bytearray([value & 1])
    _encode_tail(value >> 1, out)
    return bytes(out)


def decode_1(data: bytes) -> tuple[int, int]:
    """Decode `encode_1` output; return (value, bytes consumed)."""
    if not data:
        raise ValueError("cannot decode an empty buffer")
    return _decode_tail(data, 1, data[0] & 1, 1)


def encode_4(value: int) -> bytes:
    """Encode with three value bits and a continuation bit in the first byte."""
    return _encode_prefixed(value, 4)


def decode_4(data: bytes) -> tuple[int, int]:
    """Decode `encode_4` output; return (value, bytes consumed)."""
    return _decode_prefixed(data, 4)


def encode_5(value: int) -> bytes:
    """Encode with four value bits and a continuation bit in the first byte."""
    return _encode_prefixed(value, 5)


def decode_5(data: bytes) -> tuple[int, int]:
    """Decode `encode_5` output; return (value, bytes consumed)."""
    return _decode_prefixed(data, 5)


def encode_6(value: int) -> bytes:
    """Encode with five value bits and a continuation bit in the first byte."""
    return _encode_prefixed(value, 6)


def decode_6(data: bytes) -> tuple[int, int]:
    """Decode `encode_6` output; return (value, bytes consumed)."""
    return _decode_prefixed(data, 6)