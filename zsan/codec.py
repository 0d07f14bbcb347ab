"""Compression of ASCII text with many spaces and numbers.

The stream starts with a byte that records which kinds of numbers the text
holds. Literal ASCII bytes are copied, runs of spaces become placeholder
bytes, and numbers become variable-length encoded values.
"""

from __future__ import annotations

from collections.abc import Callable

from .markers import is_numerical, is_space
from .numerical import (
    compress_decimal,
    compress_integer,
    compress_unsigned_decimal,
    compress_unsigned_integer,
    decompress_decimal,
    decompress_integer,
    decompress_unsigned_decimal,
    decompress_unsigned_integer,
)
from .parser import SpaceBlock, scan_blocks
from .space import compress_space, decompress_space

_ZSAN_FLAG = 0b_0100_0000
_MODE_MASK = 0b_0000_0011
_NEGATIVE_FLAG = 0b_0000_0010
_DECIMAL_FLAG = 0b_0000_0001
_LITERAL_LIMIT = 0b_0111_1111

_Compressor = Callable[[int, bool, int], "bytes | None"]
_Decompressor = Callable[[bytes], "tuple[bytes, int]"]

_CODECS: dict[int, tuple[_Compressor, _Decompressor]] = {
    0: (compress_unsigned_integer, decompress_unsigned_integer),
    _NEGATIVE_FLAG: (compress_integer, decompress_integer),
    _DECIMAL_FLAG: (compress_unsigned_decimal, decompress_unsigned_decimal),
    _NEGATIVE_FLAG | _DECIMAL_FLAG: (compress_decimal, decompress_decimal),
}


def compress(text: str | bytes) -> bytes:
    """Compress `text`; empty input gives empty output."""
    src = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    if not src:
        return b""
    scan = scan_blocks(src)
    mode = (_NEGATIVE_FLAG if scan.has_negative else 0) | (_DECIMAL_FLAG if scan.has_decimal else 0)
    compress_number = _CODECS[mode][0]

    out = bytearray([mode | _ZSAN_FLAG])
    processed = 0
    for block in scan.blocks:
        if block.start > processed:
            out += src[processed:block.start]
            processed = block.start
        if isinstance(block, SpaceBlock):
            out += compress_space(block.size)
        else:
            encoded = compress_number(block.base, block.negative, block.decimal_places)
            out += encoded if encoded is not None else src[processed:processed + block.size]
        processed += block.size

    out += src[processed:]
    return bytes(out)


def decompress(data: bytes) -> str:
    """Restore the text that `compress` produced `data` from."""
    if not data:
        return ""
    view = memoryview(bytes(data))
    decompress_number = _CODECS[view[0] & _MODE_MASK][1]

    out = bytearray()
    index = 1
    while index < len(view):
        byte = view[index]
        if byte < _LITERAL_LIMIT:
            out.append(byte)
            index += 1
        elif is_space(byte):
            out += decompress_space(byte)
            index += 1
        elif is_numerical(byte):
            text, used = decompress_number(view[index:])
            out += text
            index += used
        else:
            raise ValueError(f"unexpected byte {byte:#04x} at offset {index}")
    return out.decode("utf-8")