"""Encoding of runs of spaces as placeholder bytes.

A placeholder byte has its top two bits set to ``10`` and stores a count of
up to 63 spaces in its low six bits. Longer runs use several bytes.
"""

from __future__ import annotations

from .markers import SPACE_HOLDER_FLAG

MAX_COUNT_PER_BYTE = 0b_0011_1111
_COUNT_MASK = 0b_0011_1111


def compress_space(count: int) -> bytes:
    """Encode a run of `count` spaces. A single space stays a literal space."""
    if count < 0:
        raise ValueError("space count must not be negative")
    if count == 1:
        return b" "
    full_chunks, remainder = divmod(count, MAX_COUNT_PER_BYTE)
    out = bytes([MAX_COUNT_PER_BYTE | SPACE_HOLDER_FLAG]) * full_chunks
    if remainder:
        out += bytes([remainder | SPACE_HOLDER_FLAG])
    return out


def decompress_space(byte: int) -> bytes:
    """Expand one space placeholder byte to its spaces."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"{byte} is not a byte value")
    return b" " * (byte & _COUNT_MASK)