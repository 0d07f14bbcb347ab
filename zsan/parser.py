"""Scanning of ASCII text into runs of spaces and numbers worth encoding."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_DECIMAL_PLACES = 0b_0000_1111
MAX_BASE = 999_999_999_999_999_999

_SPACE = ord(" ")
_MINUS = ord("-")
_ZERO = ord("0")
_DOT = ord(".")


@dataclass(frozen=True)
class SpaceBlock:
    """A run of `size` spaces starting at byte offset `start`."""

    start: int
    size: int


@dataclass(frozen=True)
class NumericalBlock:
    """A number spanning `size` bytes from `start`, stored as a scaled integer."""

    start: int
    size: int
    base: int
    negative: bool
    decimal_places: int


@dataclass
class ScanResult:
    """Blocks found in a text, with flags summarising the numbers among them."""

    has_negative: bool
    has_decimal: bool
    blocks: list[SpaceBlock | NumericalBlock] = field(default_factory=list)


def _is_digit(byte: int) -> bool:
    return _ZERO <= byte <= _ZERO + 9


def scan_blocks(src: bytes | str) -> ScanResult:
    """Find the space runs and numbers in `src`, in order of position."""
    s = src.encode("utf-8") if isinstance(src, str) else bytes(src)
    n = len(s)
    result = ScanResult(False, False)
    blocks = result.blocks
    idx = 0

    while idx < n:
        run_end = idx
        while run_end < n and s[run_end] == _SPACE:
            run_end += 1
        if run_end > idx:
            blocks.append(SpaceBlock(idx, run_end - idx))
        idx = run_end
        if idx >= n:
            break

        start = idx
        negative = s[idx] == _MINUS
        if negative:
            idx += 1

        base = 0
        integer_end = idx
        if idx < n and s[idx] == _ZERO:
            integer_end = idx + 1
        else:
            while integer_end < n and _is_digit(s[integer_end]):
                candidate = base * 10 + (s[integer_end] - _ZERO)
                if candidate > MAX_BASE:
                    break
                base = candidate
                integer_end += 1
            if integer_end == idx:
                idx += 1
                continue
        idx = integer_end

        decimal_places = 0
        if idx < n and s[idx] == _DOT:
            idx += 1
            frac_end = min(n, idx + MAX_DECIMAL_PLACES)
            while idx < frac_end and _is_digit(s[idx]):
                candidate = base * 10 + (s[idx] - _ZERO)
                if candidate > MAX_BASE:
                    break
                base = candidate
                idx += 1
                decimal_places += 1

        if base or decimal_places:
            if negative:
                result.has_negative = True
            size = integer_end - start
            if decimal_places:
                result.has_decimal = True
                size += decimal_places + 1
            blocks.append(NumericalBlock(start, size, base, negative, decimal_places))

    return result