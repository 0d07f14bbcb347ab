# zsan

`zsan` is a small, lossless codec for ASCII text that is made mostly of spaces
and numbers, such as fixed-width records and report lines. It copies ordinary
characters unchanged. It replaces runs of spaces and numeric literals with
short tagged byte sequences:

- A run of two or more spaces becomes one placeholder byte for each 63 spaces. A single space stays a literal space.
- An integer or decimal number becomes a variable-length integer. A decimal also records how many places it has.

The first byte of the output records which number encoding was chosen. The
choice is made once for the whole input. It depends on whether the input holds
negative numbers, decimals, both or neither.

## Installation

```
pip install .
```

## Usage

```python
from zsan.codec import compress, decompress

line = "6224      ABC20200902       1312       1145    1109.2049 "
packed = compress(line)
assert isinstance(packed, bytes)
assert decompress(packed) == line
```

- `compress(text)` takes a `str` or `bytes` and returns `bytes`. Empty input gives `b""`.
- `decompress(data)` takes those bytes and returns the original text as a `str`. Empty input gives `""`.

`decompress` raises `ValueError` when it meets a byte that is neither literal
ASCII (below `0x7F`) nor a placeholder, or when an encoded number is cut short.

## Building blocks

The lower-level pieces can also be used directly:

- `zsan.vle` holds the variable-length integer encoders. The first byte carries 0, 1, 3, 4 or 5 value bits, as in `encode_0`/`decode_0`, `encode_1`/`decode_1`, `encode_4`/`decode_4`, `encode_5`/`decode_5` and `encode_6`/`decode_6`. The encoders take an integer in the unsigned 64-bit range and return `bytes`; other values raise `ValueError`. Each decoder returns `(value, bytes_consumed)`.
- `zsan.space` has `compress_space(count)`, which returns the encoded bytes for a run of spaces, and `decompress_space(byte)`, which returns the spaces that one placeholder byte stands for.
- `zsan.markers` has `is_space(byte)` and `is_numerical(byte)`, which classify tagged bytes.
- `zsan.parser` has `scan_blocks(src)`, which splits input into `SpaceBlock` and `NumericalBlock` entries in order of position. It returns a `ScanResult` with `has_negative`, `has_decimal` and `blocks`.
- `zsan.numerical` has one compress/decompress pair for each of the four number encodings:
  - `compress_unsigned_integer` / `decompress_unsigned_integer`
  - `compress_integer` / `decompress_integer`
  - `compress_unsigned_decimal` / `decompress_unsigned_decimal`
  - `compress_decimal` / `decompress_decimal`

  Each compressor takes `(value, negative, decimal_places)` and returns the encoded bytes. It returns `None` when encoding would not pay off. Each decompressor returns `(text_bytes, bytes_consumed)`.

## Limits

- Numbers are read up to 999,999,999,999,999,999. Longer digit runs are split into several numbers.
- A decimal keeps at most 15 fractional digits. Digits after that are read as the start of a new number.
- Leading zeros and explicit `+` signs are kept as literal text.
- Small values that would not shrink are written as plain text.
- The input is expected to be ASCII. Bytes of `0x7F` and above in the input clash with the placeholder bytes and do not survive a round trip.

## What it does not do

`zsan` is a library only. It has no command-line tool and no support for files
or streams. Each call compresses or decompresses one whole buffer in memory.

## Running the tests

```
pip install .[test]
pytest
```