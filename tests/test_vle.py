import pytest

from zsan.vle import (
    U64_MAX,
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

SAMPLE_VALUES = [0, 1258, 999999999, U64_MAX]


def test_encode_6_wire_bytes():
    out = encode_6(0b_1_1101010_1001101_01100)
    assert out == bytes([0b_0010_1100, 0b_1100_1101, 0b_1110_1010, 0b_0000_0001])


def test_encode_5_round_trip_small():
    for i in range(255):
        assert decode_5(encode_5(i))[0] == i


@pytest.mark.parametrize("value", SAMPLE_VALUES)
def test_encode_5_round_trip_samples(value):
    assert decode_5(encode_5(value))[0] == value


def test_encode_1_wire_bytes():
    out = encode_1(0b_1101010_1001101_0)
    assert out == bytes([0b_0000_0000, 0b_1100_1101, 0b_0110_1010])


def test_encode_1_of_one():
    assert encode_1(0b_0000_0001) == bytes([0b_0000_0001, 0b_0000_0000])


def test_encode_1_round_trip_small():
    for i in range(255):
        assert decode_1(encode_1(i))[0] == i


def test_encode_0_wire_bytes():
    out = encode_0(0b_1_1101010_1001101_01100)
    assert out == bytes([0b_1010_1100, 0b_1101_0011, 0b_0011_1010])


@pytest.mark.parametrize("value", SAMPLE_VALUES)
def test_encode_0_round_trip_with_length(value):
    out = encode_0(value)
    assert decode_0(out) == (value, len(out))


@pytest.mark.parametrize("value", SAMPLE_VALUES + [7, 8, 15, 16, 31, 32, 127, 128])
def test_round_trip_consumes_whole_encoding(value):
    out0 = encode_0(value)
    assert decode_0(out0) == (value, len(out0))
    out1 = encode_1(value)
    assert decode_1(out1) == (value, len(out1))
    out4 = encode_4(value)
    assert decode_4(out4) == (value, len(out4))
    out5 = encode_5(value)
    assert decode_5(out5) == (value, len(out5))
    out6 = encode_6(value)
    assert decode_6(out6) == (value, len(out6))


def test_trailing_bytes_are_not_consumed():
    tail = b"\x05\x06"
    out0 = encode_0(300)
    assert decode_0(out0 + tail) == (300, len(out0))
    out1 = encode_1(300)
    assert decode_1(out1 + tail) == (300, len(out1))
    out4 = encode_4(300)
    assert decode_4(out4 + tail) == (300, len(out4))
    out5 = encode_5(300)
    assert decode_5(out5 + tail) == (300, len(out5))
    out6 = encode_6(300)
    assert decode_6(out6 + tail) == (300, len(out6))


def test_decode_truncated_raises():
    with pytest.raises(ValueError):
        decode_0(encode_0(U64_MAX)[:-1])
    with pytest.raises(ValueError):
        decode_1(encode_1(U64_MAX)[:-1])
    with pytest.raises(ValueError):
        decode_4(encode_4(U64_MAX)[:-1])
    with pytest.raises(ValueError):
        decode_5(encode_5(U64_MAX)[:-1])
    with pytest.raises(ValueError):
        decode_6(encode_6(U64_MAX)[:-1])


def test_decode_empty_raises():
    with pytest.raises(ValueError):
        decode_0(b"")
    with pytest.raises(ValueError):
        decode_1(b"")
    with pytest.raises(ValueError):
        decode_4(b"")
    with pytest.raises(ValueError):
        decode_5(b"")
    with pytest.raises(ValueError):
        decode_6(b"")


@pytest.mark.parametrize("value", [-1, U64_MAX + 1])
def test_encode_out_of_range_raises(value):
    with pytest.raises(ValueError):
        encode_0(value)
    with pytest.raises(ValueError):
        encode_1(value)
    with pytest.raises(ValueError):
        encode_4(value)
    with pytest.raises(ValueError):
        encode_5(value)
    with pytest.raises(ValueError):
        encode_6(value)


def test_prefixed_decoders_ignore_high_flag_bits():
    out = bytearray(encode_6(1000))
    out[0] |= 0b_1100_0000
    assert decode_6(bytes(out)) == (1000, len(out))