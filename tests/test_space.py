import pytest

from zsan.space import compress_space, decompress_space


def _expand(encoded):
    return b"".join(decompress_space(b) for b in encoded)


def test_space_65():
    x = b" " * 65
    out = compress_space(len(x))
    assert out == bytes([0b_1011_1111, 0b_1000_0010])
    assert _expand(out) == x


def test_single_space_is_literal():
    assert compress_space(1) == b" "


def test_zero_spaces_encode_to_nothing():
    assert compress_space(0) == b""


@pytest.mark.parametrize("count", list(range(2, 300)))
def test_round_trip(count):
    assert _expand(compress_space(count)) == b" " * count


def test_encoding_never_longer_than_run():
    for count in range(2, 500):
        assert len(compress_space(count)) <= count


def test_negative_count_raises():
    with pytest.raises(ValueError):
        compress_space(-1)


@pytest.mark.parametrize("byte", [-1, 256])
def test_decompress_rejects_non_byte(byte):
    with pytest.raises(ValueError):
        decompress_space(byte)