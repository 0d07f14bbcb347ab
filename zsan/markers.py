"""Marker bits that tell placeholder bytes apart from literal ASCII."""

SPACE_HOLDER_FLAG = 0b_1000_0000
NUMERICAL_HOLDER_FLAG = 0b_1100_0000
HOLDER_MASK = 0b_1100_0000


def is_space(byte: int) -> bool:
    """Return True if `byte` is a run-of-spaces placeholder."""
    return byte & HOLDER_MASK == SPACE_HOLDER_FLAG


def is_numerical(byte: int) -> bool:
    """Return True if `byte` starts an encoded number."""
    return byte & HOLDER_MASK == NUMERICAL_HOLDER_FLAG