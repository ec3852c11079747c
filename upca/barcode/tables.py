"""
UPC-A digit pattern tables and structural module strings.
"""

from enum import Enum


class Side(str, Enum):
    """Half of the symbol a digit is encoded in."""

    LEFT = "left"  # odd parity
    RIGHT = "right"  # even parity


# Index = digit value
LEFT_PATTERNS: tuple[str, ...] = (
    "0001101",  # 0
    "0011001",  # 1
    "0010011",  # 2
    "0111101",  # 3
    "0100011",  # 4
    "0110001",  # 5
    "0101111",  # 6
    "0111011",  # 7
    "0110111",  # 8
    "0001011",  # 9
)

RIGHT_PATTERNS: tuple[str, ...] = (
    "1110010",  # 0
    "1100110",  # 1
    "1101100",  # 2
    "1000010",  # 3
    "1011100",  # 4
    "1001110",  # 5
    "1010000",  # 6
    "1000100",  # 7
    "1001000",  # 8
    "1110100",  # 9
)

QUIET_ZONE = "0000000000"
GUARD = "101"
MIDDLE_GUARD = "01010"

DIGIT_WIDTH = 7

_TABLES = {
    Side.LEFT: LEFT_PATTERNS,
    Side.RIGHT: RIGHT_PATTERNS,
}

_REVERSE = {
    side: {pattern: digit for digit, pattern in enumerate(patterns)}
    for side, patterns in _TABLES.items()
}


def pattern_for(digit: int, side: Side) -> str:
    """Get the 7-module pattern for a digit."""
    if not 0 <= digit <= 9:
        raise ValueError(f"Digit out of range: {digit}")
    return _TABLES[side][digit]


def digit_for(pattern: str, side: Side) -> int | None:
    """
    Reverse lookup of a 7-module pattern.

    Returns:
        The digit, or None if the pattern is not in the table
    """
    return _REVERSE[side].get(pattern)


def encode_digits(digits: str, side: Side) -> str:
    """Concatenate the patterns of every digit in a numeric string."""
    return "".join(pattern_for(int(d), side) for d in digits)
