"""
UPC-A decoder: module patterns back to the digit string.

Decoding is a pure inverse mapping. It does not validate the check digit;
use validate_upc_checksum on the result when that matters.
"""

from collections.abc import Sequence

import structlog

from upca.barcode.errors import MalformedInputError, UnrecognizedPatternError
from upca.barcode.tables import DIGIT_WIDTH, Side, digit_for

logger = structlog.get_logger(__name__)

TOKEN_COUNT = 17
FLAT_LENGTH = 115

# Token positions in the grouped encoder output:
# 0 quiet zone, 1 left guard, 2 number system, 3-7 manufacturer code,
# 8 middle guard, 9-13 product code, 14 check digit, 15 right guard,
# 16 quiet zone.
NUMBER_SYSTEM_POS = 2
MANUFACTURER_POS = range(3, 8)
PRODUCT_POS = range(9, 14)
CHECK_DIGIT_POS = 14

# Module offsets of each digit in the flat pattern
_LEFT_DIGIT_OFFSETS = [13 + i * DIGIT_WIDTH for i in range(6)]
_RIGHT_DIGIT_OFFSETS = [60 + i * DIGIT_WIDTH for i in range(6)]


def tokenize(text: str) -> list[str]:
    """Split a grouped module string on whitespace."""
    return text.split()


def _lookup(token: str, side: Side, position: int) -> str:
    digit = digit_for(token, side)
    if digit is None:
        raise UnrecognizedPatternError(position, token)
    return str(digit)


def decode(tokens: Sequence[str] | str) -> str:
    """
    Recover the 12-digit code from grouped module-pattern tokens.

    Args:
        tokens: The 17 tokens of a grouped encoding, or the grouped string

    Returns:
        12-digit code

    Raises:
        MalformedInputError: Token count is not 17
        UnrecognizedPatternError: A digit token matches no table entry
    """
    if isinstance(tokens, str):
        tokens = tokenize(tokens)

    if len(tokens) != TOKEN_COUNT:
        raise MalformedInputError(
            f"Incorrect UPC-A format: expected {TOKEN_COUNT} tokens, got {len(tokens)}"
        )

    left_positions = [NUMBER_SYSTEM_POS, *MANUFACTURER_POS]
    right_positions = [*PRODUCT_POS, CHECK_DIGIT_POS]

    digits = [_lookup(tokens[pos], Side.LEFT, pos) for pos in left_positions]
    digits += [_lookup(tokens[pos], Side.RIGHT, pos) for pos in right_positions]

    code = "".join(digits)
    logger.debug("Decoded UPC-A", code=code)
    return code


def decode_flat(pattern: str) -> str:
    """
    Recover the 12-digit code from a flat 115-module pattern.

    Whitespace is ignored, so grouped output is accepted as well. Error
    positions refer to the digit index (0-11).

    Raises:
        MalformedInputError: Wrong module count or a character other than 0/1
        UnrecognizedPatternError: A digit region matches no table entry
    """
    modules = "".join(pattern.split())

    if len(modules) != FLAT_LENGTH:
        raise MalformedInputError(
            f"Incorrect UPC-A format: expected {FLAT_LENGTH} modules, got {len(modules)}"
        )
    if set(modules) - {"0", "1"}:
        raise MalformedInputError("Module pattern may contain only '0' and '1'")

    digits = []
    for index, offset in enumerate(_LEFT_DIGIT_OFFSETS):
        digits.append(_lookup(modules[offset : offset + DIGIT_WIDTH], Side.LEFT, index))
    for index, offset in enumerate(_RIGHT_DIGIT_OFFSETS, start=6):
        digits.append(_lookup(modules[offset : offset + DIGIT_WIDTH], Side.RIGHT, index))

    code = "".join(digits)
    logger.debug("Decoded flat UPC-A", code=code)
    return code
