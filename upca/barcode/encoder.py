"""
UPC-A encoder: digit payload to module pattern.
"""

import re

import structlog

from upca.barcode.checksum import calculate_upca_checksum
from upca.barcode.errors import (
    InvalidCharactersError,
    InvalidChecksumError,
    LengthOutOfRangeError,
)
from upca.barcode.tables import (
    DIGIT_WIDTH,
    GUARD,
    MIDDLE_GUARD,
    QUIET_ZONE,
    Side,
    encode_digits,
    pattern_for,
)
from upca.config import get_settings
from upca.models.symbol import CheckDigitMode, EncodedSymbol, ModuleRegion, UpcaRecord

logger = structlog.get_logger(__name__)

NUMERIC_RE = re.compile(r"[0-9]+")

MIN_LENGTH = 11
MAX_LENGTH = 12


def _resolve_mode(mode: CheckDigitMode | None) -> CheckDigitMode:
    if mode is None:
        return get_settings().check_digit_mode
    return CheckDigitMode(mode)


def build_record(digits: str, mode: CheckDigitMode | None = None) -> UpcaRecord:
    """
    Validate a digit payload and split it into a UPC-A record.

    An 11-digit payload gets the computed check digit appended; a 12-digit
    payload must already carry the correct one. The input string is never
    modified.

    Raises:
        InvalidCharactersError: Non-digit character in the payload
        LengthOutOfRangeError: Payload is not 11 or 12 digits long
        InvalidChecksumError: Supplied check digit is wrong, or the active
            formula produced a value that is not a single digit
    """
    if not NUMERIC_RE.fullmatch(digits):
        raise InvalidCharactersError("UPC-A allows numeric values only")
    if not MIN_LENGTH <= len(digits) <= MAX_LENGTH:
        raise LengthOutOfRangeError(len(digits))

    mode = _resolve_mode(mode)
    check_digit = calculate_upca_checksum(digits[:11], mode)

    if len(digits) == MAX_LENGTH:
        supplied = int(digits[11])
        if supplied != check_digit:
            logger.debug("Check digit mismatch", expected=check_digit, actual=supplied)
            raise InvalidChecksumError(check_digit, supplied)
    elif check_digit > 9:
        raise InvalidChecksumError(check_digit)

    return UpcaRecord(
        number_system=digits[0],
        manufacturer_code=digits[1:6],
        product_code=digits[6:11],
        check_digit=str(check_digit),
    )


def _group(patterns: str) -> str:
    return " ".join(
        patterns[i : i + DIGIT_WIDTH] for i in range(0, len(patterns), DIGIT_WIDTH)
    )


def encode(digits: str, mode: CheckDigitMode | None = None) -> str:
    """
    Encode a payload into the grouped, space-separated module string.

    The output has 17 tokens: quiet zone, left guard, number system, five
    manufacturer digits, middle guard, five product digits, check digit,
    right guard, quiet zone.

    Args:
        digits: 11 or 12 ASCII digits
        mode: Check digit formula (defaults to settings)

    Returns:
        Grouped module string
    """
    record = build_record(digits, mode)

    number_system = pattern_for(int(record.number_system), Side.LEFT)
    manufacturer_code = _group(encode_digits(record.manufacturer_code, Side.LEFT))
    product_code = _group(encode_digits(record.product_code, Side.RIGHT))
    check_digit = pattern_for(int(record.check_digit), Side.RIGHT)

    encoded = " ".join(
        [
            QUIET_ZONE,
            GUARD,
            number_system,
            manufacturer_code,
            MIDDLE_GUARD,
            product_code,
            check_digit,
            GUARD,
            QUIET_ZONE,
        ]
    )
    logger.debug("Encoded UPC-A", code=record.digits)
    return encoded


def _layout(record: UpcaRecord) -> tuple[ModuleRegion, ...]:
    # (name, width, digits, full_height)
    segments = [
        ("quiet_zone_left", len(QUIET_ZONE), None, True),
        ("left_guard", len(GUARD), None, True),
        ("number_system", DIGIT_WIDTH, record.number_system, True),
        ("manufacturer_code", DIGIT_WIDTH * 5, record.manufacturer_code, False),
        ("middle_guard", len(MIDDLE_GUARD), None, True),
        ("product_code", DIGIT_WIDTH * 5, record.product_code, False),
        ("check_digit", DIGIT_WIDTH, record.check_digit, True),
        ("right_guard", len(GUARD), None, True),
        ("quiet_zone_right", len(QUIET_ZONE), None, True),
    ]

    regions = []
    start = 0
    for name, width, digits, full_height in segments:
        regions.append(
            ModuleRegion(
                name=name,
                start=start,
                end=start + width,
                digits=digits,
                full_height=full_height,
            )
        )
        start += width
    return tuple(regions)


def encode_flat(digits: str, mode: CheckDigitMode | None = None) -> EncodedSymbol:
    """
    Encode a payload into the flat 115-module pattern.

    The result also carries the four digit groups and the region layout so
    a renderer can draw the text without re-deriving it.

    Args:
        digits: 11 or 12 ASCII digits
        mode: Check digit formula (defaults to settings)

    Returns:
        EncodedSymbol with pattern, record and regions
    """
    record = build_record(digits, mode)

    pattern = "".join(
        [
            QUIET_ZONE,
            GUARD,
            encode_digits(record.number_system, Side.LEFT),
            encode_digits(record.manufacturer_code, Side.LEFT),
            MIDDLE_GUARD,
            encode_digits(record.product_code, Side.RIGHT),
            encode_digits(record.check_digit, Side.RIGHT),
            GUARD,
            QUIET_ZONE,
        ]
    )
    logger.debug("Encoded flat UPC-A", code=record.digits, modules=len(pattern))

    return EncodedSymbol(pattern=pattern, record=record, regions=_layout(record))
