"""
UPC-A check digit calculation and validation.
"""

from collections.abc import Sequence

from upca.models.symbol import CheckDigitMode


def _to_digits(code: str | Sequence[int]) -> list[int]:
    if isinstance(code, str):
        digits = []
        for char in code:
            if char not in "0123456789":
                raise ValueError(f"Invalid character in code: {char}")
            digits.append(int(char))
        return digits

    digits = list(code)
    for digit in digits:
        if not 0 <= digit <= 9:
            raise ValueError(f"Digit out of range: {digit}")
    return digits


def calculate_upca_checksum(
    code: str | Sequence[int],
    mode: CheckDigitMode = CheckDigitMode.STANDARD,
) -> int:
    """
    Calculate the UPC-A check digit from the first 11 digits.

    Algorithm:
    1. Sum digits at even 0-based positions (0, 2, ..., 10) and multiply by 3
    2. Sum digits at odd 0-based positions (1, 3, ..., 9)
    3. Checksum = (10 - (total mod 10)) mod 10

    In LEGACY mode the final mod 10 is skipped, so a total divisible by 10
    yields 10 instead of 0.

    Args:
        code: At least 11 digits, as a string or a sequence of ints
        mode: Check digit formula to apply

    Returns:
        The check digit (0-9, or 10 in LEGACY mode)
    """
    digits = _to_digits(code)
    if len(digits) < 11:
        raise ValueError("Code must have at least 11 digits for UPC-A")

    first11 = digits[:11]
    even = sum(first11[0::2]) * 3
    odd = sum(first11[1::2])

    raw = 10 - ((even + odd) % 10)
    if mode == CheckDigitMode.LEGACY:
        return raw
    return raw % 10


def validate_upca_checksum(
    code: str | Sequence[int],
    supplied: int,
    mode: CheckDigitMode = CheckDigitMode.STANDARD,
) -> bool:
    """Check a supplied check digit against the one computed from 11 digits."""
    return calculate_upca_checksum(code, mode) == supplied


def validate_upc_checksum(code: str) -> bool:
    """
    Validate a complete UPC-A code.

    Args:
        code: 12-digit UPC-A code

    Returns:
        True if checksum is valid
    """
    if len(code) != 12:
        return False
    if not code.isascii() or not code.isdigit():
        return False

    return validate_upca_checksum(code[:11], int(code[-1]))


def is_valid_upca(code: str) -> tuple[bool, str]:
    """
    Validate a UPC-A code completely.

    Args:
        code: Barcode string

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not code.isascii() or not code.isdigit():
        return False, "Code contains non-numeric characters"

    if len(code) != 12:
        return False, f"Unsupported code length: {len(code)}"

    if not validate_upc_checksum(code):
        return False, "Invalid UPC-A checksum"

    return True, ""
