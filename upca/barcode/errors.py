"""
Error kinds raised by the UPC-A codec.

All of them are ValueError subclasses, so callers that only care about
"bad input" can keep catching ValueError.
"""


class UpcaError(ValueError):
    """Base class for UPC-A encode/decode failures."""

    code = "UpcaError"


class InvalidCharactersError(UpcaError):
    """Input contains a character other than 0-9."""

    code = "InvalidCharacters"


class LengthOutOfRangeError(UpcaError):
    """Digit count is outside [11, 12]."""

    code = "LengthOutOfRange"

    def __init__(self, length: int):
        super().__init__(f"UPC-A requires 11 or 12 digits, got {length}")
        self.length = length


class InvalidChecksumError(UpcaError):
    """Supplied check digit does not match the computed one."""

    code = "InvalidChecksum"

    def __init__(self, expected: int, actual: int | None = None):
        if actual is None:
            message = f"Computed check digit {expected} is not a single digit"
        else:
            message = f"Invalid check digit: expected {expected}, got {actual}"
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class MalformedInputError(UpcaError):
    """Decode input does not have the UPC-A structure."""

    code = "MalformedInput"


class UnrecognizedPatternError(UpcaError):
    """A module pattern matches no entry of the digit table."""

    code = "UnrecognizedPattern"

    def __init__(self, position: int, token: str):
        super().__init__(f"Unrecognized pattern at position {position}: {token!r}")
        self.position = position
        self.token = token
