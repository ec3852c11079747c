"""
UPC-A barcode encoding, decoding and checksum utilities.
"""

from upca.barcode.checksum import (
    calculate_upca_checksum,
    is_valid_upca,
    validate_upc_checksum,
    validate_upca_checksum,
)
from upca.barcode.decoder import decode, decode_flat, tokenize
from upca.barcode.encoder import build_record, encode, encode_flat
from upca.barcode.errors import (
    InvalidCharactersError,
    InvalidChecksumError,
    LengthOutOfRangeError,
    MalformedInputError,
    UnrecognizedPatternError,
    UpcaError,
)
from upca.barcode.tables import Side, digit_for, pattern_for

__all__ = [
    "calculate_upca_checksum",
    "validate_upca_checksum",
    "validate_upc_checksum",
    "is_valid_upca",
    "encode",
    "encode_flat",
    "build_record",
    "decode",
    "decode_flat",
    "tokenize",
    "Side",
    "pattern_for",
    "digit_for",
    "UpcaError",
    "InvalidCharactersError",
    "LengthOutOfRangeError",
    "InvalidChecksumError",
    "MalformedInputError",
    "UnrecognizedPatternError",
]
