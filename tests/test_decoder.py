"""
Tests for the UPC-A decoder.
"""

import random

import pytest

from upca.barcode.checksum import calculate_upca_checksum
from upca.barcode.decoder import decode, decode_flat, tokenize
from upca.barcode.encoder import encode, encode_flat
from upca.barcode.errors import MalformedInputError, UnrecognizedPatternError


class TestDecode:
    """Tests for grouped token decoding."""

    def test_decode_example(self):
        """Test decoding a known grouped pattern."""
        assert decode(tokenize(encode("03600029145"))) == "036000291452"

    def test_decode_accepts_string(self):
        """The grouped string can be passed directly."""
        assert decode(encode("01234567890")) == "012345678905"

    def test_decode_tolerates_extra_whitespace(self):
        """Leading, trailing and repeated whitespace is ignored."""
        grouped = "  " + encode("01234567890").replace(" ", "\n  ") + "\n"
        assert decode(grouped) == "012345678905"

    def test_round_trip(self):
        """decode(encode(d)) reconstructs d plus its check digit."""
        rng = random.Random(1234)
        for _ in range(50):
            digits = "".join(rng.choice("0123456789") for _ in range(11))
            expected = digits + str(calculate_upca_checksum(digits))
            assert decode(tokenize(encode(digits))) == expected

    def test_does_not_validate_checksum(self):
        """A wrong check digit pattern still decodes."""
        tokens = tokenize(encode("03600029145"))
        tokens[14] = "1000100"  # right-hand 7
        assert decode(tokens) == "036000291457"

    @pytest.mark.parametrize("count", [0, 16, 18])
    def test_wrong_token_count(self, count):
        """Token counts other than 17 are malformed."""
        tokens = tokenize(encode("03600029145"))
        tokens = (tokens * 2)[:count]
        with pytest.raises(MalformedInputError):
            decode(tokens)

    def test_unrecognized_pattern(self):
        """Unknown digit tokens report their position."""
        tokens = tokenize(encode("03600029145"))
        tokens[3] = "1111111"

        with pytest.raises(UnrecognizedPatternError) as exc_info:
            decode(tokens)

        assert exc_info.value.position == 3
        assert exc_info.value.token == "1111111"

    def test_right_pattern_in_left_half(self):
        """Patterns are looked up in the table for their half."""
        tokens = tokenize(encode("03600029145"))
        tokens[2] = "1110010"  # right-hand 0

        with pytest.raises(UnrecognizedPatternError) as exc_info:
            decode(tokens)
        assert exc_info.value.position == 2

    def test_left_pattern_in_check_digit(self):
        """Check digit uses the right-hand table."""
        tokens = tokenize(encode("03600029145"))
        tokens[14] = "0001101"  # left-hand 0

        with pytest.raises(UnrecognizedPatternError) as exc_info:
            decode(tokens)
        assert exc_info.value.position == 14


class TestDecodeFlat:
    """Tests for flat pattern decoding."""

    def test_decode_flat(self):
        """Flat pattern decodes to the 12-digit code."""
        assert decode_flat(encode_flat("03600029145").pattern) == "036000291452"

    def test_decode_flat_accepts_grouped(self):
        """Grouped output has the same modules."""
        assert decode_flat(encode("72527273070")) == encode_flat("72527273070").digits

    def test_wrong_length(self):
        """Module count other than 115 is malformed."""
        with pytest.raises(MalformedInputError):
            decode_flat(encode_flat("03600029145").pattern[:-1])

    def test_invalid_module(self):
        """Characters other than 0 and 1 are malformed."""
        pattern = encode_flat("03600029145").pattern
        with pytest.raises(MalformedInputError):
            decode_flat("2" + pattern[1:])

    def test_unrecognized_digit(self):
        """Corrupt digit regions report the digit index."""
        pattern = encode_flat("03600029145").pattern
        corrupt = pattern[:60] + "0000000" + pattern[67:]

        with pytest.raises(UnrecognizedPatternError) as exc_info:
            decode_flat(corrupt)
        assert exc_info.value.position == 6
