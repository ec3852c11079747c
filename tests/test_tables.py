"""
Tests for the digit pattern tables.
"""

import pytest

from upca.barcode.tables import (
    LEFT_PATTERNS,
    RIGHT_PATTERNS,
    Side,
    digit_for,
    encode_digits,
    pattern_for,
)


class TestPatternTables:
    """Tests for the raw table contents."""

    def test_table_sizes(self):
        """Both tables hold 10 patterns of 7 modules."""
        for table in (LEFT_PATTERNS, RIGHT_PATTERNS):
            assert len(table) == 10
            assert all(len(p) == 7 and set(p) <= {"0", "1"} for p in table)

    def test_tables_are_injective(self):
        """No two digits share a pattern."""
        assert len(set(LEFT_PATTERNS)) == 10
        assert len(set(RIGHT_PATTERNS)) == 10

    def test_right_is_complement_of_left(self):
        """Right-hand patterns are the bitwise complement of left-hand ones."""
        for left, right in zip(LEFT_PATTERNS, RIGHT_PATTERNS):
            assert all(a != b for a, b in zip(left, right))


class TestLookups:
    """Tests for forward and reverse lookups."""

    @pytest.mark.parametrize("side", [Side.LEFT, Side.RIGHT])
    def test_lookups_are_inverse(self, side):
        """digit_for(pattern_for(n)) == n for every digit."""
        for digit in range(10):
            assert digit_for(pattern_for(digit, side), side) == digit

    def test_known_patterns(self):
        """Spot-check patterns from the UPC-A tables."""
        assert pattern_for(0, Side.LEFT) == "0001101"
        assert pattern_for(9, Side.LEFT) == "0001011"
        assert pattern_for(0, Side.RIGHT) == "1110010"
        assert pattern_for(6, Side.RIGHT) == "1010000"

    def test_pattern_for_out_of_range(self):
        """Digits outside 0-9 are rejected."""
        with pytest.raises(ValueError):
            pattern_for(10, Side.LEFT)
        with pytest.raises(ValueError):
            pattern_for(-1, Side.RIGHT)

    def test_digit_for_unknown_pattern(self):
        """Unknown patterns return None."""
        assert digit_for("1111111", Side.LEFT) is None
        assert digit_for("000110", Side.LEFT) is None

    def test_digit_for_wrong_side(self):
        """A left-hand pattern is not found in the right-hand table."""
        assert digit_for("0001101", Side.RIGHT) is None
        assert digit_for("1110010", Side.LEFT) is None

    def test_encode_digits(self):
        """Digit strings encode to concatenated patterns."""
        assert encode_digits("01", Side.LEFT) == "0001101" + "0011001"
        assert encode_digits("", Side.RIGHT) == ""
