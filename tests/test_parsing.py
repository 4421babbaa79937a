"""Tests for numeric parsing helpers."""

import math

from console_drills.parsing import format_bound, parse_float, parse_int


class TestParseFloat:
    """Tests for parse_float."""

    def test_integer_text(self):
        """Whole numbers parse as floats."""
        assert parse_float("50") == 50.0

    def test_decimal_and_negative(self):
        """Signed decimals parse."""
        assert parse_float("-12.5") == -12.5

    def test_surrounding_whitespace(self):
        """Whitespace around the number is tolerated."""
        assert parse_float("  72 ") == 72.0

    def test_garbage_is_none(self):
        """Non-numeric text returns None."""
        assert parse_float("abc") is None

    def test_empty_is_none(self):
        """Empty input returns None."""
        assert parse_float("") is None

    def test_none_is_none(self):
        """Missing input returns None."""
        assert parse_float(None) is None

    def test_underscores_rejected(self):
        """Digit-group underscores are not accepted."""
        assert parse_float("1_000") is None

    def test_nan_parses(self):
        """NaN parses; the validator is responsible for rejecting it."""
        assert math.isnan(parse_float("nan"))


class TestParseInt:
    """Tests for parse_int."""

    def test_positive(self):
        assert parse_int("12") == 12

    def test_signed_with_whitespace(self):
        assert parse_int(" -3 ") == -3

    def test_decimal_rejected(self):
        """Decimals are not integers."""
        assert parse_int("5.0") is None

    def test_garbage_rejected(self):
        assert parse_int("abc") is None

    def test_underscores_rejected(self):
        assert parse_int("1_0") is None


class TestFormatBound:
    """Tests for format_bound."""

    def test_whole_number_drops_fraction(self):
        assert format_bound(-20.0) == "-20"
        assert format_bound(130.0) == "130"

    def test_fraction_kept(self):
        assert format_bound(-4.5) == "-4.5"


class TestNonAsciiDigits:
    """Only plain ASCII digits count as numbers."""

    def test_fullwidth_float_rejected(self):
        assert parse_float("５０") is None

    def test_fullwidth_int_rejected(self):
        assert parse_int("１２") is None

    def test_replacement_character_rejected(self):
        assert parse_float("\ufffd") is None
