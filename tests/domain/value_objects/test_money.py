"""Unit tests for cedi money helpers."""

from decimal import Decimal

import pytest
from storefront.domain.value_objects import format_cedi, from_minor_units, to_minor_units


class TestToMinorUnits:
    """Test conversion of display amounts to pesewas."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("₵350.00", 35000),
            ("$12", 1200),
            ("₵1,250.50", 125050),
            (" 99.999 ", 10000),
            (12.5, 1250),
            (7, 700),
            (Decimal("0.01"), 1),
        ],
    )
    def test_accepts_display_formats(self, value, expected):
        """Test that symbols, separators and whitespace are ignored."""
        assert to_minor_units(value) == expected

    def test_unparseable_amount_is_zero(self):
        """Test that text without a number converts to zero."""
        assert to_minor_units("free") == 0
        assert to_minor_units("") == 0
        assert to_minor_units(None) == 0

    @pytest.mark.parametrize("value", ["1" * 30, 10 ** 40, float("inf"), float("nan"), Decimal("-Infinity")])
    def test_out_of_range_or_non_finite_is_zero(self, value):
        """Test that amounts beyond decimal precision or non-finite numbers convert to zero."""
        assert to_minor_units(value) == 0

    def test_boolean_is_not_an_amount(self):
        """Test that True is not read as 1."""
        assert to_minor_units(True) == 0

    def test_negative_amount_stays_negative(self):
        """Test that the sign is kept so the caller can reject it."""
        assert to_minor_units("-5") == -500


class TestFromMinorUnits:
    """Test rendering gateway amounts."""

    def test_two_decimals(self):
        """Test that pesewas render with two decimals."""
        assert from_minor_units(35000) == "350.00"
        assert from_minor_units(1999) == "19.99"

    def test_missing_amount(self):
        """Test that a missing or non-numeric amount renders as zero."""
        assert from_minor_units(None) == "0.00"
        assert from_minor_units("n/a") == "0.00"


class TestFormatCedi:
    """Test cedi formatting for notifications."""

    def test_none_is_empty(self):
        """Test that None formats as an empty string."""
        assert format_cedi(None) == ""

    def test_numbers_get_two_decimals(self):
        """Test that numbers are formatted with the cedi sign and two decimals."""
        assert format_cedi(12) == "₵12.00"
        assert format_cedi(12.5) == "₵12.50"

    def test_cedi_string_is_kept(self):
        """Test that a value already in cedis is left as is."""
        assert format_cedi("₵1,200") == "₵1,200"

    def test_dollar_sign_is_replaced(self):
        """Test that a leading dollar and one following space become the cedi sign."""
        assert format_cedi("$45.00") == "₵45.00"
        assert format_cedi("$ 45") == "₵45"

    def test_numeric_string_is_normalized(self):
        """Test that numeric strings lose separators and gain two decimals."""
        assert format_cedi("230") == "₵230.00"
        assert format_cedi("1,250.5") == "₵1250.50"

    def test_other_text_is_returned_trimmed(self):
        """Test that other text is returned without surrounding whitespace."""
        assert format_cedi("  TBD ") == "TBD"
