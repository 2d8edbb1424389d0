"""Tests for shared utility functions."""

from shopcal.utils import format_compact, format_currency, normalize_phone


class TestNormalizePhone:
    def test_strips_spaces(self):
        assert normalize_phone("555 123 4567") == "5551234567"

    def test_strips_dashes(self):
        assert normalize_phone("555-123-4567") == "5551234567"

    def test_strips_parentheses(self):
        assert normalize_phone("(555) 123-4567") == "5551234567"

    def test_preserves_leading_plus(self):
        assert normalize_phone("+1 555 123 4567") == "+15551234567"

    def test_strips_whitespace(self):
        assert normalize_phone("  5551234567  ") == "5551234567"

    def test_letters_dropped(self):
        assert normalize_phone("smith") == ""


class TestFormatting:
    def test_currency(self):
        assert format_currency(1234.5) == "$1,234.50"
        assert format_currency(0) == "$0.00"
        assert format_currency(25, symbol="€") == "€25.00"

    def test_compact(self):
        assert format_compact(1500) == "1.5k"
        assert format_compact(3_400_000) == "3.4m"
        assert format_compact(999) == "999"
        assert format_compact(12.5) == "12.5"
