"""Unit tests for amount parsing and formatting."""

import pytest

from netpay.sdk.formatting import (
    format_amount,
    format_currency,
    format_percent,
    normalize_amount,
    parse_amount,
)


class TestParseAmount:

    @pytest.mark.parametrize("text,expected", [
        ("25000", 25000),
        ("25,000", 25000),
        ("1,234,567.89", 1234567.89),
        ("₱ 8,500.50", 8500.5),
        ("", 0),
        ("abc", 0),
        (".", 0),
        ("5.", 5),
        ("1.2.3", 1.2),
    ])
    def test_parse(self, text, expected):
        assert parse_amount(text) == pytest.approx(expected)

    def test_minus_sign_is_stripped(self):
        """The input layer only ever produces non-negative amounts."""
        assert parse_amount("-500") == 500


class TestNormalizeAmount:

    @pytest.mark.parametrize("value,expected", [
        (100, 100.0),
        (12.5, 12.5),
        ("1,000", 1000.0),
        (-1, 0.0),
        (float("nan"), 0.0),
        (float("-inf"), 0.0),
        (None, 0.0),
        (False, 0.0),
        ([], 0.0),
        ("-500", 0.0),
        (" -1,000.50", 0.0),
        ("P -1,200", 0.0),
        ("P 1,200", 1200.0),
    ])
    def test_normalize(self, value, expected):
        assert normalize_amount(value) == expected


class TestFormat:

    def test_format_amount(self):
        assert format_amount(1234567.891) == "1,234,567.89"
        assert format_amount(250000, 0) == "250,000"

    def test_format_currency(self):
        assert format_currency(22611.25) == "₱22,611.25"
        assert format_currency(0) == "₱0.00"
        assert format_currency(-12) == "-₱12.00"
        assert format_currency(5, sign="P") == "P5.00"

    def test_format_percent(self):
        assert format_percent(9.5) == "9.50%"
        assert format_percent(12) == "12.00%"
