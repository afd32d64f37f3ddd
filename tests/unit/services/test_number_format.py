"""Tests for bilingual number parsing and formatting."""

import pytest

from stockbook.core.services.number_format import (
    format_currency,
    format_number,
    format_percent,
    format_with_commas,
    from_persian_digits,
    safe_parse_float,
    safe_parse_int,
    strip_commas,
    to_persian_digits,
)


class TestDigits:
    """Tests for digit conversion."""

    def test_to_persian(self):
        assert to_persian_digits(1250) == "۱۲۵۰"

    def test_from_persian_and_arabic_indic(self):
        assert from_persian_digits("۱۲۳") == "123"
        assert from_persian_digits("٤٥٦") == "456"

    def test_format_with_commas(self):
        assert format_with_commas("1234567") == "1,234,567"
        assert format_with_commas("۱۲۳۴") == "1,234"
        assert format_with_commas("12a34") == "1,234"
        assert format_with_commas("abc") == ""

    def test_strip_commas(self):
        assert strip_commas("1,234,567") == "1234567"


class TestSafeParse:
    """Tests for lenient parsing."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("12", 12),
            ("12abc", 12),
            ("3.7", 3),
            ("۱۲۳", 123),
            ("1,250", 1250),
            ("-4", -4),
            ("abc", 0),
            ("", 0),
        ],
    )
    def test_int(self, text, expected):
        assert safe_parse_int(text) == expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("12.5", 12.5),
            ("۱۲٫", 12.0),
            ("1,250.75", 1250.75),
            (".5", 0.5),
            ("abc", 0.0),
            ("1e999", 0.0),
        ],
    )
    def test_float(self, text, expected):
        assert safe_parse_float(text) == expected


class TestFormatting:
    """Tests for display formatting."""

    def test_number_en(self):
        assert format_number(1250) == "1,250"
        assert format_number(1250.5) == "1,250.5"
        assert format_number(0.12345) == "0.123"
        assert format_number(-1500) == "-1,500"

    def test_number_fa(self):
        assert format_number(1250.5, "fa") == "۱٬۲۵۰٫۵"

    def test_currency_en(self):
        assert format_currency(1250, "en", "$") == "1,250$"

    def test_currency_fa(self):
        assert format_currency(1250, "fa", "تومان") == "۱٬۲۵۰ تومان"

    def test_percent(self):
        assert format_percent(100 / 3) == "33.33%"
        assert format_percent(50, "fa") == "۵۰.۰۰%"
        assert format_percent(float("nan")) == "0.00%"

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_shows_zero(self, value):
        assert format_number(value) == "0"
        assert format_currency(value, "en", "$") == "0$"
        assert format_percent(value) == "0.00%"
