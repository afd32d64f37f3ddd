"""
Bilingual (English/Persian) number parsing and formatting.

User input may arrive with Persian digits and thousands separators;
parsing is lenient and falls back to zero instead of raising.
"""

import math
import re
from typing import Literal

PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"
ENGLISH_DIGITS = "0123456789"

# fa-IR grouping and decimal separators
PERSIAN_THOUSANDS_SEPARATOR = "٬"
PERSIAN_DECIMAL_SEPARATOR = "٫"

_TO_PERSIAN = str.maketrans(ENGLISH_DIGITS, PERSIAN_DIGITS)
_TO_ENGLISH = str.maketrans(
    PERSIAN_DIGITS + ARABIC_INDIC_DIGITS, ENGLISH_DIGITS + ENGLISH_DIGITS
)

_THOUSANDS_RE = re.compile(r"\B(?=(\d{3})+(?!\d))")
_INT_PREFIX_RE = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

Language = Literal["en", "fa"]


def to_persian_digits(value: int | float | str) -> str:
    return str(value).translate(_TO_PERSIAN)


def from_persian_digits(text: str) -> str:
    """Replace Persian (and Arabic-Indic) digits with ASCII digits."""
    return text.translate(_TO_ENGLISH)


def format_with_commas(text: str) -> str:
    """Keep only the digits of text and group them by thousands."""
    clean = re.sub(r"[^0-9]", "", from_persian_digits(text))
    if not clean:
        return ""
    return _THOUSANDS_RE.sub(",", clean)


def strip_commas(text: str) -> str:
    return text.replace(",", "")


def _clean(text: str) -> str:
    return strip_commas(from_persian_digits(text))


def safe_parse_int(text: str) -> int:
    """
    Parse the leading integer of text.

    "12abc" -> 12, "3.7" -> 3, "۱۲۳" -> 123, "abc" -> 0.
    """
    match = _INT_PREFIX_RE.match(_clean(text))
    return int(match.group(1)) if match else 0


def safe_parse_float(text: str) -> float:
    """Parse the leading decimal number of text, 0.0 when there is none."""
    match = _FLOAT_PREFIX_RE.match(_clean(text))
    if not match:
        return 0.0
    value = float(match.group(1))
    return value if math.isfinite(value) else 0.0


def _group(amount: float) -> tuple[str, str, str]:
    """Split amount into sign, grouped integer part and fraction (max 3 digits)."""
    formatted = f"{abs(amount):,.3f}".rstrip("0").rstrip(".")
    integer, _, fraction = formatted.partition(".")
    sign = "-" if amount < 0 and formatted != "0" else ""
    return sign, integer, fraction


def format_number(amount: float, language: Language = "en") -> str:
    """Format a number with locale grouping and up to three fraction digits."""
    if not math.isfinite(amount):
        amount = 0.0
    sign, integer, fraction = _group(amount)
    if language == "fa":
        integer = integer.replace(",", PERSIAN_THOUSANDS_SEPARATOR)
        text = integer + (PERSIAN_DECIMAL_SEPARATOR + fraction if fraction else "")
        return to_persian_digits(sign + text)
    return sign + integer + ("." + fraction if fraction else "")


def format_currency(amount: float, language: Language, symbol: str) -> str:
    """
    Format an amount of money for display.

    English appends the symbol directly ("1,250$"); Persian uses Persian
    digits and separates the symbol with a space.
    """
    number = format_number(amount, language)
    if language == "fa":
        return f"{number} {symbol}"
    return f"{number}{symbol}"


def format_percent(value: float, language: Language = "en") -> str:
    """Two-decimal percentage, e.g. "33.33%"."""
    if not math.isfinite(value):
        value = 0.0
    text = f"{value:.2f}%"
    return to_persian_digits(text) if language == "fa" else text
