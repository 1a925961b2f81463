"""Digit and letter script conversion between Persian, Arabic and Latin forms."""

from __future__ import annotations

ENGLISH_DIGITS = "0123456789"
PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"

# Arabic yeh/kaf and Arabic-Indic digits -> Persian forms.
_ARABIC_TO_PERSIAN = str.maketrans("\u064a\u0643" + ARABIC_DIGITS, "\u06cc\u06a9" + PERSIAN_DIGITS)
_ENGLISH_TO_PERSIAN = str.maketrans(ENGLISH_DIGITS, PERSIAN_DIGITS)
_TO_ENGLISH = str.maketrans(PERSIAN_DIGITS + ARABIC_DIGITS, ENGLISH_DIGITS * 2)


def arabic_to_persian(text: str) -> str:
    """'اراك ١٢' -> 'اراک ۱۲'"""
    return text.translate(_ARABIC_TO_PERSIAN)


def english_digits_to_persian(text: str) -> str:
    return text.translate(_ENGLISH_TO_PERSIAN)


def to_persian(text: str) -> str:
    """Latin digits to Persian, then Arabic letters and digits to Persian."""
    return arabic_to_persian(english_digits_to_persian(text))


def to_english_digits(text: str) -> str:
    """Persian and Arabic-Indic digits to ASCII; everything else unchanged."""
    return text.translate(_TO_ENGLISH)
