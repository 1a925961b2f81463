"""Persian text helpers: digit scripts, number words, prices and text policies."""

from .digits import arabic_to_persian, english_digits_to_persian, to_persian, to_english_digits
from .numbers import number_to_words, number_to_price, separate
from .general import (
    HALF_SPACE,
    only_persian_letters,
    word_count,
    validate_word_count,
    is_otp_valid,
    is_password_valid,
    remove_half_spaces,
    spaces_to_half_spaces,
    half_spaces_to_spaces,
)

__all__ = [
    "arabic_to_persian",
    "english_digits_to_persian",
    "to_persian",
    "to_english_digits",
    "number_to_words",
    "number_to_price",
    "separate",
    "HALF_SPACE",
    "only_persian_letters",
    "word_count",
    "validate_word_count",
    "is_otp_valid",
    "is_password_valid",
    "remove_half_spaces",
    "spaces_to_half_spaces",
    "half_spaces_to_spaces",
]
