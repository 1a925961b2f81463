"""
General text checks: Persian-only text, word counts, OTP and password
policies, and half-space (ZWNJ) helpers.
"""

from __future__ import annotations

from typing import Optional
import re

from ..config import PasswordPolicy
from ..errors import InvalidArgumentError

HALF_SPACE = "\u200c"

_PERSIAN_LETTERS = re.compile(r"[\u0600-\u06FF\s]+")
_PASSWORD_SPECIALS = "@$_!%*?&"


def only_persian_letters(text: str) -> bool:
    """True if every character is in U+0600..U+06FF or whitespace (and text is non-empty)."""
    return _PERSIAN_LETTERS.fullmatch(text) is not None


def word_count(text: str) -> int:
    return len(text.split())


def validate_word_count(text: str, min_words: int, max_words: int) -> bool:
    """`word_count(text)` falls within `[min_words, max_words]`."""
    return min_words <= word_count(text) <= max_words


def is_otp_valid(text: str, length: int) -> bool:
    """
    A one-time password is exactly `length` ASCII digits.

    Raises:
        InvalidArgumentError: `length` is smaller than 1.
    """
    if length < 1:
        raise InvalidArgumentError("Length can not be smaller than 1")
    if not text or len(text) != length:
        return False
    return re.fullmatch(r"[0-9]+", text) is not None


def _password_pattern(policy: PasswordPolicy) -> re.Pattern:
    lookaheads = ""
    if policy.uppercase_required:
        lookaheads += r"(?=.*[A-Z])"
    if policy.lowercase_required:
        lookaheads += r"(?=.*[a-z])"
    if policy.digits_required:
        lookaheads += r"(?=.*\d)"
    if policy.special_char_required:
        lookaheads += f"(?=.*[{re.escape(_PASSWORD_SPECIALS)}])"
    body = f"[A-Za-z\\d{re.escape(_PASSWORD_SPECIALS)}]{{{policy.minimum_length},}}"
    return re.compile(lookaheads + body, re.ASCII)


def is_password_valid(password: str, policy: Optional[PasswordPolicy] = None) -> bool:
    """
    Check a password against a `PasswordPolicy` (defaults: every class
    required, at least 8 characters).

    Only letters, digits and `@$_!%*?&` are allowed. Each enabled class must
    appear at least once; disabled classes are not checked.

    Raises:
        InvalidArgumentError: `policy.minimum_length` is smaller than 1.
    """
    policy = policy or PasswordPolicy()
    if policy.minimum_length < 1:
        raise InvalidArgumentError("The length of password can not be smaller than 1")
    return _password_pattern(policy).fullmatch(password) is not None


def remove_half_spaces(text: str) -> str:
    return text.replace(HALF_SPACE, "")


def spaces_to_half_spaces(text: str) -> str:
    return text.replace(" ", HALF_SPACE)


def half_spaces_to_spaces(text: str) -> str:
    return text.replace(HALF_SPACE, " ")
