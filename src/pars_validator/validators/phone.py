"""
Iranian phone numbers and e-mail addresses.

Phone inputs are normalized before checking: whitespace is removed and an
international prefix (`+98` or `0098`) is replaced by a single `0`, so
'+98 912 345 6789', '00989123456789' and '09123456789' are equivalent.
"""

from __future__ import annotations

from typing import Optional
import re

from ..registry import MobileOperator, find_operator, provinces

_WHITESPACE = re.compile(r"\s+")
_MOBILE = re.compile(r"09\d{9}", re.ASCII)
_LANDLINE = re.compile(r"0\d{10}", re.ASCII)
_EMAIL = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}", re.ASCII)


def normalize_phone_number(number: str) -> str:
    """Strip whitespace and fold '+98' / '0098' into a leading '0'."""
    number = _WHITESPACE.sub("", number)
    if number.startswith("+98"):
        return "0" + number[3:]
    if number.startswith("0098"):
        return "0" + number[4:]
    return number


def is_mobile_number_valid(number: str) -> bool:
    """True for '09' followed by nine digits, after normalization."""
    if not isinstance(number, str):
        return False
    return _MOBILE.fullmatch(normalize_phone_number(number)) is not None


def is_landline_number_valid(number: str) -> bool:
    """True for '0' followed by ten digits, after normalization."""
    if not isinstance(number, str):
        return False
    return _LANDLINE.fullmatch(normalize_phone_number(number)) is not None


def get_landline_province(number: str) -> Optional[str]:
    """Province owning the 3-digit area code of a valid landline number."""
    if not is_landline_number_valid(number):
        return None
    return provinces().get(normalize_phone_number(number)[:3])


def get_mobile_operator_record(number: str) -> Optional[MobileOperator]:
    """
    Operator record for a valid mobile number.

    Operators are scanned in registry order and the first one owning a code
    that prefixes the number wins; the registry lists specific codes before
    the shorter codes they extend.
    """
    if not is_mobile_number_valid(number):
        return None
    return find_operator(normalize_phone_number(number))


def get_mobile_operator(number: str) -> Optional[str]:
    op = get_mobile_operator_record(number)
    return op.name if op else None


def is_email_valid(text: str) -> bool:
    """ASCII local part, '@', and a dotted domain; no whitespace anywhere."""
    if not isinstance(text, str):
        return False
    return _EMAIL.fullmatch(text) is not None
