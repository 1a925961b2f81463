"""
Iranian identity numbers: national ID (کد ملی), legal-entity ID (شناسه ملی)
and postal code.

All inputs are taken literally; no whitespace stripping or digit-script
conversion happens here. Run `to_english_digits` first if the input may be
typed with Persian digits.
"""

from __future__ import annotations

from typing import Optional
import logging
import random
import re

from ..registry import issuance_places

logger = logging.getLogger(__name__)

_TEN_DIGITS = re.compile(r"\d{10}", re.ASCII)
_REPEATED = frozenset(str(d) * 10 for d in range(10))

# Literal pattern, applied as a search (not anchored).
_POSTAL_CODE = re.compile(r"\b(?!(\d)\1{3})[13-9]{4}[1346-9][013-9]{5}\b", re.ASCII)

_LEGAL_ID_WEIGHTS = (29, 27, 23, 19, 17)

# Generation practically always succeeds first time; the cap only guarantees termination.
_MAX_GENERATION_ATTEMPTS = 1000


def _national_check_digit(digits: str) -> int:
    """Check digit for the first nine digits of a national ID."""
    total = sum(int(ch) * (10 - i) for i, ch in enumerate(digits[:9]))
    remainder = total % 11
    return remainder if remainder < 2 else 11 - remainder


def is_national_id_valid(code: str) -> bool:
    """
    Validate an Iranian national ID.

    Args:
        code: Candidate ID; must be exactly ten ASCII digits.

    Returns:
        True if the ID is well formed, not one of the ten repeated-digit
        strings, and its last digit matches the weighted mod-11 checksum.
    """
    if not isinstance(code, str) or not _TEN_DIGITS.fullmatch(code):
        return False
    if code in _REPEATED:
        return False
    return int(code[9]) == _national_check_digit(code)


def generate_random_national_id(rng: Optional[random.Random] = None) -> str:
    """
    Return a random national ID that passes `is_national_id_valid`.

    Nine digits are drawn uniformly; the tenth is the matching check digit.
    A draw that still fails validation (a repeated-digit string) is discarded
    and redrawn.
    """
    rng = rng or random.Random()
    for attempt in range(1, _MAX_GENERATION_ATTEMPTS + 1):
        body = "".join(str(rng.randrange(10)) for _ in range(9))
        code = body + str(_national_check_digit(body))
        if is_national_id_valid(code):
            return code
        logger.debug("discarded generated national id on attempt %d", attempt)
    raise RuntimeError("could not generate a valid national id")


def get_issuance_place(code: str) -> Optional[str]:
    """Place of issuance for a valid national ID, from its first three digits."""
    if not is_national_id_valid(code):
        return None
    return issuance_places().get(code[:3])


def is_postal_code_valid(code: str) -> bool:
    """
    Check a 10-digit Iranian postal code against the known shape.

    Rejects codes starting with four identical digits; the first four digits
    come from {1,3-9}, the fifth from {1,3,4,6-9}, the last five from {0,1,3-9}.
    """
    if not isinstance(code, str):
        return False
    return _POSTAL_CODE.search(code) is not None


def is_legal_entity_id_valid(legal_id: str) -> bool:
    """
    Validate an 11-digit legal-entity national ID (شناسه ملی اشخاص حقوقی).

    The check digit (index 10) must equal
    `sum((id[9] + 2 + id[i]) * w[i % 5] for i in 0..9) mod 11`, with 10 folded
    to 0, where `w = (29, 27, 23, 19, 17)`. IDs that are all zero, or whose
    digits 4-9 are all zero, are rejected.
    """
    if not isinstance(legal_id, str) or len(legal_id) < 11:
        return False
    if not legal_id.isascii() or not legal_id.isdigit():
        return False
    if int(legal_id) == 0 or int(legal_id[3:9]) == 0:
        return False

    check = int(legal_id[10])
    base = int(legal_id[9]) + 2
    s = sum((base + int(ch)) * _LEGAL_ID_WEIGHTS[i % 5] for i, ch in enumerate(legal_id[:10]))
    s %= 11
    if s == 10:
        s = 0
    return check == s
