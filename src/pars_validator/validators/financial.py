"""
Bank card and IBAN (شبا) checks.

- Card numbers: 16 ASCII digits, Luhn ("mod 10") checksum, BIN lookup.
- IBAN: 26 uppercase alphanumerics, ISO 7064 mod-97 check.

Inputs are taken as given. Use `normalize_spaces_dashes` first to accept
user-friendly forms like "6037-9912-3456-7893".
"""

from __future__ import annotations

from typing import Optional
import re

from ..config import GroupingOptions
from ..errors import InvalidArgumentError
from ..registry import Bank, bank_by_bin
from ..text.numbers import separate

_SIXTEEN_DIGITS = re.compile(r"\d{16}", re.ASCII)
_IBAN_CHARS = re.compile(r"[A-Z0-9]{26}", re.ASCII)


def normalize_spaces_dashes(s: str) -> str:
    """
    Remove spaces and dashes from a string.

    Lets callers accept hyphenated card numbers or spaced IBANs while the
    validators below operate on the canonical representation.
    """
    return s.replace(" ", "").replace("-", "")


def is_card_number_valid(number: str) -> bool:
    """
    Validate a 16-digit bank card number using the Luhn checksum.

    Reading left to right, digits at odd 1-based positions are doubled (minus
    9 when the product exceeds 9), digits at even positions count as-is. The
    number is valid when the total is divisible by 10.
    """
    if not isinstance(number, str) or not _SIXTEEN_DIGITS.fullmatch(number):
        return False

    total = 0
    for i, ch in enumerate(number, start=1):
        d = ord(ch) - 48  # '0' -> 48
        if i % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return total % 10 == 0


def format_card_number(
    number: str,
    splitter: str = " ",
    group_size: int = 4,
    options: Optional[GroupingOptions] = None,
) -> str:
    """
    Split a valid card number into groups, e.g. '6037 9912 3456 7893'.

    `options` (e.g. `ParsValidatorConfig.card_format`) overrides `splitter`
    and `group_size` when given.

    Raises:
        InvalidArgumentError: the card number fails validation or
            `group_size` is not positive.
    """
    if options is not None:
        splitter, group_size = options.splitter, options.group_size
    if not is_card_number_valid(number):
        raise InvalidArgumentError("Card number is not valid.")
    if group_size <= 0:
        raise InvalidArgumentError("Group size must be greater than 0.")
    return separate(number, splitter=splitter, group_size=group_size)


def get_bank(number: str) -> Optional[Bank]:
    """Bank record owning the card's BIN, or None for invalid/unknown cards."""
    if not is_card_number_valid(number):
        return None
    return bank_by_bin().get(number[:6])


def get_bank_name(number: str) -> Optional[str]:
    bank = get_bank(number)
    return bank.name if bank else None


def is_iban_valid(iban: str) -> bool:
    """
    Validate an Iranian IBAN using the mod-97 algorithm.

    Steps:
      1) Require exactly 26 characters from A-Z/0-9.
      2) Move the first 4 chars to the end.
      3) Replace letters A..Z with 10..35.
      4) Interpret the result as one integer; valid iff it is 1 mod 97.

    Python integers are arbitrary precision, so the expanded numeral is
    reduced in one step.
    """
    if not isinstance(iban, str) or not _IBAN_CHARS.fullmatch(iban):
        return False

    rearr = iban[4:] + iban[:4]
    numeral = "".join(ch if ch.isdigit() else str(ord(ch) - 55) for ch in rearr)
    return int(numeral) % 97 == 1
