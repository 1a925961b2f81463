"""Rendering numbers as Persian words, Rial/Toman prices and grouped strings."""

from __future__ import annotations

from typing import List, Optional

from ..config import GroupingOptions
from ..errors import InvalidArgumentError
from .digits import to_persian

MAX_WORDS_VALUE = 999_999_999_999

ZERO = "صفر"
AND = " و "
TOMAN = "تومان"
RIAL = "ریال"

_ONES = ["", "یک", "دو", "سه", "چهار", "پنج", "شش", "هفت", "هشت", "نه"]

_TEENS = [
    "ده",
    "یازده",
    "دوازده",
    "سیزده",
    "چهارده",
    "پانزده",
    "شانزده",
    "هفده",
    "هجده",
    "نوزده",
]

_TENS = ["", "ده", "بیست", "سی", "چهل", "پنجاه", "شصت", "هفتاد", "هشتاد", "نود"]

_HUNDREDS = ["", "یکصد", "دویست", "سیصد", "چهارصد", "پانصد", "ششصد", "هفتصد", "هشتصد", "نهصد"]

# Scale word per base-1000 group, least significant first.
_SCALES = ["", "هزار", "میلیون", "میلیارد"]


def _require_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    return value


def _chunk_to_words(n: int) -> str:
    """Words for 1..999; 0 yields an empty string."""
    parts: List[str] = []
    hundreds, rest = divmod(n, 100)
    if hundreds:
        parts.append(_HUNDREDS[hundreds])
    if 10 <= rest <= 19:
        parts.append(_TEENS[rest - 10])
    else:
        tens, ones = divmod(rest, 10)
        if tens:
            parts.append(_TENS[tens])
        if ones:
            parts.append(_ONES[ones])
    return AND.join(parts)


def number_to_words(n: int) -> str:
    """
    Spell out 0..999,999,999,999 in Persian.

    The number is split into base-1000 groups; each non-zero group is spelled
    out, suffixed with its scale word, and the groups are joined
    most-significant first with 'و'.

    >>> number_to_words(1000)
    'یک هزار'
    """
    n = _require_int(n, "n")
    if not 0 <= n <= MAX_WORDS_VALUE:
        raise InvalidArgumentError(f"n must be between 0 and {MAX_WORDS_VALUE:,}, got {n}")
    if n == 0:
        return ZERO

    words: List[str] = []
    scale = 0
    while n > 0:
        n, chunk = divmod(n, 1000)
        if chunk:
            text = _chunk_to_words(chunk)
            if _SCALES[scale]:
                text = f"{text} {_SCALES[scale]}"
            words.append(text)
        scale += 1
    return AND.join(reversed(words))


def number_to_price(rials: int) -> str:
    """
    Describe an amount of Rials in Tomans and Rials, with Persian digits.

    Groups keep their digits rather than being spelled out:

    >>> number_to_price(123456789)
    '۱۲ میلیون و ۳۴۵ هزار و ۶۷۸ تومان و ۹ ریال'

    Amounts below one Toman (1-9 Rials) carry no Toman word at all, only the
    Rial phrase (`'۵ ریال'`). Zero is rendered as `'۰ تومان'`.

    Raises:
        InvalidArgumentError: `rials` is negative or not an integer.
    """
    rials = _require_int(rials, "rials")
    if rials < 0:
        raise InvalidArgumentError(f"rials must not be negative, got {rials}")

    tomans, remainder = divmod(rials, 10)
    billions, rest = divmod(tomans, 1_000_000_000)
    millions, rest = divmod(rest, 1_000_000)
    thousands, units = divmod(rest, 1000)

    parts: List[str] = []
    if billions:
        parts.append(f"{billions} میلیارد")
    if millions:
        parts.append(f"{millions} میلیون")
    if thousands:
        parts.append(f"{thousands} هزار")
    if units:
        parts.append(str(units))

    if parts:
        text = f"{AND.join(parts)} {TOMAN}"
        if remainder:
            text += f"{AND}{remainder} {RIAL}"
    elif remainder:
        text = f"{remainder} {RIAL}"
    else:
        text = f"0 {TOMAN}"
    return to_persian(text)


def separate(
    text: str,
    splitter: str = ",",
    group_size: int = 3,
    options: Optional[GroupingOptions] = None,
) -> str:
    """
    Cut `text` left to right into `group_size` pieces joined by `splitter`.

    The last piece may be shorter. Works on any string, not just digits.
    When `options` is given, its splitter and group size replace the keyword
    values.

    Raises:
        InvalidArgumentError: `group_size` is not positive.
    """
    if options is not None:
        splitter, group_size = options.splitter, options.group_size
    if group_size <= 0:
        raise InvalidArgumentError("Group size must be greater than 0.")
    return splitter.join(text[i : i + group_size] for i in range(0, len(text), group_size))
