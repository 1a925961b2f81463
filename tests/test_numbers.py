import pytest

from pars_validator.config import GroupingOptions
from pars_validator.errors import InvalidArgumentError
from pars_validator.text.numbers import number_to_price, number_to_words, separate


@pytest.mark.parametrize(
    "n, words",
    [
        (0, "صفر"),
        (5, "پنج"),
        (10, "ده"),
        (15, "پانزده"),
        (20, "بیست"),
        (21, "بیست و یک"),
        (100, "یکصد"),
        (115, "یکصد و پانزده"),
        (305, "سیصد و پنج"),
        (1000, "یک هزار"),
        (1001, "یک هزار و یک"),
        (1_000_000, "یک میلیون"),
        (2_000_003, "دو میلیون و سه"),
        (5_000_000_000, "پنج میلیارد"),
    ],
)
def test_number_to_words(n, words):
    assert number_to_words(n) == words


def test_number_to_words_full_decomposition():
    assert number_to_words(123456789) == (
        "یکصد و بیست و سه میلیون و چهارصد و پنجاه و شش هزار و هفتصد و هشتاد و نه"
    )


def test_number_to_words_upper_bound():
    assert number_to_words(999_999_999_999) == (
        "نهصد و نود و نه میلیارد و نهصد و نود و نه میلیون و نهصد و نود و نه هزار و نهصد و نود و نه"
    )


@pytest.mark.parametrize("n", [-1, 1_000_000_000_000, 1.5, "12", True])
def test_number_to_words_rejects_out_of_range(n):
    with pytest.raises(InvalidArgumentError):
        number_to_words(n)


@pytest.mark.parametrize(
    "rials, price",
    [
        (123456789, "۱۲ میلیون و ۳۴۵ هزار و ۶۷۸ تومان و ۹ ریال"),
        (1234567890, "۱۲۳ میلیون و ۴۵۶ هزار و ۷۸۹ تومان"),
        (10, "۱ تومان"),
        (10010, "۱ هزار و ۱ تومان"),
        (10_000_000_000, "۱ میلیارد تومان"),
        (5, "۵ ریال"),
        (0, "۰ تومان"),
    ],
)
def test_number_to_price(rials, price):
    assert number_to_price(rials) == price


def test_number_to_price_rejects_negative():
    with pytest.raises(InvalidArgumentError):
        number_to_price(-10)


def test_separate():
    assert separate("123456789", splitter=",", group_size=3) == "123,456,789"
    assert separate("abcdef", splitter="-", group_size=2) == "ab-cd-ef"
    assert separate("1234567") == "123,456,7"
    assert separate("") == ""


def test_separate_with_options():
    assert separate("123456789", options=GroupingOptions(splitter=" ", group_size=4)) == "1234 5678 9"
    assert separate("123456789", splitter="-", options=GroupingOptions()) == "123,456,789"


@pytest.mark.parametrize("size", [0, -1])
def test_separate_rejects_bad_group_size(size):
    with pytest.raises(InvalidArgumentError):
        separate("abc", group_size=size)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        separate("abc", group_size=0)
