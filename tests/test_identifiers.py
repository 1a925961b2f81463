import random

import pytest

from pars_validator.validators.identifiers import (
    generate_random_national_id,
    get_issuance_place,
    is_legal_entity_id_valid,
    is_national_id_valid,
    is_postal_code_valid,
)


@pytest.mark.parametrize("code", ["0013542419", "0499370899", "9990000018"])
def test_valid_national_ids(code):
    assert is_national_id_valid(code)


@pytest.mark.parametrize(
    "code",
    [
        "0013542418",   # wrong check digit
        "001354241",    # too short
        "00135424190",  # too long
        "001354241a",
        "0013542419\n",
        "۰۰۱۳۵۴۲۴۱۹",   # Persian digits are not converted here
        "",
    ],
)
def test_invalid_national_ids(code):
    assert not is_national_id_valid(code)


@pytest.mark.parametrize("digit", "0123456789")
def test_repeated_digit_ids_rejected(digit):
    assert not is_national_id_valid(digit * 10)


def test_generated_ids_are_valid():
    rng = random.Random(1234)
    for _ in range(500):
        code = generate_random_national_id(rng)
        assert len(code) == 10
        assert is_national_id_valid(code)


def test_generate_without_rng():
    assert is_national_id_valid(generate_random_national_id())


def test_issuance_place():
    assert get_issuance_place("0013542419") == "تهران مرکزی"
    assert get_issuance_place("0499370899") == "شهرری"


def test_issuance_place_unknown_prefix_or_invalid_id():
    assert get_issuance_place("9990000018") is None
    assert get_issuance_place("0013542418") is None


@pytest.mark.parametrize("code", ["1918934354", "3339934354", "کد پستی 1918934354"])
def test_valid_postal_codes(code):
    assert is_postal_code_valid(code)


@pytest.mark.parametrize(
    "code",
    [
        "1111111111",   # four identical leading digits
        "3333934354",
        "2918934354",   # first digit 2
        "1918534354",   # fifth digit 5
        "1918924354",   # sixth digit 2
        "191893435",
        "19189343541",
        "",
    ],
)
def test_invalid_postal_codes(code):
    assert not is_postal_code_valid(code)


def test_legal_entity_id():
    assert is_legal_entity_id_valid("10380284790")
    assert not is_legal_entity_id_valid("10380284791")


def test_legal_entity_id_checks_first_eleven_digits():
    assert is_legal_entity_id_valid("103802847901")
    assert not is_legal_entity_id_valid("10380284790x")
    assert not is_legal_entity_id_valid("103802847911")


@pytest.mark.parametrize(
    "legal_id",
    ["00000000000", "10300000090", "1038028479", "1038028479a", ""],
)
def test_invalid_legal_entity_ids(legal_id):
    assert not is_legal_entity_id_valid(legal_id)
