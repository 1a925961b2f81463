import dataclasses

import pytest

from pars_validator import registry
from pars_validator.errors import DataPackError


def test_bins_are_unique_six_digit_strings():
    seen = set()
    for bank in registry.banks():
        for p in bank.card_prefixes:
            assert len(p) == 6 and p.isdigit()
            assert p not in seen
            seen.add(p)
    assert set(registry.bank_by_bin()) == seen


def test_operator_codes_precede_their_extensions():
    """A code must never be shadowed by a shorter code listed earlier."""
    ordered = [code for op in registry.mobile_operators() for code in op.number_codes]
    for i, code in enumerate(ordered):
        for earlier in ordered[:i]:
            assert not code.startswith(earlier), f"{code} is shadowed by {earlier}"


def test_tables_are_loaded_once():
    assert registry.provinces() is registry.provinces()
    assert registry.banks() is registry.banks()


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        registry.provinces()["099"] = "x"
    with pytest.raises(TypeError):
        registry.issuance_places()["999"] = "x"
    with pytest.raises(TypeError):
        registry.bank_by_bin()["000000"] = None


def test_records_are_frozen():
    bank = registry.banks()[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        bank.name = "x"


def test_issuance_keys_keep_leading_zeros():
    assert registry.issuance_places()["001"] == "تهران مرکزی"
    assert registry.issuance_places()["083"] == "طبس"


def test_find_operator():
    assert registry.find_operator("09123456789").name == "همراه اول"
    assert registry.find_operator("08123456789") is None


def test_duplicate_bin_rejected(monkeypatch):
    pack = {
        "banks": [
            {"name": "A", "icon": "a.svg", "prefixes": ["111111"]},
            {"name": "B", "icon": "b.svg", "prefixes": ["111111"]},
        ]
    }
    monkeypatch.setattr(registry, "_read_pack", lambda fname: pack)
    with pytest.raises(DataPackError):
        registry.banks.__wrapped__()


def test_malformed_bin_rejected(monkeypatch):
    pack = {"banks": [{"name": "A", "icon": "a.svg", "prefixes": ["12345"]}]}
    monkeypatch.setattr(registry, "_read_pack", lambda fname: pack)
    with pytest.raises(DataPackError):
        registry.banks.__wrapped__()


def test_malformed_operator_code_rejected(monkeypatch):
    pack = {"operators": [{"name": "A", "icon": "a.svg", "codes": ["0812"]}]}
    monkeypatch.setattr(registry, "_read_pack", lambda fname: pack)
    with pytest.raises(DataPackError):
        registry.mobile_operators.__wrapped__()


@pytest.mark.parametrize(
    "accessor, pack",
    [
        ("banks", {"banks": [{"icon": "a.svg", "prefixes": ["111111"]}]}),
        ("banks", {"banks": ["not-a-mapping"]}),
        ("mobile_operators", {"operators": [{"name": "", "codes": ["0912"]}]}),
    ],
)
def test_entry_without_name_rejected(monkeypatch, accessor, pack):
    monkeypatch.setattr(registry, "_read_pack", lambda fname: pack)
    with pytest.raises(DataPackError):
        getattr(registry, accessor).__wrapped__()
