"""
Read-only lookup tables backed by the YAML data packs in `pars_validator.data`.

What this does
--------------
- Reads `banks.yaml`, `operators.yaml`, `provinces.yaml` and `issuance.yaml`
  with `importlib.resources` and PyYAML.
- Turns them into immutable records (`Bank`, `MobileOperator`) and read-only
  mappings, each loaded once on first use and cached for the process lifetime.
- Checks the invariants the lookups rely on (unique 6-digit BINs, well-formed
  operator codes) so a broken pack fails loudly at load time instead of
  returning wrong answers.

Nothing here is ever mutated after loading, so every accessor is safe to call
from multiple threads without locking.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple
import logging
import re

import yaml

from .errors import DataPackError

logger = logging.getLogger(__name__)

_DATA_PACKAGE = "pars_validator.data"

_BIN_RE = re.compile(r"^\d{6}$")
_OPERATOR_CODE_RE = re.compile(r"^09\d{2,5}$")
_THREE_DIGITS_RE = re.compile(r"^\d{3}$")


# ---- Records --------------------------------------------------------------------------

@dataclass(frozen=True)
class Bank:
    """
    A card-issuing bank.

    Attributes:
        name:          Persian display name.
        card_prefixes: 6-digit BINs owned by this bank.
        icon:          Opaque icon asset identifier for a presentation layer.
    """
    name: str
    card_prefixes: FrozenSet[str]
    icon: str


@dataclass(frozen=True)
class MobileOperator:
    """
    A mobile network operator.

    `number_codes` keeps the declared order; codes are prefixes of a normalized
    mobile number (`09` + 9 digits).
    """
    name: str
    number_codes: Tuple[str, ...]
    icon: str

    def matches(self, number: str) -> bool:
        return any(number.startswith(code) for code in self.number_codes)


# ---- Loading helpers ------------------------------------------------------------------

def _read_pack(fname: str) -> Dict[str, Any]:
    text = resources.files(_DATA_PACKAGE).joinpath(fname).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise DataPackError(f"{fname}: top level must be a mapping")
    return data


def _code_table(fname: str, key: str) -> Mapping[str, str]:
    """Load a flat `code -> name` table keyed by 3-digit strings."""
    raw = _read_pack(fname).get(key) or {}
    table: Dict[str, str] = {}
    for code, name in raw.items():
        code = str(code)
        if not _THREE_DIGITS_RE.match(code):
            raise DataPackError(f"{fname}: code {code!r} is not three digits")
        table[code] = str(name)
    logger.debug("loaded %s: %d entries", fname, len(table))
    return MappingProxyType(table)


def _entry_name(fname: str, entry: Any) -> str:
    if not isinstance(entry, dict) or not entry.get("name"):
        raise DataPackError(f"{fname}: entry {entry!r} has no name")
    return str(entry["name"])


# ---- Public accessors -----------------------------------------------------------------

@lru_cache(maxsize=None)
def banks() -> Tuple[Bank, ...]:
    """All banks in declared order."""
    out = []
    seen: Dict[str, str] = {}
    for entry in _read_pack("banks.yaml").get("banks") or []:
        name = _entry_name("banks.yaml", entry)
        prefixes = [str(p) for p in entry.get("prefixes") or []]
        for p in prefixes:
            if not _BIN_RE.match(p):
                raise DataPackError(f"banks.yaml: {name}: BIN {p!r} is not six digits")
            if p in seen:
                raise DataPackError(f"banks.yaml: BIN {p} claimed by both {seen[p]} and {name}")
            seen[p] = name
        out.append(Bank(name=name, card_prefixes=frozenset(prefixes), icon=str(entry.get("icon", ""))))
    logger.debug("loaded banks.yaml: %d banks, %d BINs", len(out), len(seen))
    return tuple(out)


@lru_cache(maxsize=None)
def bank_by_bin() -> Mapping[str, Bank]:
    """BIN -> Bank, exact match only."""
    return MappingProxyType({p: bank for bank in banks() for p in bank.card_prefixes})


@lru_cache(maxsize=None)
def mobile_operators() -> Tuple[MobileOperator, ...]:
    """Operators in the order lookups must scan them."""
    out = []
    for entry in _read_pack("operators.yaml").get("operators") or []:
        name = _entry_name("operators.yaml", entry)
        codes = tuple(str(c) for c in entry.get("codes") or [])
        for c in codes:
            if not _OPERATOR_CODE_RE.match(c):
                raise DataPackError(f"operators.yaml: {name}: code {c!r} is not a 4-7 digit 09 prefix")
        out.append(MobileOperator(name=name, number_codes=codes, icon=str(entry.get("icon", ""))))
    logger.debug("loaded operators.yaml: %d operators", len(out))
    return tuple(out)


@lru_cache(maxsize=None)
def provinces() -> Mapping[str, str]:
    """Landline area code (e.g. '021') -> province name."""
    return _code_table("provinces.yaml", "provinces")


@lru_cache(maxsize=None)
def issuance_places() -> Mapping[str, str]:
    """First three national-ID digits -> place of issuance."""
    return _code_table("issuance.yaml", "places")


def find_operator(number: str) -> Optional[MobileOperator]:
    """First operator, in declared order, owning a code that prefixes `number`."""
    for op in mobile_operators():
        if op.matches(number):
            return op
    return None
