from __future__ import annotations

from pathlib import Path
from typing import Optional
import yaml
from pydantic import BaseModel, Field


# ---- Password policy (what a password must contain) ----
class PasswordPolicy(BaseModel):
    """
    Requirements checked by `is_password_valid`.

    A disabled requirement is simply not checked; it never forbids the class.
    `minimum_length` below 1 is rejected when the policy is used, not here,
    so a bad value surfaces as `InvalidArgumentError` from the validator.
    """
    uppercase_required: bool = True
    lowercase_required: bool = True
    digits_required: bool = True
    special_char_required: bool = True
    minimum_length: int = 8


# ---- Grouping (card formatting and generic separation) ----
class GroupingOptions(BaseModel):
    splitter: str = ","
    group_size: int = 3


def _card_grouping() -> GroupingOptions:
    return GroupingOptions(splitter=" ", group_size=4)


# ---- Root config ----
class ParsValidatorConfig(BaseModel):
    password: PasswordPolicy = Field(default_factory=PasswordPolicy)
    card_format: GroupingOptions = Field(default_factory=_card_grouping)
    separate: GroupingOptions = Field(default_factory=GroupingOptions)
    otp_length: int = 6


# ---- Loader ----
def load_config(path: Optional[Path]) -> ParsValidatorConfig:
    if not path:
        return ParsValidatorConfig()
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    return ParsValidatorConfig(**data)
