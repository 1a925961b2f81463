"""Checksum and format validators for Iranian identity, banking and contact data."""

from .identifiers import (
    is_national_id_valid,
    generate_random_national_id,
    get_issuance_place,
    is_postal_code_valid,
    is_legal_entity_id_valid,
)
from .financial import (
    normalize_spaces_dashes,
    is_card_number_valid,
    format_card_number,
    get_bank,
    get_bank_name,
    is_iban_valid,
)
from .phone import (
    normalize_phone_number,
    is_mobile_number_valid,
    is_landline_number_valid,
    get_landline_province,
    get_mobile_operator,
    get_mobile_operator_record,
    is_email_valid,
)

__all__ = [
    "is_national_id_valid",
    "generate_random_national_id",
    "get_issuance_place",
    "is_postal_code_valid",
    "is_legal_entity_id_valid",
    "normalize_spaces_dashes",
    "is_card_number_valid",
    "format_card_number",
    "get_bank",
    "get_bank_name",
    "is_iban_valid",
    "normalize_phone_number",
    "is_mobile_number_valid",
    "is_landline_number_valid",
    "get_landline_province",
    "get_mobile_operator",
    "get_mobile_operator_record",
    "is_email_valid",
]
