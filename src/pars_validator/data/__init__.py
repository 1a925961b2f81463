"""Bundled YAML lookup tables (banks, mobile operators, provinces, issuance places)."""
