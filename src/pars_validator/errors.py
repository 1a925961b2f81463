"""Exceptions raised by pars_validator."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """
    A caller passed an argument no operation can work with (e.g. a group size
    of zero, or formatting a card number that fails the Luhn check).

    Not recoverable by retrying with the same input.
    """


class DataPackError(RuntimeError):
    """A bundled YAML data pack is malformed or breaks a registry invariant."""
