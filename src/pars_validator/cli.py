from __future__ import annotations

import pathlib
from typing import Callable, Dict, Optional
from enum import Enum

import typer
import structlog
from rich.console import Console

from .config import load_config, ParsValidatorConfig
from .errors import InvalidArgumentError
from .registry import issuance_places, provinces
from .text import (
    is_otp_valid,
    is_password_valid,
    number_to_price,
    number_to_words,
    separate,
    to_english_digits,
    to_persian,
)
from .validators import (
    format_card_number,
    generate_random_national_id,
    get_bank_name,
    get_issuance_place,
    get_landline_province,
    get_mobile_operator,
    is_card_number_valid,
    is_email_valid,
    is_iban_valid,
    is_landline_number_valid,
    is_legal_entity_id_valid,
    is_mobile_number_valid,
    is_national_id_valid,
    is_postal_code_valid,
    normalize_spaces_dashes,
)

console = Console(soft_wrap=True)
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="pars-validator: Iranian ID, bank and phone number checks")


class CheckKind(str, Enum):
    national_id = "national-id"
    legal_id = "legal-id"
    postal_code = "postal-code"
    card = "card"
    iban = "iban"
    mobile = "mobile"
    landline = "landline"
    email = "email"


class LookupKind(str, Enum):
    bank = "bank"
    operator = "operator"
    province = "province"
    issuance = "issuance"


class DigitScript(str, Enum):
    persian = "persian"
    english = "english"


_CHECKS: Dict[CheckKind, Callable[[str], bool]] = {
    CheckKind.national_id: is_national_id_valid,
    CheckKind.legal_id: is_legal_entity_id_valid,
    CheckKind.postal_code: is_postal_code_valid,
    CheckKind.card: lambda v: is_card_number_valid(normalize_spaces_dashes(v)),
    CheckKind.iban: lambda v: is_iban_valid(normalize_spaces_dashes(v).upper()),
    CheckKind.mobile: is_mobile_number_valid,
    CheckKind.landline: is_landline_number_valid,
    CheckKind.email: is_email_valid,
}

_LOOKUPS: Dict[LookupKind, Callable[[str], Optional[str]]] = {
    LookupKind.bank: lambda v: get_bank_name(normalize_spaces_dashes(v)),
    LookupKind.operator: get_mobile_operator,
    LookupKind.province: get_landline_province,
    LookupKind.issuance: get_issuance_place,
}


def _report(ok: bool) -> None:
    if ok:
        console.print("[green]valid[/green]")
    else:
        console.print("[red]invalid[/red]")
        raise typer.Exit(code=1)


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"pars-validator {__version__}")
        raise typer.Exit()


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to .pars-validator.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    structlog.configure(processors=[structlog.processors.JSONRenderer()])
    ctx.obj = {"config": load_config(config) if config else ParsValidatorConfig()}
    if verbose:
        log.info("verbose_enabled", tables={"provinces": len(provinces()), "issuance": len(issuance_places())})


@app.command()
def check(
    kind: CheckKind = typer.Argument(..., help="What VALUE is", case_sensitive=False),
    value: str = typer.Argument(..., help="Value to validate"),
):
    """Validate VALUE; exit code 1 when it is invalid."""
    _report(_CHECKS[kind](to_english_digits(value)))


@app.command()
def lookup(
    kind: LookupKind = typer.Argument(..., help="Table to search", case_sensitive=False),
    value: str = typer.Argument(..., help="Card number, phone number or national ID"),
):
    """Resolve a bank, operator, province or issuance place."""
    name = _LOOKUPS[kind](to_english_digits(value))
    if name is None:
        console.print("[yellow]not found[/yellow]")
        raise typer.Exit(code=1)
    console.print(name)


@app.command()
def words(n: int = typer.Argument(..., help="Integer between 0 and 999,999,999,999")):
    """Spell out N in Persian."""
    try:
        console.print(number_to_words(n))
    except InvalidArgumentError as e:
        raise typer.BadParameter(str(e), param_hint="N")


@app.command()
def price(rials: int = typer.Argument(..., help="Amount in Rials")):
    """Show an amount of Rials as Tomans and Rials."""
    try:
        console.print(number_to_price(rials))
    except InvalidArgumentError as e:
        raise typer.BadParameter(str(e), param_hint="RIALS")


@app.command("generate-id")
def generate_id(count: int = typer.Option(1, "--count", "-n", min=1, help="How many IDs to print")):
    """Print random valid national IDs."""
    for _ in range(count):
        console.print(generate_random_national_id())


@app.command("format-card")
def format_card(ctx: typer.Context, number: str = typer.Argument(..., help="16-digit card number")):
    """Group a card number using the configured splitter and group size."""
    cfg: ParsValidatorConfig = ctx.obj["config"]
    try:
        console.print(format_card_number(normalize_spaces_dashes(to_english_digits(number)), options=cfg.card_format))
    except InvalidArgumentError as e:
        raise typer.BadParameter(str(e), param_hint="NUMBER")


@app.command("separate")
def separate_cmd(ctx: typer.Context, text: str = typer.Argument(..., help="Text to group")):
    """Cut TEXT into groups using the configured splitter and group size."""
    cfg: ParsValidatorConfig = ctx.obj["config"]
    try:
        console.print(separate(text, options=cfg.separate))
    except InvalidArgumentError as e:
        raise typer.BadParameter(str(e), param_hint="TEXT")


@app.command()
def otp(
    ctx: typer.Context,
    code: str = typer.Argument(..., help="One-time password"),
    length: Optional[int] = typer.Option(None, "--length", help="Expected length (default from config)"),
):
    """Check CODE is a one-time password of the expected length."""
    cfg: ParsValidatorConfig = ctx.obj["config"]
    try:
        ok = is_otp_valid(to_english_digits(code), length if length is not None else cfg.otp_length)
    except InvalidArgumentError as e:
        raise typer.BadParameter(str(e), param_hint="--length")
    _report(ok)


@app.command()
def password(ctx: typer.Context, value: str = typer.Argument(..., help="Password to check")):
    """Check VALUE against the configured password policy."""
    cfg: ParsValidatorConfig = ctx.obj["config"]
    try:
        ok = is_password_valid(value, cfg.password)
    except InvalidArgumentError as e:
        raise typer.BadParameter(str(e), param_hint="VALUE")
    _report(ok)


@app.command()
def digits(
    text: str = typer.Argument(..., help="Text to convert"),
    to: DigitScript = typer.Option(DigitScript.persian, "--to", case_sensitive=False, help="Target digit script"),
):
    """Convert digits (and Arabic yeh/kaf) between scripts."""
    console.print(to_persian(text) if to is DigitScript.persian else to_english_digits(text))
