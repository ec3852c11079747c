"""
UPC-A codec CLI.

Usage:
    poetry run upca encode 03600029145
    poetry run upca encode 036000291452 --flat --format json
    poetry run upca decode "0000000000 101 0001101 ... 101 0000000000"
    poetry run upca checksum 03600029145
    poetry run upca validate 036000291452
"""

import json
import sys
from typing import NoReturn

import click
import structlog

from upca.barcode import (
    UpcaError,
    calculate_upca_checksum,
    decode,
    decode_flat,
    encode,
    encode_flat,
    is_valid_upca,
    tokenize,
)
from upca.barcode.errors import InvalidCharactersError, LengthOutOfRangeError
from upca.config import get_settings
from upca.logging import configure_logging
from upca.models import CheckDigitMode

logger = structlog.get_logger(__name__)

# Exit code for rejected input
EXIT_INVALID_INPUT = 2


def _fail(error: UpcaError, output_format: str = "text") -> NoReturn:
    logger.debug("Rejected input", error=error.code, message=str(error))
    if output_format == "json":
        click.echo(json.dumps({"error": error.code, "message": str(error)}))
    else:
        click.echo(f"{error.code}: {error}", err=True)
    sys.exit(EXIT_INVALID_INPUT)


@click.group()
@click.option(
    "--check-digit-mode",
    type=click.Choice([m.value for m in CheckDigitMode]),
    default=None,
    help="Check digit formula (defaults to UPCA_CHECK_DIGIT_MODE)",
)
@click.pass_context
def cli(ctx: click.Context, check_digit_mode: str | None) -> None:
    """Encode and decode UPC-A module patterns."""
    configure_logging()
    ctx.ensure_object(dict)
    ctx.obj["mode"] = CheckDigitMode(check_digit_mode) if check_digit_mode else None


@cli.command("encode")
@click.argument("digits")
@click.option("--flat", is_flag=True, help="Emit the 115-module pattern without separators")
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text)",
)
@click.pass_context
def encode_command(ctx: click.Context, digits: str, flat: bool, output_format: str) -> None:
    """Encode 11 or 12 digits."""
    mode = ctx.obj["mode"]
    try:
        if flat:
            symbol = encode_flat(digits, mode)
        else:
            grouped = encode(digits, mode)
    except UpcaError as e:
        _fail(e, output_format)

    if output_format == "json":
        if flat:
            payload = {
                "pattern": symbol.pattern,
                "code": symbol.digits,
                "number_system": symbol.number_system,
                "manufacturer_code": symbol.manufacturer_code,
                "product_code": symbol.product_code,
                "check_digit": symbol.check_digit,
                "regions": [region.model_dump() for region in symbol.regions],
            }
        else:
            payload = {"pattern": grouped}
        click.echo(json.dumps(payload, indent=2))
    elif flat:
        click.echo(symbol.pattern)
        click.echo(symbol.human_readable)
    else:
        click.echo(grouped)


@cli.command("decode")
@click.argument("tokens", nargs=-1)
def decode_command(tokens: tuple[str, ...]) -> None:
    """
    Decode a grouped or flat module pattern.

    Reads standard input when no TOKENS are given.
    """
    parts = tokenize(" ".join(tokens)) if tokens else tokenize(sys.stdin.read())

    try:
        if len(parts) == 1:
            code = decode_flat(parts[0])
        else:
            code = decode(parts)
    except UpcaError as e:
        _fail(e)

    click.echo(code)


@cli.command("checksum")
@click.argument("digits")
@click.pass_context
def checksum_command(ctx: click.Context, digits: str) -> None:
    """Print the check digit computed from the first 11 digits."""
    mode = ctx.obj["mode"] or get_settings().check_digit_mode
    try:
        if not digits.isascii() or not digits.isdigit():
            raise InvalidCharactersError("UPC-A allows numeric values only")
        if len(digits) not in (11, 12):
            raise LengthOutOfRangeError(len(digits))
    except UpcaError as e:
        _fail(e)

    click.echo(calculate_upca_checksum(digits, mode))


@cli.command("validate")
@click.argument("code")
def validate_command(code: str) -> None:
    """Check a 12-digit code. Exits 1 when invalid."""
    is_valid, error = is_valid_upca(code)
    if is_valid:
        click.echo(f"{code}: valid")
        return
    click.echo(f"{code}: {error}", err=True)
    sys.exit(1)


if __name__ == "__main__":
    cli()
