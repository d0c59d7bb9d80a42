"""
CLI tool to validate, convert and classify product codes.

Usage:
    product-check detect 748196000441
    product-check detect 978-0-306-40615-7 --format json
    product-check validate upce 02345673
    product-check expand 02345673
    product-check expand 654321 --indicator 1
    product-check suppress 023456000073
"""

import json
import sys

import click

from productcode import (
    ProductCodeError,
    detect_product_code,
    expand_upce,
    suppress_upca,
    validate_ean,
    validate_isbn,
    validate_upc,
    validate_upce,
)
from productcode.barcode.checksum import check_digit_char
from productcode.config import get_settings
from productcode.log import configure_logging
from productcode.models import DetectionResult


VALIDATORS = {
    "upc": validate_upc,
    "upce": validate_upce,
    "ean": validate_ean,
}


def format_text(result: DetectionResult) -> str:
    """Format a detection result as aligned text lines."""
    lines = [
        f"{'Code':<12} {result.code}",
        f"{'Type':<12} {result.code_type.value}",
        f"{'Check digit':<12} {check_digit_char(result.check_digit)}",
    ]
    if result.is_isbn:
        parts = result.isbn_parts
        if parts.ean:
            lines.append(f"{'EAN':<12} {parts.ean}")
        lines.append(f"{'Group':<12} {parts.group}")
        lines.append(f"{'Publisher':<12} {parts.publisher}")
        lines.append(f"{'Title':<12} {parts.title}")
        lines.append(f"{'Check':<12} {parts.check_digit}")
    return "\n".join(lines)


def fail(error: ProductCodeError) -> None:
    """Report a classified error on stderr and exit with status 1."""
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


@click.group()
def main() -> None:
    """Validate, convert and classify UPC, EAN and ISBN codes."""
    configure_logging()


@main.command()
@click.argument("code")
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Output format (default: from PRODUCTCODE_DEFAULT_OUTPUT_FORMAT, else text)",
)
def detect(code: str, output_format: str | None) -> None:
    """Detect whether CODE is a UPC-A, UPC-E, EAN or ISBN."""
    output_format = output_format or get_settings().default_output_format

    try:
        result = detect_product_code(code)
    except ProductCodeError as e:
        fail(e)
        return

    if output_format == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        click.echo(format_text(result))


@main.command()
@click.argument("code_format", type=click.Choice(["upc", "upce", "ean", "isbn"]))
@click.argument("code")
def validate(code_format: str, code: str) -> None:
    """Check the check digit of CODE as CODE_FORMAT."""
    try:
        if code_format == "isbn":
            outcome = validate_isbn(code)
            valid = outcome.valid
        else:
            valid = VALIDATORS[code_format](code)
    except ProductCodeError as e:
        fail(e)
        return

    if valid:
        click.echo(f"{code}: valid {code_format.upper()}")
        if code_format == "isbn" and outcome.parts:
            click.echo(json.dumps(outcome.parts.to_dict(), indent=2))
    else:
        click.echo(f"{code}: invalid {code_format.upper()} check digit")
        sys.exit(1)


@main.command()
@click.argument("code")
@click.option(
    "--indicator", "-i",
    default=None,
    help="Selector digit, required for bare 6-digit UPC-E codes",
)
def expand(code: str, indicator: str | None) -> None:
    """Expand UPC-E CODE to its 12-digit UPC-A form."""
    try:
        click.echo(expand_upce(code, indicator=indicator))
    except ProductCodeError as e:
        fail(e)


@main.command()
@click.argument("code")
def suppress(code: str) -> None:
    """Compress 12-digit UPC-A CODE to its 8-digit UPC-E form."""
    try:
        click.echo(suppress_upca(code))
    except ProductCodeError as e:
        fail(e)


if __name__ == "__main__":
    main()
