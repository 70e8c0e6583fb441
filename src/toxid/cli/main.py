"""toxid CLI -- inspect, validate, scan for and assemble peer addresses.

Thin wrapper around ``toxid.protocol`` using click.
"""

from __future__ import annotations

import json
import logging

import click

from toxid.config import CLIConfig
from toxid.protocol import (
    Address,
    PublicKey,
    ToxIdError,
    find_addresses,
    looks_like_address,
)

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _error(msg: str) -> None:
    """Print an error message to stderr and exit 1."""
    click.echo(msg, err=True)
    raise SystemExit(1)


def _use_json(ctx: click.Context, as_json: bool) -> bool:
    return as_json or ctx.obj["config"].output_format == "json"


def _describe(address: Address) -> dict:
    """Field breakdown of *address* for display."""
    commitment = address.mlkem_commitment
    return {
        "address": address.to_text(),
        "variant": address.variant.value if address.variant else None,
        "size": address.size,
        "public_key": address.public_key.to_hex(),
        "mlkem_commitment": commitment.hex().upper() if commitment is not None else None,
        "nospam": address.nospam_hex,
        "checksum": address.checksum.hex().upper(),
        "valid": address.is_valid(),
    }


def _verdict(value: str) -> str:
    if not looks_like_address(value):
        return "malformed"
    if not Address.from_text(value).is_valid():
        return "bad checksum"
    return "valid"


def _decode_hex(value: str, what: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError:
        _error(f"Error: {what} is not hex: {value!r}")


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="toxid")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """toxid -- peer address inspection and validation."""
    try:
        config = CLIConfig(log_level="DEBUG" if verbose else None)
    except ValueError as exc:
        _error(f"Error: {exc}")
    logging.basicConfig(level=config.numeric_log_level, format=_LOG_FORMAT)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


# ---------------------------------------------------------------------------
# toxid inspect
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("address")
@click.option("--json", "as_json", is_flag=True, help="Print as JSON.")
@click.pass_context
def inspect(ctx: click.Context, address: str, as_json: bool) -> None:
    """Show the fields of an address."""
    if not looks_like_address(address):
        _error(f"Error: not an address: {address!r}")

    info = _describe(Address.from_text(address))
    if _use_json(ctx, as_json):
        click.echo(json.dumps(info, indent=2))
        return

    click.echo(f"Address:    {info['address']}")
    click.echo(f"Variant:    {info['variant']} ({info['size']} bytes)")
    click.echo(f"Public key: {info['public_key']}")
    if info["mlkem_commitment"] is not None:
        click.echo(f"ML-KEM:     {info['mlkem_commitment']}")
    click.echo(f"NoSpam:     {info['nospam']}")
    click.echo(f"Checksum:   {info['checksum']}")
    click.echo(f"Valid:      {'yes' if info['valid'] else 'no (checksum mismatch)'}")


# ---------------------------------------------------------------------------
# toxid validate
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("addresses", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print as JSON.")
@click.pass_context
def validate(ctx: click.Context, addresses: tuple[str, ...], as_json: bool) -> None:
    """Check one or more addresses.  Exits 1 if any is not valid."""
    verdicts = {value: _verdict(value) for value in addresses}

    if _use_json(ctx, as_json):
        click.echo(json.dumps(verdicts, indent=2))
    else:
        for value, verdict in verdicts.items():
            click.echo(f"{value}: {verdict}")

    if any(verdict != "valid" for verdict in verdicts.values()):
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# toxid scan
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("source", type=click.File("r", errors="replace"), default="-")
@click.option("--valid-only", is_flag=True, help="Drop addresses with a bad checksum.")
@click.option("--json", "as_json", is_flag=True, help="Print as JSON.")
@click.pass_context
def scan(ctx: click.Context, source, valid_only: bool, as_json: bool) -> None:
    """Find addresses in free text read from SOURCE (default: stdin)."""
    found = find_addresses(source.read())
    if valid_only:
        found = [address for address in found if address.is_valid()]
    logger.debug("Found %d address(es)", len(found))

    if _use_json(ctx, as_json):
        click.echo(json.dumps([_describe(address) for address in found], indent=2))
        return

    if not found:
        click.echo("No addresses found.")
        return
    for address in found:
        marker = "" if address.is_valid() else "  (bad checksum)"
        click.echo(f"{address.to_text()}{marker}")


# ---------------------------------------------------------------------------
# toxid build
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("public_key")
@click.argument("nospam")
@click.option("--commitment", default=None, help="ML-KEM commitment (16 hex chars) for a post-quantum address.")
def build(public_key: str, nospam: str, commitment: str | None) -> None:
    """Assemble an address from PUBLIC_KEY and NOSPAM (hex) and compute its checksum."""
    nospam_bytes = _decode_hex(nospam, "NoSpam")
    commitment_bytes = _decode_hex(commitment, "commitment") if commitment is not None else None

    try:
        address = Address.build(PublicKey.from_hex(public_key), nospam_bytes, commitment_bytes)
    except ToxIdError as exc:
        _error(f"Error: {exc}")
    click.echo(address.to_text())
