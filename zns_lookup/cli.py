"""Click CLI: resolve, chains."""

from __future__ import annotations

import asyncio
import json
import logging

import click
from pydantic import ValidationError

from zns_lookup.config import get_settings


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Log at DEBUG level")
def cli(verbose: bool):
    """zns-lookup - ZNS domain <-> address resolution across EVM chains."""
    try:
        settings = get_settings()
    except ValidationError as e:
        raise click.ClickException(f"Invalid ZNS_* configuration:\n{e}") from e
    level = "DEBUG" if verbose else settings.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.option("--chain", required=True, help="Chain as eip155:<id>, numeric id, or name (polygon, taiko, ...)")
@click.option("--domain", default=None, help="ZNS domain to resolve, e.g. example.poly")
@click.option("--address", default=None, help="Address to reverse-resolve")
def resolve(chain: str, domain: str | None, address: str | None):
    """Resolve a ZNS domain to an address, or an address to its primary domain."""
    from zns_lookup.chain.registry import resolve_chain
    from zns_lookup.chain.eip155 import get_eip155_from_chain_id
    from zns_lookup.lookup import on_name_lookup

    if not domain and not address:
        raise click.UsageError("Pass --domain or --address.")

    try:
        chain_config = resolve_chain(chain)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--chain") from e

    request = {
        "chainId": get_eip155_from_chain_id(chain_config.chain_id),
        "domain": domain,
        "address": address,
    }
    response = asyncio.run(on_name_lookup(request))

    if response is None:
        click.echo("No result.")
        return
    click.echo(json.dumps(response.to_wire(), indent=2, ensure_ascii=False))


@cli.command()
def chains():
    """List supported chains and their TLDs."""
    from zns_lookup.chain.registry import SUPPORTED_CHAINS
    from zns_lookup.chain.eip155 import get_eip155_from_chain_id

    for c in SUPPORTED_CHAINS:
        tlds = ", ".join(f".{t}" for t in c.tlds)
        click.echo(f"{get_eip155_from_chain_id(c.chain_id):<16} {c.name:<12} {tlds}")


if __name__ == "__main__":
    cli()
