"""Name-lookup entry point: routes a host request to forward or reverse ZNS resolution."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from zns_lookup.chain.eip155 import get_chain_id_from_eip155
from zns_lookup.chain.registry import ChainConfig, get_chain_config, is_supported_tld, strip_tld
from zns_lookup.models.schema import LookupRequest, LookupResponse, ResolvedAddress
from zns_lookup.resolver import resolve_zns_name, reverse_resolve_address

logger = logging.getLogger(__name__)


def _lookup_chain(chain_identifier: str) -> tuple[int, ChainConfig | None]:
    # Codec errors propagate to the host.
    chain_id = get_chain_id_from_eip155(chain_identifier)
    return chain_id, get_chain_config(chain_id)


def _single_result(resolved_address: str, domain_name: str) -> LookupResponse:
    return LookupResponse(
        resolved_addresses=[
            ResolvedAddress(resolved_address=resolved_address, domain_name=domain_name),
        ]
    )


async def on_name_lookup(request: LookupRequest | Mapping[str, Any]) -> LookupResponse | None:
    """Resolve a domain to an address, or an address to its primary domain.

    A domain with a supported TLD is tried first; if that yields nothing and the
    request also carries an address, reverse resolution runs. Unsupported TLDs,
    unknown chains and remote misses all return None, which tells the host there
    is nothing to contribute.

    Raises:
        InvalidFormatError, InvalidNumberError: malformed ``chainId``.
    """
    if not isinstance(request, LookupRequest):
        request = LookupRequest.model_validate(request)

    domain, address = request.domain, request.address

    if domain and is_supported_tld(domain):
        chain_id, chain = _lookup_chain(request.chain_id)
        if chain is None:
            logger.debug(f"chain_id={chain_id} not supported, skipping {domain!r}")
            return None

        name = strip_tld(domain, chain)
        resolved = await resolve_zns_name(name, chain_id)
        if resolved:
            logger.debug(f"{domain} -> {resolved} on {chain.name}")
            return _single_result(resolved, domain)

    if address:
        chain_id, chain = _lookup_chain(request.chain_id)
        if chain is None:
            logger.debug(f"chain_id={chain_id} not supported, skipping reverse lookup")
            return None

        primary = await reverse_resolve_address(address, chain_id)
        if primary:
            logger.debug(f"{address} -> {primary} on {chain.name}")
            return _single_result(address, primary)

    return None
