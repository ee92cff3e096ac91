"""ZNS API client: forward (name -> address) and reverse (address -> name) lookups.

Remote failures never propagate. Transport errors, timeouts, non-2xx statuses
and unusable bodies are classified as ResolutionUnavailable, logged, and
reported to the caller as None, same as "not found".
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from zns_lookup.config import get_settings
from zns_lookup.errors import ResolutionUnavailable

logger = logging.getLogger(__name__)


async def _fetch_json(
    url: str,
    params: dict[str, Any],
    client: httpx.AsyncClient | None = None,
) -> dict:
    """GET ``url`` and return the decoded JSON object. Raises ResolutionUnavailable."""
    settings = get_settings()
    try:
        if client is None:
            async with httpx.AsyncClient(
                timeout=settings.request_timeout,
                headers={"User-Agent": settings.user_agent},
            ) as own_client:
                resp = await own_client.get(url, params=params)
        else:
            resp = await client.get(url, params=params, timeout=settings.request_timeout)
        resp.raise_for_status()
        data = resp.json()
    except httpx.HTTPError as e:
        raise ResolutionUnavailable(f"ZNS API request failed: {e!r}") from e
    except ValueError as e:
        raise ResolutionUnavailable(f"ZNS API returned invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ResolutionUnavailable(f"ZNS API returned {type(data).__name__}, expected an object")
    return data


def _text_field(data: dict, field: str) -> str | None:
    value = data.get(field)
    if isinstance(value, str) and value:
        return value
    return None


async def resolve_zns_name(
    name: str,
    chain_id: int,
    client: httpx.AsyncClient | None = None,
) -> str | None:
    """Resolve a bare ZNS name (TLD already stripped, e.g. "xinkin") to an address.

    Args:
        name: ZNS name without its TLD
        chain_id: Numeric chain id (e.g. 137 for Polygon)
        client: Optional shared client; a short-lived one is opened otherwise

    Returns:
        The resolved address, or None when unregistered or the API is unavailable
    """
    url = get_settings().resolve_domain_url
    try:
        data = await _fetch_json(url, {"domain": name, "chain": chain_id}, client)
    except ResolutionUnavailable as e:
        logger.warning(f"Forward lookup of {name!r} on chain_id={chain_id} unavailable: {e}")
        return None
    return _text_field(data, "address")


async def reverse_resolve_address(
    address: str,
    chain_id: int,
    client: httpx.AsyncClient | None = None,
) -> str | None:
    """Look up the primary ZNS domain of ``address``. None when unset or unavailable."""
    url = get_settings().resolve_address_url
    try:
        data = await _fetch_json(url, {"address": address, "chain": chain_id}, client)
    except ResolutionUnavailable as e:
        logger.warning(f"Reverse lookup of {address} on chain_id={chain_id} unavailable: {e}")
        return None
    return _text_field(data, "primaryDomain")
