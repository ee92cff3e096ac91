"""RPC shim: maps host method calls onto the lookup entry point."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from zns_lookup.errors import MethodNotFoundError
from zns_lookup.lookup import on_name_lookup

NAME_LOOKUP_METHOD = "onNameLookup"


async def handle_rpc_request(request: Mapping[str, Any]) -> dict | None:
    """Dispatch ``{"method": ..., "params": ...}``; returns the wire-shaped response."""
    if request.get("method") == NAME_LOOKUP_METHOD:
        response = await on_name_lookup(request.get("params") or {})
        return response.to_wire() if response is not None else None
    raise MethodNotFoundError("Method not found.")
