"""Chain registry mapping chain_id to the ZNS TLDs served on it."""

from __future__ import annotations

from dataclasses import dataclass

from zns_lookup.chain.eip155 import get_chain_id_from_eip155, get_eip155_from_chain_id


@dataclass(frozen=True)
class ChainConfig:
    chain_id: int
    name: str
    tlds: tuple[str, ...]


# One row per ZNS deployment. TLDs are stored lowercase and URL-encoded when
# they are not plain ASCII (the Taiko TLD is the drum emoji).
NETWORKS: list[tuple[int, str, str]] = [
    (137, "Polygon", "poly"),
    (56, "BNB Chain", "bnb"),
    (81457, "Blast", "blast"),
    (534352, "Scroll", "scroll"),
    (167000, "Taiko", "%f0%9f%a5%81"),
    (7777777, "Zora", "zora"),
    (146, "Sonic", "sonic"),
    (57073, "Ink", "ink"),
    (130, "Unichain", "unichain"),
    (1868, "Soneium", "soneium"),
]

SUPPORTED_CHAINS: tuple[ChainConfig, ...] = tuple(
    ChainConfig(chain_id=chain_id, name=label, tlds=(tld,)) for chain_id, label, tld in NETWORKS
)


def get_chain_config(chain_id: int) -> ChainConfig | None:
    """Return the first registered chain with ``chain_id``, or None."""
    for chain in SUPPORTED_CHAINS:
        if chain.chain_id == chain_id:
            return chain
    return None


def is_supported_tld(domain: str) -> bool:
    """True when the last label of ``domain`` is a TLD of any registered chain."""
    if "." not in domain:
        return False
    tld = domain.rsplit(".", 1)[1].lower()
    if not tld:
        return False
    return any(tld in chain.tlds for chain in SUPPORTED_CHAINS)


def strip_tld(domain: str, chain: ChainConfig) -> str:
    """Drop a trailing ``.<tld>`` matching one of the chain's configured TLDs.

    Matching is case-sensitive against the configured spelling; a domain that
    carries none of them is returned unchanged.
    """
    for tld in chain.tlds:
        suffix = f".{tld}"
        if domain.endswith(suffix):
            return domain[: -len(suffix)]
    return domain


def get_all_chain_ids() -> list[str]:
    return [get_eip155_from_chain_id(c.chain_id) for c in SUPPORTED_CHAINS]


def get_all_tlds() -> list[str]:
    return [tld for c in SUPPORTED_CHAINS for tld in c.tlds]


def resolve_chain(name_or_id: str | int) -> ChainConfig:
    """Resolve a chain name, numeric id or ``eip155:<id>`` identifier to its config."""
    if isinstance(name_or_id, int):
        chain_id = name_or_id
    else:
        value = str(name_or_id).strip()
        if ":" in value:
            chain_id = get_chain_id_from_eip155(value)
        elif value.isdigit():
            chain_id = int(value)
        else:
            by_name = {c.name.lower(): c for c in SUPPORTED_CHAINS}
            if value.lower() not in by_name:
                raise ValueError(f"Unknown chain '{value}'. Supported: {sorted(by_name)}")
            return by_name[value.lower()]

    chain = get_chain_config(chain_id)
    if chain is None:
        supported = [c.chain_id for c in SUPPORTED_CHAINS]
        raise ValueError(f"Unknown chain_id={chain_id}. Supported: {supported}")
    return chain
