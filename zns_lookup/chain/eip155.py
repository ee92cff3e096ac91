"""EIP-155 chain identifier codec ("eip155:137" <-> 137)."""

from __future__ import annotations

from zns_lookup.errors import InvalidFormatError, InvalidNumberError

NAMESPACE = "eip155"


def get_chain_id_from_eip155(eip155_chain_id: str) -> int:
    """Convert an EIP-155 chain identifier such as ``"eip155:1"`` to its numeric id.

    Raises:
        InvalidFormatError: not exactly ``<namespace>:<id>``, wrong namespace, or empty id.
        InvalidNumberError: the id part is not a base-10 integer.
    """
    parts = eip155_chain_id.split(":")
    if len(parts) != 2 or parts[0] != NAMESPACE or not parts[1]:
        raise InvalidFormatError(f"Invalid EIP155 chain ID format: {eip155_chain_id!r}")

    digits = parts[1]
    # int() would also accept whitespace, underscores and non-ASCII digits
    unsigned = digits[1:] if digits.startswith("-") else digits
    if not unsigned.isascii() or not unsigned.isdigit():
        raise InvalidNumberError(f"Invalid chain ID number: {digits!r}")
    return int(digits, 10)


def get_eip155_from_chain_id(chain_id: int) -> str:
    return f"{NAMESPACE}:{chain_id}"
