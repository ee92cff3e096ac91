"""Pydantic v2 models for the name-lookup request/response contract.

Field names are snake_case in Python; the host's camelCase names are aliases
and are what ``model_dump(by_alias=True)`` emits.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PROTOCOL = "ZNS"


class LookupRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    chain_id: str = Field(alias="chainId", description="EIP-155 chain identifier, e.g. eip155:137")
    domain: str | None = None
    address: str | None = None


class ResolvedAddress(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    resolved_address: str = Field(alias="resolvedAddress")
    protocol: Literal["ZNS"] = PROTOCOL
    domain_name: str = Field(alias="domainName")


class LookupResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    resolved_addresses: list[ResolvedAddress] = Field(alias="resolvedAddresses")

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
