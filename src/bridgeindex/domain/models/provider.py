"""Normalized shapes every provider adapter maps its upstream data into."""

from typing import Optional

from pydantic import BaseModel, Field

from bridgeindex.domain.enums import TokenTag

UNKNOWN = "Unknown"


class NativeCurrency(BaseModel):
    name: str
    symbol: str
    decimals: int


def unknown_native_currency() -> NativeCurrency:
    """Placeholder for providers that do not describe the gas token (storage columns are NOT NULL)."""
    return NativeCurrency(name=UNKNOWN, symbol=UNKNOWN, decimals=18)


class ChainData(BaseModel):
    id: int
    name: str
    native_currency: NativeCurrency = Field(default_factory=unknown_native_currency)
    vm_type: Optional[str] = None  # only some providers report it
    explorer_url: Optional[str] = None


class TokenData(BaseModel):
    address: str
    symbol: str
    name: str
    decimals: Optional[int] = None  # None when the provider does not publish it
    chain_id: int
    logo_uri: Optional[str] = None
    tags: list[TokenTag] = Field(default_factory=list)


class ProviderResponse(BaseModel):
    chains: list[ChainData] = Field(default_factory=list)
    tokens: list[TokenData] = Field(default_factory=list)
