"""Descriptive chain metadata merged from the external chain registries."""

from typing import Optional

from pydantic import BaseModel

from bridgeindex.domain.enums import ChainType
from bridgeindex.domain.models.provider import NativeCurrency


class Explorer(BaseModel):
    name: str
    url: str
    standard: str = "unknown"


class Feature(BaseModel):
    name: str


class ChainMetadata(BaseModel):
    chain_id: int
    name: str
    short_name: str
    chain_type: ChainType
    native_currency: NativeCurrency
    icon: Optional[str] = None
    info_url: Optional[str] = None
    explorers: Optional[list[Explorer]] = None
    rpc: Optional[list[str]] = None
    faucets: Optional[list[str]] = None
    ens: Optional[dict[str, str]] = None
    features: Optional[list[Feature]] = None
    vm_type: Optional[str] = None  # set only for curated canonical entries
