from typing import Any, Optional

from pydantic import BaseModel


class ChainResponse(BaseModel):
    chain_id: int
    name: str
    native_currency_name: str
    native_currency_symbol: str
    native_currency_decimals: int
    short_name: Optional[str] = None
    chain_type: Optional[str] = None
    vm_type: Optional[str] = None
    icon: Optional[str] = None
    info_url: Optional[str] = None
    explorers: Optional[list[dict[str, Any]]] = None
    rpc: Optional[list[str]] = None
    explorer_url: Optional[str] = None
    providers: list[str] = []

    model_config = {"from_attributes": True}


class TokenResponse(BaseModel):
    provider_name: str
    chain_id: int
    address: str
    symbol: str
    name: str
    decimals: Optional[int] = None
    logo_uri: Optional[str] = None
    tags: list[str] = []
    explorer_url: Optional[str] = None

    model_config = {"from_attributes": True}


class TokenList(BaseModel):
    tokens: list[TokenResponse]
    total: int
