"""Provider adapter contract and the mapping helpers all twelve adapters share."""

import logging
from abc import ABC, abstractmethod
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic.alias_generators import to_camel

from bridgeindex.aggregation.categorize import categorize_token
from bridgeindex.aggregation.chain_mapping import is_evm_chain
from bridgeindex.aggregation.normalize import normalize_address, normalize_native_address
from bridgeindex.domain.models import ChainData, NativeCurrency, ProviderResponse, TokenData, unknown_native_currency
from bridgeindex.exceptions import ProviderError
from bridgeindex.infra.http.json_client import JsonHttpClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UpstreamModel(BaseModel):
    """Base for upstream response shapes: camelCase on the wire, unknown fields ignored."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ProviderAdapter(ABC):
    """Fetches one provider's upstream data and maps it into chains + tokens.

    Subclasses implement ``_fetch``. Any error escaping it is logged and
    re-raised as ProviderError so the caller only ever sees one error type
    per provider.
    """

    name: str

    def __init__(self, http_client: JsonHttpClient | None = None) -> None:
        self._http = http_client

    async def fetch(self) -> ProviderResponse:
        try:
            return await self._fetch()
        except ProviderError:
            raise
        except Exception as e:
            logger.error("[%s] Fetch failed: %s", self.name, e)
            raise ProviderError(self.name, f"Fetch operation failed: {e}") from e

    @abstractmethod
    async def _fetch(self) -> ProviderResponse:
        """Provider-specific retrieval, validation and mapping."""

    async def _get(self, url: str, shape: Any, params: dict | None = None) -> Any:
        """GET ``url`` and validate the body against ``shape`` (a model or a typing expression)."""
        if self._http is None:
            raise ProviderError(self.name, "No HTTP client configured")
        raw = await self._http.get_json(url, params=params)
        return decode(shape, raw)


def decode(shape: type[T] | Any, raw: Any) -> T:
    """Validate raw JSON against an upstream shape. Raises pydantic.ValidationError."""
    return TypeAdapter(shape).validate_python(raw)


def parse_chain_id(value: int | str | None) -> int | None:
    """Parse a chain ID given as an int, a decimal string or a 0x-prefixed hex string."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = value.strip()
    try:
        if text.lower().startswith("0x"):
            return int(text, 16)
        return int(text, 10)
    except ValueError:
        return None


def strip_nul(value: str) -> str:
    """Remove embedded NUL characters, which PostgreSQL text columns reject."""
    return value.replace("\x00", "")


def build_chain(
    chain_id: int,
    name: str,
    native_currency: NativeCurrency | None = None,
    vm_type: str | None = None,
) -> ChainData:
    return ChainData(
        id=chain_id,
        name=name,
        native_currency=native_currency or unknown_native_currency(),
        vm_type=vm_type,
    )


def build_token(
    *,
    chain_id: int,
    address: str,
    symbol: str,
    name: str,
    decimals: int | None = None,
    logo_uri: str | None = None,
) -> TokenData:
    """Normalize the address for the chain's VM type, then categorize."""
    is_evm = is_evm_chain(chain_id)
    normalized = normalize_native_address(address) if is_evm else normalize_address(address, False)
    return TokenData(
        address=normalized,
        symbol=symbol,
        name=name,
        decimals=decimals,
        chain_id=chain_id,
        logo_uri=logo_uri,
        tags=categorize_token(symbol, name, normalized),
    )
