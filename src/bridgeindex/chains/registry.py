"""Client for the public chain registries used to enrich stored chains.

Two catalogs are merged: chainid.network (complete, always required) and
chainlist.org (fresher RPC and explorer data, best effort). chainlist
entries win on conflict; testnets are dropped from both.
"""

import asyncio
import logging
from typing import Any, Optional

from pydantic import Field, ValidationError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from bridgeindex.chains.manual_overrides import apply_manual_override
from bridgeindex.domain.enums import ChainType
from bridgeindex.domain.models import ChainMetadata, Explorer, Feature, NativeCurrency
from bridgeindex.exceptions import ChainRegistryError, ExternalServiceError
from bridgeindex.infra.http.json_client import JsonHttpClient
from bridgeindex.providers.base import UpstreamModel, decode

logger = logging.getLogger(__name__)

CHAINLIST_URL = "https://chainlist.org/rpcs.json"
CHAINID_NETWORK_URL = "https://chainid.network/chains.json"

TESTNET_KEYWORDS = (
    "testnet",
    "test net",
    "sepolia",
    "goerli",
    "ropsten",
    "rinkeby",
    "kovan",
    "mumbai",
    "fuji",
    "chapel",
    "sandbox",
)


class RegistryNativeCurrency(UpstreamModel):
    name: str
    symbol: str
    decimals: int


class RegistryIcon(UpstreamModel):
    url: str
    format: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


class RegistryExplorer(UpstreamModel):
    name: str
    url: str
    standard: Optional[str] = None


class RegistryFeature(UpstreamModel):
    name: str


class RegistryEns(UpstreamModel):
    registry: Optional[str] = None


class RegistryRpc(UpstreamModel):
    url: str
    tracking: Optional[str] = None
    is_open_source: Optional[bool] = None


class RegistryChain(UpstreamModel):
    """Fields both catalogs share."""

    name: str
    chain: str
    icon: Optional[str | RegistryIcon] = None
    faucets: Optional[str | list[str]] = None
    native_currency: RegistryNativeCurrency
    info_url: Optional[str] = Field(None, alias="infoURL")
    short_name: str
    chain_id: int
    network_id: Optional[int] = None
    slip44: Optional[int] = None
    ens: Optional[RegistryEns] = None
    explorers: Optional[list[RegistryExplorer]] = None
    features: Optional[list[str | RegistryFeature]] = None
    status: Optional[str] = None

    @property
    def flagged_testnet(self) -> bool:
        return False

    def rpc_urls(self) -> list[str]:
        return []


class ChainlistChain(RegistryChain):
    is_testnet: bool = False
    rpc: list[RegistryRpc | str] = Field(default_factory=list)
    chain_slug: Optional[str] = None
    tvl: Optional[float] = None

    @property
    def flagged_testnet(self) -> bool:
        return self.is_testnet

    def rpc_urls(self) -> list[str]:
        return [r.url if isinstance(r, RegistryRpc) else r for r in self.rpc]


class ChainIdNetworkChain(RegistryChain):
    testnet: Optional[bool] = None
    rpc: list[str] = Field(default_factory=list)

    @property
    def flagged_testnet(self) -> bool:
        return bool(self.testnet)

    def rpc_urls(self) -> list[str]:
        return list(self.rpc)


def is_testnet(name: str, flagged: bool = False) -> bool:
    if flagged:
        return True
    lowered = name.lower()
    return any(keyword in lowered for keyword in TESTNET_KEYWORDS)


def usable_rpc_urls(urls: list[str]) -> list[str]:
    """HTTP(S) endpoints only; templated URLs needing an API key are dropped."""
    return [url for url in urls if url.startswith("http") and "${" not in url]


def to_chain_metadata(chain: RegistryChain) -> ChainMetadata:
    icon = chain.icon.url if isinstance(chain.icon, RegistryIcon) else chain.icon
    faucets = [chain.faucets] if isinstance(chain.faucets, str) else chain.faucets
    features = None
    if chain.features is not None:
        features = [Feature(name=f if isinstance(f, str) else f.name) for f in chain.features]
    explorers = None
    if chain.explorers is not None:
        explorers = [Explorer(name=e.name, url=e.url, standard=e.standard or "unknown") for e in chain.explorers]
    ens = {"registry": chain.ens.registry} if chain.ens and chain.ens.registry else None

    return ChainMetadata(
        chain_id=chain.chain_id,
        name=chain.name,
        short_name=chain.short_name,
        chain_type=ChainType.TESTNET if is_testnet(chain.name, chain.flagged_testnet) else ChainType.MAINNET,
        native_currency=NativeCurrency(**chain.native_currency.model_dump()),
        icon=icon,
        info_url=chain.info_url,
        explorers=explorers,
        rpc=usable_rpc_urls(chain.rpc_urls()),
        faucets=faucets,
        ens=ens,
        features=features,
    )


def parse_catalog(raw: Any, model: type[RegistryChain]) -> list[ChainMetadata]:
    """Validate entries one by one. Malformed entries are skipped, a non-list body raises."""
    items = decode(list[dict[str, Any]], raw)
    parsed: list[ChainMetadata] = []
    skipped = 0
    for item in items:
        try:
            parsed.append(to_chain_metadata(model.model_validate(item)))
        except ValidationError:
            skipped += 1
    if skipped:
        logger.debug("Skipped %d malformed %s entries", skipped, model.__name__)
    return parsed


class ChainRegistry:
    def __init__(self, http_client: JsonHttpClient) -> None:
        self._http = http_client
        self._merged: dict[int, ChainMetadata] | None = None

    @retry(
        retry=retry_if_exception_type(ExternalServiceError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=5),
        reraise=True,
    )
    async def _get_catalog(self, url: str) -> Any:
        return await self._http.get_json(url)

    async def fetch_primary(self) -> list[ChainMetadata]:
        """chainlist.org catalog, or an empty list if it cannot be loaded."""
        try:
            raw = await self._get_catalog(CHAINLIST_URL)
            return parse_catalog(raw, ChainlistChain)
        except (ExternalServiceError, ValidationError) as e:
            logger.warning("Primary chain registry unavailable, using fallback only: %s", e)
            return []

    async def fetch_fallback(self) -> list[ChainMetadata]:
        try:
            raw = await self._get_catalog(CHAINID_NETWORK_URL)
            return parse_catalog(raw, ChainIdNetworkChain)
        except (ExternalServiceError, ValidationError) as e:
            raise ChainRegistryError(f"Failed to load fallback chain registry: {e}") from e

    async def fetch_all(self) -> list[ChainMetadata]:
        """Merged mainnet catalog: fallback seeds, primary overwrites, manual overrides last."""
        primary, fallback = await asyncio.gather(self.fetch_primary(), self.fetch_fallback())

        merged: dict[int, ChainMetadata] = {}
        for source in (fallback, primary):
            for metadata in source:
                if metadata.chain_type == ChainType.MAINNET:
                    merged[metadata.chain_id] = metadata

        logger.info(
            "Chain registry: %d mainnets (%d primary, %d fallback entries)",
            len(merged),
            len(primary),
            len(fallback),
        )
        catalog = [apply_manual_override(metadata) for metadata in merged.values()]
        self._merged = {metadata.chain_id: metadata for metadata in catalog}
        return catalog

    async def fetch_by_chain_id(self, chain_id: int, refresh: bool = False) -> ChainMetadata | None:
        """Look up one chain in the last merged catalog, loading it first if needed or asked to."""
        if self._merged is None or refresh:
            await self.fetch_all()
        return self._merged.get(chain_id)
