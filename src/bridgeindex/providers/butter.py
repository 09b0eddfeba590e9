"""Butter Network: chain list plus paged token lists for a fixed set of major networks."""

import asyncio
import logging
from typing import Optional

from pydantic import ValidationError

from bridgeindex.domain.enums import ProviderName
from bridgeindex.domain.models import ChainData, NativeCurrency, ProviderResponse, TokenData
from bridgeindex.exceptions import ExternalServiceError
from bridgeindex.providers.base import ProviderAdapter, UpstreamModel, build_chain, build_token, parse_chain_id

logger = logging.getLogger(__name__)

CHAINS_URL = "https://bs-tokens-api.chainservice.io/api/queryChainList"
TOKENS_URL = "https://bs-tokens-api.chainservice.io/api/queryTokenList"

MAJOR_NETWORKS = ("ethereum", "binance-smart-chain", "polygon", "arbitrum", "optimism")
MAX_CONCURRENT_REQUESTS = 5
PAGE_SIZE = 100


class ButterChain(UpstreamModel):
    chain_id: int | str
    name: str
    coin: str


class ButterChainList(UpstreamModel):
    chains: list[ButterChain]


class ButterChainsResponse(UpstreamModel):
    code: int
    data: ButterChainList


class ButterToken(UpstreamModel):
    chain_id: int | str
    address: str
    name: str
    symbol: str
    decimals: int
    image: Optional[str] = None


class ButterTokenPage(UpstreamModel):
    results: list[ButterToken]
    count: int


class ButterTokensResponse(UpstreamModel):
    code: int
    data: ButterTokenPage


class ButterAdapter(ProviderAdapter):
    name = ProviderName.BUTTER.value

    async def _fetch(self) -> ProviderResponse:
        response: ButterChainsResponse = await self._get(CHAINS_URL, ButterChainsResponse)

        chains: list[ChainData] = []
        for chain in response.data.chains:
            chain_id = parse_chain_id(chain.chain_id)
            if chain_id is None:
                logger.debug("[%s] Skipping %s: unparsable chainId %r", self.name, chain.name, chain.chain_id)
                continue
            native = NativeCurrency(name=chain.coin, symbol=chain.coin, decimals=18)
            chains.append(build_chain(chain_id, chain.name, native))

        semaphore = asyncio.Semaphore(MAX_CONCURRENT_REQUESTS)
        per_network = await asyncio.gather(
            *(self._fetch_network_tokens(network, semaphore) for network in MAJOR_NETWORKS)
        )
        tokens = [token for network_tokens in per_network for token in network_tokens]
        return ProviderResponse(chains=chains, tokens=tokens)

    async def _fetch_network_tokens(self, network: str, semaphore: asyncio.Semaphore) -> list[TokenData]:
        async with semaphore:
            try:
                response: ButterTokensResponse = await self._get(
                    TOKENS_URL, ButterTokensResponse, params={"network": network, "pageSize": PAGE_SIZE}
                )
            except (ExternalServiceError, ValidationError) as e:
                logger.warning("[%s] Failed to fetch tokens for network %s: %s", self.name, network, e)
                return []

        tokens: list[TokenData] = []
        for token in response.data.results:
            chain_id = parse_chain_id(token.chain_id)
            if chain_id is None:
                continue
            tokens.append(
                build_token(
                    chain_id=chain_id,
                    address=token.address,
                    symbol=token.symbol,
                    name=token.name,
                    decimals=token.decimals,
                    logo_uri=token.image,
                )
            )
        return tokens
