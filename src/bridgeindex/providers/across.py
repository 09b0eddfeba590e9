"""Across: separate chain and token endpoints, fetched concurrently."""

import asyncio
from typing import Optional

from bridgeindex.domain.enums import ProviderName
from bridgeindex.domain.models import ChainData, ProviderResponse
from bridgeindex.providers.base import ProviderAdapter, UpstreamModel, build_chain, build_token

CHAINS_URL = "https://across.to/api/swap/chains"
TOKENS_URL = "https://across.to/api/swap/tokens"


class AcrossChain(UpstreamModel):
    chain_id: int
    name: str


class AcrossToken(UpstreamModel):
    address: str
    symbol: str
    name: str
    decimals: int
    chain_id: int
    logo_url: Optional[str] = None


class AcrossAdapter(ProviderAdapter):
    name = ProviderName.ACROSS.value

    async def _fetch(self) -> ProviderResponse:
        raw_chains, raw_tokens = await asyncio.gather(
            self._get(CHAINS_URL, list[AcrossChain]),
            self._get(TOKENS_URL, list[AcrossToken]),
        )

        # the chains endpoint repeats entries
        chains: dict[int, ChainData] = {}
        for chain in raw_chains:
            if chain.chain_id not in chains:
                chains[chain.chain_id] = build_chain(chain.chain_id, chain.name)

        tokens = [
            build_token(
                chain_id=token.chain_id,
                address=token.address,
                symbol=token.symbol,
                name=token.name,
                decimals=token.decimals,
                logo_uri=token.logo_url,
            )
            for token in raw_tokens
        ]
        return ProviderResponse(chains=list(chains.values()), tokens=tokens)
