"""Aori: flat chain and token arrays, fetched concurrently. No decimals published."""

import asyncio

from bridgeindex.domain.enums import ProviderName
from bridgeindex.domain.models import ProviderResponse
from bridgeindex.providers.base import ProviderAdapter, UpstreamModel, build_chain, build_token

CHAINS_URL = "https://api.aori.io/chains"
TOKENS_URL = "https://api.aori.io/tokens"


class AoriChain(UpstreamModel):
    chain_key: str
    chain_id: int
    eid: int
    address: str


class AoriToken(UpstreamModel):
    symbol: str
    address: str
    chain_id: int
    chain_key: str


class AoriAdapter(ProviderAdapter):
    name = ProviderName.AORI.value

    async def _fetch(self) -> ProviderResponse:
        raw_chains, raw_tokens = await asyncio.gather(
            self._get(CHAINS_URL, list[AoriChain]),
            self._get(TOKENS_URL, list[AoriToken]),
        )
        chains = [build_chain(c.chain_id, c.chain_key) for c in raw_chains]
        tokens = [
            build_token(chain_id=t.chain_id, address=t.address, symbol=t.symbol, name=t.symbol)
            for t in raw_tokens
        ]
        return ProviderResponse(chains=chains, tokens=tokens)
