"""Stargate: tokens reference chains by string key, resolved through the chains endpoint."""

import asyncio
import logging
from typing import Optional

from pydantic import Field

from bridgeindex.domain.enums import ProviderName, VmType
from bridgeindex.domain.models import ProviderResponse, TokenData
from bridgeindex.providers.base import ProviderAdapter, UpstreamModel, build_chain, build_token

logger = logging.getLogger(__name__)

CHAINS_URL = "https://stargate.finance/api/v1/chains"
TOKENS_URL = "https://stargate.finance/api/v1/tokens"


class StargateChain(UpstreamModel):
    chain_id: int
    name: str
    chain_key: str
    chain_type: str


class StargateChainsResponse(UpstreamModel):
    chains: list[StargateChain]


class StargateToken(UpstreamModel):
    address: str
    symbol: str
    name: str
    decimals: int
    chain_key: str
    logo_uri: Optional[str] = Field(None, alias="logoURI")


class StargateTokensResponse(UpstreamModel):
    tokens: list[StargateToken]


class StargateAdapter(ProviderAdapter):
    name = ProviderName.STARGATE.value

    async def _fetch(self) -> ProviderResponse:
        chains_response, tokens_response = await asyncio.gather(
            self._get(CHAINS_URL, StargateChainsResponse),
            self._get(TOKENS_URL, StargateTokensResponse),
        )

        evm_chains = [c for c in chains_response.chains if c.chain_type == VmType.EVM.value]
        chain_id_by_key = {c.chain_key: c.chain_id for c in evm_chains}
        chains = [build_chain(c.chain_id, c.name, vm_type=c.chain_type) for c in evm_chains]

        tokens: list[TokenData] = []
        dropped = 0
        for token in tokens_response.tokens:
            chain_id = chain_id_by_key.get(token.chain_key)
            if chain_id is None:
                dropped += 1
                continue
            tokens.append(
                build_token(
                    chain_id=chain_id,
                    address=token.address,
                    symbol=token.symbol,
                    name=token.name,
                    decimals=token.decimals,
                    logo_uri=token.logo_uri,
                )
            )
        if dropped:
            logger.debug("[%s] Dropped %d tokens on unknown or non-EVM chain keys", self.name, dropped)

        return ProviderResponse(chains=chains, tokens=tokens)
