"""deBridge DLN: chain list plus one token-list request per chain.

The per-chain requests are issued all at once. A chain whose token list
cannot be fetched contributes no tokens; the other chains still succeed.
"""

import asyncio
import logging
import re
from typing import Optional

from pydantic import Field, ValidationError

from bridgeindex.domain.enums import ProviderName
from bridgeindex.domain.models import ProviderResponse, TokenData
from bridgeindex.exceptions import ExternalServiceError
from bridgeindex.providers.base import ProviderAdapter, UpstreamModel, build_chain, build_token

logger = logging.getLogger(__name__)

CHAINS_URL = "https://dln.debridge.finance/v1.0/supported-chains-info"
TOKENS_URL = "https://dln.debridge.finance/v1.0/token-list"

# Solana, Tron and other non-EVM networks deBridge lists under internal IDs
NON_EVM_CHAIN_IDS = frozenset({7565164, 100000026, 100000027, 100000029})

EVM_ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")


class DebridgeChain(UpstreamModel):
    chain_id: int
    original_chain_id: Optional[int] = None
    chain_name: str


class DebridgeChainsResponse(UpstreamModel):
    chains: list[DebridgeChain]


class DebridgeToken(UpstreamModel):
    symbol: Optional[str] = None
    name: Optional[str] = None
    decimals: Optional[int] = None
    address: str
    logo_uri: Optional[str] = Field(None, alias="logoURI")


class DebridgeTokensResponse(UpstreamModel):
    tokens: dict[str, DebridgeToken]


class DebridgeAdapter(ProviderAdapter):
    name = ProviderName.DEBRIDGE.value

    async def _fetch(self) -> ProviderResponse:
        response: DebridgeChainsResponse = await self._get(CHAINS_URL, DebridgeChainsResponse)
        evm_chains = [c for c in response.chains if c.chain_id not in NON_EVM_CHAIN_IDS]

        chains = [build_chain(c.original_chain_id or c.chain_id, c.chain_name) for c in evm_chains]
        per_chain = await asyncio.gather(*(self._fetch_chain_tokens(c) for c in evm_chains))

        tokens = [token for chain_tokens in per_chain for token in chain_tokens]
        return ProviderResponse(chains=chains, tokens=tokens)

    async def _fetch_chain_tokens(self, chain: DebridgeChain) -> list[TokenData]:
        try:
            response: DebridgeTokensResponse = await self._get(
                TOKENS_URL, DebridgeTokensResponse, params={"chainId": chain.chain_id}
            )
        except (ExternalServiceError, ValidationError) as e:
            logger.warning("[%s] Failed to fetch tokens for chain %s: %s", self.name, chain.chain_id, e)
            return []

        chain_id = chain.original_chain_id or chain.chain_id
        tokens: list[TokenData] = []
        for token in response.tokens.values():
            if not token.symbol or not token.name or token.decimals is None:
                continue
            if not EVM_ADDRESS_RE.match(token.address):
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
        return tokens
