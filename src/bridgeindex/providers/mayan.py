"""Mayan: token lists keyed by chain name, with Wormhole chain IDs."""

import logging
import re
from typing import Optional

from pydantic import Field

from bridgeindex.domain.enums import ProviderName
from bridgeindex.domain.models import ProviderResponse, TokenData
from bridgeindex.providers.base import ProviderAdapter, UpstreamModel, build_chain, build_token

logger = logging.getLogger(__name__)

TOKENS_URL = "https://price-api.mayan.finance/v3/tokens"

NON_EVM_CHAIN_NAMES = frozenset({
    "solana",
    "aptos",
    "sui",
    "ton",
    "tron",
    "cosmos",
    "osmosis",
    "injective",
    "sei",
})

# Wormhole chain ID -> EVM chain ID
WORMHOLE_TO_EVM: dict[int, int] = {
    2: 1,  # Ethereum
    4: 56,  # BSC
    5: 137,  # Polygon
    6: 43114,  # Avalanche
    10: 250,  # Fantom
    23: 42161,  # Arbitrum
    24: 10,  # Optimism
    30: 8453,  # Base
}

EVM_ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")


class MayanToken(UpstreamModel):
    name: str
    symbol: str
    mint: Optional[str] = None
    contract: Optional[str] = None
    chain_id: Optional[int] = None
    w_chain_id: Optional[int] = None
    decimals: int
    logo_uri: Optional[str] = Field(None, alias="logoURI")


def resolve_chain_id(token: MayanToken) -> int | None:
    """EVM chain ID for a token: translated Wormhole ID first, then the plain chainId."""
    if token.w_chain_id:
        return WORMHOLE_TO_EVM.get(token.w_chain_id)
    return token.chain_id or None


class MayanAdapter(ProviderAdapter):
    name = ProviderName.MAYAN.value

    async def _fetch(self) -> ProviderResponse:
        response: dict[str, list[MayanToken]] = await self._get(TOKENS_URL, dict[str, list[MayanToken]])

        seen_chain_ids: set[int] = set()
        tokens: list[TokenData] = []
        for chain_name, chain_tokens in response.items():
            if chain_name.lower() in NON_EVM_CHAIN_NAMES:
                continue

            for token in chain_tokens:
                # ``mint`` is the Solana-side address; only the EVM contract is usable here
                if not token.contract or not EVM_ADDRESS_RE.match(token.contract):
                    continue
                chain_id = resolve_chain_id(token)
                if not chain_id:
                    continue

                seen_chain_ids.add(chain_id)
                tokens.append(
                    build_token(
                        chain_id=chain_id,
                        address=token.contract,
                        symbol=token.symbol,
                        name=token.name,
                        decimals=token.decimals,
                        logo_uri=token.logo_uri,
                    )
                )

        chains = [build_chain(chain_id, f"Chain {chain_id}") for chain_id in sorted(seen_chain_ids)]
        return ProviderResponse(chains=chains, tokens=tokens)
