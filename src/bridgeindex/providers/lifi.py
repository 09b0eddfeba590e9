"""LI.FI: a single token list keyed by chain ID; chains are inferred from the keys."""

import logging
from typing import Optional

from pydantic import Field

from bridgeindex.domain.enums import ProviderName
from bridgeindex.domain.models import ChainData, ProviderResponse, TokenData
from bridgeindex.providers.base import ProviderAdapter, UpstreamModel, build_chain, build_token, parse_chain_id, strip_nul

logger = logging.getLogger(__name__)

TOKENS_URL = "https://li.quest/v1/tokens"


class LifiToken(UpstreamModel):
    address: str
    symbol: str
    name: str
    decimals: int
    chain_id: Optional[int] = None
    logo_uri: Optional[str] = Field(None, alias="logoURI")
    price_usd: Optional[str] = Field(None, alias="priceUSD")


class LifiTokensResponse(UpstreamModel):
    tokens: dict[str, list[LifiToken]]


class LifiAdapter(ProviderAdapter):
    name = ProviderName.LIFI.value

    async def _fetch(self) -> ProviderResponse:
        response: LifiTokensResponse = await self._get(TOKENS_URL, LifiTokensResponse)

        chains: list[ChainData] = []
        tokens: list[TokenData] = []
        for key, chain_tokens in response.tokens.items():
            chain_id = parse_chain_id(key)
            if chain_id is None:
                logger.debug("[%s] Skipping non-numeric chain key %r", self.name, key)
                continue
            chains.append(build_chain(chain_id, f"Chain {chain_id}"))

            for token in chain_tokens:
                # some upstream entries carry NUL bytes, which PostgreSQL text rejects
                logo = strip_nul(token.logo_uri) if token.logo_uri else None
                tokens.append(
                    build_token(
                        chain_id=token.chain_id or chain_id,
                        address=token.address,
                        symbol=strip_nul(token.symbol),
                        name=strip_nul(token.name),
                        decimals=token.decimals,
                        logo_uri=logo or None,
                    )
                )

        return ProviderResponse(chains=chains, tokens=tokens)
