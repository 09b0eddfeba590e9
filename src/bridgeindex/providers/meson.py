"""Meson: one listing of chains, each with its token IDs; chain IDs are usually hex strings."""

import logging
from typing import Optional

from bridgeindex.domain.enums import ProviderName
from bridgeindex.domain.models import ChainData, ProviderResponse, TokenData
from bridgeindex.providers.base import ProviderAdapter, UpstreamModel, build_chain, build_token, parse_chain_id

logger = logging.getLogger(__name__)

LIST_URL = "https://relayer.meson.fi/api/v1/list"


class MesonToken(UpstreamModel):
    id: str
    addr: Optional[str] = None


class MesonChain(UpstreamModel):
    id: str
    name: str
    chain_id: int | str
    tokens: list[MesonToken]


class MesonListResponse(UpstreamModel):
    result: list[MesonChain]


class MesonAdapter(ProviderAdapter):
    name = ProviderName.MESON.value

    async def _fetch(self) -> ProviderResponse:
        response: MesonListResponse = await self._get(LIST_URL, MesonListResponse)

        chains: list[ChainData] = []
        tokens: list[TokenData] = []
        for chain in response.result:
            chain_id = parse_chain_id(chain.chain_id)
            if chain_id is None:
                logger.debug("[%s] Skipping %s: unparsable chainId %r", self.name, chain.id, chain.chain_id)
                continue
            chains.append(build_chain(chain_id, chain.name))

            for token in chain.tokens:
                # native-only entries have no contract address
                if not token.addr:
                    continue
                symbol = token.id.upper()
                tokens.append(build_token(chain_id=chain_id, address=token.addr, symbol=symbol, name=symbol))

        return ProviderResponse(chains=chains, tokens=tokens)
