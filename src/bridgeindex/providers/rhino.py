"""Rhino.fi: bridge configs keyed by chain, each with a symbol -> token map."""

import logging
from typing import Optional

from bridgeindex.domain.enums import ProviderName
from bridgeindex.domain.models import ChainData, ProviderResponse, TokenData
from bridgeindex.providers.base import ProviderAdapter, UpstreamModel, build_chain, build_token, parse_chain_id

logger = logging.getLogger(__name__)

CONFIGS_URL = "https://api.rhino.fi/bridge/configs"


class RhinoToken(UpstreamModel):
    token: Optional[str] = None
    address: str
    decimals: Optional[int] = None


class RhinoChainConfig(UpstreamModel):
    name: str
    network_id: int | str
    tokens: Optional[dict[str, RhinoToken]] = None


class RhinoAdapter(ProviderAdapter):
    name = ProviderName.RHINO.value

    async def _fetch(self) -> ProviderResponse:
        configs: dict[str, RhinoChainConfig] = await self._get(CONFIGS_URL, dict[str, RhinoChainConfig])

        chains: list[ChainData] = []
        tokens: list[TokenData] = []
        for key, config in configs.items():
            chain_id = parse_chain_id(config.network_id) if config.network_id else None
            if chain_id is None:
                logger.debug("[%s] Skipping config %r without a numeric networkId", self.name, key)
                continue
            chains.append(build_chain(chain_id, config.name))

            for symbol, token in (config.tokens or {}).items():
                if not token.address:
                    continue
                tokens.append(
                    build_token(
                        chain_id=chain_id,
                        address=token.address,
                        symbol=symbol,
                        name=token.token or symbol,
                        decimals=token.decimals,
                    )
                )

        return ProviderResponse(chains=chains, tokens=tokens)
