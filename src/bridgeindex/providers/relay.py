"""Relay: one endpoint listing chains with their solver currencies inline."""

import logging
from typing import Optional

from pydantic import Field

from bridgeindex.domain.enums import ProviderName
from bridgeindex.domain.models import ChainData, NativeCurrency, ProviderResponse, TokenData
from bridgeindex.providers.base import ProviderAdapter, UpstreamModel, build_chain, build_token, parse_chain_id

logger = logging.getLogger(__name__)

CHAINS_URL = "https://api.relay.link/chains"


class RelayCurrency(UpstreamModel):
    address: str
    symbol: str
    name: str
    decimals: int
    logo_uri: Optional[str] = Field(None, alias="logoURI")


class RelayNativeCurrency(UpstreamModel):
    name: str
    symbol: str
    decimals: int


class RelayChain(UpstreamModel):
    id: int | str
    name: str
    display_name: Optional[str] = None
    vm_type: Optional[str] = None
    native_currency: Optional[RelayNativeCurrency] = None
    solver_currencies: Optional[list[RelayCurrency]] = None


class RelayChainsResponse(UpstreamModel):
    chains: list[RelayChain]


class RelayAdapter(ProviderAdapter):
    name = ProviderName.RELAY.value

    async def _fetch(self) -> ProviderResponse:
        response: RelayChainsResponse = await self._get(CHAINS_URL, RelayChainsResponse)

        chains: list[ChainData] = []
        tokens: list[TokenData] = []
        for chain in response.chains:
            chain_id = parse_chain_id(chain.id)
            if chain_id is None:
                logger.warning("[%s] Skipping chain with unparsable id %r", self.name, chain.id)
                continue

            native = None
            if chain.native_currency is not None:
                native = NativeCurrency(**chain.native_currency.model_dump())
            chains.append(build_chain(chain_id, chain.display_name or chain.name, native, chain.vm_type))

            for currency in chain.solver_currencies or []:
                tokens.append(
                    build_token(
                        chain_id=chain_id,
                        address=currency.address,
                        symbol=currency.symbol,
                        name=currency.name,
                        decimals=currency.decimals,
                        logo_uri=currency.logo_uri,
                    )
                )

        return ProviderResponse(chains=chains, tokens=tokens)
