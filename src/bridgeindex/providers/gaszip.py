"""Gas.zip: refuel-only, so each mainnet chain yields exactly one native gas token."""

from bridgeindex.aggregation.normalize import ZERO_ADDRESS
from bridgeindex.domain.enums import ProviderName
from bridgeindex.domain.models import NativeCurrency, ProviderResponse
from bridgeindex.providers.base import ProviderAdapter, UpstreamModel, build_chain, build_token

CHAINS_URL = "https://backend.gas.zip/v2/chains"


class GasZipChain(UpstreamModel):
    name: str
    chain: int
    symbol: str
    decimals: int
    mainnet: bool


class GasZipChainsResponse(UpstreamModel):
    chains: list[GasZipChain]


class GasZipAdapter(ProviderAdapter):
    name = ProviderName.GASZIP.value

    async def _fetch(self) -> ProviderResponse:
        response: GasZipChainsResponse = await self._get(CHAINS_URL, GasZipChainsResponse)
        mainnets = [c for c in response.chains if c.mainnet]

        chains = [
            build_chain(
                c.chain,
                c.name,
                NativeCurrency(name=c.symbol, symbol=c.symbol, decimals=c.decimals),
            )
            for c in mainnets
        ]
        tokens = [
            build_token(
                chain_id=c.chain,
                address=ZERO_ADDRESS,
                symbol=c.symbol,
                name=c.symbol,
                decimals=c.decimals,
            )
            for c in mainnets
        ]
        return ProviderResponse(chains=chains, tokens=tokens)
