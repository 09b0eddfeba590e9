"""Eco Routes: no public listing API, so supported stablecoins are kept as a static table."""

from bridgeindex.domain.enums import ProviderName
from bridgeindex.domain.models import ProviderResponse
from bridgeindex.providers.base import ProviderAdapter, build_chain, build_token

ECO_CHAINS: dict[int, str] = {
    1: "Ethereum",
    10: "Optimism",
    130: "Unichain",
    137: "Polygon",
    146: "Sonic",
    480: "World Chain",
    8453: "Base",
    42161: "Arbitrum",
    42220: "Celo",
    57073: "Ink",
}

# symbol -> (name, {chain_id: address}); every token uses 6 decimals
ECO_TOKENS: dict[str, tuple[str, dict[int, str]]] = {
    "USDC": (
        "USD Coin",
        {
            1: "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
            10: "0x0b2c639c533813f4aa9d7837caf62653d097ff85",
            130: "0x078D782b760474a361dDA0AF3839290b0EF57AD6",
            137: "0x3c499c542cEF5E3811e1192ce70d8cC03d5c3359",
            146: "0x29219dd400f2Bf60E5a23d13Be72B486D4038894",
            480: "0x79A02482A880bCE3F13e09Da970dC34db4CD24d1",
            8453: "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913",
            42161: "0xaf88d065e77c8cc2239327c5edb3a432268e5831",
            42220: "0xcebA9300f2b948710d2653dD7B07f33A8B32118C",
        },
    ),
    "USDT": (
        "Tether USD",
        {
            1: "0xdac17f958d2ee523a2206206994597c13d831ec7",
            10: "0x94b008aA00579c1307B0EF2c499aD98a8ce58e58",
            137: "0xc2132d05d31c914a87c6611c10748aeb04b58e8f",
            42220: "0x48065fbBE25f71C9282ddf5e1cD6D6A887483D5e",
        },
    ),
    "USDCe": (
        "Bridged USDC",
        {
            10: "0x7F5c764cBc14f9669B88837ca1490cCa17c31607",
            137: "0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174",
            42161: "0xff970a61a04b1ca14834a43f5de4533ebddb5cc8",
            57073: "0xF1815bd50389c46847f0Bda824eC8da914045D14",
        },
    ),
    "USDbC": (
        "USD Base Coin",
        {
            8453: "0xd9aAEc86B65D86f6A7B5B1b0c42FFA531710b6CA",
        },
    ),
    "oUSDT": (
        "Omni USDT",
        {
            1: "0x1217bfe6c773eec6cc4a38b5dc45b92292b6e189",
            10: "0x1217bfe6c773eec6cc4a38b5dc45b92292b6e189",
            8453: "0x1217bfe6c773eec6cc4a38b5dc45b92292b6e189",
        },
    ),
    "USDT0": (
        "USDT0",
        {
            130: "0x9151434b16b9763660705744891fA906F660EcC5",
            42161: "0xfd086bc7cd5c481dcc9c85ebe478a1c0b69fcbb9",
            57073: "0x0200C29006150606B650577BBE7B6248F58470c1",
        },
    ),
}

ECO_TOKEN_DECIMALS = 6


class EcoAdapter(ProviderAdapter):
    name = ProviderName.ECO.value

    async def _fetch(self) -> ProviderResponse:
        chains = [build_chain(chain_id, name) for chain_id, name in ECO_CHAINS.items()]
        tokens = [
            build_token(
                chain_id=chain_id,
                address=address,
                symbol=symbol,
                name=name,
                decimals=ECO_TOKEN_DECIMALS,
            )
            for symbol, (name, addresses) in ECO_TOKENS.items()
            for chain_id, address in addresses.items()
        ]
        return ProviderResponse(chains=chains, tokens=tokens)
