"""Static descriptive information about each bridge provider, served by the status endpoint."""

from typing import Optional

from pydantic import BaseModel, Field

from bridgeindex.domain.enums import ProviderName


class ProviderInfo(BaseModel):
    name: str
    display_name: str
    description: str
    website: Optional[str] = None
    docs: Optional[str] = None
    api_endpoint: Optional[str] = None
    notes: list[str] = Field(default_factory=list)


PROVIDER_INFO: dict[str, ProviderInfo] = {
    ProviderName.RELAY.value: ProviderInfo(
        name=ProviderName.RELAY.value,
        display_name="Relay",
        description="Cross-chain bridge protocol supporting both EVM and non-EVM chains",
        website="https://relay.link",
        docs="https://docs.relay.link/references/api/get-chains",
        api_endpoint="https://api.relay.link/chains",
        notes=[
            "Tokens come from each chain's solver currencies",
            "Chains without nativeCurrency get placeholder values",
        ],
    ),
    ProviderName.LIFI.value: ProviderInfo(
        name=ProviderName.LIFI.value,
        display_name="LiFi",
        description="Multi-chain liquidity aggregation protocol with the widest chain coverage",
        website="https://li.fi",
        docs="https://docs.li.fi/api-reference/fetch-all-known-tokens",
        api_endpoint="https://li.quest/v1/tokens",
        notes=[
            "Large dataset stored in batches",
            "NUL bytes are stripped from symbol, name and logo",
            "No chains endpoint; chains are inferred from the token map keys",
        ],
    ),
    ProviderName.ACROSS.value: ProviderInfo(
        name=ProviderName.ACROSS.value,
        display_name="Across",
        description="Optimistic bridge protocol focused on L2 rollups",
        website="https://across.to",
        docs="https://docs.across.to/reference/api-reference",
        api_endpoint="https://across.to/api",
        notes=[
            "Chains and tokens are fetched from separate endpoints in parallel",
            "Logos come from logoUrl rather than logoURI",
        ],
    ),
    ProviderName.STARGATE.value: ProviderInfo(
        name=ProviderName.STARGATE.value,
        display_name="Stargate",
        description="Omnichain liquidity transport protocol powered by LayerZero",
        website="https://stargate.finance",
        docs="https://docs.stargate.finance/developers/api-docs/overview",
        api_endpoint="https://stargate.finance/api/v1",
        notes=[
            "Token chainKey strings are resolved to numeric chain IDs",
            "EVM chains only",
        ],
    ),
    ProviderName.DEBRIDGE.value: ProviderInfo(
        name=ProviderName.DEBRIDGE.value,
        display_name="deBridge",
        description="Cross-chain interoperability protocol with the largest token catalog",
        website="https://debridge.finance",
        docs="https://docs.debridge.com/api-reference/utils/get-v10supported-chains-info",
        api_endpoint="https://dln.debridge.finance/v1.0",
        notes=[
            "Tokens are fetched per chain",
            "Non-EVM chains (Solana, Tron, Sei, Injective) are excluded",
            "Token addresses must be 0x-prefixed 40-hex-digit EVM addresses",
        ],
    ),
    ProviderName.MAYAN.value: ProviderInfo(
        name=ProviderName.MAYAN.value,
        display_name="Mayan",
        description="Solana-focused bridge connecting SVM and EVM ecosystems",
        website="https://mayan.finance",
        docs="https://docs.mayan.finance/integration/quote-api#supported-tokens",
        api_endpoint="https://price-api.mayan.finance/v3/tokens",
        notes=[
            "Wormhole chain IDs are translated to EVM chain IDs (2 -> 1 for Ethereum)",
            "Non-EVM chains are excluded by name",
            "EVM addresses come from 'contract', not 'mint'",
        ],
    ),
    ProviderName.RHINO.value: ProviderInfo(
        name=ProviderName.RHINO.value,
        display_name="Rhino.fi",
        description="Layer 2 focused bridge and trading platform",
        website="https://rhino.fi",
        docs="https://docs.rhino.fi/api-reference/configs/configs-chains-&-tokens",
        api_endpoint="https://api.rhino.fi/bridge/configs",
        notes=[
            "Chains are keyed by name with a nested token map",
            "The token map key is used as the symbol",
            "Decimals are optional",
        ],
    ),
    ProviderName.GASZIP.value: ProviderInfo(
        name=ProviderName.GASZIP.value,
        display_name="GasZip",
        description="Native gas token provider covering 160+ chains",
        website="https://gas.zip",
        docs="https://dev.gas.zip/gas/api/chains",
        api_endpoint="https://backend.gas.zip/v2/chains",
        notes=[
            "Native gas tokens only",
            "Mainnets only",
            "Native tokens are stored at the zero address",
        ],
    ),
    ProviderName.AORI.value: ProviderInfo(
        name=ProviderName.AORI.value,
        display_name="Aori",
        description="High-performance orderbook DEX with LayerZero integration",
        website="https://aori.io",
        docs="https://docs.aori.io/reference/chains",
        api_endpoint="https://api.aori.io",
        notes=[
            "No token names or decimals; the symbol doubles as the name",
            "chainKey is used as the chain name",
        ],
    ),
    ProviderName.ECO.value: ProviderInfo(
        name=ProviderName.ECO.value,
        display_name="Eco",
        description="Stablecoin-focused protocol with curated token support",
        website="https://eco.com",
        docs="https://eco.com/docs/getting-started/routes/chain-support",
        api_endpoint=None,
        notes=[
            "Static data, no API",
            "USDC, USDT, USDCe, USDbC, oUSDT and USDT0 across 10 chains",
        ],
    ),
    ProviderName.MESON.value: ProviderInfo(
        name=ProviderName.MESON.value,
        display_name="Meson",
        description="Stablecoin swap protocol optimized for low slippage",
        website="https://meson.fi",
        docs="https://meson.dev/api/endpoints/list-chains",
        api_endpoint="https://relayer.meson.fi/api/v1/list",
        notes=[
            "Chain IDs are hex (0x prefix) or decimal strings",
            "No token names or decimals; the uppercased id is the symbol",
            "Tokens without an address are skipped",
        ],
    ),
    ProviderName.BUTTER.value: ProviderInfo(
        name=ProviderName.BUTTER.value,
        display_name="Butter",
        description="Token list service with curated multi-chain coverage",
        website="https://butternetwork.io",
        docs="https://docs.butternetwork.io/butter-swap-integration/integration-guide",
        api_endpoint="https://bs-tokens-api.chainservice.io/api",
        notes=[
            "Paged token API, 100 per page",
            "Only Ethereum, BSC, Polygon, Arbitrum and Optimism token lists are fetched",
            "At most 5 token-list requests in flight",
        ],
    ),
}


def get_provider_info(provider_name: str) -> ProviderInfo | None:
    return PROVIDER_INFO.get(provider_name.lower())
