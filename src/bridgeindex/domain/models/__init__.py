from bridgeindex.domain.models.chain_metadata import ChainMetadata, Explorer, Feature
from bridgeindex.domain.models.fetch import EnrichmentSummary, FetchRunSummary, ProviderFetchResult
from bridgeindex.domain.models.provider import (
    ChainData,
    NativeCurrency,
    ProviderResponse,
    TokenData,
    unknown_native_currency,
)

__all__ = [
    "ChainData",
    "ChainMetadata",
    "EnrichmentSummary",
    "Explorer",
    "Feature",
    "FetchRunSummary",
    "NativeCurrency",
    "ProviderFetchResult",
    "ProviderResponse",
    "TokenData",
    "unknown_native_currency",
]
