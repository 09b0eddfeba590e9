from bridgeindex.db.models.chain import Chain, ChainProviderSupport
from bridgeindex.db.models.provider_fetch import ProviderFetch
from bridgeindex.db.models.token import Token

__all__ = [
    "Chain",
    "ChainProviderSupport",
    "ProviderFetch",
    "Token",
]
