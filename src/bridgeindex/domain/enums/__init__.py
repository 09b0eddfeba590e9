from bridgeindex.domain.enums.chain import ChainType, VmType
from bridgeindex.domain.enums.provider import ProviderName
from bridgeindex.domain.enums.token_tag import TokenTag

__all__ = [
    "ChainType",
    "ProviderName",
    "TokenTag",
    "VmType",
]
