"""Curated metadata for non-EVM chains the public registries describe poorly.

Entries here are authoritative: the storage writer prefers them over
provider-reported fields, and ``is_evm_chain`` reads ``vm_type`` from them.
"""

from bridgeindex.domain.enums import ChainType, VmType
from bridgeindex.domain.models import ChainMetadata, Explorer, NativeCurrency

# Across's Solana ID; other providers' Solana IDs are mapped onto it
SOLANA_CHAIN_ID = 34268394551451

CANONICAL_CHAIN_METADATA: dict[int, ChainMetadata] = {
    SOLANA_CHAIN_ID: ChainMetadata(
        chain_id=SOLANA_CHAIN_ID,
        name="Solana",
        short_name="sol",
        chain_type=ChainType.MAINNET,
        vm_type=VmType.SVM.value,
        native_currency=NativeCurrency(name="Solana", symbol="SOL", decimals=9),
        icon="https://icons.llamao.fi/icons/chains/rsz_solana.jpg",
        info_url="https://solana.com",
        explorers=[
            Explorer(name="Solscan", url="https://solscan.io", standard="none"),
            Explorer(name="Solana Explorer", url="https://explorer.solana.com", standard="none"),
        ],
        rpc=["https://api.mainnet-beta.solana.com"],
    ),
}


def get_canonical_metadata(chain_id: int) -> ChainMetadata | None:
    return CANONICAL_CHAIN_METADATA.get(chain_id)


def has_canonical_metadata(chain_id: int) -> bool:
    return chain_id in CANONICAL_CHAIN_METADATA
