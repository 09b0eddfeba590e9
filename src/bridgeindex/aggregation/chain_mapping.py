"""Chain ID canonicalization.

EVM chain IDs agree across providers. Non-EVM networks do not: each provider
invents its own ID for Solana, so those are folded onto one canonical ID here
before anything is stored.
"""

from bridgeindex.chains.canonical_metadata import SOLANA_CHAIN_ID, get_canonical_metadata
from bridgeindex.domain.enums import VmType

CHAIN_ID_NORMALIZATION: dict[int, int] = {
    501474: SOLANA_CHAIN_ID,  # GasZip
    792703809: SOLANA_CHAIN_ID,  # Relay
    1360108768460801: SOLANA_CHAIN_ID,  # Butter
}


def normalize_chain_id(chain_id: int) -> int:
    return CHAIN_ID_NORMALIZATION.get(chain_id, chain_id)


def requires_normalization(chain_id: int) -> bool:
    return chain_id in CHAIN_ID_NORMALIZATION


def get_provider_chain_ids(canonical_chain_id: int) -> list[int]:
    """All provider-specific IDs that fold onto ``canonical_chain_id``."""
    return [provider_id for provider_id, canonical in CHAIN_ID_NORMALIZATION.items() if canonical == canonical_chain_id]


def is_evm_chain(chain_id: int) -> bool:
    """Whether addresses on this chain follow EVM (case-insensitive hex) rules.

    Only chains with curated canonical metadata are known to be non-EVM.
    Anything unrecognized is assumed to be EVM; a new non-EVM chain without a
    canonical entry will have its addresses lowercased.
    """
    canonical = get_canonical_metadata(normalize_chain_id(chain_id))
    if canonical is not None:
        return canonical.vm_type == VmType.EVM.value
    return True
