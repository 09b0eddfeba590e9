"""Hand-maintained corrections applied on top of the merged registry catalog."""

from typing import Any

from bridgeindex.domain.models import ChainMetadata, Explorer

# chain_id -> fields replacing the registry's values
MANUAL_OVERRIDES: dict[int, dict[str, Any]] = {
    # HyperEVM: the registries list no usable explorer
    999: {
        "explorers": [Explorer(name="Hypurrscan", url="https://hypurrscan.io", standard="EIP3091")],
    },
}


def apply_manual_override(metadata: ChainMetadata) -> ChainMetadata:
    override = MANUAL_OVERRIDES.get(metadata.chain_id)
    if override is None:
        return metadata
    return metadata.model_copy(update=override)
