"""Block explorer links for tokens and addresses."""

from typing import Any, Optional, Sequence

from bridgeindex.aggregation.chain_mapping import is_evm_chain, normalize_chain_id
from bridgeindex.chains.canonical_metadata import SOLANA_CHAIN_ID

# Fallbacks for chains whose stored row has no explorers yet
WELL_KNOWN_EXPLORERS: dict[int, str] = {
    1: "https://etherscan.io",
    10: "https://optimistic.etherscan.io",
    56: "https://bscscan.com",
    137: "https://polygonscan.com",
    250: "https://ftmscan.com",
    8453: "https://basescan.org",
    42161: "https://arbiscan.io",
    42220: "https://celoscan.io",
    43114: "https://snowtrace.io",
    SOLANA_CHAIN_ID: "https://solscan.io",
}


def explorer_base_url(chain_id: int, explorers: Optional[Sequence[Any]] = None) -> str | None:
    """First stored explorer (dicts or objects with ``url``), else the well-known table."""
    if explorers:
        first = explorers[0]
        url = first.get("url") if isinstance(first, dict) else getattr(first, "url", None)
        if url:
            return url.rstrip("/")
    return WELL_KNOWN_EXPLORERS.get(normalize_chain_id(chain_id))


def token_explorer_url(chain_id: int, address: str, explorers: Optional[Sequence[Any]] = None) -> str | None:
    base = explorer_base_url(chain_id, explorers)
    if base is None:
        return None
    return f"{base}/token/{address}"


def address_explorer_url(chain_id: int, address: str, explorers: Optional[Sequence[Any]] = None) -> str | None:
    base = explorer_base_url(chain_id, explorers)
    if base is None:
        return None
    path = "address" if is_evm_chain(chain_id) else "account"
    return f"{base}/{path}/{address}"
