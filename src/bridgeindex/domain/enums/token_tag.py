from enum import Enum


class TokenTag(str, Enum):
    """Semantic tags assigned by the token categorizer."""

    LIQUIDITY_POOL = "liquidity-pool"
    GOVERNANCE = "governance"
    WRAPPED = "wrapped"
    NATIVE = "native"
    STABLECOIN = "stablecoin"
    BRIDGED = "bridged"
    DERIVATIVE = "derivative"  # reserved, never assigned by categorize_token
    REBASING = "rebasing"
    YIELD_BEARING = "yield-bearing"
