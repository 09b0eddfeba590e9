"""Address normalization rules shared by every provider adapter."""

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
EEEE_ADDRESS = "0xeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeee"

NATIVE_SENTINELS = frozenset({ZERO_ADDRESS, EEEE_ADDRESS})


def normalize_address(address: str, is_evm: bool = True) -> str:
    """Normalize address: lowercase for EVM hex, preserve case otherwise (Solana base58 is case-sensitive)."""
    if not is_evm:
        return address.strip()
    return address.lower().strip()


def is_native_token(address: str) -> bool:
    """True for the two placeholder addresses token lists use for the gas token. EVM only."""
    return normalize_address(address, True) in NATIVE_SENTINELS


def normalize_native_address(address: str) -> str:
    """Collapse both native sentinels onto the zero address. EVM only."""
    if is_native_token(address):
        return ZERO_ADDRESS
    return normalize_address(address, True)
