"""Heuristic token categorization from symbol, name and address.

Each category is checked independently against both the symbol and the name,
so a token can carry several tags or none. Most patterns are
case-insensitive. The bridged/governance prefix patterns (``veCRV``,
``axlUSDC``) are case-sensitive: the lowercase prefix must be followed by an
uppercase letter, so ``soUSDC`` matches and ``SOL`` does not.
"""

import re

from bridgeindex.aggregation.normalize import is_native_token
from bridgeindex.domain.enums import TokenTag

_I = re.IGNORECASE


def _compile(*patterns: str | tuple[str, int]) -> tuple[re.Pattern[str], ...]:
    compiled = []
    for pattern in patterns:
        if isinstance(pattern, tuple):
            compiled.append(re.compile(pattern[0], pattern[1]))
        else:
            compiled.append(re.compile(pattern))
    return tuple(compiled)


LIQUIDITY_POOL_PATTERNS = _compile(
    (r"uni-?v2", _I),
    (r"slp$", _I),
    (r"^lp-", _I),
    (r"-lp$", _I),
    (r"pendle-?lpt", _I),
    (r"spt-?pt/ibt", _I),
    (r"laminar-?v2", _I),
    (r"cake-?lp", _I),
    (r"balancer", _I),
    (r"bpt$", _I),
    (r"^v2-", _I),
    (r"liquidity", _I),
)

GOVERNANCE_PATTERNS = _compile(
    (r"^voted?-", _I),
    r"^ve[A-Z]",
    (r"^escrowed-", _I),
    (r"^xve", _I),
    (r"voting", _I),
    (r"^vlcvx", _I),
    r"^sd[A-Z]",  # Stake DAO
)

WRAPPED_PATTERNS = _compile(
    (r"^w[a-z]{3,4}$", _I),  # WETH, WBTC, WMATIC
    (r"^wrapped\s", _I),
    (r"\swrapped$", _I),
)

STABLECOIN_PATTERNS = _compile(
    (r"^usdc", _I),
    (r"^usdt", _I),
    (r"^dai$", _I),
    (r"^busd", _I),
    (r"^tusd", _I),
    (r"^usdp", _I),
    (r"^frax$", _I),
    (r"^lusd", _I),
    (r"^gusd", _I),
    (r"^susd", _I),
    (r"^mim$", _I),
    (r"^ust$", _I),
    (r"^euroc", _I),
    (r"^eurt", _I),
    (r"^ageur", _I),
)

BRIDGED_PATTERNS = _compile(
    (r"\.e$", _I),  # USDC.e
    r"^ce[A-Z]",  # Celer
    r"^any[A-Z]",  # Multichain
    r"^axl[A-Z]",  # Axelar
    r"^so[A-Z]",  # Synapse
    (r"\.so$", _I),
    (r"bridged", _I),
)

REBASING_PATTERNS = _compile(
    (r"^r[a-z]{3,5}$", _I),  # rETH
    (r"^st[a-z]{3,4}$", _I),  # stETH, stMATIC
    (r"rebase", _I),
    (r"ampleforth", _I),
    (r"^ampl$", _I),
)

YIELD_BEARING_PATTERNS = _compile(
    (r"^ib[a-z]", _I),
    (r"^ay[a-z]", _I),
    (r"^cy[a-z]", _I),
    (r"yield", _I),
    (r"earning", _I),
    (r"interest", _I),
)


def _matches_any(patterns: tuple[re.Pattern[str], ...], symbol: str, name: str) -> bool:
    return any(p.search(symbol) or p.search(name) for p in patterns)


def categorize_token(symbol: str, name: str, address: str) -> list[TokenTag]:
    """Return the tags that apply to a token, in a stable order."""
    symbol = symbol.strip()
    name = name.strip()

    checks = (
        (TokenTag.LIQUIDITY_POOL, _matches_any(LIQUIDITY_POOL_PATTERNS, symbol, name)),
        (TokenTag.GOVERNANCE, _matches_any(GOVERNANCE_PATTERNS, symbol, name)),
        (TokenTag.WRAPPED, _matches_any(WRAPPED_PATTERNS, symbol, name)),
        (TokenTag.NATIVE, is_native_token(address)),
        (TokenTag.STABLECOIN, _matches_any(STABLECOIN_PATTERNS, symbol, name)),
        (TokenTag.BRIDGED, _matches_any(BRIDGED_PATTERNS, symbol, name)),
        (TokenTag.REBASING, _matches_any(REBASING_PATTERNS, symbol, name)),
        (TokenTag.YIELD_BEARING, _matches_any(YIELD_BEARING_PATTERNS, symbol, name)),
    )
    return [tag for tag, matched in checks if matched]
