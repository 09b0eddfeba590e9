"""Persists one provider's normalized response.

A provider run is written in two transactions. The first inserts the fetch
attempt, the provider's chains and its support links, and commits at once
so other providers never wait on those chain rows. The second upserts the
tokens in batches. If the first fails a failed attempt is recorded in a
fresh session; if the second fails the committed attempt is marked failed.
"""

import logging
from typing import Any, Iterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from bridgeindex.chains.canonical_metadata import get_canonical_metadata
from bridgeindex.db.repos.chain_repo import ChainRepo
from bridgeindex.db.repos.fetch_repo import ProviderFetchRepo
from bridgeindex.db.repos.token_repo import TokenRepo
from bridgeindex.domain.models import ChainData, TokenData
from bridgeindex.exceptions import StorageError

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 500


def chain_row(chain: ChainData) -> dict[str, Any]:
    """Insert values for a chain, preferring curated canonical metadata over the provider's view."""
    canonical = get_canonical_metadata(chain.id)
    if canonical is None:
        return {
            "chain_id": chain.id,
            "name": chain.name,
            "native_currency_name": chain.native_currency.name,
            "native_currency_symbol": chain.native_currency.symbol,
            "native_currency_decimals": chain.native_currency.decimals,
            "vm_type": chain.vm_type,
            "short_name": None,
            "chain_type": None,
            "icon": None,
            "info_url": None,
            "explorers": None,
            "rpc": None,
        }
    return {
        "chain_id": chain.id,
        "name": canonical.name,
        "native_currency_name": canonical.native_currency.name,
        "native_currency_symbol": canonical.native_currency.symbol,
        "native_currency_decimals": canonical.native_currency.decimals,
        "vm_type": canonical.vm_type,
        "short_name": canonical.short_name,
        "chain_type": canonical.chain_type.value,
        "icon": canonical.icon,
        "info_url": canonical.info_url,
        "explorers": [e.model_dump() for e in canonical.explorers] if canonical.explorers else None,
        "rpc": canonical.rpc,
    }


def token_row(token: TokenData) -> dict[str, Any]:
    return {
        "chain_id": token.chain_id,
        "address": token.address,
        "symbol": token.symbol,
        "name": token.name,
        "decimals": token.decimals,
        "logo_uri": token.logo_uri,
        "tags": [tag.value for tag in token.tags],
        "raw_data": token.model_dump(mode="json"),
    }


def unique_chains(chains: list[ChainData]) -> list[ChainData]:
    """First occurrence of each chain ID, in input order."""
    seen: dict[int, ChainData] = {}
    for chain in chains:
        seen.setdefault(chain.id, chain)
    return list(seen.values())


def dedupe_tokens(tokens: list[TokenData]) -> list[TokenData]:
    """Unique on (chain_id, address); the last occurrence wins."""
    by_key: dict[tuple[int, str], TokenData] = {}
    for token in tokens:
        by_key[(token.chain_id, token.address)] = token
    return list(by_key.values())


def chunked(items: list, size: int) -> Iterator[list]:
    for start in range(0, len(items), size):
        yield items[start:start + size]


class ProviderStorageWriter:
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> None:
        self._session_factory = session_factory
        self._batch_size = batch_size

    async def store(self, provider: str, chains: list[ChainData], tokens: list[TokenData]) -> int:
        """Persist a successful fetch and return its fetch attempt ID.

        The attempt, chains and support links commit first in a short
        transaction; tokens follow in a second one. Chains are inserted in
        ascending ID order so concurrent providers touch shared rows in the
        same sequence.
        """
        try:
            fetch_id = await self._store_chains(provider, chains, len(tokens))
        except Exception as e:
            logger.exception("[%s] Failed to store chains", provider)
            try:
                await self.record_failure(provider, str(e))
            except Exception:
                logger.exception("[%s] Could not record the failed fetch attempt", provider)
            raise StorageError(provider, f"Failed to store provider data: {e}") from e

        try:
            batches = await self._store_tokens(provider, tokens, fetch_id)
        except Exception as e:
            logger.exception("[%s] Failed to store tokens", provider)
            try:
                await self._mark_failed(fetch_id, str(e))
            except Exception:
                logger.exception("[%s] Could not mark fetch attempt %d as failed", provider, fetch_id)
            raise StorageError(provider, f"Failed to store provider data: {e}") from e

        logger.info(
            "[%s] Stored %d chains and %d tokens in %d batches (fetch_id=%d)",
            provider,
            len(chains),
            len(tokens),
            batches,
            fetch_id,
        )
        return fetch_id

    async def _store_chains(self, provider: str, chains: list[ChainData], tokens_count: int) -> int:
        async with self._session_factory() as session:
            async with session.begin():
                fetch_id = await ProviderFetchRepo(session).insert_fetch_attempt(
                    provider,
                    success=True,
                    chains_count=len(chains),
                    tokens_count=tokens_count,
                )

                chain_repo = ChainRepo(session)
                ordered = sorted(unique_chains(chains), key=lambda c: c.id)
                await chain_repo.upsert_chains([chain_row(c) for c in ordered])
                await chain_repo.link_chain_provider_support([c.id for c in ordered], provider, fetch_id)
        return fetch_id

    async def _store_tokens(self, provider: str, tokens: list[TokenData], fetch_id: int) -> int:
        batches = 0
        async with self._session_factory() as session:
            async with session.begin():
                token_repo = TokenRepo(session)
                for batch in chunked(tokens, self._batch_size):
                    rows = [token_row(t) for t in dedupe_tokens(batch)]
                    await token_repo.upsert_tokens(provider, rows, fetch_id)
                    batches += 1
        return batches

    async def _mark_failed(self, fetch_id: int, error_message: str) -> None:
        async with self._session_factory() as session:
            async with session.begin():
                await ProviderFetchRepo(session).mark_failed(fetch_id, error_message)

    async def record_failure(self, provider: str, error_message: str) -> int:
        async with self._session_factory() as session:
            async with session.begin():
                return await ProviderFetchRepo(session).insert_fetch_attempt(
                    provider,
                    success=False,
                    error_message=error_message,
                )
