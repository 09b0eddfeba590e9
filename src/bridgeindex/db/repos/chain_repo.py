from typing import Any, Iterable, Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from bridgeindex.db.models.chain import Chain, ChainProviderSupport
from bridgeindex.db.repos.dialect import upsert_insert

# Columns the enrichment pass is allowed to overwrite
ENRICHABLE_FIELDS = frozenset({
    "name",
    "short_name",
    "chain_type",
    "icon",
    "info_url",
    "explorers",
    "rpc",
    "faucets",
    "ens",
    "features",
})


class ChainRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def upsert_chains(self, rows: list[dict[str, Any]]) -> None:
        """Insert chains that do not exist yet. Existing rows are left untouched."""
        if not rows:
            return
        stmt = upsert_insert(self._session, Chain).values(rows)
        stmt = stmt.on_conflict_do_nothing(index_elements=[Chain.chain_id])
        await self._session.execute(stmt)

    async def link_chain_provider_support(self, chain_ids: Iterable[int], provider: str, fetch_id: int) -> None:
        """Record that ``provider`` supports each chain, pointing existing links at ``fetch_id``."""
        rows = [
            {"chain_id": chain_id, "provider_name": provider, "fetch_id": fetch_id}
            for chain_id in dict.fromkeys(chain_ids)
        ]
        if not rows:
            return
        insert = upsert_insert(self._session, ChainProviderSupport)
        stmt = insert.values(rows).on_conflict_do_update(
            index_elements=[ChainProviderSupport.chain_id, ChainProviderSupport.provider_name],
            set_={"fetch_id": insert.excluded.fetch_id},
        )
        await self._session.execute(stmt)

    async def update_chain_metadata(self, chain_id: int, fields: dict[str, Any]) -> None:
        unknown = set(fields) - ENRICHABLE_FIELDS
        if unknown:
            raise ValueError(f"Not enrichable: {sorted(unknown)}")
        await self._session.execute(
            update(Chain)
            .where(Chain.chain_id == chain_id)
            .values(**fields, updated_at=func.now())
            .execution_options(synchronize_session=False)
        )

    async def list_known_chain_ids(self) -> list[int]:
        result = await self._session.execute(select(Chain.chain_id).order_by(Chain.chain_id))
        return list(result.scalars().all())

    async def get_by_id(self, chain_id: int) -> Optional[Chain]:
        result = await self._session.execute(select(Chain).where(Chain.chain_id == chain_id))
        return result.scalar_one_or_none()

    async def list_providers_for_chain(self, chain_id: int) -> list[str]:
        result = await self._session.execute(
            select(ChainProviderSupport.provider_name)
            .where(ChainProviderSupport.chain_id == chain_id)
            .order_by(ChainProviderSupport.provider_name)
        )
        return list(result.scalars().all())
