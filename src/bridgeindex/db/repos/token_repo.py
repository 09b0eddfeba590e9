from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from bridgeindex.db.models.token import Token
from bridgeindex.db.repos.dialect import upsert_insert


class TokenRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def upsert_tokens(self, provider: str, rows: list[dict[str, Any]], fetch_id: int) -> None:
        """Insert or refresh tokens keyed on (provider, chain_id, address).

        ``rows`` must already be unique on (chain_id, address); PostgreSQL
        rejects a statement that touches the same conflict target twice.
        """
        if not rows:
            return
        values = [{**row, "provider_name": provider, "fetch_id": fetch_id} for row in rows]
        insert = upsert_insert(self._session, Token)
        stmt = insert.values(values).on_conflict_do_update(
            index_elements=[Token.provider_name, Token.chain_id, Token.address],
            set_={
                "symbol": insert.excluded.symbol,
                "name": insert.excluded.name,
                "decimals": insert.excluded.decimals,
                "logo_uri": insert.excluded.logo_uri,
                "tags": insert.excluded.tags,
                "fetch_id": insert.excluded.fetch_id,
                "raw_data": insert.excluded.raw_data,
            },
        )
        await self._session.execute(stmt)

    async def list_for_provider(self, provider: str, chain_id: int | None = None) -> list[Token]:
        query = select(Token).where(Token.provider_name == provider)
        if chain_id is not None:
            query = query.where(Token.chain_id == chain_id)
        result = await self._session.execute(query.order_by(Token.chain_id, Token.address))
        return list(result.scalars().all())

    async def count_by_provider(self) -> dict[str, int]:
        result = await self._session.execute(
            select(Token.provider_name, func.count(Token.id)).group_by(Token.provider_name)
        )
        return {provider: count for provider, count in result.all()}
