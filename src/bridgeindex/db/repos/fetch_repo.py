from typing import Optional

from sqlalchemy import case, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from bridgeindex.db.models.provider_fetch import ProviderFetch


class ProviderFetchRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert_fetch_attempt(
        self,
        provider: str,
        success: bool,
        chains_count: Optional[int] = None,
        tokens_count: Optional[int] = None,
        error_message: Optional[str] = None,
    ) -> int:
        fetch = ProviderFetch(
            provider_name=provider,
            success=success,
            chains_count=chains_count,
            tokens_count=tokens_count,
            error_message=error_message,
        )
        self._session.add(fetch)
        await self._session.flush()
        return fetch.id

    async def mark_failed(self, fetch_id: int, error_message: str) -> None:
        """Flip a committed attempt to failed when a later write step for it fails."""
        await self._session.execute(
            update(ProviderFetch)
            .where(ProviderFetch.id == fetch_id)
            .values(success=False, error_message=error_message)
            .execution_options(synchronize_session=False)
        )

    async def get_by_id(self, fetch_id: int) -> Optional[ProviderFetch]:
        result = await self._session.execute(select(ProviderFetch).where(ProviderFetch.id == fetch_id))
        return result.scalar_one_or_none()

    async def list_for_provider(self, provider: str, limit: int = 20) -> list[ProviderFetch]:
        result = await self._session.execute(
            select(ProviderFetch)
            .where(ProviderFetch.provider_name == provider)
            .order_by(ProviderFetch.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def provider_summaries(self) -> dict[str, dict]:
        """Attempt totals and the latest attempt per provider, keyed by provider name."""
        totals_result = await self._session.execute(
            select(
                ProviderFetch.provider_name,
                func.count(ProviderFetch.id),
                func.sum(case((ProviderFetch.success.is_(True), 1), else_=0)),
                func.max(ProviderFetch.id),
            ).group_by(ProviderFetch.provider_name)
        )
        rows = totals_result.all()
        if not rows:
            return {}

        latest_ids = [row[3] for row in rows]
        latest_result = await self._session.execute(select(ProviderFetch).where(ProviderFetch.id.in_(latest_ids)))
        latest_by_id = {f.id: f for f in latest_result.scalars().all()}

        summaries: dict[str, dict] = {}
        for provider_name, total, successes, latest_id in rows:
            successes = int(successes or 0)
            summaries[provider_name] = {
                "total_fetches": total,
                "successful_fetches": successes,
                "success_rate": round(successes / total, 4) if total else 0.0,
                "latest": latest_by_id.get(latest_id),
            }
        return summaries
