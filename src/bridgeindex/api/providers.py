from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from bridgeindex.api.deps import get_db
from bridgeindex.api.schemas.providers import FetchAttemptResponse, ProviderDetail, ProviderStatus, ProviderStatusList
from bridgeindex.db.repos.fetch_repo import ProviderFetchRepo
from bridgeindex.db.repos.token_repo import TokenRepo
from bridgeindex.providers.metadata import PROVIDER_INFO, ProviderInfo, get_provider_info

router = APIRouter(prefix="/api/providers", tags=["providers"])

DbDep = Annotated[AsyncSession, Depends(get_db)]


def _to_status(info: ProviderInfo, summary: dict | None, token_count: int) -> ProviderStatus:
    summary = summary or {}
    latest = summary.get("latest")
    return ProviderStatus(
        **info.model_dump(),
        total_fetches=summary.get("total_fetches", 0),
        successful_fetches=summary.get("successful_fetches", 0),
        success_rate=summary.get("success_rate", 0.0),
        token_count=token_count,
        latest_fetch=FetchAttemptResponse.model_validate(latest) if latest is not None else None,
    )


@router.get("", response_model=ProviderStatusList)
async def list_providers(db: DbDep) -> ProviderStatusList:
    summaries = await ProviderFetchRepo(db).provider_summaries()
    token_counts = await TokenRepo(db).count_by_provider()
    return ProviderStatusList(
        providers=[
            _to_status(info, summaries.get(name), token_counts.get(name, 0))
            for name, info in PROVIDER_INFO.items()
        ]
    )


@router.get("/{provider_name}", response_model=ProviderDetail)
async def get_provider(provider_name: str, db: DbDep, limit: int = 20) -> ProviderDetail:
    info = get_provider_info(provider_name)
    if info is None:
        raise HTTPException(status_code=404, detail=f"Unknown provider: {provider_name}")

    fetch_repo = ProviderFetchRepo(db)
    summaries = await fetch_repo.provider_summaries()
    token_counts = await TokenRepo(db).count_by_provider()
    recent = await fetch_repo.list_for_provider(info.name, limit=limit)

    status = _to_status(info, summaries.get(info.name), token_counts.get(info.name, 0))
    return ProviderDetail(
        **status.model_dump(),
        recent_fetches=[FetchAttemptResponse.model_validate(f) for f in recent],
    )
