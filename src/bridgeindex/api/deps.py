from typing import AsyncGenerator

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from bridgeindex.config import Settings
from bridgeindex.container import Container
from bridgeindex.ingestion.orchestrator import FetchOrchestrator


@inject
async def get_db(
    session_factory: async_sessionmaker[AsyncSession] = Depends(Provide[Container.session_factory]),
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@inject
def get_settings(settings: Settings = Depends(Provide[Container.settings])) -> Settings:
    return settings


@inject
def get_orchestrator(
    orchestrator: FetchOrchestrator = Depends(Provide[Container.orchestrator]),
) -> FetchOrchestrator:
    return orchestrator
