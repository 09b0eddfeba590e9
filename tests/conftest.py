from typing import Any, Callable
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from bridgeindex.db.session import Base
from bridgeindex.exceptions import ExternalServiceError
import bridgeindex.db.models  # noqa: F401  register all models


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
async def engine():
    eng = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest.fixture()
async def session(engine) -> AsyncSession:
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as sess:
        yield sess


@pytest.fixture()
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture()
def fake_http() -> Callable[[dict[str, Any]], AsyncMock]:
    """Build an HTTP client mock whose ``get_json`` answers by URL.

    A route value may be a payload, an exception instance (raised), or a
    callable taking ``params`` and returning either.
    """

    def build(routes: dict[str, Any]) -> AsyncMock:
        http = AsyncMock()

        async def get_json(url, params=None):
            if url not in routes:
                raise ExternalServiceError(f"Failed to fetch {url}: HTTP 404")
            answer = routes[url]
            if callable(answer):
                answer = answer(params)
            if isinstance(answer, Exception):
                raise answer
            return answer

        http.get_json.side_effect = get_json
        return http

    return build
