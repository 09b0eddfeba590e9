import logging
from typing import Any

import httpx

from bridgeindex.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


class JsonHttpClient:
    """Async HTTP client for public JSON GET endpoints with a fixed per-request timeout."""

    def __init__(self, timeout: float = 30.0, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._client = httpx.AsyncClient(timeout=timeout, follow_redirects=True, transport=transport)

    async def get(self, url: str, params: dict | None = None) -> httpx.Response:
        return await self._client.get(url, params=params)

    async def get_json(self, url: str, params: dict | None = None) -> Any:
        """GET ``url`` and decode the body. Every failure surfaces as ExternalServiceError."""
        logger.debug("GET %s", url)
        try:
            resp = await self.get(url, params=params)
        except httpx.HTTPError as e:
            raise ExternalServiceError(f"Failed to fetch {url}: {e!r}") from e

        if resp.status_code >= 400:
            raise ExternalServiceError(f"Failed to fetch {url}: HTTP {resp.status_code}")

        try:
            return resp.json()
        except ValueError as e:  # malformed JSON or a body that is not valid UTF-8
            raise ExternalServiceError(f"Invalid JSON from {url}: {e}") from e

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "JsonHttpClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
