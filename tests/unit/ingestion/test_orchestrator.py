import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from bridgeindex.domain.enums import ProviderName
from bridgeindex.domain.models import EnrichmentSummary, ProviderFetchResult
from bridgeindex.exceptions import ProviderError, StorageError
from bridgeindex.ingestion.orchestrator import FetchOrchestrator


def _adapter(name: str) -> MagicMock:
    adapter = MagicMock()
    adapter.name = name
    return adapter


def _pipeline(failing: dict[str, Exception]) -> AsyncMock:
    pipeline = AsyncMock()

    async def run(adapter):
        await asyncio.sleep(0)
        if adapter.name in failing:
            raise failing[adapter.name]
        return ProviderFetchResult(provider=adapter.name, success=True, chains_count=2, tokens_count=5)

    pipeline.run.side_effect = run
    return pipeline


def _enricher(summary: EnrichmentSummary | None = None, error: Exception | None = None) -> AsyncMock:
    enricher = AsyncMock()
    if error is not None:
        enricher.enrich_chains.side_effect = error
    else:
        enricher.enrich_chains.return_value = summary or EnrichmentSummary(enriched_count=3, total_chains=900)
    return enricher


ALL_PROVIDERS = [p.value for p in ProviderName]


class TestFetchOrchestrator:
    async def test_one_failure_does_not_abort_others(self):
        adapters = [_adapter(name) for name in ALL_PROVIDERS]
        pipeline = _pipeline({"mayan": ProviderError("mayan", "Fetch operation failed: timeout")})
        enricher = _enricher()

        summary = await FetchOrchestrator(adapters, pipeline, enricher).run_full_fetch()

        assert summary.total == 12
        assert summary.successes == 11
        assert summary.failures == 1
        assert summary.exit_code == 1
        assert [r.provider for r in summary.results] == ALL_PROVIDERS
        failed = next(r for r in summary.results if not r.success)
        assert failed.provider == "mayan"
        assert "timeout" in failed.error
        assert summary.enrichment == EnrichmentSummary(enriched_count=3, total_chains=900)
        enricher.enrich_chains.assert_awaited_once()
        assert pipeline.run.await_count == 12

    async def test_all_succeed(self):
        adapters = [_adapter("relay"), _adapter("eco")]
        summary = await FetchOrchestrator(adapters, _pipeline({}), _enricher()).run_full_fetch()

        assert summary.failures == 0
        assert summary.exit_code == 0
        assert all(r.chains_count == 2 and r.tokens_count == 5 for r in summary.results)
        assert summary.duration_ms >= 0

    async def test_all_fail_still_returns_summary(self):
        adapters = [_adapter("relay"), _adapter("lifi")]
        pipeline = _pipeline({
            "relay": ProviderError("relay", "Fetch operation failed: HTTP 500"),
            "lifi": StorageError("lifi", "Failed to store provider data: disk full"),
        })
        enricher = _enricher()

        summary = await FetchOrchestrator(adapters, pipeline, enricher).run_full_fetch()

        assert summary.successes == 0
        assert summary.failures == 2
        assert summary.exit_code == 1
        assert summary.results[1].error == "[lifi] Failed to store provider data: disk full"
        enricher.enrich_chains.assert_awaited_once()

    async def test_enrichment_failure_is_not_fatal(self):
        adapters = [_adapter("across")]
        enricher = _enricher(error=RuntimeError("registry unreachable"))

        summary = await FetchOrchestrator(adapters, _pipeline({}), enricher).run_full_fetch()

        assert summary.enrichment is None
        assert summary.successes == 1
        assert summary.exit_code == 0

    async def test_cancellation_propagates(self):
        adapters = [_adapter("across")]
        pipeline = _pipeline({"across": asyncio.CancelledError()})

        with pytest.raises(asyncio.CancelledError):
            await FetchOrchestrator(adapters, pipeline, _enricher()).run_full_fetch()
