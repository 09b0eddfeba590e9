"""Runs every provider pipeline concurrently, then enriches chains once.

A failing provider never aborts the run: its exception is turned into a
failed ProviderFetchResult and the other providers carry on.
"""

import asyncio
import logging
import time
from typing import Sequence

from bridgeindex.chains.enrichment import ChainEnricher
from bridgeindex.domain.models import EnrichmentSummary, FetchRunSummary, ProviderFetchResult
from bridgeindex.ingestion.pipeline import ProviderPipeline
from bridgeindex.providers.base import ProviderAdapter

logger = logging.getLogger(__name__)


class FetchOrchestrator:
    def __init__(
        self,
        adapters: Sequence[ProviderAdapter],
        pipeline: ProviderPipeline,
        enricher: ChainEnricher,
    ) -> None:
        self._adapters = list(adapters)
        self._pipeline = pipeline
        self._enricher = enricher

    async def run_full_fetch(self) -> FetchRunSummary:
        started = time.monotonic()
        logger.info("Starting full fetch for %d providers", len(self._adapters))

        outcomes = await asyncio.gather(
            *(self._pipeline.run(adapter) for adapter in self._adapters),
            return_exceptions=True,
        )

        results: list[ProviderFetchResult] = []
        for adapter, outcome in zip(self._adapters, outcomes):
            if isinstance(outcome, ProviderFetchResult):
                results.append(outcome)
            elif isinstance(outcome, Exception):
                results.append(ProviderFetchResult(provider=adapter.name, success=False, error=str(outcome)))
            else:
                raise outcome

        successes = sum(1 for r in results if r.success)
        failures = len(results) - successes
        logger.info("Fetch complete: %d succeeded, %d failed", successes, failures)
        for result in results:
            if result.success:
                logger.info("  %s: %d chains, %d tokens", result.provider, result.chains_count, result.tokens_count)
            else:
                logger.error("  %s: FAILED - %s", result.provider, result.error)

        enrichment = await self._enrich()

        return FetchRunSummary(
            results=results,
            total=len(results),
            successes=successes,
            failures=failures,
            enrichment=enrichment,
            duration_ms=int((time.monotonic() - started) * 1000),
        )

    async def _enrich(self) -> EnrichmentSummary | None:
        logger.info("Enriching chain metadata")
        try:
            return await self._enricher.enrich_chains()
        except Exception:
            logger.exception("Chain enrichment failed; provider results are unaffected")
            return None
