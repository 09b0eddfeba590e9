"""Fetch every bridge provider, store the results and enrich chain metadata.

Usage:
    bridgeindex-fetch
    PYTHONPATH=src python -m bridgeindex.jobs.fetch_providers

Exits 1 if any provider failed, so a scheduler can alert on it.
"""

import asyncio
import logging
import sys

from bridgeindex.config import settings
from bridgeindex.container import Container
from bridgeindex.domain.models import FetchRunSummary

logger = logging.getLogger("bridgeindex.jobs.fetch_providers")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format="%(asctime)s %(levelname)-5s %(name)s - %(message)s")
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


async def run(container: Container) -> FetchRunSummary:
    http_client = container.http_client()
    engine = container.engine()
    try:
        return await container.orchestrator().run_full_fetch()
    finally:
        await http_client.close()
        await engine.dispose()


def log_summary(summary: FetchRunSummary) -> None:
    logger.info("=" * 60)
    logger.info(
        "Providers: %d total, %d succeeded, %d failed (%.1fs)",
        summary.total,
        summary.successes,
        summary.failures,
        summary.duration_ms / 1000,
    )
    if summary.enrichment is not None:
        logger.info(
            "Chains enriched: %d (registry size %d)",
            summary.enrichment.enriched_count,
            summary.enrichment.total_chains,
        )
    else:
        logger.warning("Chain enrichment did not complete")
    for result in summary.results:
        if not result.success:
            logger.error("  %s: %s", result.provider, result.error)
    logger.info("=" * 60)


def main() -> None:
    configure_logging(settings.log_level)
    try:
        summary = asyncio.run(run(Container()))
    except Exception:
        logger.exception("Fetch job aborted")
        sys.exit(1)

    log_summary(summary)
    sys.exit(summary.exit_code)


if __name__ == "__main__":
    main()
