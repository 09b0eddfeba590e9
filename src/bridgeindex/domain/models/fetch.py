"""Outcome types reported by the fetch orchestrator."""

from typing import Optional

from pydantic import BaseModel


class ProviderFetchResult(BaseModel):
    provider: str
    success: bool
    chains_count: Optional[int] = None
    tokens_count: Optional[int] = None
    error: Optional[str] = None


class EnrichmentSummary(BaseModel):
    enriched_count: int
    total_chains: int


class FetchRunSummary(BaseModel):
    """Structured result of one full fetch, returned even when every provider fails."""

    results: list[ProviderFetchResult]
    total: int
    successes: int
    failures: int
    enrichment: Optional[EnrichmentSummary] = None
    duration_ms: int

    @property
    def exit_code(self) -> int:
        return 1 if self.failures > 0 else 0
