import logging

from bridgeindex.aggregation.chain_mapping import normalize_chain_id
from bridgeindex.domain.models import ChainData, ProviderFetchResult, ProviderResponse, TokenData
from bridgeindex.exceptions import ProviderError
from bridgeindex.ingestion.storage import ProviderStorageWriter
from bridgeindex.providers.base import ProviderAdapter

logger = logging.getLogger(__name__)


def canonicalize_chain_ids(provider: str, response: ProviderResponse) -> tuple[list[ChainData], list[TokenData]]:
    """Rewrite provider-specific chain IDs (e.g. each bridge's own Solana ID) to canonical ones."""
    chains: list[ChainData] = []
    for chain in response.chains:
        canonical_id = normalize_chain_id(chain.id)
        if canonical_id != chain.id:
            logger.info("[%s] Normalized chain ID %d -> %d (%s)", provider, chain.id, canonical_id, chain.name)
            chain = chain.model_copy(update={"id": canonical_id})
        chains.append(chain)

    tokens: list[TokenData] = []
    remapped = 0
    for token in response.tokens:
        canonical_id = normalize_chain_id(token.chain_id)
        if canonical_id != token.chain_id:
            token = token.model_copy(update={"chain_id": canonical_id})
            remapped += 1
        tokens.append(token)
    if remapped:
        logger.info("[%s] Normalized chain ID on %d tokens", provider, remapped)

    return chains, tokens


class ProviderPipeline:
    """fetch -> canonicalize -> store, for a single adapter."""

    def __init__(self, storage: ProviderStorageWriter) -> None:
        self._storage = storage

    async def run(self, adapter: ProviderAdapter) -> ProviderFetchResult:
        provider = adapter.name
        logger.info("[%s] Starting fetch", provider)

        try:
            response = await adapter.fetch()
        except ProviderError as e:
            try:
                await self._storage.record_failure(provider, str(e))
            except Exception:
                logger.exception("[%s] Could not record the failed fetch attempt", provider)
            raise

        chains, tokens = canonicalize_chain_ids(provider, response)
        await self._storage.store(provider, chains, tokens)

        logger.info("[%s] Completed: %d chains, %d tokens", provider, len(chains), len(tokens))
        return ProviderFetchResult(
            provider=provider,
            success=True,
            chains_count=len(chains),
            tokens_count=len(tokens),
        )
