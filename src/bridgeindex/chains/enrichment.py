import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from bridgeindex.chains.registry import ChainRegistry
from bridgeindex.db.repos.chain_repo import ChainRepo
from bridgeindex.domain.models import ChainMetadata, EnrichmentSummary

logger = logging.getLogger(__name__)


def enrichment_fields(metadata: ChainMetadata) -> dict[str, Any]:
    """Columns written to an existing chain row. Native currency and VM type are left as stored."""
    return {
        "name": metadata.name,
        "short_name": metadata.short_name,
        "chain_type": metadata.chain_type.value,
        "icon": metadata.icon,
        "info_url": metadata.info_url,
        "explorers": [e.model_dump() for e in metadata.explorers] if metadata.explorers is not None else None,
        "rpc": metadata.rpc,
        "faucets": metadata.faucets,
        "ens": metadata.ens,
        "features": [f.model_dump() for f in metadata.features] if metadata.features is not None else None,
    }


class ChainEnricher:
    """Overwrites descriptive columns of chains already in the database.

    Never inserts chains: only IDs some provider has reported get enriched.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], registry: ChainRegistry) -> None:
        self._session_factory = session_factory
        self._registry = registry

    async def enrich_chains(self) -> EnrichmentSummary:
        catalog = {m.chain_id: m for m in await self._registry.fetch_all()}

        enriched = 0
        async with self._session_factory() as session:
            repo = ChainRepo(session)
            for chain_id in await repo.list_known_chain_ids():
                metadata = catalog.get(chain_id)
                if metadata is None:
                    continue
                await repo.update_chain_metadata(chain_id, enrichment_fields(metadata))
                enriched += 1
            await session.commit()

        logger.info("Enriched %d chains from a registry of %d", enriched, len(catalog))
        return EnrichmentSummary(enriched_count=enriched, total_chains=len(catalog))

    async def enrich_chain_by_id(self, chain_id: int) -> bool:
        """Enrich a single stored chain. False if the chain is unknown locally or to the registry."""
        metadata = await self._registry.fetch_by_chain_id(chain_id)
        if metadata is None:
            logger.warning("Chain %d not found in registry", chain_id)
            return False

        async with self._session_factory() as session:
            repo = ChainRepo(session)
            if await repo.get_by_id(chain_id) is None:
                return False
            await repo.update_chain_metadata(chain_id, enrichment_fields(metadata))
            await session.commit()
        return True
