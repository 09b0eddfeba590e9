from dependency_injector import containers, providers

from bridgeindex.chains.enrichment import ChainEnricher
from bridgeindex.chains.registry import ChainRegistry
from bridgeindex.config import Settings
from bridgeindex.db.session import build_engine, build_session_factory
from bridgeindex.infra.http.json_client import JsonHttpClient
from bridgeindex.ingestion.orchestrator import FetchOrchestrator
from bridgeindex.ingestion.pipeline import ProviderPipeline
from bridgeindex.ingestion.storage import ProviderStorageWriter
from bridgeindex.providers.registry import build_default_adapters


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(modules=["bridgeindex.api.deps"])

    settings = providers.Singleton(Settings)

    engine = providers.Singleton(
        build_engine,
        database_url=settings.provided.database_url,
        echo=settings.provided.debug,
    )

    session_factory = providers.Singleton(
        build_session_factory,
        engine=engine,
    )

    http_client = providers.Singleton(
        JsonHttpClient,
        timeout=settings.provided.http_timeout,
    )

    storage_writer = providers.Singleton(
        ProviderStorageWriter,
        session_factory=session_factory,
        batch_size=settings.provided.token_batch_size,
    )

    pipeline = providers.Singleton(
        ProviderPipeline,
        storage=storage_writer,
    )

    chain_registry = providers.Singleton(
        ChainRegistry,
        http_client=http_client,
    )

    chain_enricher = providers.Singleton(
        ChainEnricher,
        session_factory=session_factory,
        registry=chain_registry,
    )

    adapters = providers.Singleton(
        build_default_adapters,
        http_client=http_client,
    )

    orchestrator = providers.Factory(
        FetchOrchestrator,
        adapters=adapters,
        pipeline=pipeline,
        enricher=chain_enricher,
    )
