"""Exception hierarchy shared by the ingestion pipeline."""


class BridgeIndexError(Exception):
    """Base class for all bridgeindex errors."""


class ExternalServiceError(BridgeIndexError):
    """An upstream HTTP call failed (transport, status code, or body decoding)."""


class ProviderError(BridgeIndexError):
    """A provider adapter could not produce a response."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"[{provider}] {message}")
        self.provider = provider
        self.message = message


class StorageError(BridgeIndexError):
    """Persisting a provider's batch failed."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"[{provider}] {message}")
        self.provider = provider
        self.message = message


class ChainRegistryError(BridgeIndexError):
    """The chain metadata catalogs could not be loaded."""
