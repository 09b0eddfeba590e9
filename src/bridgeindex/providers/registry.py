from bridgeindex.infra.http.json_client import JsonHttpClient
from bridgeindex.providers.across import AcrossAdapter
from bridgeindex.providers.aori import AoriAdapter
from bridgeindex.providers.base import ProviderAdapter
from bridgeindex.providers.butter import ButterAdapter
from bridgeindex.providers.debridge import DebridgeAdapter
from bridgeindex.providers.eco import EcoAdapter
from bridgeindex.providers.gaszip import GasZipAdapter
from bridgeindex.providers.lifi import LifiAdapter
from bridgeindex.providers.mayan import MayanAdapter
from bridgeindex.providers.meson import MesonAdapter
from bridgeindex.providers.relay import RelayAdapter
from bridgeindex.providers.rhino import RhinoAdapter
from bridgeindex.providers.stargate import StargateAdapter

ADAPTER_CLASSES: tuple[type[ProviderAdapter], ...] = (
    RelayAdapter,
    LifiAdapter,
    AcrossAdapter,
    StargateAdapter,
    DebridgeAdapter,
    MayanAdapter,
    RhinoAdapter,
    GasZipAdapter,
    AoriAdapter,
    EcoAdapter,
    MesonAdapter,
    ButterAdapter,
)


def build_default_adapters(http_client: JsonHttpClient) -> list[ProviderAdapter]:
    """One adapter per supported provider, all sharing ``http_client``."""
    return [adapter_cls(http_client) for adapter_cls in ADAPTER_CLASSES]
