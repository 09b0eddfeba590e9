from enum import Enum


class ProviderName(str, Enum):
    """Upstream bridge providers. Values are the names stored in the database."""

    RELAY = "relay"
    LIFI = "lifi"
    ACROSS = "across"
    STARGATE = "stargate"
    DEBRIDGE = "debridge"
    MAYAN = "mayan"
    RHINO = "rhino"
    GASZIP = "gaszip"
    AORI = "aori"
    ECO = "eco"
    MESON = "meson"
    BUTTER = "butter"
