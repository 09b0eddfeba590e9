from typing import Any, Optional

from sqlalchemy import BigInteger, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from bridgeindex.db.session import Base, CreatedAtMixin, JSONType, TimestampMixin


class Chain(TimestampMixin, Base):
    """A blockchain network keyed by its canonical chain ID.

    Provider-reported fields are written once (first writer wins). The
    descriptive columns below ``native_currency_decimals`` are filled in by
    chain enrichment.
    """

    __tablename__ = "chains"

    chain_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(Text)
    native_currency_name: Mapped[str] = mapped_column(Text)
    native_currency_symbol: Mapped[str] = mapped_column(Text)
    native_currency_decimals: Mapped[int] = mapped_column(Integer)

    short_name: Mapped[Optional[str]] = mapped_column(Text, default=None)
    chain_type: Mapped[Optional[str]] = mapped_column(String(20), default=None)  # mainnet / testnet
    vm_type: Mapped[Optional[str]] = mapped_column(String(20), default=None)  # evm / svm / NULL
    icon: Mapped[Optional[str]] = mapped_column(Text, default=None)
    info_url: Mapped[Optional[str]] = mapped_column(Text, default=None)
    explorers: Mapped[Optional[list[dict[str, Any]]]] = mapped_column(JSONType, default=None)
    rpc: Mapped[Optional[list[str]]] = mapped_column(JSONType, default=None)
    faucets: Mapped[Optional[list[str]]] = mapped_column(JSONType, default=None)
    ens: Mapped[Optional[dict[str, Any]]] = mapped_column(JSONType, default=None)
    features: Mapped[Optional[list[dict[str, Any]]]] = mapped_column(JSONType, default=None)


class ChainProviderSupport(CreatedAtMixin, Base):
    """Asserts that a provider supports a chain. Unique per (chain, provider)."""

    __tablename__ = "chain_provider_support"
    __table_args__ = (
        UniqueConstraint("chain_id", "provider_name", name="uq_chain_provider_support_chain_provider"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    chain_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("chains.chain_id"))
    provider_name: Mapped[str] = mapped_column(String(50))
    fetch_id: Mapped[int] = mapped_column(ForeignKey("provider_fetches.id"))  # latest attempt that reported it
