from typing import Any, Optional

from sqlalchemy import BigInteger, ForeignKey, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from bridgeindex.db.session import Base, CreatedAtMixin, JSONType


class Token(CreatedAtMixin, Base):
    """One provider's view of a fungible asset on one chain.

    The same symbol appears once per (provider, chain, address). Grouping
    across providers happens at query time.
    """

    __tablename__ = "tokens"
    __table_args__ = (
        UniqueConstraint("provider_name", "chain_id", "address", name="uq_tokens_provider_chain_address"),
        Index("ix_tokens_symbol", "symbol"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    provider_name: Mapped[str] = mapped_column(String(50))
    chain_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("chains.chain_id"))
    address: Mapped[str] = mapped_column(Text)  # lowercase on EVM, case-preserved otherwise
    symbol: Mapped[str] = mapped_column(Text)
    name: Mapped[str] = mapped_column(Text)
    decimals: Mapped[Optional[int]] = mapped_column(Integer, default=None)
    logo_uri: Mapped[Optional[str]] = mapped_column(Text, default=None)
    tags: Mapped[list[str]] = mapped_column(JSONType, default=list)
    fetch_id: Mapped[int] = mapped_column(ForeignKey("provider_fetches.id"))
    raw_data: Mapped[dict[str, Any]] = mapped_column(JSONType)
