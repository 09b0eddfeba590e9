"""Audit trail of provider adapter runs."""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from bridgeindex.db.session import Base


class ProviderFetch(Base):
    """One row per adapter invocation, success or failure. Append-only."""

    __tablename__ = "provider_fetches"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    provider_name: Mapped[str] = mapped_column(String(50), index=True)
    fetched_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    success: Mapped[bool] = mapped_column(Boolean)
    chains_count: Mapped[Optional[int]] = mapped_column(Integer, default=None)
    tokens_count: Mapped[Optional[int]] = mapped_column(Integer, default=None)
    error_message: Mapped[Optional[str]] = mapped_column(Text, default=None)
