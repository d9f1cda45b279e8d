"""ORM model for immutable snapshots of a portfolio's editable fields.

A version row stores the snapshot as a single JSON payload with the keys
``name``, ``description``, ``slug``, ``template_id``, ``is_published`` and
``customization``. Rows are never updated once written.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio_studio.data.db import Base

if TYPE_CHECKING:
    from portfolio_studio.data.models.portfolio import Portfolio


class PortfolioVersion(Base):
    """Point-in-time copy of a portfolio."""

    __tablename__ = "portfolio_versions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    portfolio_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("portfolios.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    snapshot: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )

    portfolio: Mapped[Portfolio] = relationship("Portfolio", back_populates="versions")
