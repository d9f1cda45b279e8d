"""ORM model for a work item shown inside a portfolio."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio_studio.data.db import Base

if TYPE_CHECKING:
    from portfolio_studio.data.models.portfolio import Portfolio


class Project(Base):
    """A project entry belonging to exactly one portfolio.

    Attributes:
        id: Auto-incrementing primary key.
        portfolio_id: Parent portfolio (CASCADE on delete).
        title: Project title.
        description: Optional free text (may contain HTML).
        image_url: Optional cover image URL.
        project_url: Optional external link.
        tags: List of tag strings.
        order: Display position within the portfolio.
    """

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    portfolio_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("portfolios.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    project_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    tags: Mapped[list[str] | None] = mapped_column(JSON, nullable=True, default=lambda: [])
    order: Mapped[int] = mapped_column("display_order", Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    portfolio: Mapped[Portfolio] = relationship("Portfolio", back_populates="projects")
