"""ORM model representing a user's publishable portfolio site."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio_studio.data.db import Base

if TYPE_CHECKING:
    from portfolio_studio.data.models.portfolio_version import PortfolioVersion
    from portfolio_studio.data.models.project import Project
    from portfolio_studio.data.models.template import Template
    from portfolio_studio.data.models.user import User


class Portfolio(Base):
    """Portfolio site definition owned by a single user.

    Attributes:
        id: Auto-incrementing primary key.
        user_id: Owner of the portfolio.
        name: Display name.
        description: Optional introduction text.
        slug: Unique identifier used in the public URL.
        is_published: Whether the public view is reachable.
        template_id: Optional catalog template the site is based on.
        customization: Validated customization payload (colors, fonts, scripts...).
        view_count: Number of public views served.
    """

    __tablename__ = "portfolios"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    slug: Mapped[str] = mapped_column(String(120), unique=True, nullable=False, index=True)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    template_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("templates.id", ondelete="SET NULL"),
        nullable=True,
    )
    customization: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    view_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
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

    user: Mapped[User] = relationship("User", back_populates="portfolios")
    template: Mapped[Template | None] = relationship("Template")
    projects: Mapped[list[Project]] = relationship(
        "Project",
        back_populates="portfolio",
        cascade="all, delete-orphan",
    )
    versions: Mapped[list[PortfolioVersion]] = relationship(
        "PortfolioVersion",
        back_populates="portfolio",
        cascade="all, delete-orphan",
    )
