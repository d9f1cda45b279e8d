"""User account model for authentication.

Passwords are stored as salted PBKDF2 hashes, never in plaintext.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio_studio.data.db import Base

if TYPE_CHECKING:
    from portfolio_studio.data.models.portfolio import Portfolio


class User(Base):
    """Application user account.

    Attributes:
        id: Auto-incrementing primary key.
        email: Unique email address used for login.
        password_hash: Salted hash of the user's password.
        first_name: Optional given name.
        last_name: Optional family name.
        created_at: UTC timestamp when the account was created.
        updated_at: UTC timestamp of the last modification.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(256), nullable=False)
    first_name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    portfolios: Mapped[list[Portfolio]] = relationship(
        "Portfolio", back_populates="user", cascade="all, delete-orphan"
    )
