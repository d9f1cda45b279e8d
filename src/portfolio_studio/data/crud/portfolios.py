"""Query helpers for the portfolios table."""

from __future__ import annotations

import re
from typing import Any

from sqlalchemy import update
from sqlalchemy.orm import Session

from portfolio_studio.data.models import Portfolio

_SLUG_INVALID = re.compile(r"[^a-z0-9]+")

MAX_SLUG_LENGTH = 120
# Room for the "-N" suffix added by unique_slug.
_SLUG_BASE_LENGTH = MAX_SLUG_LENGTH - 8


def slugify(value: str) -> str:
    """Turn a display name into a URL-safe slug."""
    slug = _SLUG_INVALID.sub("-", value.lower()).strip("-")
    slug = slug[:_SLUG_BASE_LENGTH].rstrip("-")
    return slug or "portfolio"


def slug_exists(session: Session, slug: str, *, exclude_id: int | None = None) -> bool:
    query = session.query(Portfolio.id).filter(Portfolio.slug == slug)
    if exclude_id is not None:
        query = query.filter(Portfolio.id != exclude_id)
    return query.first() is not None


def unique_slug(session: Session, base: str) -> str:
    """Return ``base`` or ``base-2``, ``base-3``... whichever is free."""
    candidate = base
    suffix = 2
    while slug_exists(session, candidate):
        candidate = f"{base}-{suffix}"
        suffix += 1
    return candidate


def get_user_portfolios(session: Session, user_id: int) -> list[Portfolio]:
    return (
        session.query(Portfolio)
        .filter(Portfolio.user_id == user_id)
        .order_by(Portfolio.updated_at.desc(), Portfolio.id.desc())
        .all()
    )


def get_portfolio(session: Session, portfolio_id: int) -> Portfolio | None:
    return session.get(Portfolio, portfolio_id)


def get_portfolio_by_slug(session: Session, slug: str) -> Portfolio | None:
    return session.query(Portfolio).filter(Portfolio.slug == slug).first()


def create_portfolio(session: Session, *, user_id: int, **fields: Any) -> Portfolio:
    portfolio = Portfolio(user_id=user_id, **fields)
    session.add(portfolio)
    session.flush()
    session.refresh(portfolio)
    return portfolio


def update_portfolio(session: Session, portfolio: Portfolio, updates: dict[str, Any]) -> Portfolio:
    """Apply a partial set of column updates to ``portfolio``."""
    for field, value in updates.items():
        setattr(portfolio, field, value)
    session.flush()
    session.refresh(portfolio)
    return portfolio


def delete_portfolio(session: Session, portfolio: Portfolio) -> None:
    session.delete(portfolio)
    session.flush()


def increment_portfolio_views(session: Session, portfolio_id: int) -> None:
    session.execute(
        update(Portfolio)
        .where(Portfolio.id == portfolio_id)
        .values(view_count=Portfolio.view_count + 1, updated_at=Portfolio.updated_at)
        .execution_options(synchronize_session=False)
    )
