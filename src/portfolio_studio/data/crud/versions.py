"""Query helpers for portfolio snapshots."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from portfolio_studio.data.models import PortfolioVersion


def get_portfolio_versions(session: Session, portfolio_id: int) -> list[PortfolioVersion]:
    """Return versions newest first; equal timestamps fall back to id order."""
    return (
        session.query(PortfolioVersion)
        .filter(PortfolioVersion.portfolio_id == portfolio_id)
        .order_by(PortfolioVersion.created_at.desc(), PortfolioVersion.id.desc())
        .all()
    )


def get_portfolio_version(
    session: Session, portfolio_id: int, version_id: int
) -> PortfolioVersion | None:
    """Return the version only if it belongs to ``portfolio_id``."""
    return (
        session.query(PortfolioVersion)
        .filter(
            PortfolioVersion.id == version_id,
            PortfolioVersion.portfolio_id == portfolio_id,
        )
        .first()
    )


def create_portfolio_version(
    session: Session,
    *,
    portfolio_id: int,
    title: str,
    summary: str | None,
    snapshot: dict[str, Any],
) -> PortfolioVersion:
    version = PortfolioVersion(
        portfolio_id=portfolio_id,
        title=title,
        summary=summary,
        snapshot=snapshot,
    )
    session.add(version)
    session.flush()
    session.refresh(version)
    return version
