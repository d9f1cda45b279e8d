"""Portfolio snapshots: capture the editable fields and restore them later.

A snapshot copies the editable columns verbatim into an immutable
``portfolio_versions`` row. Reverting validates the stored payload against
the portfolio update shape and overwrites the live row unconditionally.
There is no merge, no diffing and no implicit pre-revert snapshot.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError
from sqlalchemy.orm import Session

from portfolio_studio.api.schemas.portfolio import EDITABLE_FIELDS, PortfolioSnapshot
from portfolio_studio.data.crud.versions import create_portfolio_version, get_portfolio_versions
from portfolio_studio.data.models import Portfolio, PortfolioVersion
from portfolio_studio.services.portfolio_editing import apply_portfolio_updates

logger = logging.getLogger(__name__)


class SnapshotPayloadError(ValueError):
    """Raised when a stored snapshot no longer matches the portfolio shape."""

    def __init__(self, version_id: int, errors: list[dict[str, Any]]) -> None:
        super().__init__(f"Snapshot {version_id} is malformed")
        self.version_id = version_id
        self.errors = errors


def default_snapshot_title(now: datetime | None = None) -> str:
    now = now or datetime.now(UTC)
    return f"Snapshot {now:%Y-%m-%d %H:%M:%S} UTC"


def capture_snapshot(portfolio: Portfolio) -> dict[str, Any]:
    """Copy the editable fields of ``portfolio`` into a plain dict."""
    return {field: getattr(portfolio, field) for field in EDITABLE_FIELDS}


def create_snapshot(
    session: Session,
    portfolio: Portfolio,
    *,
    title: str | None = None,
    summary: str | None = None,
) -> PortfolioVersion:
    version = create_portfolio_version(
        session,
        portfolio_id=portfolio.id,
        title=title or default_snapshot_title(),
        summary=summary,
        snapshot=capture_snapshot(portfolio),
    )
    logger.info("Created snapshot %s for portfolio %s", version.id, portfolio.id)
    return version


def list_snapshots(session: Session, portfolio: Portfolio) -> list[PortfolioVersion]:
    return get_portfolio_versions(session, portfolio.id)


def revert_to_version(
    session: Session, portfolio: Portfolio, version: PortfolioVersion
) -> Portfolio:
    """Overwrite the editable fields of ``portfolio`` with ``version``'s snapshot.

    Raises:
        SnapshotPayloadError: If the stored payload fails validation.
        SlugConflictError: If the snapshot slug now belongs to another portfolio.
        UnknownTemplateError: If the snapshot references a deleted template.
    """
    if version.portfolio_id != portfolio.id:
        raise ValueError("Version does not belong to this portfolio")

    try:
        payload = PortfolioSnapshot.model_validate(version.snapshot)
    except ValidationError as exc:
        raise SnapshotPayloadError(
            version.id, exc.errors(include_url=False, include_context=False)
        ) from exc

    updates = {field: getattr(payload, field) for field in EDITABLE_FIELDS}
    portfolio = apply_portfolio_updates(session, portfolio, updates)
    logger.info("Reverted portfolio %s to snapshot %s", portfolio.id, version.id)
    return portfolio
