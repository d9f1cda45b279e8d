"""Pydantic schemas for portfolio snapshots."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from portfolio_studio.api.schemas.common import CamelModel


class VersionCreateRequest(CamelModel):
    """Optional metadata for a new snapshot."""

    title: str | None = Field(None, max_length=200)
    summary: str | None = Field(None, max_length=2000)


class VersionResponse(CamelModel):
    """Stored snapshot.

    ``snapshot`` is returned exactly as stored (snake_case keys).
    """

    id: int
    portfolio_id: int
    title: str
    summary: str | None
    snapshot: dict[str, Any]
    created_at: datetime
