"""Pydantic schemas for portfolio endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import Field, model_validator

from portfolio_studio.api.schemas.common import CamelModel
from portfolio_studio.api.schemas.customization import Customization
from portfolio_studio.api.schemas.projects import ProjectResponse
from portfolio_studio.data.crud.portfolios import MAX_SLUG_LENGTH

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"

PortfolioName = Annotated[str, Field(min_length=1, max_length=200)]
Slug = Annotated[str, Field(min_length=1, max_length=MAX_SLUG_LENGTH, pattern=SLUG_PATTERN)]

# Editable fields captured by snapshots and restored by reverts.
EDITABLE_FIELDS = (
    "name",
    "description",
    "slug",
    "template_id",
    "is_published",
    "customization",
)

_NON_NULLABLE_FIELDS = ("name", "slug", "is_published")


class PortfolioCreateRequest(CamelModel):
    """Request body for creating a portfolio.

    When ``slug`` is omitted one is derived from ``name``.
    """

    name: PortfolioName
    description: str | None = None
    slug: Slug | None = None
    is_published: bool = False
    template_id: int | None = None
    customization: Customization | None = None


class PortfolioUpdateRequest(CamelModel):
    """Partial update of a portfolio; only supplied fields are written."""

    name: PortfolioName | None = None
    description: str | None = None
    slug: Slug | None = None
    is_published: bool | None = None
    template_id: int | None = None
    customization: Customization | None = None

    @model_validator(mode="after")
    def _reject_null_required_fields(self) -> PortfolioUpdateRequest:
        for field in _NON_NULLABLE_FIELDS:
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class PortfolioSnapshot(PortfolioUpdateRequest):
    """Update shape with every editable field required.

    Used to validate a stored snapshot before it is written back.
    """

    name: PortfolioName
    description: str | None
    slug: Slug
    is_published: bool
    template_id: int | None
    customization: Customization | None


class PortfolioResponse(CamelModel):
    """Portfolio as returned to its owner."""

    id: int
    user_id: int
    name: str
    description: str | None
    slug: str
    is_published: bool
    template_id: int | None
    customization: Customization | None
    view_count: int
    created_at: datetime
    updated_at: datetime


class PublicPortfolioResponse(PortfolioResponse):
    """Published portfolio together with its projects."""

    projects: list[ProjectResponse]
