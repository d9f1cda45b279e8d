"""Pydantic schemas for project endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field, model_validator

from portfolio_studio.api.schemas.common import CamelModel


class ProjectCreateRequest(CamelModel):
    """Request body for adding a project to a portfolio."""

    title: str = Field(min_length=1, max_length=200)
    description: str | None = None
    image_url: str | None = Field(None, max_length=2048)
    project_url: str | None = Field(None, max_length=2048)
    tags: list[str] = Field(default_factory=list)
    order: int = 0


class ProjectUpdateRequest(CamelModel):
    """Partial update of a project."""

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    image_url: str | None = Field(None, max_length=2048)
    project_url: str | None = Field(None, max_length=2048)
    tags: list[str] | None = None
    order: int | None = None

    @model_validator(mode="after")
    def _reject_null_title(self) -> ProjectUpdateRequest:
        for field in ("title", "order"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class ProjectResponse(CamelModel):
    """Project as returned by the API."""

    id: int
    portfolio_id: int
    title: str
    description: str | None
    image_url: str | None
    project_url: str | None
    tags: list[str] | None
    order: int
    created_at: datetime
    updated_at: datetime
