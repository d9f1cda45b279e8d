"""Pydantic schemas for the template catalog."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from portfolio_studio.api.schemas.common import CamelModel


class TemplateResponse(CamelModel):
    """Catalog template."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    name: str
    description: str | None
    category: str
    preview_image_url: str | None
    rating: float
    usage_count: int
    is_active: bool
    config: dict[str, Any] | None
    created_at: datetime
