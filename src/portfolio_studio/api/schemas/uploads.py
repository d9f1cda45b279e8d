"""Pydantic schemas for file uploads."""

from __future__ import annotations

from portfolio_studio.api.schemas.common import CamelModel


class UploadResponse(CamelModel):
    url: str
