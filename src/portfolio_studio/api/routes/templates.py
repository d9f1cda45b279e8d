"""Template catalog routes (public)."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from portfolio_studio.api.schemas.templates import TemplateResponse
from portfolio_studio.data.crud.templates import get_template, get_templates
from portfolio_studio.data.db import get_session

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get(
    "",
    response_model=list[TemplateResponse],
    summary="List templates",
    description="Active templates ordered by popularity, optionally filtered by category.",
)
def list_templates(
    category: Annotated[str | None, Query(max_length=64)] = None,
) -> list[TemplateResponse]:
    with get_session() as session:
        return [TemplateResponse.model_validate(t) for t in get_templates(session, category)]


@router.get("/{template_id}", response_model=TemplateResponse, summary="Get a template")
def get_template_detail(template_id: int) -> TemplateResponse:
    with get_session() as session:
        template = get_template(session, template_id)
        if template is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Template not found",
            )
        return TemplateResponse.model_validate(template)
