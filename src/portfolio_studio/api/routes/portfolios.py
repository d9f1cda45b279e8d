"""Portfolio routes: CRUD for owners, export, and the public read-only view."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, Response, status
from fastapi.responses import JSONResponse

from portfolio_studio.api.dependencies import CurrentUser, get_owned_portfolio
from portfolio_studio.api.routes.projects import project_to_response
from portfolio_studio.api.schemas.customization import Customization
from portfolio_studio.api.schemas.portfolio import (
    PortfolioCreateRequest,
    PortfolioResponse,
    PortfolioUpdateRequest,
    PublicPortfolioResponse,
)
from portfolio_studio.data.crud.portfolios import (
    delete_portfolio,
    get_portfolio_by_slug,
    get_user_portfolios,
    increment_portfolio_views,
)
from portfolio_studio.data.crud.projects import get_portfolio_projects
from portfolio_studio.data.db import get_session
from portfolio_studio.data.models import Portfolio
from portfolio_studio.services.portfolio_editing import (
    apply_portfolio_updates,
    create_user_portfolio,
)
from portfolio_studio.utils.export import (
    FORMAT_MEDIA_TYPES,
    ExportFormat,
    export_filename,
    render_html,
    render_markdown,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["portfolios"])


def portfolio_to_response(portfolio: Portfolio) -> PortfolioResponse:
    return PortfolioResponse(
        id=portfolio.id,
        user_id=portfolio.user_id,
        name=portfolio.name,
        description=portfolio.description,
        slug=portfolio.slug,
        is_published=portfolio.is_published,
        template_id=portfolio.template_id,
        customization=(
            Customization.model_validate(portfolio.customization)
            if portfolio.customization is not None
            else None
        ),
        view_count=portfolio.view_count,
        created_at=portfolio.created_at,
        updated_at=portfolio.updated_at,
    )


@router.get(
    "/portfolios",
    response_model=list[PortfolioResponse],
    summary="List the current user's portfolios",
    description="Return the requester's portfolios, most recently updated first.",
)
def list_portfolios(current_user: CurrentUser) -> list[PortfolioResponse]:
    with get_session() as session:
        return [portfolio_to_response(p) for p in get_user_portfolios(session, current_user.id)]


@router.post(
    "/portfolios",
    response_model=PortfolioResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a portfolio",
    responses={409: {"description": "Slug already in use"}},
)
def create_portfolio(request: PortfolioCreateRequest, current_user: CurrentUser) -> PortfolioResponse:
    with get_session() as session:
        portfolio = create_user_portfolio(session, current_user.id, dict(request))
        return portfolio_to_response(portfolio)


@router.get(
    "/portfolios/{portfolio_id}",
    response_model=PortfolioResponse,
    summary="Get a portfolio",
)
def get_portfolio(portfolio_id: int, current_user: CurrentUser) -> PortfolioResponse:
    with get_session() as session:
        return portfolio_to_response(get_owned_portfolio(session, portfolio_id, current_user))


@router.patch(
    "/portfolios/{portfolio_id}",
    response_model=PortfolioResponse,
    summary="Update a portfolio",
    description="Partially update a portfolio; only supplied fields are changed.",
    responses={409: {"description": "Slug already in use"}},
)
def update_portfolio(
    portfolio_id: int,
    request: PortfolioUpdateRequest,
    current_user: CurrentUser,
) -> PortfolioResponse:
    updates = {field: getattr(request, field) for field in request.model_fields_set}
    with get_session() as session:
        portfolio = get_owned_portfolio(session, portfolio_id, current_user)
        portfolio = apply_portfolio_updates(session, portfolio, updates)
        return portfolio_to_response(portfolio)


@router.delete(
    "/portfolios/{portfolio_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a portfolio",
    description="Delete a portfolio together with its projects and versions.",
)
def remove_portfolio(portfolio_id: int, current_user: CurrentUser) -> Response:
    with get_session() as session:
        portfolio = get_owned_portfolio(session, portfolio_id, current_user)
        delete_portfolio(session, portfolio)
    logger.info("Deleted portfolio %s", portfolio_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/public/portfolios/{slug}",
    response_model=PublicPortfolioResponse,
    summary="View a published portfolio",
    description=(
        "Public, unauthenticated view of a published portfolio and its projects. "
        "Each successful request increments the view counter."
    ),
)
def get_public_portfolio(slug: str) -> PublicPortfolioResponse:
    with get_session() as session:
        portfolio = get_portfolio_by_slug(session, slug)
        if portfolio is None or not portfolio.is_published:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Portfolio not found",
            )

        increment_portfolio_views(session, portfolio.id)
        session.refresh(portfolio)
        projects = get_portfolio_projects(session, portfolio.id)

        return PublicPortfolioResponse(
            **dict(portfolio_to_response(portfolio)),
            projects=[project_to_response(p) for p in projects],
        )


@router.get(
    "/portfolios/{portfolio_id}/export",
    summary="Export a portfolio",
    description="Download the portfolio and its projects as JSON, Markdown, or HTML.",
    responses={
        200: {
            "content": {
                "application/json": {},
                "text/markdown": {},
                "text/html": {},
            }
        }
    },
)
def export_portfolio(
    portfolio_id: int,
    current_user: CurrentUser,
    export_format: Annotated[ExportFormat, Query(alias="format")] = "json",
) -> Response:
    with get_session() as session:
        portfolio = get_owned_portfolio(session, portfolio_id, current_user)
        projects = get_portfolio_projects(session, portfolio.id)

        if export_format == "json":
            body = {
                "portfolio": portfolio_to_response(portfolio).model_dump(mode="json", by_alias=True),
                "projects": [
                    project_to_response(p).model_dump(mode="json", by_alias=True) for p in projects
                ],
                "exportedAt": datetime.now(UTC).isoformat(),
            }
            return JSONResponse(content=body)

        rendered = (
            render_markdown(portfolio, projects)
            if export_format == "markdown"
            else render_html(portfolio, projects)
        )
        filename = export_filename(portfolio, export_format)

    return Response(
        content=rendered,
        media_type=FORMAT_MEDIA_TYPES[export_format],
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
