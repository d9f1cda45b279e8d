"""Portfolio version routes: snapshot, list and revert."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from portfolio_studio.api.dependencies import CurrentUser, get_owned_portfolio
from portfolio_studio.api.routes.portfolios import portfolio_to_response
from portfolio_studio.api.schemas.portfolio import PortfolioResponse
from portfolio_studio.api.schemas.versions import VersionCreateRequest, VersionResponse
from portfolio_studio.data.crud.versions import get_portfolio_version
from portfolio_studio.data.db import get_session
from portfolio_studio.data.models import PortfolioVersion
from portfolio_studio.services.versioning import create_snapshot, list_snapshots, revert_to_version

router = APIRouter(prefix="/portfolios/{portfolio_id}/versions", tags=["versions"])


def _version_to_response(version: PortfolioVersion) -> VersionResponse:
    return VersionResponse(
        id=version.id,
        portfolio_id=version.portfolio_id,
        title=version.title,
        summary=version.summary,
        snapshot=version.snapshot,
        created_at=version.created_at,
    )


@router.get(
    "",
    response_model=list[VersionResponse],
    summary="List snapshots",
    description="Return every snapshot of the portfolio, newest first.",
)
def list_versions(portfolio_id: int, current_user: CurrentUser) -> list[VersionResponse]:
    with get_session() as session:
        portfolio = get_owned_portfolio(session, portfolio_id, current_user)
        return [_version_to_response(v) for v in list_snapshots(session, portfolio)]


@router.post(
    "",
    response_model=VersionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a snapshot",
    description=(
        "Capture the portfolio's editable fields. When no title is given a "
        "timestamped default is used."
    ),
)
def create_version(
    portfolio_id: int,
    current_user: CurrentUser,
    request: VersionCreateRequest | None = None,
) -> VersionResponse:
    request = request or VersionCreateRequest()
    with get_session() as session:
        portfolio = get_owned_portfolio(session, portfolio_id, current_user)
        version = create_snapshot(
            session, portfolio, title=request.title, summary=request.summary
        )
        return _version_to_response(version)


@router.post(
    "/{version_id}/revert",
    response_model=PortfolioResponse,
    summary="Revert to a snapshot",
    description=(
        "Overwrite the portfolio's editable fields with the snapshot. The version "
        "must belong to this portfolio."
    ),
    responses={
        400: {"description": "Snapshot payload is invalid"},
        404: {"description": "Portfolio or version not found"},
        409: {"description": "Snapshot slug is now used by another portfolio"},
    },
)
def revert_version(
    portfolio_id: int,
    version_id: int,
    current_user: CurrentUser,
) -> PortfolioResponse:
    with get_session() as session:
        portfolio = get_owned_portfolio(session, portfolio_id, current_user)
        version = get_portfolio_version(session, portfolio.id, version_id)
        if version is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Version not found",
            )
        portfolio = revert_to_version(session, portfolio, version)
        return portfolio_to_response(portfolio)
