"""Project routes: list, add, edit and remove the projects of a portfolio."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Response, status
from sqlalchemy.orm import Session

from portfolio_studio.api.dependencies import CurrentUser, get_owned_portfolio
from portfolio_studio.api.schemas.projects import (
    ProjectCreateRequest,
    ProjectResponse,
    ProjectUpdateRequest,
)
from portfolio_studio.data.crud.portfolios import get_portfolio
from portfolio_studio.data.crud.projects import (
    create_project,
    delete_project,
    get_portfolio_projects,
    get_project,
    update_project,
)
from portfolio_studio.data.db import get_session
from portfolio_studio.data.models import Project, User

router = APIRouter(tags=["projects"])


def project_to_response(project: Project) -> ProjectResponse:
    return ProjectResponse(
        id=project.id,
        portfolio_id=project.portfolio_id,
        title=project.title,
        description=project.description,
        image_url=project.image_url,
        project_url=project.project_url,
        tags=project.tags,
        order=project.order,
        created_at=project.created_at,
        updated_at=project.updated_at,
    )


def _get_owned_project(session: Session, project_id: int, user: User) -> Project:
    """Load a project whose parent portfolio belongs to ``user``."""
    project = get_project(session, project_id)
    if project is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found",
        )
    portfolio = get_portfolio(session, project.portfolio_id)
    if portfolio is None or portfolio.user_id != user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied",
        )
    return project


@router.get(
    "/portfolios/{portfolio_id}/projects",
    response_model=list[ProjectResponse],
    summary="List projects in a portfolio",
)
def list_projects(portfolio_id: int, current_user: CurrentUser) -> list[ProjectResponse]:
    with get_session() as session:
        portfolio = get_owned_portfolio(session, portfolio_id, current_user)
        return [project_to_response(p) for p in get_portfolio_projects(session, portfolio.id)]


@router.post(
    "/portfolios/{portfolio_id}/projects",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a project to a portfolio",
)
def add_project(
    portfolio_id: int,
    request: ProjectCreateRequest,
    current_user: CurrentUser,
) -> ProjectResponse:
    with get_session() as session:
        portfolio = get_owned_portfolio(session, portfolio_id, current_user)
        project = create_project(session, portfolio_id=portfolio.id, **request.model_dump())
        return project_to_response(project)


@router.patch(
    "/projects/{project_id}",
    response_model=ProjectResponse,
    summary="Update a project",
    description="Partially update a project; only supplied fields are changed.",
)
def edit_project(
    project_id: int,
    request: ProjectUpdateRequest,
    current_user: CurrentUser,
) -> ProjectResponse:
    with get_session() as session:
        project = _get_owned_project(session, project_id, current_user)
        project = update_project(session, project, request.model_dump(exclude_unset=True))
        return project_to_response(project)


@router.delete(
    "/projects/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a project",
)
def remove_project(project_id: int, current_user: CurrentUser) -> Response:
    with get_session() as session:
        project = _get_owned_project(session, project_id, current_user)
        delete_project(session, project)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
