"""Query helpers for the projects table."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from portfolio_studio.data.models import Project


def get_portfolio_projects(session: Session, portfolio_id: int) -> list[Project]:
    return (
        session.query(Project)
        .filter(Project.portfolio_id == portfolio_id)
        .order_by(Project.order, Project.created_at, Project.id)
        .all()
    )


def get_project(session: Session, project_id: int) -> Project | None:
    return session.get(Project, project_id)


def create_project(session: Session, *, portfolio_id: int, **fields: Any) -> Project:
    project = Project(portfolio_id=portfolio_id, **fields)
    session.add(project)
    session.flush()
    session.refresh(project)
    return project


def update_project(session: Session, project: Project, updates: dict[str, Any]) -> Project:
    for field, value in updates.items():
        setattr(project, field, value)
    session.flush()
    session.refresh(project)
    return project


def delete_project(session: Session, project: Project) -> None:
    session.delete(project)
    session.flush()
