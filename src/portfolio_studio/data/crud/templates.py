"""Query helpers for the template catalog."""

from __future__ import annotations

from typing import Any

from sqlalchemy import update
from sqlalchemy.orm import Session

from portfolio_studio.data.models import Template


def get_templates(session: Session, category: str | None = None) -> list[Template]:
    """Return active templates, most used first, optionally filtered by category."""
    query = session.query(Template).filter(Template.is_active.is_(True))
    if category:
        query = query.filter(Template.category == category)
    return query.order_by(Template.usage_count.desc(), Template.id).all()


def get_template(session: Session, template_id: int) -> Template | None:
    return session.get(Template, template_id)


def create_template(session: Session, **fields: Any) -> Template:
    template = Template(**fields)
    session.add(template)
    session.flush()
    session.refresh(template)
    return template


def increment_template_usage(session: Session, template_id: int) -> None:
    session.execute(
        update(Template)
        .where(Template.id == template_id)
        .values(usage_count=Template.usage_count + 1)
        .execution_options(synchronize_session=False)
    )
