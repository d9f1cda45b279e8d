"""Write path shared by portfolio creation, patching and snapshot reverts.

Column values reach the ``portfolios`` table only through this module so
that slug uniqueness, template references and the customization payload are
checked the same way everywhere.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from portfolio_studio.api.schemas.customization import Customization
from portfolio_studio.data.crud.portfolios import (
    create_portfolio,
    slug_exists,
    slugify,
    unique_slug,
    update_portfolio,
)
from portfolio_studio.data.crud.templates import get_template, increment_template_usage
from portfolio_studio.data.models import Portfolio


class SlugConflictError(ValueError):
    """Raised when a slug is already used by another portfolio."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Slug '{slug}' is already in use")
        self.slug = slug


class UnknownTemplateError(ValueError):
    """Raised when a portfolio references a template that does not exist."""

    def __init__(self, template_id: int) -> None:
        super().__init__(f"Template {template_id} does not exist")
        self.template_id = template_id


def serialize_customization(value: Customization | dict[str, Any] | None) -> dict[str, Any] | None:
    """Return the JSON form stored in the ``customization`` column."""
    if value is None:
        return None
    if isinstance(value, dict):
        value = Customization.model_validate(value)
    return value.model_dump(mode="json")


def _check_template(session: Session, template_id: int | None) -> None:
    if template_id is not None and get_template(session, template_id) is None:
        raise UnknownTemplateError(template_id)


def create_user_portfolio(session: Session, user_id: int, fields: dict[str, Any]) -> Portfolio:
    """Insert a portfolio for ``user_id``.

    ``fields`` holds column names. A missing slug is derived from the name and
    suffixed until unique; an explicit slug that is taken raises
    :class:`SlugConflictError`.
    """
    values = dict(fields)
    slug = values.get("slug")
    if slug:
        if slug_exists(session, slug):
            raise SlugConflictError(slug)
    else:
        values["slug"] = unique_slug(session, slugify(values["name"]))

    template_id = values.get("template_id")
    _check_template(session, template_id)
    values["customization"] = serialize_customization(values.get("customization"))

    portfolio = create_portfolio(session, user_id=user_id, **values)
    if template_id is not None:
        increment_template_usage(session, template_id)
    return portfolio


def apply_portfolio_updates(
    session: Session, portfolio: Portfolio, updates: dict[str, Any]
) -> Portfolio:
    """Write ``updates`` (column name -> value) onto ``portfolio``."""
    values = dict(updates)
    slug = values.get("slug")
    if slug is not None and slug_exists(session, slug, exclude_id=portfolio.id):
        raise SlugConflictError(slug)

    template_changed = False
    if "template_id" in values:
        _check_template(session, values["template_id"])
        template_changed = values["template_id"] != portfolio.template_id

    if "customization" in values:
        values["customization"] = serialize_customization(values["customization"])

    portfolio = update_portfolio(session, portfolio, values)
    if template_changed and portfolio.template_id is not None:
        increment_template_usage(session, portfolio.template_id)
    return portfolio
