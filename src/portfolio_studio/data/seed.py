"""Default template catalog inserted into an empty database."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from portfolio_studio.data.models import Template

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES: tuple[dict[str, Any], ...] = (
    {
        "name": "Minimal Developer",
        "description": "Clean single-column layout focused on code projects.",
        "category": "developer",
        "preview_image_url": "/templates/minimal-developer.png",
        "rating": 4.7,
        "config": {
            "colors": {"primary": "#1f2937", "background": "#ffffff", "accent": "#2563eb"},
            "layout": ["hero", "projects", "skills", "contact"],
        },
    },
    {
        "name": "Studio Grid",
        "description": "Image-first masonry grid for visual work.",
        "category": "designer",
        "preview_image_url": "/templates/studio-grid.png",
        "rating": 4.8,
        "config": {
            "colors": {"primary": "#111111", "background": "#fafafa", "accent": "#f97316"},
            "layout": ["hero", "gallery", "about", "contact"],
        },
    },
    {
        "name": "Case Study",
        "description": "Long-form sections for product and UX case studies.",
        "category": "designer",
        "preview_image_url": "/templates/case-study.png",
        "rating": 4.5,
        "config": {
            "colors": {"primary": "#0f172a", "background": "#f8fafc", "accent": "#14b8a6"},
            "layout": ["hero", "case-studies", "process", "testimonials", "contact"],
        },
    },
    {
        "name": "Lens",
        "description": "Full-bleed photography portfolio with dark theme.",
        "category": "photographer",
        "preview_image_url": "/templates/lens.png",
        "rating": 4.6,
        "config": {
            "colors": {"primary": "#f5f5f5", "background": "#0a0a0a", "accent": "#eab308"},
            "layout": ["hero", "gallery", "contact"],
        },
    },
    {
        "name": "Byline",
        "description": "Typography-led layout for writers and journalists.",
        "category": "writer",
        "preview_image_url": "/templates/byline.png",
        "rating": 4.4,
        "config": {
            "colors": {"primary": "#292524", "background": "#fffbeb", "accent": "#b91c1c"},
            "layout": ["hero", "articles", "about", "contact"],
        },
    },
)


def seed_default_templates(session: Session) -> int:
    """Insert the default catalog if the templates table is empty.

    Returns:
        Number of templates inserted.
    """
    if session.query(Template.id).first() is not None:
        return 0

    for entry in DEFAULT_TEMPLATES:
        session.add(Template(**entry))
    logger.info("Seeded %d default templates", len(DEFAULT_TEMPLATES))
    return len(DEFAULT_TEMPLATES)
