"""Route handlers for the API."""

from portfolio_studio.api.routes import (
    ai,
    analysis,
    auth,
    health,
    portfolios,
    projects,
    templates,
    uploads,
    versions,
)

__all__ = [
    "ai",
    "analysis",
    "auth",
    "health",
    "portfolios",
    "projects",
    "templates",
    "uploads",
    "versions",
]
