"""ORM models package for database tables.

This package provides SQLAlchemy ORM models representing database tables:
- User: Account used to authenticate API requests
- Portfolio: A user's publishable site definition
- Project: Work items displayed in a portfolio
- Template: Global catalog of portfolio templates
- PortfolioVersion: Immutable snapshots of a portfolio's editable fields

All models inherit from the shared Base declarative class defined in data.db.
"""

from portfolio_studio.data.db import Base
from portfolio_studio.data.models.portfolio import Portfolio
from portfolio_studio.data.models.portfolio_version import PortfolioVersion
from portfolio_studio.data.models.project import Project
from portfolio_studio.data.models.template import Template
from portfolio_studio.data.models.user import User

__all__ = ["Base", "Portfolio", "PortfolioVersion", "Project", "Template", "User"]
