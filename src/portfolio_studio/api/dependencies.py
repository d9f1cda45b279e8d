"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from portfolio_studio.data.crud.portfolios import get_portfolio
from portfolio_studio.data.crud.users import get_user
from portfolio_studio.data.db import get_session
from portfolio_studio.data.models import Portfolio, User
from portfolio_studio.services.auth import decode_access_token
from portfolio_studio.services.llm_service import LLMService

_bearer_scheme = HTTPBearer(auto_error=False, description="JWT issued by /api/auth/login")


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer_scheme)],
) -> User:
    """Resolve the authenticated user from the ``Authorization: Bearer`` header.

    Raises:
        HTTPException: If the token is missing, invalid, expired, or names an
            unknown user (401).
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    with get_session() as session:
        user = get_user(session, user_id)
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="User not found",
                headers={"WWW-Authenticate": "Bearer"},
            )
        session.expunge(user)
        return user


CurrentUser = Annotated[User, Depends(get_current_user)]


def get_owned_portfolio(session: Session, portfolio_id: int, user: User) -> Portfolio:
    """Load a portfolio and verify the requester owns it.

    Raises:
        HTTPException: If the portfolio does not exist (404) or belongs to
            another user (403).
    """
    portfolio = get_portfolio(session, portfolio_id)
    if portfolio is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Portfolio not found",
        )
    if portfolio.user_id != user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied",
        )
    return portfolio


def get_llm_service() -> LLMService:
    """Return the LLM service used by AI and analysis routes."""
    return LLMService()
