"""Query helpers for the users table."""

from __future__ import annotations

from sqlalchemy.orm import Session

from portfolio_studio.data.models import User


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user(session: Session, user_id: int) -> User | None:
    return session.get(User, user_id)


def get_user_by_email(session: Session, email: str) -> User | None:
    return session.query(User).filter(User.email == normalize_email(email)).first()


def create_user(
    session: Session,
    *,
    email: str,
    password_hash: str,
    first_name: str | None = None,
    last_name: str | None = None,
) -> User:
    user = User(
        email=normalize_email(email),
        password_hash=password_hash,
        first_name=first_name,
        last_name=last_name,
    )
    session.add(user)
    session.flush()
    session.refresh(user)
    return user
