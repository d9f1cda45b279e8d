"""Authentication helpers for the API.

Passwords are stored as salted PBKDF2 hashes. Sessions are stateless
HS256 JWTs whose ``sub`` claim carries the user id.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import os
from datetime import UTC, datetime, timedelta

import jwt
from sqlalchemy.orm import Session

from portfolio_studio.config import Settings, get_settings
from portfolio_studio.data.crud.users import create_user, get_user_by_email
from portfolio_studio.data.models import User

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"

_PBKDF2_ITERATIONS = 100_000
_SALT_BYTES = 16


def hash_password(password: str) -> str:
    """Return a salted PBKDF2 hash for the given password.

    The result is stored as ``<salt_hex>:<hash_hex>``.
    """
    salt = os.urandom(_SALT_BYTES)
    derived = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)
    return f"{salt.hex()}:{derived.hex()}"


def verify_password(password: str, stored_hash: str) -> bool:
    """Verify a password against a stored ``salt:hash`` string."""
    try:
        salt_hex, hash_hex = stored_hash.split(":", 1)
    except ValueError:
        return False

    try:
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(hash_hex)
    except ValueError:
        return False

    candidate = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt,
        _PBKDF2_ITERATIONS,
    )
    return hmac.compare_digest(candidate, expected)


def create_access_token(user_id: int, settings: Settings | None = None) -> str:
    """Issue a signed token for ``user_id``."""
    settings = settings or get_settings()
    now = datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(seconds=settings.jwt_expires_in_seconds),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings | None = None) -> int | None:
    """Return the user id carried by ``token``, or None if it is invalid or expired."""
    settings = settings or get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[JWT_ALGORITHM])
    except jwt.PyJWTError:
        return None

    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        return None


def register_user(
    session: Session,
    *,
    email: str,
    password: str,
    first_name: str | None = None,
    last_name: str | None = None,
) -> tuple[User | None, str | None]:
    """Create a new user account.

    Returns:
        Tuple of (user, error message). On success, error is None.
    """
    if get_user_by_email(session, email) is not None:
        return None, "User with this email already exists"

    user = create_user(
        session,
        email=email,
        password_hash=hash_password(password),
        first_name=first_name,
        last_name=last_name,
    )
    logger.info("Registered user %s", user.id)
    return user, None


def authenticate_user(session: Session, email: str, password: str) -> User | None:
    """Return the user matching the credentials, or None."""
    user = get_user_by_email(session, email)
    if user is None:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user
