"""Pydantic schemas for authentication endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from portfolio_studio.api.schemas.common import CamelModel

MIN_PASSWORD_LENGTH = 8


class RegisterRequest(CamelModel):
    """Request body for creating an account."""

    email: EmailStr
    password: str = Field(min_length=MIN_PASSWORD_LENGTH, max_length=128)
    first_name: str | None = Field(None, max_length=128)
    last_name: str | None = Field(None, max_length=128)


class LoginRequest(CamelModel):
    """Request body for exchanging credentials for a token."""

    email: EmailStr
    password: str = Field(min_length=1, max_length=128)


class UserResponse(CamelModel):
    """Public view of a user account."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    email: str
    first_name: str | None = None
    last_name: str | None = None


class UserDetailResponse(UserResponse):
    """User account including timestamps."""

    created_at: datetime
    updated_at: datetime


class AuthResponse(CamelModel):
    """Token issued after registration or login."""

    message: str
    token: str
    user: UserResponse


class CurrentUserResponse(CamelModel):
    user: UserResponse
