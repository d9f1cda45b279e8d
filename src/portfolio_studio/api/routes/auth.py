"""Authentication routes: register, login, current user and logout."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from portfolio_studio.api.dependencies import CurrentUser
from portfolio_studio.api.schemas.auth import (
    AuthResponse,
    CurrentUserResponse,
    LoginRequest,
    RegisterRequest,
    UserDetailResponse,
    UserResponse,
)
from portfolio_studio.api.schemas.common import MessageResponse
from portfolio_studio.data.db import get_session
from portfolio_studio.services.auth import authenticate_user, create_access_token, register_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
    responses={400: {"description": "Invalid data or email already registered"}},
)
def register(request: RegisterRequest) -> AuthResponse:
    with get_session() as session:
        user, error = register_user(
            session,
            email=request.email,
            password=request.password,
            first_name=request.first_name,
            last_name=request.last_name,
        )
        if user is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)

        return AuthResponse(
            message="User created successfully",
            token=create_access_token(user.id),
            user=UserResponse.model_validate(user),
        )


@router.post("/login", response_model=AuthResponse, summary="Log in")
def login(request: LoginRequest) -> AuthResponse:
    with get_session() as session:
        user = authenticate_user(session, request.email, request.password)
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid email or password",
            )

        return AuthResponse(
            message="Login successful",
            token=create_access_token(user.id),
            user=UserResponse.model_validate(user),
        )


@router.get("/me", response_model=CurrentUserResponse, summary="Current user")
def me(current_user: CurrentUser) -> CurrentUserResponse:
    return CurrentUserResponse(user=UserResponse.model_validate(current_user))


@router.get(
    "/user",
    response_model=UserDetailResponse,
    summary="Current user record",
    description="Full account record of the requester, without the password hash.",
)
def current_user_record(current_user: CurrentUser) -> UserDetailResponse:
    return UserDetailResponse.model_validate(current_user)


@router.post("/logout", response_model=MessageResponse, summary="Log out")
def logout() -> MessageResponse:
    """Tokens are stateless; the client discards its copy."""
    return MessageResponse(message="Logout successful")
