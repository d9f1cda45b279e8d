"""Shared helpers for API tests."""

from __future__ import annotations

import itertools

from fastapi.testclient import TestClient

_counter = itertools.count(1)


def register(client: TestClient, email: str | None = None, password: str = "password123") -> dict:
    """Register a user and return the auth response body."""
    email = email or f"user{next(_counter)}@example.com"
    response = client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "firstName": "Ada", "lastName": "Lovelace"},
    )
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def create_portfolio(client: TestClient, token: str, **fields: object) -> dict:
    body = {"name": "My Portfolio", **fields}
    response = client.post("/api/portfolios", json=body, headers=auth_headers(token))
    assert response.status_code == 201, response.text
    return response.json()


def create_project(client: TestClient, token: str, portfolio_id: int, **fields: object) -> dict:
    body = {"title": "Project", **fields}
    response = client.post(
        f"/api/portfolios/{portfolio_id}/projects", json=body, headers=auth_headers(token)
    )
    assert response.status_code == 201, response.text
    return response.json()
