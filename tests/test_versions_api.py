from __future__ import annotations

from fastapi.testclient import TestClient
from helpers import auth_headers, create_portfolio, register

from portfolio_studio.api.main import app
from portfolio_studio.data.db import get_session
from portfolio_studio.data.models import PortfolioVersion

client = TestClient(app)


def _snapshot(token: str, portfolio_id: int, **body: object) -> dict:
    response = client.post(
        f"/api/portfolios/{portfolio_id}/versions", json=body, headers=auth_headers(token)
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_create_snapshot_copies_editable_fields() -> None:
    token = register(client)["token"]
    portfolio = create_portfolio(
        client,
        token,
        name="Versioned",
        description="First draft",
        customization={"colors": {"primary": "#123456"}},
    )

    version = _snapshot(token, portfolio["id"], title="Draft 1", summary="Initial")

    assert version["title"] == "Draft 1"
    assert version["summary"] == "Initial"
    assert version["portfolioId"] == portfolio["id"]
    snapshot = version["snapshot"]
    assert snapshot["name"] == "Versioned"
    assert snapshot["description"] == "First draft"
    assert snapshot["slug"] == portfolio["slug"]
    assert snapshot["is_published"] is False
    assert snapshot["customization"]["colors"]["primary"] == "#123456"


def test_snapshot_without_title_gets_default() -> None:
    token = register(client)["token"]
    portfolio = create_portfolio(client, token)

    response = client.post(
        f"/api/portfolios/{portfolio['id']}/versions", headers=auth_headers(token)
    )

    assert response.status_code == 201
    assert response.json()["title"].startswith("Snapshot ")
    assert response.json()["title"].endswith(" UTC")


def test_list_versions_newest_first() -> None:
    token = register(client)["token"]
    portfolio = create_portfolio(client, token)
    _snapshot(token, portfolio["id"], title="one")
    _snapshot(token, portfolio["id"], title="two")
    _snapshot(token, portfolio["id"], title="three")

    response = client.get(
        f"/api/portfolios/{portfolio['id']}/versions", headers=auth_headers(token)
    )

    assert response.status_code == 200
    assert [v["title"] for v in response.json()] == ["three", "two", "one"]


def test_revert_restores_snapshot_fields() -> None:
    token = register(client)["token"]
    headers = auth_headers(token)
    portfolio = create_portfolio(client, token, name="Before", description="Old copy")
    version = _snapshot(token, portfolio["id"], title="baseline")

    client.patch(
        f"/api/portfolios/{portfolio['id']}",
        json={
            "name": "After",
            "description": None,
            "slug": "after-slug",
            "isPublished": True,
            "customization": {"colors": {"primary": "#ff0000"}},
        },
        headers=headers,
    )

    response = client.post(
        f"/api/portfolios/{portfolio['id']}/versions/{version['id']}/revert", headers=headers
    )

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Before"
    assert data["description"] == "Old copy"
    assert data["slug"] == portfolio["slug"]
    assert data["isPublished"] is False
    assert data["customization"] is None


def test_revert_does_not_create_a_new_version() -> None:
    token = register(client)["token"]
    headers = auth_headers(token)
    portfolio = create_portfolio(client, token)
    version = _snapshot(token, portfolio["id"])

    client.post(f"/api/portfolios/{portfolio['id']}/versions/{version['id']}/revert", headers=headers)

    listing = client.get(f"/api/portfolios/{portfolio['id']}/versions", headers=headers)
    assert len(listing.json()) == 1


def test_revert_with_version_from_other_portfolio_is_not_found() -> None:
    token = register(client)["token"]
    first = create_portfolio(client, token, name="First", description="First site")
    second = create_portfolio(client, token, name="Second")
    version = _snapshot(token, first["id"])
    edited = client.patch(
        f"/api/portfolios/{second['id']}",
        json={"name": "Second edited", "description": "Kept as is"},
        headers=auth_headers(token),
    )
    assert edited.status_code == 200

    response = client.post(
        f"/api/portfolios/{second['id']}/versions/{version['id']}/revert",
        headers=auth_headers(token),
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Version not found"

    second_after = client.get(
        f"/api/portfolios/{second['id']}", headers=auth_headers(token)
    ).json()
    assert second_after["name"] == "Second edited"
    assert second_after["description"] == "Kept as is"
    assert second_after["slug"] == second["slug"]

    first_after = client.get(f"/api/portfolios/{first['id']}", headers=auth_headers(token)).json()
    assert first_after["name"] == "First"
    assert first_after["description"] == "First site"


def test_revert_rejects_malformed_snapshot() -> None:
    token = register(client)["token"]
    portfolio = create_portfolio(client, token, name="Stable")
    version = _snapshot(token, portfolio["id"])
    with get_session() as session:
        stored = session.get(PortfolioVersion, version["id"])
        stored.snapshot = {"name": "", "slug": "Not Valid"}

    response = client.post(
        f"/api/portfolios/{portfolio['id']}/versions/{version['id']}/revert",
        headers=auth_headers(token),
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Snapshot payload is invalid"
    assert response.json()["errors"]

    current = client.get(f"/api/portfolios/{portfolio['id']}", headers=auth_headers(token))
    assert current.json()["name"] == "Stable"


def test_revert_conflicting_slug_is_rejected() -> None:
    token = register(client)["token"]
    headers = auth_headers(token)
    portfolio = create_portfolio(client, token, name="Mine", slug="shared")
    version = _snapshot(token, portfolio["id"])
    client.patch(f"/api/portfolios/{portfolio['id']}", json={"slug": "moved"}, headers=headers)
    create_portfolio(client, token, name="Other", slug="shared")

    response = client.post(
        f"/api/portfolios/{portfolio['id']}/versions/{version['id']}/revert", headers=headers
    )

    assert response.status_code == 409


def test_versions_of_other_users_portfolio_are_forbidden() -> None:
    alice = register(client)["token"]
    bob = register(client)["token"]
    portfolio = create_portfolio(client, alice)
    version = _snapshot(alice, portfolio["id"])

    listing = client.get(f"/api/portfolios/{portfolio['id']}/versions", headers=auth_headers(bob))
    revert = client.post(
        f"/api/portfolios/{portfolio['id']}/versions/{version['id']}/revert",
        headers=auth_headers(bob),
    )

    assert listing.status_code == 403
    assert revert.status_code == 403


def test_snapshot_then_revert_reproduces_state() -> None:
    token = register(client)["token"]
    headers = auth_headers(token)
    portfolio = create_portfolio(
        client,
        token,
        name="Stateful",
        description="Exact copy",
        isPublished=True,
        customization={"colors": {"primary": "#abc"}, "layout": ["hero", "projects"]},
    )
    version = _snapshot(token, portfolio["id"])

    response = client.post(
        f"/api/portfolios/{portfolio['id']}/versions/{version['id']}/revert", headers=headers
    )

    reverted = response.json()
    for field in ("name", "description", "slug", "isPublished", "templateId", "customization"):
        assert reverted[field] == portfolio[field]


def test_long_name_gets_a_slug_that_survives_snapshot_and_revert() -> None:
    token = register(client)["token"]
    portfolio = create_portfolio(client, token, name="a" * 150)
    twin = create_portfolio(client, token, name="a" * 150)

    assert len(portfolio["slug"]) <= 120
    assert len(twin["slug"]) <= 120
    assert twin["slug"] != portfolio["slug"]

    version = _snapshot(token, portfolio["id"])
    reverted = client.post(
        f"/api/portfolios/{portfolio['id']}/versions/{version['id']}/revert",
        headers=auth_headers(token),
    )
    assert reverted.status_code == 200, reverted.text
    assert reverted.json()["slug"] == portfolio["slug"]

    resubmitted = client.patch(
        f"/api/portfolios/{portfolio['id']}",
        json={"slug": portfolio["slug"]},
        headers=auth_headers(token),
    )
    assert resubmitted.status_code == 200, resubmitted.text
