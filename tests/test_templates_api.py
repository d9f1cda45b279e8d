from __future__ import annotations

from fastapi.testclient import TestClient
from helpers import create_portfolio, register

from portfolio_studio.api.main import app
from portfolio_studio.data.crud.templates import create_template
from portfolio_studio.data.db import get_session

client = TestClient(app)


def test_default_catalog_is_public() -> None:
    response = client.get("/api/templates")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 5
    assert {"name", "category", "usageCount", "isActive", "config"} <= set(data[0])


def test_filter_by_category() -> None:
    response = client.get("/api/templates", params={"category": "designer"})

    assert response.status_code == 200
    assert {t["category"] for t in response.json()} == {"designer"}
    assert len(response.json()) == 2


def test_inactive_templates_are_hidden() -> None:
    with get_session() as session:
        create_template(session, name="Retired", category="developer", is_active=False)

    names = [t["name"] for t in client.get("/api/templates").json()]

    assert "Retired" not in names


def test_templates_ordered_by_usage() -> None:
    templates = client.get("/api/templates").json()
    popular = templates[-1]
    token = register(client)["token"]
    create_portfolio(client, token, name="Uses it", templateId=popular["id"])

    reordered = client.get("/api/templates").json()

    assert reordered[0]["id"] == popular["id"]
    assert reordered[0]["usageCount"] == popular["usageCount"] + 1


def test_get_template_by_id() -> None:
    template = client.get("/api/templates").json()[0]

    found = client.get(f"/api/templates/{template['id']}")
    missing = client.get("/api/templates/99999")

    assert found.status_code == 200
    assert found.json()["name"] == template["name"]
    assert missing.status_code == 404
