from __future__ import annotations

from fastapi.testclient import TestClient
from helpers import auth_headers, create_portfolio, create_project, register

from portfolio_studio.api.main import app

client = TestClient(app)


def _setup() -> tuple[str, dict]:
    token = register(client)["token"]
    portfolio = create_portfolio(
        client, token, name="Export Me", slug="export-me", description="About <me>"
    )
    create_project(client, token, portfolio["id"], title="Widget", tags=["python"])
    return token, portfolio


def test_json_export_is_default() -> None:
    token, portfolio = _setup()

    response = client.get(
        f"/api/portfolios/{portfolio['id']}/export", headers=auth_headers(token)
    )

    assert response.status_code == 200
    data = response.json()
    assert data["portfolio"]["name"] == "Export Me"
    assert [p["title"] for p in data["projects"]] == ["Widget"]
    assert "exportedAt" in data


def test_markdown_export_is_attachment() -> None:
    token, portfolio = _setup()

    response = client.get(
        f"/api/portfolios/{portfolio['id']}/export?format=markdown", headers=auth_headers(token)
    )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/markdown")
    assert 'filename="export-me.md"' in response.headers["content-disposition"]
    assert response.text.startswith("# Export Me")
    assert "### Widget" in response.text


def test_html_export_escapes_user_text() -> None:
    token, portfolio = _setup()

    response = client.get(
        f"/api/portfolios/{portfolio['id']}/export?format=html", headers=auth_headers(token)
    )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert 'filename="export-me.html"' in response.headers["content-disposition"]
    assert "About &lt;me&gt;" in response.text
    assert "<me>" not in response.text


def test_unknown_export_format_is_rejected() -> None:
    token, portfolio = _setup()

    response = client.get(
        f"/api/portfolios/{portfolio['id']}/export?format=pdf", headers=auth_headers(token)
    )

    assert response.status_code == 400


def test_export_requires_ownership() -> None:
    _, portfolio = _setup()
    other = register(client)["token"]

    response = client.get(
        f"/api/portfolios/{portfolio['id']}/export", headers=auth_headers(other)
    )

    assert response.status_code == 403
