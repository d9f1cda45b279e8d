from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from helpers import auth_headers, register

from portfolio_studio.api.main import app

client = TestClient(app)

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def test_upload_requires_auth() -> None:
    response = client.post(
        "/api/upload", files={"file": ("photo.png", PNG_BYTES, "image/png")}
    )

    assert response.status_code == 401


def test_upload_and_download_round_trip() -> None:
    token = register(client)["token"]

    response = client.post(
        "/api/upload",
        files={"file": ("photo.png", PNG_BYTES, "image/png")},
        headers=auth_headers(token),
    )

    assert response.status_code == 200
    url = response.json()["url"]
    assert url.startswith("/uploads/")
    assert url.endswith(".png")

    download = client.get(url)
    assert download.status_code == 200
    assert download.content == PNG_BYTES


def test_upload_without_file_is_rejected() -> None:
    token = register(client)["token"]

    response = client.post("/api/upload", headers=auth_headers(token))

    assert response.status_code == 400
    assert response.json()["detail"] == "No file uploaded"


@pytest.mark.parametrize(
    ("filename", "content_type"),
    [
        ("script.exe", "application/octet-stream"),
        ("notes.txt", "text/plain"),
        ("photo.png", "text/html"),
    ],
)
def test_upload_rejects_disallowed_types(filename: str, content_type: str) -> None:
    token = register(client)["token"]

    response = client.post(
        "/api/upload",
        files={"file": (filename, b"data", content_type)},
        headers=auth_headers(token),
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid file type"


def test_upload_rejects_oversized_file(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAX_UPLOAD_BYTES", "16")
    token = register(client)["token"]

    response = client.post(
        "/api/upload",
        files={"file": ("photo.png", PNG_BYTES, "image/png")},
        headers=auth_headers(token),
    )

    assert response.status_code == 400
    assert "limit" in response.json()["detail"]


def test_download_unknown_file_is_not_found() -> None:
    assert client.get("/uploads/0123456789abcdef0123456789abcdef.png").status_code == 404
    assert client.get("/uploads/..%2Fdatabase.db").status_code == 404


def test_oversized_upload_leaves_nothing_in_upload_dir(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("MAX_UPLOAD_BYTES", "16")
    token = register(client)["token"]

    response = client.post(
        "/api/upload",
        files={"file": ("photo.png", PNG_BYTES * 1000, "image/png")},
        headers=auth_headers(token),
    )

    assert response.status_code == 400
    upload_root = tmp_path / "uploads"
    assert not upload_root.exists() or list(upload_root.iterdir()) == []
