from __future__ import annotations

from pathlib import Path

import pytest

import portfolio_studio.data.db as app_db
from portfolio_studio.data.db import dispose_engine, init_db

TEST_JWT_SECRET = "test-secret-key-with-enough-length"


@pytest.fixture(autouse=True)
def jwt_secret(monkeypatch: pytest.MonkeyPatch) -> str:
    """Provide a valid signing secret for every test."""
    monkeypatch.setenv("JWT_SECRET", TEST_JWT_SECRET)
    monkeypatch.delenv("JWT_EXPIRES_IN", raising=False)
    monkeypatch.delenv("MAX_UPLOAD_BYTES", raising=False)
    return TEST_JWT_SECRET


@pytest.fixture
def api_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Use a temporary SQLite DB for API tests."""
    db_path = tmp_path / "api.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    upload_root = tmp_path / "uploads"
    monkeypatch.setenv("UPLOAD_DIR", upload_root.as_posix())
    app_db._engine = None
    app_db._SessionLocal = None
    init_db()
    yield
    # Dispose engine to release connections
    dispose_engine()


@pytest.fixture(autouse=True)
def _api_db_for_api_files(request: pytest.FixtureRequest) -> None:
    """Automatically apply the api_db fixture to tests in API test files."""
    # Check if test file name contains "api" (case-insensitive)
    test_file_path = Path(str(request.node.fspath))
    if "api" in test_file_path.stem.lower():
        request.getfixturevalue("api_db")
