"""Runtime configuration loaded from environment variables.

Values are read from the process environment, with a local ``.env`` file
loaded via ``python-dotenv`` at import time. Required settings fail fast:
``get_settings()`` raises :class:`ConfigError` instead of falling back to an
insecure default, and the API refuses to start when that happens.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PLACEHOLDER_JWT_SECRET = "your-secret-key"
MIN_JWT_SECRET_LENGTH = 16
DEFAULT_JWT_EXPIRES_IN = "7d"
DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024

_DURATION_UNITS = {"s": 1, "m": 60, "h": 3600, "d": 86400}
_DURATION_PATTERN = re.compile(r"^(\d+)\s*([smhd]?)$")


class ConfigError(RuntimeError):
    """Raised when a required configuration value is missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Resolved application settings."""

    jwt_secret: str
    jwt_expires_in_seconds: int
    upload_dir: Path
    max_upload_bytes: int
    log_level: str


def _project_root() -> Path:
    return Path(__file__).resolve().parents[2]


def parse_duration(value: str) -> int:
    """Parse ``"3600"``, ``"30m"``, ``"12h"`` or ``"7d"`` into seconds."""
    match = _DURATION_PATTERN.match(value.strip().lower())
    if match is None:
        raise ConfigError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    seconds = int(amount) * _DURATION_UNITS[unit or "s"]
    if seconds <= 0:
        raise ConfigError(f"Duration must be positive: {value!r}")
    return seconds


def _read_jwt_secret() -> str:
    secret = os.getenv("JWT_SECRET", "").strip()
    if not secret:
        raise ConfigError("JWT_SECRET environment variable is required")
    if secret == PLACEHOLDER_JWT_SECRET:
        raise ConfigError("JWT_SECRET must not be the placeholder value")
    if len(secret) < MIN_JWT_SECRET_LENGTH:
        raise ConfigError(f"JWT_SECRET must be at least {MIN_JWT_SECRET_LENGTH} characters long")
    return secret


def get_upload_dir() -> Path:
    """Return the directory uploaded files are stored in."""
    env_dir = os.getenv("UPLOAD_DIR")
    if env_dir:
        return Path(env_dir).expanduser().resolve()
    return _project_root() / "uploads"


def get_settings() -> Settings:
    """Build settings from the current environment.

    Raises:
        ConfigError: If a required value is missing or malformed.
    """
    max_upload = os.getenv("MAX_UPLOAD_BYTES")
    try:
        max_upload_bytes = int(max_upload) if max_upload else DEFAULT_MAX_UPLOAD_BYTES
    except ValueError as exc:
        raise ConfigError(f"MAX_UPLOAD_BYTES must be an integer: {max_upload!r}") from exc

    return Settings(
        jwt_secret=_read_jwt_secret(),
        jwt_expires_in_seconds=parse_duration(
            os.getenv("JWT_EXPIRES_IN", DEFAULT_JWT_EXPIRES_IN)
        ),
        upload_dir=get_upload_dir(),
        max_upload_bytes=max_upload_bytes,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the server process."""
    logging.basicConfig(
        level=level or os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
