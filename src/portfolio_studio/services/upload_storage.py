"""Helpers for storing and retrieving uploaded media files."""

from __future__ import annotations

import logging
import re
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from portfolio_studio.config import get_upload_dir

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads"

ALLOWED_TYPES = re.compile(r"jpeg|jpg|png|gif|pdf|doc|docx")
ALLOWED_EXTENSIONS = (".jpeg", ".jpg", ".png", ".gif", ".pdf", ".doc", ".docx")
_STORED_NAME = re.compile(r"^[0-9a-f]{32}\.[a-z]+$")
CHUNK_SIZE = 8192  # 8KB chunks


class UploadRejectedError(ValueError):
    """Raised when an uploaded file fails validation."""


@dataclass(frozen=True)
class StoredUpload:
    filename: str
    path: Path

    @property
    def url(self) -> str:
        return f"{UPLOAD_URL_PREFIX}/{self.filename}"


def get_upload_storage_root() -> Path:
    """Return the root directory for stored uploads."""
    return get_upload_dir()


def validate_upload(filename: str | None, content_type: str | None) -> str:
    """Check extension and content type; return the normalized extension.

    Both the extension and the MIME type must name an allowed type.
    """
    if not filename:
        raise UploadRejectedError("No file uploaded")
    extension = Path(filename).suffix.lower()
    if extension not in ALLOWED_EXTENSIONS:
        raise UploadRejectedError("Invalid file type")
    if not content_type or not ALLOWED_TYPES.search(content_type.lower()):
        raise UploadRejectedError("Invalid file type")
    return extension


def store_upload(
    filename: str | None,
    content_type: str | None,
    source: BinaryIO,
    *,
    max_bytes: int,
) -> StoredUpload:
    """Validate and persist an uploaded file under a random name.

    The stream is copied in chunks and abandoned as soon as it passes
    ``max_bytes``; a rejected file leaves nothing behind on disk.
    """
    extension = validate_upload(filename, content_type)

    stored_name = f"{uuid.uuid4().hex}{extension}"
    target_path = get_upload_storage_root() / stored_name
    target_path.parent.mkdir(parents=True, exist_ok=True)

    size = 0
    try:
        with open(target_path, "wb") as f:
            while True:
                chunk = source.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > max_bytes:
                    raise UploadRejectedError(f"File exceeds the {max_bytes} byte limit")
                f.write(chunk)
        if size == 0:
            raise UploadRejectedError("Uploaded file is empty")
    except Exception:
        target_path.unlink(missing_ok=True)
        raise

    logger.info("Stored upload %s (%d bytes)", stored_name, size)
    return StoredUpload(filename=stored_name, path=target_path)


def get_upload_path(filename: str) -> Path | None:
    """Return the path of a stored upload, or None if it does not exist."""
    if not _STORED_NAME.match(filename):
        return None
    path = get_upload_storage_root() / filename
    return path if path.is_file() else None
