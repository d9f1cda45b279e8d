"""File upload routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, File, HTTPException, UploadFile, status
from fastapi.responses import FileResponse

from portfolio_studio.api.dependencies import CurrentUser
from portfolio_studio.api.schemas.uploads import UploadResponse
from portfolio_studio.config import get_settings
from portfolio_studio.services.upload_storage import get_upload_path, store_upload

router = APIRouter(tags=["uploads"])

# Served outside the /api prefix so stored URLs can be used directly in pages.
files_router = APIRouter(tags=["uploads"])


@router.post(
    "/upload",
    response_model=UploadResponse,
    summary="Upload a media file",
    description="Accepts jpeg, jpg, png, gif, pdf, doc and docx files up to the size limit.",
    responses={400: {"description": "Missing, invalid or oversized file"}},
)
def upload_file(
    current_user: CurrentUser,
    file: Annotated[UploadFile | None, File(description="File to upload")] = None,
) -> UploadResponse:
    if file is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded",
        )

    stored = store_upload(
        file.filename,
        file.content_type,
        file.file,
        max_bytes=get_settings().max_upload_bytes,
    )
    return UploadResponse(url=stored.url)


@files_router.get("/uploads/{filename}", summary="Download an uploaded file")
def get_uploaded_file(filename: str) -> FileResponse:
    path = get_upload_path(filename)
    if path is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="File not found",
        )
    return FileResponse(path)
