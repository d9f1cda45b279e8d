"""Exception handlers translating domain failures into HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from portfolio_studio.api.schemas.common import FieldError, ValidationErrorResponse
from portfolio_studio.services.llm_providers import LLMError
from portfolio_studio.services.portfolio_editing import SlugConflictError, UnknownTemplateError
from portfolio_studio.services.upload_storage import UploadRejectedError
from portfolio_studio.services.versioning import SnapshotPayloadError

logger = logging.getLogger(__name__)


def _field_errors(errors: list[dict]) -> list[FieldError]:
    return [
        FieldError(
            field=".".join(str(part) for part in error.get("loc", ())),
            message=str(error.get("msg", "Invalid value")),
            type=str(error.get("type", "value_error")),
        )
        for error in errors
    ]


def _validation_response(errors: list[dict], detail: str = "Validation failed") -> JSONResponse:
    body = ValidationErrorResponse(detail=detail, errors=_field_errors(errors))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _validation_response(list(exc.errors()))


async def snapshot_payload_handler(request: Request, exc: SnapshotPayloadError) -> JSONResponse:
    logger.warning("Rejected malformed snapshot %s", exc.version_id)
    return _validation_response(exc.errors, detail="Snapshot payload is invalid")


async def slug_conflict_handler(request: Request, exc: SlugConflictError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


async def unknown_template_handler(request: Request, exc: UnknownTemplateError) -> JSONResponse:
    return _validation_response(
        [{"loc": ("body", "templateId"), "msg": str(exc), "type": "template_not_found"}]
    )


async def upload_rejected_handler(request: Request, exc: UploadRejectedError) -> JSONResponse:
    logger.warning("Rejected upload: %s", exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


async def llm_error_handler(request: Request, exc: LLMError) -> JSONResponse:
    logger.error("AI request to %s failed: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "AI service request failed"},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SnapshotPayloadError, snapshot_payload_handler)
    app.add_exception_handler(SlugConflictError, slug_conflict_handler)
    app.add_exception_handler(UnknownTemplateError, unknown_template_handler)
    app.add_exception_handler(UploadRejectedError, upload_rejected_handler)
    app.add_exception_handler(LLMError, llm_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
