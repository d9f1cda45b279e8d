"""Shared Pydantic schemas for API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase JSON keys.

    Input accepts both camelCase and snake_case keys; output uses camelCase.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(CamelModel):
    """Plain acknowledgement message."""

    message: str


class FieldError(BaseModel):
    """A single validation failure."""

    field: str = Field(description="Dotted location of the invalid value")
    message: str
    type: str


class ValidationErrorResponse(BaseModel):
    """Body returned with 400 responses for malformed input."""

    detail: str = "Validation failed"
    errors: list[FieldError]
