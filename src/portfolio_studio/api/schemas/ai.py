"""Pydantic schemas for AI writing assistant endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from portfolio_studio.api.schemas.common import CamelModel

TextLength = Literal["short", "medium", "long"]


class GenerateTextRequest(CamelModel):
    prompt: str = Field(min_length=1, max_length=2000)
    tone: str = Field("professional", min_length=1, max_length=40)
    length: TextLength = "medium"
    existing_text: str | None = Field(None, max_length=10000)


class GenerateTextResponse(CamelModel):
    text: str


class ContentImprovementsRequest(CamelModel):
    content: str = Field(min_length=1, max_length=20000)


class ContentImprovementsResponse(CamelModel):
    suggestions: str


class TemplateIdeasRequest(CamelModel):
    industry: str = Field(min_length=1, max_length=200)
    goals: str | None = Field(None, max_length=2000)
    tone: str | None = Field(None, max_length=40)
    must_have_sections: list[str] | None = None


class TemplateIdeasResponse(CamelModel):
    outline: str


class TranslateRequest(CamelModel):
    text: str = Field(min_length=1, max_length=20000)
    target_language: str = Field(min_length=1, max_length=64)
    source_language: str | None = Field(None, max_length=64)


class TranslateResponse(CamelModel):
    translated: str
