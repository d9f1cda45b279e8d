"""AI writing assistant routes.

Provider failures are not caught here: ``LLMError`` propagates to the
exception handler registered in ``api.errors`` and becomes a 500.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from portfolio_studio.api.dependencies import CurrentUser, get_llm_service
from portfolio_studio.api.schemas.ai import (
    ContentImprovementsRequest,
    ContentImprovementsResponse,
    GenerateTextRequest,
    GenerateTextResponse,
    TemplateIdeasRequest,
    TemplateIdeasResponse,
    TranslateRequest,
    TranslateResponse,
)
from portfolio_studio.services import ai_assist
from portfolio_studio.services.llm_service import LLMService

router = APIRouter(prefix="/ai", tags=["ai"])

LLM = Annotated[LLMService, Depends(get_llm_service)]

_UPSTREAM_ERROR = {500: {"description": "AI provider request failed"}}


@router.post(
    "/generate-text",
    response_model=GenerateTextResponse,
    summary="Generate portfolio copy",
    responses=_UPSTREAM_ERROR,
)
def generate_text(
    request: GenerateTextRequest, current_user: CurrentUser, llm: LLM
) -> GenerateTextResponse:
    text = ai_assist.generate_text(
        llm,
        request.prompt,
        tone=request.tone,
        length=request.length,
        existing_text=request.existing_text or None,
    )
    return GenerateTextResponse(text=text)


@router.post(
    "/content-improvements",
    response_model=ContentImprovementsResponse,
    summary="Review existing copy",
    responses=_UPSTREAM_ERROR,
)
def content_improvements(
    request: ContentImprovementsRequest, current_user: CurrentUser, llm: LLM
) -> ContentImprovementsResponse:
    suggestions = ai_assist.suggest_content_improvements(llm, request.content)
    return ContentImprovementsResponse(suggestions=suggestions)


@router.post(
    "/templates",
    response_model=TemplateIdeasResponse,
    summary="Outline a custom template",
    responses=_UPSTREAM_ERROR,
)
def template_ideas(
    request: TemplateIdeasRequest, current_user: CurrentUser, llm: LLM
) -> TemplateIdeasResponse:
    outline = ai_assist.generate_template_ideas(
        llm,
        request.industry,
        goals=request.goals,
        tone=request.tone,
        must_have_sections=request.must_have_sections,
    )
    return TemplateIdeasResponse(outline=outline)


@router.post(
    "/translate",
    response_model=TranslateResponse,
    summary="Translate copy",
    responses=_UPSTREAM_ERROR,
)
def translate(request: TranslateRequest, current_user: CurrentUser, llm: LLM) -> TranslateResponse:
    translated = ai_assist.translate_text(
        llm, request.text, request.target_language, request.source_language
    )
    return TranslateResponse(translated=translated)
