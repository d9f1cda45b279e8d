"""Performance and accessibility analysis routes.

The score is always returned. The AI advice attached to it is best effort:
when the provider fails the advice is ``null`` and a warning is logged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import asdict
from typing import Annotated, TypeVar

from fastapi import APIRouter, Depends

from portfolio_studio.api.dependencies import CurrentUser, get_llm_service, get_owned_portfolio
from portfolio_studio.api.schemas.analysis import (
    AccessibilityAnalysisResponse,
    AccessibilityReportResponse,
    AnalysisRequest,
    PerformanceAnalysisResponse,
    PerformanceReportResponse,
)
from portfolio_studio.data.crud.projects import get_portfolio_projects
from portfolio_studio.data.db import get_session
from portfolio_studio.services.ai_assist import (
    generate_accessibility_suggestions,
    generate_performance_suggestions,
)
from portfolio_studio.services.analysis import analyze_accessibility, analyze_performance
from portfolio_studio.services.llm_service import LLMService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analysis", tags=["analysis"])

LLM = Annotated[LLMService, Depends(get_llm_service)]

ReportT = TypeVar("ReportT")


def _best_effort_advice(
    advise: Callable[[LLMService, ReportT], str], llm: LLMService, report: ReportT
) -> str | None:
    try:
        return advise(llm, report)
    except Exception as exc:
        logger.warning("AI advice unavailable: %s", exc)
        return None


@router.post(
    "/performance",
    response_model=PerformanceAnalysisResponse,
    summary="Analyze portfolio performance",
)
def performance(
    request: AnalysisRequest, current_user: CurrentUser, llm: LLM
) -> PerformanceAnalysisResponse:
    with get_session() as session:
        portfolio = get_owned_portfolio(session, request.portfolio_id, current_user)
        report = analyze_performance(portfolio, get_portfolio_projects(session, portfolio.id))

    advice = _best_effort_advice(generate_performance_suggestions, llm, report)
    return PerformanceAnalysisResponse(
        report=PerformanceReportResponse(**asdict(report)),
        ai_advice=advice,
    )


@router.post(
    "/accessibility",
    response_model=AccessibilityAnalysisResponse,
    summary="Analyze portfolio accessibility",
    description=(
        "Heuristic checks: images without a description count as missing alt text and "
        "projects with an empty tag list count as heading-structure issues."
    ),
)
def accessibility(
    request: AnalysisRequest, current_user: CurrentUser, llm: LLM
) -> AccessibilityAnalysisResponse:
    with get_session() as session:
        portfolio = get_owned_portfolio(session, request.portfolio_id, current_user)
        report = analyze_accessibility(portfolio, get_portfolio_projects(session, portfolio.id))

    advice = _best_effort_advice(generate_accessibility_suggestions, llm, report)
    return AccessibilityAnalysisResponse(
        report=AccessibilityReportResponse(**asdict(report)),
        ai_advice=advice,
    )
