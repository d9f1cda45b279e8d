"""Pydantic schemas for performance and accessibility analysis."""

from __future__ import annotations

from portfolio_studio.api.schemas.common import CamelModel


class AnalysisRequest(CamelModel):
    portfolio_id: int


class PerformanceReportResponse(CamelModel):
    score: int
    project_count: int
    average_description_length: int
    has_large_images: bool
    custom_script_blocks: int
    recommendations: list[str]


class AccessibilityReportResponse(CamelModel):
    score: int
    missing_alt_tags: int
    low_contrast_pairs: int
    heading_issues: int
    contrast_ratio: float
    notes: list[str]


class PerformanceAnalysisResponse(CamelModel):
    report: PerformanceReportResponse
    ai_advice: str | None


class AccessibilityAnalysisResponse(CamelModel):
    report: AccessibilityReportResponse
    ai_advice: str | None
