"""Heuristic performance and accessibility scoring for portfolios.

Everything here is pure and deterministic: the functions only look at the
portfolio row and its already-loaded projects. The accessibility checks are
stand-ins rather than DOM audits: an image without a description is
counted as missing alt text, and an empty tag list is counted as a
heading-structure issue.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

PERFORMANCE_BASE_SCORE = 100
PERFORMANCE_MIN_SCORE = 40
ACCESSIBILITY_BASE_SCORE = 100
ACCESSIBILITY_MIN_SCORE = 30

LAZY_LOAD_PROJECT_THRESHOLD = 8
LONG_DESCRIPTION_WORDS = 160
SCRIPT_BLOCK_THRESHOLD = 2
PROJECTS_WITHOUT_PENALTY = 6

RECOMMENDATION_PENALTY = 10
LARGE_IMAGE_PENALTY = 10
EXTRA_PROJECT_PENALTY = 2
MISSING_ALT_PENALTY = 10
LOW_CONTRAST_PENALTY = 15
HEADING_ISSUE_PENALTY = 5

WCAG_AA_CONTRAST = 4.5

LAZY_LOAD_RECOMMENDATION = (
    "Consider lazy loading or splitting projects into categories to reduce initial load."
)
TRIM_DESCRIPTIONS_RECOMMENDATION = (
    "Trim project descriptions to keep them scannable and avoid large blocks of text."
)
OPTIMIZE_IMAGES_RECOMMENDATION = (
    "Optimize or convert large hero images to next-gen formats like WebP or AVIF."
)
DEFER_SCRIPTS_RECOMMENDATION = (
    "Review custom script blocks to ensure they are deferred or loaded asynchronously."
)

ALT_TEXT_NOTE = (
    "Some project images have no description; add descriptive alt text to every "
    "project image (heuristic: image present without description)."
)
CONTRAST_NOTE = "Adjust primary and background colors to meet WCAG AA contrast ratio (4.5:1)."
HEADING_NOTE = (
    "Ensure project sections follow a logical heading hierarchy, e.g. H2 for section titles "
    "(heuristic: projects with an empty tag list)."
)

_HTML_TAG = re.compile(r"<[^>]+>")
_LARGE_IMAGE = re.compile(r"original|large|full", re.IGNORECASE)
_HEX_DIGITS = frozenset("0123456789abcdef")


class PortfolioLike(Protocol):
    customization: dict[str, Any] | None


class ProjectLike(Protocol):
    description: str | None
    image_url: str | None
    tags: list[str] | None


@dataclass(frozen=True)
class PerformanceReport:
    score: int
    project_count: int
    average_description_length: int
    has_large_images: bool
    custom_script_blocks: int
    recommendations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class AccessibilityReport:
    score: int
    missing_alt_tags: int
    low_contrast_pairs: int
    heading_issues: int
    contrast_ratio: float
    notes: list[str] = field(default_factory=list)


def count_words(text: str | None) -> int:
    """Count whitespace-separated words after stripping HTML tags."""
    if not text:
        return 0
    return len(_HTML_TAG.sub(" ", text).split())


def is_large_image(url: str | None) -> bool:
    if not url:
        return False
    return bool(_LARGE_IMAGE.search(url)) or "?raw=true" in url


def _customization(portfolio: PortfolioLike) -> dict[str, Any]:
    value = portfolio.customization
    return value if isinstance(value, dict) else {}


def count_script_blocks(portfolio: PortfolioLike) -> int:
    scripts = _customization(portfolio).get("scripts")
    return len(scripts) if isinstance(scripts, list) else 0


def analyze_performance(
    portfolio: PortfolioLike, projects: Sequence[ProjectLike]
) -> PerformanceReport:
    """Score how heavy a portfolio is likely to be to load."""
    project_count = len(projects)
    if project_count == 0:
        average_description_length = 0
    else:
        total_words = sum(count_words(project.description) for project in projects)
        # Half-up rounding, not banker's rounding.
        average_description_length = math.floor(total_words / project_count + 0.5)

    has_large_images = any(is_large_image(project.image_url) for project in projects)
    custom_script_blocks = count_script_blocks(portfolio)

    recommendations: list[str] = []
    if project_count > LAZY_LOAD_PROJECT_THRESHOLD:
        recommendations.append(LAZY_LOAD_RECOMMENDATION)
    if average_description_length > LONG_DESCRIPTION_WORDS:
        recommendations.append(TRIM_DESCRIPTIONS_RECOMMENDATION)
    if has_large_images:
        recommendations.append(OPTIMIZE_IMAGES_RECOMMENDATION)
    if custom_script_blocks > SCRIPT_BLOCK_THRESHOLD:
        recommendations.append(DEFER_SCRIPTS_RECOMMENDATION)

    penalty = (
        len(recommendations) * RECOMMENDATION_PENALTY
        + (LARGE_IMAGE_PENALTY if has_large_images else 0)
        + max(0, project_count - PROJECTS_WITHOUT_PENALTY) * EXTRA_PROJECT_PENALTY
    )
    score = max(PERFORMANCE_MIN_SCORE, PERFORMANCE_BASE_SCORE - penalty)

    return PerformanceReport(
        score=score,
        project_count=project_count,
        average_description_length=average_description_length,
        has_large_images=has_large_images,
        custom_script_blocks=custom_script_blocks,
        recommendations=recommendations,
    )


def analyze_accessibility(
    portfolio: PortfolioLike, projects: Sequence[ProjectLike]
) -> AccessibilityReport:
    """Score a portfolio against a few accessibility heuristics."""
    missing_alt_tags = 0
    heading_issues = 0
    for project in projects:
        if project.image_url and not project.description:
            missing_alt_tags += 1
        if isinstance(project.tags, list) and not project.tags:
            heading_issues += 1

    palette = _customization(portfolio).get("colors")
    primary = palette.get("primary") if isinstance(palette, dict) else None
    background = palette.get("background") if isinstance(palette, dict) else None
    ratio = contrast_ratio(primary, background)

    low_contrast_pairs = 0
    if primary and background and ratio < WCAG_AA_CONTRAST:
        low_contrast_pairs = 1

    notes: list[str] = []
    if missing_alt_tags:
        notes.append(ALT_TEXT_NOTE)
    if low_contrast_pairs:
        notes.append(CONTRAST_NOTE)
    if heading_issues:
        notes.append(HEADING_NOTE)

    penalty = (
        missing_alt_tags * MISSING_ALT_PENALTY
        + low_contrast_pairs * LOW_CONTRAST_PENALTY
        + heading_issues * HEADING_ISSUE_PENALTY
    )
    score = max(ACCESSIBILITY_MIN_SCORE, ACCESSIBILITY_BASE_SCORE - penalty)

    return AccessibilityReport(
        score=score,
        missing_alt_tags=missing_alt_tags,
        low_contrast_pairs=low_contrast_pairs,
        heading_issues=heading_issues,
        contrast_ratio=ratio,
        notes=notes,
    )


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Parse ``#rgb`` / ``#rrggbb`` (case-insensitive, ``#`` optional).

    Anything else is treated as black.
    """
    digits = value.strip().removeprefix("#").lower()
    if len(digits) not in (3, 6) or not set(digits) <= _HEX_DIGITS:
        return (0, 0, 0)
    if len(digits) == 3:
        digits = "".join(char * 2 for char in digits)
    number = int(digits, 16)
    return (number >> 16) & 255, (number >> 8) & 255, number & 255


def _linearize(channel: int) -> float:
    proportion = channel / 255
    if proportion <= 0.03928:
        return proportion / 12.92
    return ((proportion + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: tuple[int, int, int]) -> float:
    red, green, blue = rgb
    return 0.2126 * _linearize(red) + 0.7152 * _linearize(green) + 0.0722 * _linearize(blue)


def contrast_ratio(color_a: str | None, color_b: str | None) -> float:
    """WCAG contrast ratio between two hex colors, rounded to 2 decimals.

    Returns 1.0 when either color is missing.
    """
    if not color_a or not color_b:
        return 1.0
    lum_a = relative_luminance(hex_to_rgb(color_a))
    lum_b = relative_luminance(hex_to_rgb(color_b))
    brighter = max(lum_a, lum_b) + 0.05
    darker = min(lum_a, lum_b) + 0.05
    return round(brighter / darker, 2)
