"""Prompt builders for the AI writing assistant.

Each operation formats a single instruction string from typed inputs and
forwards it unchanged to the configured LLM provider. There is no retry and
no post-processing beyond what the provider does; failures propagate as
``LLMError``.
"""

from __future__ import annotations

from collections.abc import Sequence

from portfolio_studio.services.analysis import AccessibilityReport, PerformanceReport
from portfolio_studio.services.llm_service import LLMService

AI_TEMPERATURE = 0.75

_LENGTH_GUIDANCE = {
    "short": "Keep the response concise (under 80 words).",
    "medium": "Aim for 120 words on average.",
    "long": "Provide a detailed response (around 200 words).",
}


def build_generate_text_prompt(
    prompt: str,
    *,
    tone: str | None = None,
    length: str | None = None,
    existing_text: str | None = None,
) -> str:
    lines = [
        "You are an expert portfolio copywriter.",
        f"Write in a {tone or 'professional'} tone.",
        _LENGTH_GUIDANCE.get(length or "medium", _LENGTH_GUIDANCE["medium"]),
    ]
    if existing_text:
        lines.append(
            "Improve the existing text. Keep the original meaning while improving "
            "clarity, flow, and impact."
        )
        lines.append(f"Existing text: {existing_text}")
    lines.append(f"Task: {prompt}")
    return "\n".join(lines)


def build_template_ideas_prompt(
    industry: str,
    *,
    goals: str | None = None,
    tone: str | None = None,
    must_have_sections: Sequence[str] | None = None,
) -> str:
    parts = [
        "You are helping a user plan a portfolio layout.",
        f"Industry: {industry}.",
        f"Preferred tone: {tone}." if tone else "",
        f"Goals: {goals}." if goals else "",
        f"Required sections: {', '.join(must_have_sections)}." if must_have_sections else "",
        "Suggest an ordered list of sections, recommended color accents, and unique "
        "interactive ideas.",
        "Return clear markdown with headings for sections, color palette, and interactive ideas.",
    ]
    return " ".join(part for part in parts if part)


def build_translate_prompt(
    text: str, target_language: str, source_language: str | None = None
) -> str:
    if source_language:
        instruction = (
            f"Translate the following {source_language} text into {target_language} "
            "while preserving tone and intent."
        )
    else:
        instruction = (
            f"Translate the following text into {target_language} while preserving tone and intent."
        )
    return "\n".join(
        [
            "You are a professional translator for portfolio content.",
            instruction,
            "Return only the translated text without additional commentary.",
            f"Text: {text}",
        ]
    )


def build_content_improvements_prompt(content: str) -> str:
    return "\n".join(
        [
            "Review the portfolio content below and suggest improvements.",
            "Provide a short summary, a list of strengths, and actionable recommendations.",
            "Keep the response concise and formatted as markdown.",
            f"Content: {content}",
        ]
    )


def build_performance_prompt(report: PerformanceReport) -> str:
    images = (
        "Images exceed the recommended size."
        if report.has_large_images
        else "Images are within recommended sizes."
    )
    scripts = (
        f"There are {report.custom_script_blocks} custom script blocks that may affect performance."
        if report.custom_script_blocks
        else "There are no custom script blocks."
    )
    return "\n".join(
        [
            "You are optimizing a web portfolio for performance.",
            f"Projects: {report.project_count} projects with average description length "
            f"{report.average_description_length} words.",
            images,
            scripts,
            "Suggest concrete steps to improve loading speed in bullet points.",
        ]
    )


def build_accessibility_prompt(report: AccessibilityReport) -> str:
    return " ".join(
        [
            "You are an accessibility auditor for digital portfolios.",
            f"Found {report.missing_alt_tags} images missing alt text, "
            f"{report.low_contrast_pairs} color combinations with insufficient contrast, "
            f"and {report.heading_issues} heading structure issues.",
            "Provide prioritized recommendations using markdown bullet lists.",
        ]
    )


def generate_text(
    llm: LLMService,
    prompt: str,
    *,
    tone: str | None = None,
    length: str | None = None,
    existing_text: str | None = None,
) -> str:
    """Write new portfolio copy, or rewrite ``existing_text`` when given."""
    instruction = build_generate_text_prompt(
        prompt, tone=tone, length=length, existing_text=existing_text
    )
    return llm.complete(instruction, temperature=AI_TEMPERATURE)


def suggest_content_improvements(llm: LLMService, content: str) -> str:
    return llm.complete(build_content_improvements_prompt(content), temperature=AI_TEMPERATURE)


def generate_template_ideas(
    llm: LLMService,
    industry: str,
    *,
    goals: str | None = None,
    tone: str | None = None,
    must_have_sections: Sequence[str] | None = None,
) -> str:
    instruction = build_template_ideas_prompt(
        industry, goals=goals, tone=tone, must_have_sections=must_have_sections
    )
    return llm.complete(instruction, temperature=AI_TEMPERATURE)


def translate_text(
    llm: LLMService, text: str, target_language: str, source_language: str | None = None
) -> str:
    instruction = build_translate_prompt(text, target_language, source_language)
    return llm.complete(instruction, temperature=AI_TEMPERATURE)


def generate_performance_suggestions(llm: LLMService, report: PerformanceReport) -> str:
    return llm.complete(build_performance_prompt(report), temperature=AI_TEMPERATURE)


def generate_accessibility_suggestions(llm: LLMService, report: AccessibilityReport) -> str:
    return llm.complete(build_accessibility_prompt(report), temperature=AI_TEMPERATURE)
