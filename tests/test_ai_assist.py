from __future__ import annotations

from portfolio_studio.services import ai_assist
from portfolio_studio.services.analysis import AccessibilityReport, PerformanceReport
from portfolio_studio.services.llm_providers import LLMProvider
from portfolio_studio.services.llm_service import LLMService


class EchoProvider(LLMProvider):
    def __init__(self) -> None:
        self.prompts: list[str] = []
        self.configs: list[dict] = []

    def send_prompt(self, prompt: str, config: dict) -> str:
        self.prompts.append(prompt)
        self.configs.append(config)
        return "ok"


def test_generate_text_prompt_defaults() -> None:
    prompt = ai_assist.build_generate_text_prompt("Write an about section")

    assert "professional tone" in prompt
    assert "120 words" in prompt
    assert prompt.endswith("Task: Write an about section")
    assert "Existing text" not in prompt


def test_generate_text_prompt_rewrites_existing_text() -> None:
    prompt = ai_assist.build_generate_text_prompt(
        "Tighten this", tone="playful", length="long", existing_text="I like code."
    )

    assert "playful tone" in prompt
    assert "around 200 words" in prompt
    assert "Existing text: I like code." in prompt


def test_template_ideas_prompt_skips_missing_parts() -> None:
    prompt = ai_assist.build_template_ideas_prompt("architecture")

    assert "Industry: architecture." in prompt
    assert "Goals" not in prompt
    assert "Required sections" not in prompt


def test_translate_prompt_with_and_without_source() -> None:
    with_source = ai_assist.build_translate_prompt("Hola", "English", "Spanish")
    without_source = ai_assist.build_translate_prompt("Hola", "English")

    assert "Spanish text into English" in with_source
    assert "following text into English" in without_source
    assert without_source.endswith("Text: Hola")


def test_performance_prompt_mentions_findings() -> None:
    report = PerformanceReport(
        score=70,
        project_count=3,
        average_description_length=40,
        has_large_images=True,
        custom_script_blocks=2,
    )

    prompt = ai_assist.build_performance_prompt(report)

    assert "3 projects" in prompt
    assert "40 words" in prompt
    assert "exceed the recommended size" in prompt
    assert "2 custom script blocks" in prompt


def test_accessibility_prompt_mentions_counts() -> None:
    report = AccessibilityReport(
        score=75, missing_alt_tags=2, low_contrast_pairs=1, heading_issues=0, contrast_ratio=3.2
    )

    prompt = ai_assist.build_accessibility_prompt(report)

    assert "2 images missing alt text" in prompt
    assert "1 color combinations" in prompt
    assert "0 heading structure issues" in prompt


def test_operations_use_fixed_temperature() -> None:
    provider = EchoProvider()
    llm = LLMService(provider=provider)

    ai_assist.generate_text(llm, "Bio")
    ai_assist.suggest_content_improvements(llm, "Text")
    ai_assist.generate_template_ideas(llm, "music")
    ai_assist.translate_text(llm, "Hi", "German")

    assert len(provider.prompts) == 4
    assert all(config == {"temperature": ai_assist.AI_TEMPERATURE} for config in provider.configs)
