from __future__ import annotations

from typing import get_args

from portfolio_studio.data.models import Portfolio, Project
from portfolio_studio.utils.export import (
    FORMAT_EXTENSIONS,
    FORMAT_MEDIA_TYPES,
    ExportFormat,
    _sanitize_filename,
    export_filename,
    render_html,
    render_markdown,
)


def _portfolio(**fields: object) -> Portfolio:
    values = {"name": "Jane Doe", "slug": "jane-doe", "description": "Designer & developer"}
    values.update(fields)
    return Portfolio(**values)


def _project(**fields: object) -> Project:
    values = {"title": "Widget", "tags": []}
    values.update(fields)
    return Project(**values)


def test_sanitize_filename() -> None:
    assert _sanitize_filename('a/b\\c:d*e?"f<g>h|i j') == "a_b_c_d_e__f_g_h_i_j"
    assert _sanitize_filename("...") == "portfolio"


def test_export_filename_uses_slug() -> None:
    assert export_filename(_portfolio(), "markdown") == "jane-doe.md"
    assert export_filename(_portfolio(), "html") == "jane-doe.html"


def test_markdown_without_projects() -> None:
    text = render_markdown(_portfolio(), [])

    assert text.startswith("# Jane Doe\n")
    assert "Designer & developer" in text
    assert "_No projects yet._" in text
    assert text.endswith("\n")


def test_markdown_with_project_details() -> None:
    project = _project(
        description="Built a widget.",
        image_url="/uploads/abc.png",
        project_url="https://example.com",
        tags=["python", "fastapi"],
    )

    text = render_markdown(_portfolio(), [project])

    assert "### Widget" in text
    assert "![Widget](/uploads/abc.png)" in text
    assert "**Tags:** python, fastapi" in text
    assert "**Link:** [https://example.com](https://example.com)" in text


def test_html_escapes_content_and_uses_palette() -> None:
    portfolio = _portfolio(
        name="<script>alert(1)</script>",
        customization={"colors": {"primary": "#ff0000; } body { display:none"}},
    )
    project = _project(title="A & B", image_url='x.png" onerror="bad')

    document = render_html(portfolio, [project])

    assert document.startswith("<!DOCTYPE html>")
    assert "<script>" not in document
    assert "&lt;script&gt;" in document
    assert "A &amp; B" in document
    assert 'onerror="bad' not in document
    assert "--color-primary: #ff0000  body  display:none;" in document


def test_html_without_projects() -> None:
    document = render_html(_portfolio(customization=None), [])

    assert "No projects yet." in document
    assert "--color-background: #ffffff;" in document


def test_every_export_format_has_extension_and_media_type() -> None:
    formats = set(get_args(ExportFormat))

    assert formats == {"json", "markdown", "html"}
    assert set(FORMAT_EXTENSIONS) == formats
    assert set(FORMAT_MEDIA_TYPES) == formats
