"""Export utilities for rendering a portfolio as Markdown or HTML."""

from __future__ import annotations

import html
import re
from collections.abc import Sequence
from typing import Any, Literal

from portfolio_studio.data.models import Portfolio, Project

ExportFormat = Literal["json", "markdown", "html"]

FORMAT_EXTENSIONS = {"json": "json", "markdown": "md", "html": "html"}
FORMAT_MEDIA_TYPES = {
    "json": "application/json",
    "markdown": "text/markdown; charset=utf-8",
    "html": "text/html; charset=utf-8",
}

_DEFAULT_COLORS = {
    "primary": "#111827",
    "background": "#ffffff",
    "text": "#111827",
    "accent": "#2563eb",
}


def _sanitize_filename(name: str) -> str:
    """Remove or replace characters that are invalid in filenames."""
    # Replace invalid characters with underscores
    sanitized = re.sub(r'[<>:"/\\|?*\s]', "_", name)
    # Remove leading/trailing whitespace and dots
    sanitized = sanitized.strip(". ")
    return sanitized or "portfolio"


def export_filename(portfolio: Portfolio, export_format: str) -> str:
    """Return the download filename for an export, e.g. ``my-site.md``."""
    base_name = _sanitize_filename(portfolio.slug or portfolio.name)
    return f"{base_name}.{FORMAT_EXTENSIONS[export_format]}"


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").strip()


def render_markdown(portfolio: Portfolio, projects: Sequence[Project]) -> str:
    """Render a portfolio and its projects as a Markdown document."""
    lines: list[str] = [f"# {_normalize_newlines(portfolio.name)}", ""]
    if portfolio.description:
        lines.extend([_normalize_newlines(portfolio.description), ""])

    lines.extend(["## Projects", ""])
    if not projects:
        lines.extend(["_No projects yet._", ""])

    for project in projects:
        lines.extend([f"### {_normalize_newlines(project.title)}", ""])
        if project.image_url:
            lines.extend([f"![{project.title}]({project.image_url})", ""])
        if project.description:
            lines.extend([_normalize_newlines(project.description), ""])
        if project.tags:
            lines.append(f"**Tags:** {', '.join(project.tags)}")
        if project.project_url:
            lines.append(f"**Link:** [{project.project_url}]({project.project_url})")
        if project.tags or project.project_url:
            lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def _palette(portfolio: Portfolio) -> dict[str, str]:
    customization: dict[str, Any] = portfolio.customization or {}
    colors = customization.get("colors") or {}
    palette = dict(_DEFAULT_COLORS)
    for key in palette:
        value = colors.get(key)
        if isinstance(value, str) and value:
            palette[key] = value
    return palette


def _css_value(value: str) -> str:
    # Keep user supplied colors from breaking out of the declaration.
    return re.sub(r"[;{}<>\"'\\]", "", value)


def render_html(portfolio: Portfolio, projects: Sequence[Project]) -> str:
    """Render a standalone HTML5 document; all user text is escaped."""
    palette = _palette(portfolio)
    css_vars = "\n".join(
        f"      --color-{name}: {_css_value(value)};" for name, value in palette.items()
    )

    project_blocks: list[str] = []
    for project in projects:
        parts = [f"      <h3>{html.escape(project.title)}</h3>"]
        if project.image_url:
            parts.append(
                f'      <img src="{html.escape(project.image_url, quote=True)}" '
                f'alt="{html.escape(project.description or project.title, quote=True)}">'
            )
        if project.description:
            parts.append(f"      <p>{html.escape(project.description)}</p>")
        if project.tags:
            tags = "".join(f"<li>{html.escape(tag)}</li>" for tag in project.tags)
            parts.append(f'      <ul class="tags">{tags}</ul>')
        if project.project_url:
            url = html.escape(project.project_url, quote=True)
            parts.append(f'      <p><a href="{url}">View project</a></p>')
        project_blocks.append("    <article>\n" + "\n".join(parts) + "\n    </article>")

    description = (
        f"    <p>{html.escape(portfolio.description)}</p>\n" if portfolio.description else ""
    )
    body = "\n".join(project_blocks) if project_blocks else "    <p>No projects yet.</p>"

    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '  <meta charset="utf-8">\n'
        '  <meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"  <title>{html.escape(portfolio.name)}</title>\n"
        "  <style>\n"
        "    :root {\n"
        f"{css_vars}\n"
        "    }\n"
        "    body { font-family: system-ui, sans-serif; margin: 0 auto; max-width: 960px;"
        " padding: 2rem; background: var(--color-background); color: var(--color-text); }\n"
        "    h1, h2, h3 { color: var(--color-primary); }\n"
        "    a { color: var(--color-accent); }\n"
        "    img { max-width: 100%; height: auto; }\n"
        "    .tags { display: flex; gap: 0.5rem; list-style: none; padding: 0; }\n"
        "  </style>\n"
        "</head>\n"
        "<body>\n"
        "  <header>\n"
        f"    <h1>{html.escape(portfolio.name)}</h1>\n"
        f"{description}"
        "  </header>\n"
        "  <main>\n"
        "    <h2>Projects</h2>\n"
        f"{body}\n"
        "  </main>\n"
        "</body>\n"
        "</html>\n"
    )
