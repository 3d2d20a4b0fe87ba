"""Assemble a parsed report into a complete standalone HTML page."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .assets import CLIENT_JS, REPORT_CSS
from .inline import escape_html, render_inline
from .metadata import display_items
from .parser import ParsedReport, TocEntry
from .persona_colors import PersonaPalette

DEFAULT_TITLE = "Spark Report"
TITLE_PREFIX = "Spark Report:"
BRAND_TEXT = "SPARK"
EYEBROW_TEXT = "SPARK REPORT"
FOOTER_TEXT = "Generated by Spark"

MERMAID_SCRIPT_URL = "https://cdn.jsdelivr.net/npm/mermaid@11/dist/mermaid.min.js"
MERMAID_INIT = 'mermaid.initialize({ startOnLoad: true, theme: "neutral" });'

BACK_TO_TOP_ICON = '<svg viewBox="0 0 24 24"><path d="M18 15l-6-6-6 6"/></svg>'


def display_title(title: str) -> str:
    """Drop the ``Spark Report:`` prefix; the eyebrow above the heading already says it."""
    if title.startswith(TITLE_PREFIX + " "):
        return title[len(TITLE_PREFIX) + 1:]
    if title.startswith(TITLE_PREFIX):
        return title[len(TITLE_PREFIX):].strip()
    return title


def build_toc_html(entries: Sequence[TocEntry], colors: PersonaPalette) -> str:
    if not entries:
        return ""
    parts = ['<ul class="toc" id="toc">']
    for entry in entries:
        classes = ["toc-link"]
        if entry.level == 3:
            classes.append("toc-sub")
        if entry.persona:
            classes.append(f"toc-persona-{colors.color_for(entry.persona).name}")
        parts.append(
            f'<li><a href="#{entry.id}" class="{" ".join(classes)}" '
            f'data-target="{entry.id}">{escape_html(entry.text)}</a></li>'
        )
    parts.append("</ul>")
    return "".join(parts)


def build_meta_bar_html(metadata: Optional[Dict[str, str]]) -> str:
    items = display_items(metadata)
    if not items:
        return ""
    parts = ['<div class="meta-bar">']
    for label, value in items:
        parts.append(
            '<div class="meta-item">'
            f'<span class="meta-label">{escape_html(label)}</span>'
            f'<span class="meta-value">{escape_html(value)}</span>'
            "</div>"
        )
    parts.append("</div>")
    return "".join(parts)


def build_mermaid_script() -> str:
    return (
        f'\n<script src="{MERMAID_SCRIPT_URL}"></script>'
        f"\n<script>{MERMAID_INIT}</script>"
    )


def build_report(report: ParsedReport) -> str:
    """Render the full page for ``report``.

    The navigation is built before the persona stylesheet so every color the
    sidebar refers to has its rule in ``<style>``.
    """
    page_title = report.title or DEFAULT_TITLE
    toc_html = build_toc_html(report.toc, report.colors)
    persona_css = report.colors.stylesheet()
    mermaid_script = build_mermaid_script() if report.has_diagrams else ""

    page_lines: List[str] = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="UTF-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"<title>{escape_html(page_title)}</title>",
        f"<style>{REPORT_CSS}{persona_css}</style>",
        "</head>",
        "<body>",
        '<div class="progress-bar" id="progress"></div>',
        '<nav class="sidebar" id="sidebar">',
        f'<div class="sidebar-brand"><span class="brand-mark"></span><span class="brand-text">{BRAND_TEXT}</span></div>',
        toc_html,
        f'<div class="sidebar-footer">{FOOTER_TEXT}</div>',
        "</nav>",
        '<button class="burger" id="burger" aria-label="Toggle navigation"><span></span><span></span><span></span></button>',
        '<div class="overlay" id="overlay"></div>',
        '<main class="content">',
        "<article>",
        '<header class="report-header">',
        f'<div class="report-eyebrow">{EYEBROW_TEXT}</div>',
        f"<h1>{render_inline(display_title(report.title))}</h1>",
        build_meta_bar_html(report.metadata),
        "</header>",
        "\n".join(report.preamble),
        "\n".join(report.sections),
        "</article>",
        "</main>",
        f'<button class="back-to-top" id="back-to-top" aria-label="Back to top">{BACK_TO_TOP_ICON}</button>',
        f"<script>{CLIENT_JS}</script>{mermaid_script}",
        "</body>",
        "</html>",
    ]
    return "\n".join(page_lines)
