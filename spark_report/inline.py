"""Inline Markdown formatting, link sanitising and heading slugs."""

from __future__ import annotations

import logging
import re
from html import escape as html_escape

logger = logging.getLogger(__name__)

BLOCKED_HREF = "#blocked"

CODE_SPAN_RE = re.compile(r"`([^`]+)`")
BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
ITALIC_STAR_RE = re.compile(r"\*(.+?)\*")
ITALIC_UNDERSCORE_RE = re.compile(r"(?<!\w)_(.+?)_(?!\w)")
LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
SAFE_HREF_RE = re.compile(r"^(https?:|mailto:|/|#|\.)", re.IGNORECASE)
SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.-]*:", re.IGNORECASE)
SLUG_SEPARATOR_RE = re.compile(r"[^a-z0-9]+")


def escape_html(text: str) -> str:
    """Escape ``&``, ``<``, ``>`` and ``"``; single quotes are left alone."""
    return html_escape(text, quote=False).replace('"', "&quot;")


def sanitize_href(url: str) -> str:
    trimmed = url.strip()
    if SAFE_HREF_RE.match(trimmed):
        return trimmed
    if SCHEME_RE.match(trimmed):
        logger.debug("Blocked link target %r", trimmed)
        return BLOCKED_HREF
    return trimmed


def _render_link(match: "re.Match[str]") -> str:
    label, href = match.group(1), match.group(2)
    return f'<a href="{sanitize_href(href)}">{label}</a>'


def render_inline(text: str) -> str:
    """Escape a text run and apply the supported inline markup.

    The substitutions run in a fixed order over already-escaped text: code
    spans, bold, star italics, underscore italics, then links. A marker
    without its closing partner is left as literal text.
    """
    if not text:
        return ""
    rendered = escape_html(text)
    rendered = CODE_SPAN_RE.sub(r"<code>\1</code>", rendered)
    rendered = BOLD_RE.sub(r"<strong>\1</strong>", rendered)
    rendered = ITALIC_STAR_RE.sub(r"<em>\1</em>", rendered)
    rendered = ITALIC_UNDERSCORE_RE.sub(r"<em>\1</em>", rendered)
    rendered = LINK_RE.sub(_render_link, rendered)
    return rendered


def slugify(text: str) -> str:
    candidate = SLUG_SEPARATOR_RE.sub("-", text.lower())
    if candidate.startswith("-"):
        candidate = candidate[1:]
    if candidate.endswith("-"):
        candidate = candidate[:-1]
    return candidate
