"""
Fenced code block rendering.
Turns captured fence contents into either a Mermaid diagram container or a
plain ``<pre><code>`` block.
"""

import re
from typing import Sequence

from .inline import escape_html

DIAGRAM_LANGUAGE = "mermaid"
DIAGRAM_MARKER = 'class="mermaid"'

LANGUAGE_TAG_RE = re.compile(r"[^a-zA-Z0-9_-]")


def sanitize_language(tag: str) -> str:
    """Keep only letters, digits, ``-`` and ``_`` from a fence info string."""
    return LANGUAGE_TAG_RE.sub("", tag.strip())


def format_code_block(code_lines: Sequence[str], language: str) -> str:
    """
    Generate the HTML for one fenced block.

    Args:
        code_lines: Raw lines between the fences, unescaped
        language: Sanitized language tag, possibly empty

    Returns:
        A diagram container for Mermaid sources, otherwise a code block
        carrying a ``language-*`` class when a tag was given
    """
    body = "\n".join(escape_html(line) for line in code_lines)

    if language == DIAGRAM_LANGUAGE:
        return f'<div {DIAGRAM_MARKER}>{body}</div>'

    lang_attr = f' class="language-{language}"' if language else ""
    return f"<pre><code{lang_attr}>{body}</code></pre>"
