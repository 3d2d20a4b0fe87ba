"""Line-oriented parser turning Spark Markdown into report fragments."""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Pattern, Sequence, Tuple

from .code_blocks import DIAGRAM_LANGUAGE, format_code_block, sanitize_language
from .inline import escape_html, render_inline, slugify
from .metadata import parse_metadata
from .persona_colors import PersonaPalette

logger = logging.getLogger(__name__)

CODE_FENCE = "```"
HEADING_RE = re.compile(r"^(#{1,4})\s+(.+)$")
RULE_RE = re.compile(r"^---+$")
BLOCKQUOTE_MARKER_RE = re.compile(r"^>\s?")
UNORDERED_ITEM_RE = re.compile(r"^[-*]\s")
ORDERED_ITEM_RE = re.compile(r"^\d+\.\s")
UNORDERED_MARKER_RE = re.compile(r"^[-*]\s+")
ORDERED_MARKER_RE = re.compile(r"^\d+\.\s+")

SEED_RE = re.compile(r"^Seed:\s*(.+)$", re.IGNORECASE)
CROSS_RE = re.compile(r"^Cross-Pollination(?:\s+Round\s+\d+)?:\s*(.+)$", re.IGNORECASE)
SESSION_RECORD_RE = re.compile(r"^Session\s+Record$", re.IGNORECASE)
SYNTHESIS_RE = re.compile(r"^Synthesis$", re.IGNORECASE)

# Checked in order; the first match decides the phase.
PHASE_RULES: Tuple[Tuple[Pattern[str], str], ...] = (
    (SEED_RE, "seed"),
    (CROSS_RE, "cross"),
    (SESSION_RECORD_RE, "session-record"),
    (SYNTHESIS_RE, "synthesis"),
)
SECTION_CLASSES = {
    "synthesis": "synthesis-section",
    "session-record": "session-record-section",
}

PERSONA_CLOSE = "</div></div>"
SYNTHESIS_OPEN = '<div class="synthesis-callout">'
SYNTHESIS_CLOSE = "</div>"


@dataclass(frozen=True)
class TocEntry:
    id: str
    text: str
    level: int
    phase: str = ""
    persona: Optional[str] = None


@dataclass
class ParsedReport:
    title: str = ""
    metadata: Optional[Dict[str, str]] = None
    preamble: List[str] = field(default_factory=list)
    sections: List[str] = field(default_factory=list)
    toc: List[TocEntry] = field(default_factory=list)
    colors: PersonaPalette = field(default_factory=PersonaPalette)
    diagram_count: int = 0

    @property
    def has_diagrams(self) -> bool:
        return self.diagram_count > 0


class Region(enum.Enum):
    """What is currently open around the emission point."""

    NONE = "none"
    SECTION = "section"
    SYNTHESIS = "synthesis"
    PERSONA = "persona"


def detect_phase(text: str) -> Tuple[str, Optional[str]]:
    """Return ``(phase, persona)`` for a level-2 heading; ``("", None)`` if unrecognised."""
    for pattern, phase in PHASE_RULES:
        match = pattern.match(text)
        if match:
            persona = match.group(1).strip() if pattern.groups else None
            return phase, persona
    return "", None


def is_fence(line: str) -> bool:
    return line.startswith(CODE_FENCE)


def is_rule(line: str) -> bool:
    return bool(RULE_RE.match(line.strip()))


def is_table_line(line: str) -> bool:
    return "|" in line and line.strip().startswith("|")


def is_unordered_item(line: str) -> bool:
    return bool(UNORDERED_ITEM_RE.match(line.strip()))


def is_ordered_item(line: str) -> bool:
    return bool(ORDERED_ITEM_RE.match(line.strip()))


def starts_block(line: str) -> bool:
    """True when ``line`` would start something other than a paragraph."""
    return (
        not line.strip()
        or line.startswith("#")
        or is_fence(line)
        or line.startswith(">")
        or is_unordered_item(line)
        or is_ordered_item(line)
        or is_rule(line)
        or is_table_line(line)
    )


def collect_fence(lines: Sequence[str], start: int) -> Tuple[str, List[str], int]:
    """Read a fenced block opened at ``start``; an unclosed fence runs to the end."""
    language = sanitize_language(lines[start][len(CODE_FENCE):])
    code_lines: List[str] = []
    i = start + 1
    while i < len(lines) and not is_fence(lines[i]):
        code_lines.append(lines[i])
        i += 1
    if i < len(lines):
        i += 1
    return language, code_lines, i


def collect_blockquote(lines: Sequence[str], start: int) -> Tuple[List[str], int]:
    quote_lines: List[str] = []
    i = start
    while i < len(lines) and lines[i].startswith(">"):
        quote_lines.append(BLOCKQUOTE_MARKER_RE.sub("", lines[i], count=1))
        i += 1
    return quote_lines, i


def collect_table(lines: Sequence[str], start: int) -> Tuple[List[str], int]:
    table_lines: List[str] = []
    i = start
    while i < len(lines) and is_table_line(lines[i]):
        table_lines.append(lines[i])
        i += 1
    return table_lines, i


def split_table_cells(line: str) -> List[str]:
    return [cell.strip() for cell in line.split("|") if cell.strip()]


def collect_list_items(
    lines: Sequence[str], start: int, item_re: Pattern[str], marker_re: Pattern[str]
) -> Tuple[List[str], int]:
    """Gather list items, swallowing a blank line when the next line continues the list."""
    items: List[str] = []
    i = start
    while i < len(lines):
        stripped = lines[i].strip()
        if item_re.match(stripped):
            items.append(marker_re.sub("", stripped, count=1))
            i += 1
            continue
        if not stripped and i + 1 < len(lines) and item_re.match(lines[i + 1].strip()):
            i += 1
            continue
        break
    return items, i


def collect_paragraph(lines: Sequence[str], start: int) -> Tuple[List[str], int]:
    # The first line is always taken so stray '#' lines cannot stall the cursor.
    para_lines = [lines[start]]
    i = start + 1
    while i < len(lines) and not starts_block(lines[i]):
        para_lines.append(lines[i])
        i += 1
    return para_lines, i


def render_table(table_lines: Sequence[str]) -> str:
    header_cells = split_table_cells(table_lines[0])
    parts = ['<div class="table-wrap"><table><thead><tr>']
    for cell in header_cells:
        parts.append(f"<th>{render_inline(cell)}</th>")
    parts.append("</tr></thead><tbody>")
    # Row 1 is the alignment row and is skipped by position.
    for line in table_lines[2:]:
        parts.append("<tr>")
        for cell in split_table_cells(line):
            parts.append(f"<td>{render_inline(cell)}</td>")
        parts.append("</tr>")
    parts.append("</tbody></table></div>")
    return "".join(parts)


def render_list(tag: str, items: Sequence[str]) -> str:
    body = "".join(f"<li>{render_inline(item)}</li>" for item in items)
    return f"<{tag}>{body}</{tag}>"


class ReportParser:
    """Single-pass block parser with section and persona region tracking.

    The parser keeps one open section buffer at a time. Inside it, at most
    one sub-region is open: the synthesis callout that a ``## Synthesis``
    heading opens, or the persona block that a level-3 heading opens under a
    persona-owned section. Every transition closes what is open before it
    opens something new, so the emitted markup always balances.
    """

    def __init__(self, lines: Sequence[str]) -> None:
        self.lines = lines
        self.report = ParsedReport()
        self.region = Region.NONE
        self._section: Optional[List[str]] = None
        self._last_section_entry: Optional[TocEntry] = None
        self._skipped_metadata_rule = False

    # -- emission and region transitions --------------------------------

    def emit(self, html: str) -> None:
        if self._section is not None:
            self._section.append(html)
        else:
            self.report.preamble.append(html)

    def close_subregion(self) -> None:
        if self.region is Region.PERSONA:
            self.emit(PERSONA_CLOSE)
        elif self.region is Region.SYNTHESIS:
            self.emit(SYNTHESIS_CLOSE)
        else:
            return
        self.region = Region.SECTION

    def close_section(self) -> None:
        self.close_subregion()
        if self._section is not None:
            self._section.append("</section>")
            self.report.sections.append("\n".join(self._section))
            self._section = None
        self.region = Region.NONE

    # -- driver ------------------------------------------------------------

    def parse(self) -> ParsedReport:
        lines = self.lines
        i = 0
        while i < len(lines):
            line = lines[i]

            if is_fence(line):
                i = self._handle_fence(i)
                continue

            heading = HEADING_RE.match(line)
            if heading:
                self._handle_heading(len(heading.group(1)), heading.group(2).strip())
                i += 1
                continue

            if line.startswith(">"):
                i = self._handle_blockquote(i)
                continue

            if is_rule(line):
                self._handle_rule()
                i += 1
                continue

            if is_table_line(line):
                i = self._handle_table(i)
                continue

            if is_unordered_item(line):
                items, i = collect_list_items(lines, i, UNORDERED_ITEM_RE, UNORDERED_MARKER_RE)
                self.emit(render_list("ul", items))
                continue

            if is_ordered_item(line):
                items, i = collect_list_items(lines, i, ORDERED_ITEM_RE, ORDERED_MARKER_RE)
                self.emit(render_list("ol", items))
                continue

            if not line.strip():
                i += 1
                continue

            para_lines, i = collect_paragraph(lines, i)
            paragraph = "\n".join(para_lines)
            self.emit(f"<p>{render_inline(paragraph)}</p>")

        self.close_section()
        return self.report

    # -- construct handlers ------------------------------------------------

    def _handle_fence(self, start: int) -> int:
        language, code_lines, next_index = collect_fence(self.lines, start)
        if language == DIAGRAM_LANGUAGE:
            self.report.diagram_count += 1
        self.emit(format_code_block(code_lines, language))
        return next_index

    def _handle_heading(self, level: int, text: str) -> None:
        if level == 1:
            self.report.title = text
        elif level == 2:
            self._open_section(text)
        elif level == 3:
            self._open_subsection(text)
        else:
            self.emit(f"<h4>{render_inline(text)}</h4>")

    def _open_section(self, text: str) -> None:
        self.close_section()
        section_id = slugify(text)
        phase, persona = detect_phase(text)
        css_class = "section"
        if phase in SECTION_CLASSES:
            css_class += f" {SECTION_CLASSES[phase]}"

        self._section = [
            f'<section id="{section_id}" class="{css_class}">',
            f"<h2>{render_inline(text)}</h2>",
        ]
        self.region = Region.SECTION
        if phase == "synthesis":
            self._section.append(SYNTHESIS_OPEN)
            self.region = Region.SYNTHESIS

        if persona:
            # Colors follow level-2 heading order, even for sections without subsections.
            self.report.colors.color_for(persona)

        entry = TocEntry(id=section_id, text=text, level=2, phase=phase, persona=persona)
        self.report.toc.append(entry)
        self._last_section_entry = entry

    def _open_subsection(self, text: str) -> None:
        if self.region is Region.PERSONA:
            self.close_subregion()

        parent = self._last_section_entry
        slug = slugify(text)
        entry_id = f"{parent.id}-{slug}" if parent and parent.id else slug
        persona = parent.persona if parent else None

        if persona:
            color = self.report.colors.color_for(persona)
            self.emit(f'<div class="persona-section persona-{color.name}" id="{entry_id}">')
            self.emit(
                f'<h3><span class="persona-badge" style="color:{color.hex};'
                f'background:rgba({color.rgb},0.08)">{escape_html(text)}</span></h3>'
            )
            self.emit('<div class="persona-content">')
            self.region = Region.PERSONA
        else:
            self.emit(f'<h3 id="{entry_id}">{render_inline(text)}</h3>')

        self.report.toc.append(TocEntry(id=entry_id, text=text, level=3, persona=persona))

    def _handle_blockquote(self, start: int) -> int:
        quote_lines, next_index = collect_blockquote(self.lines, start)
        if self._accepts_metadata():
            candidate = parse_metadata(" ".join(quote_lines))
            if candidate:
                self.report.metadata = candidate
                return next_index
        self.emit(f"<blockquote>{'<br>'.join(render_inline(q) for q in quote_lines)}</blockquote>")
        return next_index

    def _accepts_metadata(self) -> bool:
        return (
            self.report.metadata is None
            and self._section is None
            and not self.report.preamble
        )

    def _handle_rule(self) -> None:
        if (
            self.report.metadata is not None
            and not self._skipped_metadata_rule
            and self._section is None
        ):
            self._skipped_metadata_rule = True
            return
        if self.region is Region.SYNTHESIS:
            self.close_subregion()
            return
        self.emit("<hr>")

    def _handle_table(self, start: int) -> int:
        table_lines, next_index = collect_table(self.lines, start)
        if len(table_lines) < 2:
            logger.debug("Dropping table at line %d: needs a header and separator row", start + 1)
            return next_index
        self.emit(render_table(table_lines))
        return next_index


def split_lines(markdown: str) -> List[str]:
    return [line[:-1] if line.endswith("\r") else line for line in markdown.split("\n")]


def convert_markdown(markdown: str) -> ParsedReport:
    """Parse a Spark Markdown document into a :class:`ParsedReport`.

    Every call starts from a fresh parser and a fresh persona palette.
    """
    return ReportParser(split_lines(markdown)).parse()
