"""Convert Spark ideation Markdown into a standalone HTML report."""

from .generate_report import ReportInputError, main, read_source, render_report
from .page import build_report
from .parser import ParsedReport, TocEntry, convert_markdown
from .persona_colors import PersonaColor, PersonaPalette

__all__ = [
    "ParsedReport",
    "PersonaColor",
    "PersonaPalette",
    "ReportInputError",
    "TocEntry",
    "build_report",
    "convert_markdown",
    "main",
    "read_source",
    "render_report",
]
