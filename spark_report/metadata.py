"""Report metadata: extraction from the leading blockquote and display helpers."""

from __future__ import annotations

import logging
import re
from collections import OrderedDict
from datetime import datetime
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

METADATA_FIELD_RE = re.compile(r"\*\*(.+?)\*\*\s*:\s*([^|*]+)")
META_DISPLAY_ORDER = ("personas", "rounds", "focus", "date")
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%m/%d/%Y",
    "%A, %B %d, %Y",
    "%a, %b %d, %Y",
    "%A, %b %d, %Y",
    "%B %Y",
    "%b %Y",
    "%Y-%m",
    "%Y",
)


def parse_metadata(text: str) -> Dict[str, str]:
    """Collect ``**Label**: value`` pairs; values stop at ``|``, ``*`` or the end."""
    metadata: Dict[str, str] = OrderedDict()
    for match in METADATA_FIELD_RE.finditer(text):
        metadata[match.group(1).strip().lower()] = match.group(2).strip()
    return metadata


def parse_date(value: str) -> Optional[datetime]:
    candidate = value.strip()
    if not candidate:
        return None
    try:
        return datetime.fromisoformat(candidate.replace("Z", "+00:00"))
    except ValueError:
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(candidate, fmt)
        except ValueError:
            continue
    return None


def format_date(value: str) -> str:
    """Render a date as ``Mon D, YYYY``; anything unparseable comes back as-is."""
    parsed = parse_date(value)
    if parsed is None:
        logger.debug("Leaving unparseable date %r unformatted", value)
        return value
    return f"{MONTH_ABBREVIATIONS[parsed.month - 1]} {parsed.day}, {parsed.year}"


def display_items(metadata: Optional[Dict[str, str]]) -> List[Tuple[str, str]]:
    """Return ``(label, value)`` pairs in meta-bar order.

    Preferred keys come first in their fixed order, followed by the remaining
    keys in the order they were written. Empty values are dropped and the
    ``date`` value is reformatted for display.
    """
    if not metadata:
        return []
    keys = [key for key in META_DISPLAY_ORDER if metadata.get(key)]
    keys.extend(
        key for key in metadata if key not in META_DISPLAY_ORDER and metadata[key]
    )
    items: List[Tuple[str, str]] = []
    for key in keys:
        value = metadata[key]
        label = key[:1].upper() + key[1:]
        items.append((label, format_date(value) if key == "date" else value))
    return items
