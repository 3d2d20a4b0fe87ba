"""Persona color allocation, scoped to a single report conversion."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from typing import Iterator, List, Tuple


@dataclass(frozen=True)
class PersonaColor:
    name: str
    hex: str
    rgb: str


PERSONA_COLORS: Tuple[PersonaColor, ...] = (
    PersonaColor("teal", "#2a7d6e", "42,125,110"),
    PersonaColor("amber", "#b37d4e", "179,125,78"),
    PersonaColor("indigo", "#5a5fa0", "90,95,160"),
    PersonaColor("rose", "#b35a6e", "179,90,110"),
    PersonaColor("slate", "#5a7d8a", "90,125,138"),
    PersonaColor("plum", "#8a5a9a", "138,90,154"),
)


class PersonaPalette:
    """Hands out palette colors to persona names in first-seen order.

    Each conversion builds its own palette, so two reports rendered in the
    same process never share assignments. Past the sixth distinct persona the
    palette wraps around and colors are reused.
    """

    def __init__(self, colors: Tuple[PersonaColor, ...] = PERSONA_COLORS) -> None:
        if not colors:
            raise ValueError("Persona palette needs at least one color")
        self._colors = colors
        self._assigned: "OrderedDict[str, PersonaColor]" = OrderedDict()
        self._counter = 0

    def __len__(self) -> int:
        return len(self._assigned)

    def __contains__(self, persona: object) -> bool:
        return persona in self._assigned

    def color_for(self, persona: str) -> PersonaColor:
        color = self._assigned.get(persona)
        if color is None:
            color = self._colors[self._counter % len(self._colors)]
            self._counter += 1
            self._assigned[persona] = color
        return color

    def items(self) -> Iterator[Tuple[str, PersonaColor]]:
        return iter(self._assigned.items())

    def stylesheet(self) -> str:
        """CSS rules for every color handed out so far, in allocation order."""
        rules: List[str] = []
        seen = set()
        for color in self._assigned.values():
            if color.name in seen:
                continue
            seen.add(color.name)
            rules.append(
                f"\n.persona-{color.name} {{\n"
                f"  border-left-color: {color.hex};\n"
                f"  background: linear-gradient(to right, rgba({color.rgb},0.035), transparent 70%);\n"
                f"}}\n"
                f".toc-link.toc-persona-{color.name}::before {{\n"
                f"  background: {color.hex};\n"
                f"}}\n"
            )
        return "".join(rules)
