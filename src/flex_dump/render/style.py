"""Theme definition for layout box diagrams."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Theme:
    """Visual theme for a layout box diagram."""

    name: str
    background_color: str
    box_stroke: str
    box_stroke_width: float
    # Fills cycle by tree depth
    box_fills: list[str] = field(default_factory=list)
    label_color: str = "#333333"
    label_font_family: str = "'Helvetica Neue', Helvetica, Arial, sans-serif"
    label_font_size: float = 11.0
    measured_stroke: str = ""  # empty = inherit box_stroke
    measured_dash: str = "4 2"

    def fill_for_depth(self, depth: int) -> str:
        if not self.box_fills:
            return "none"
        return self.box_fills[depth % len(self.box_fills)]
