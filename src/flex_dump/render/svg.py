"""SVG box diagrams of computed layouts using drawsvg."""

from __future__ import annotations

from dataclasses import dataclass

import drawsvg as draw

from flex_dump.node.model import Node
from flex_dump.render.constants import (
    CANVAS_PADDING,
    LABEL_INSET_X,
    LABEL_INSET_Y,
    MIN_LABEL_HEIGHT,
)
from flex_dump.render.style import Theme


@dataclass
class PlacedBox:
    """A node's computed box in absolute canvas coordinates."""

    node: Node
    x: float
    y: float
    width: float
    height: float
    depth: int


def place_boxes(root: Node) -> list[PlacedBox]:
    """Resolve every node's parent-relative layout to absolute coordinates.

    Boxes are returned in pre-order, so parents precede their children.
    """
    boxes: list[PlacedBox] = []

    def visit(node: Node, x: float, y: float, depth: int) -> None:
        layout = node.layout
        abs_x = x + layout.left
        abs_y = y + layout.top
        boxes.append(PlacedBox(node, abs_x, abs_y, layout.width, layout.height, depth))
        for child in node.children:
            visit(child, abs_x, abs_y, depth + 1)

    visit(root, 0.0, 0.0, 0)
    return boxes


def render_svg(
    root: Node,
    theme: Theme,
    padding: float = CANVAS_PADDING,
) -> str:
    """Render the computed layout of a tree to an SVG string."""
    boxes = place_boxes(root)

    min_x = min(b.x for b in boxes)
    min_y = min(b.y for b in boxes)
    max_x = max(b.x + b.width for b in boxes)
    max_y = max(b.y + b.height for b in boxes)

    svg_width = int(max_x - min_x + padding * 2) or 1
    svg_height = int(max_y - min_y + padding * 2) or 1

    d = draw.Drawing(svg_width, svg_height)
    d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    # Shift so the top-left-most box sits at the padding corner
    dx = padding - min_x
    dy = padding - min_y
    for box in boxes:
        _render_box(d, box, theme, dx, dy)

    return d.as_svg()


def _render_box(
    d: draw.Drawing,
    box: PlacedBox,
    theme: Theme,
    dx: float,
    dy: float,
) -> None:
    stroke = theme.box_stroke
    extra = {}
    if box.node.has_measure_func:
        stroke = theme.measured_stroke or theme.box_stroke
        extra["stroke_dasharray"] = theme.measured_dash

    d.append(draw.Rectangle(
        box.x + dx, box.y + dy,
        box.width, box.height,
        fill=theme.fill_for_depth(box.depth),
        stroke=stroke,
        stroke_width=theme.box_stroke_width,
        **extra,
    ))

    if box.node.id and box.height >= MIN_LABEL_HEIGHT:
        d.append(draw.Text(
            box.node.id,
            theme.label_font_size,
            box.x + dx + LABEL_INSET_X,
            box.y + dy + LABEL_INSET_Y,
            fill=theme.label_color,
            font_family=theme.label_font_family,
            dominant_baseline="hanging",
        ))
