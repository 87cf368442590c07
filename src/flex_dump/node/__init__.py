"""Layout node model."""

from flex_dump.node.enums import (
    PHYSICAL_EDGES,
    Align,
    Display,
    Edge,
    FlexDirection,
    Justify,
    Overflow,
    PositionType,
    PrintOptions,
    Unit,
    Wrap,
)
from flex_dump.node.model import (
    DEFAULT_STYLE,
    VALUE_AUTO,
    VALUE_UNDEFINED,
    VALUE_ZERO,
    Edges,
    Layout,
    Node,
    Style,
    Value,
    computed_edge_value,
    is_undefined,
    percent,
    point,
)

__all__ = [
    "PHYSICAL_EDGES",
    "Align",
    "Display",
    "Edge",
    "FlexDirection",
    "Justify",
    "Overflow",
    "PositionType",
    "PrintOptions",
    "Unit",
    "Wrap",
    "DEFAULT_STYLE",
    "VALUE_AUTO",
    "VALUE_UNDEFINED",
    "VALUE_ZERO",
    "Edges",
    "Layout",
    "Node",
    "Style",
    "Value",
    "computed_edge_value",
    "is_undefined",
    "percent",
    "point",
]
