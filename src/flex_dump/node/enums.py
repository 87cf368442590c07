"""Enumerations describing flexbox style properties.

Enum values are the names the printer emits, so ``member.value`` is
always the text that ends up in the serialized tree.
"""

from __future__ import annotations

from enum import Enum, IntFlag


class FlexDirection(Enum):
    COLUMN = "column"
    COLUMN_REVERSE = "column-reverse"
    ROW = "row"
    ROW_REVERSE = "row-reverse"


class Justify(Enum):
    FLEX_START = "flex-start"
    CENTER = "center"
    FLEX_END = "flex-end"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"


class Align(Enum):
    AUTO = "auto"
    FLEX_START = "flex-start"
    CENTER = "center"
    FLEX_END = "flex-end"
    STRETCH = "stretch"
    BASELINE = "baseline"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"


class Wrap(Enum):
    NO_WRAP = "no-wrap"
    WRAP = "wrap"
    WRAP_REVERSE = "wrap-reverse"


class Overflow(Enum):
    VISIBLE = "visible"
    HIDDEN = "hidden"
    SCROLL = "scroll"


class Display(Enum):
    FLEX = "flex"
    NONE = "none"


class PositionType(Enum):
    RELATIVE = "relative"
    ABSOLUTE = "absolute"


class Unit(Enum):
    """Kind of a dimension or edge value."""

    UNDEFINED = "undefined"
    POINT = "point"
    PERCENT = "percent"
    AUTO = "auto"


class Edge(Enum):
    """Addressable slot of an edge block.

    Only LEFT, TOP, RIGHT and BOTTOM are physical edges. The others are
    shorthands consulted when resolving a physical edge; ALL is the
    catch-all sentinel.
    """

    LEFT = "left"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    START = "start"
    END = "end"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    ALL = "all"


PHYSICAL_EDGES = (Edge.LEFT, Edge.TOP, Edge.RIGHT, Edge.BOTTOM)


class PrintOptions(IntFlag):
    """Detail flags selecting which blocks the printer emits per node."""

    NONE = 0
    LAYOUT = 1
    STYLE = 2
    CHILDREN = 4
