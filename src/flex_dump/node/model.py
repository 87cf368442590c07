"""Data model for flexbox layout trees.

Nodes are built and mutated by callers (or by the JSON loader in
``flex_dump.parser``); the printer and the SVG renderer only read them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Callable, Iterator, Optional, TextIO

from flex_dump.node.enums import (
    PHYSICAL_EDGES,
    Align,
    Display,
    Edge,
    FlexDirection,
    Justify,
    Overflow,
    PositionType,
    Unit,
    Wrap,
)


@dataclass(frozen=True, eq=False)
class Value:
    """A dimension or edge value: a magnitude tagged with a unit.

    Magnitudes of ``undefined`` and ``auto`` values carry no meaning and
    are ignored when comparing.
    """

    value: float
    unit: Unit

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        if self.unit != other.unit:
            return False
        if self.unit in (Unit.UNDEFINED, Unit.AUTO):
            return True
        return self.value == other.value

    def __hash__(self) -> int:
        if self.unit in (Unit.UNDEFINED, Unit.AUTO):
            return hash(self.unit)
        return hash((self.unit, self.value))

    @property
    def is_undefined(self) -> bool:
        return self.unit is Unit.UNDEFINED


VALUE_UNDEFINED = Value(math.nan, Unit.UNDEFINED)
VALUE_AUTO = Value(math.nan, Unit.AUTO)
VALUE_ZERO = Value(0.0, Unit.POINT)


def point(value: float) -> Value:
    return Value(float(value), Unit.POINT)


def percent(value: float) -> Value:
    return Value(float(value), Unit.PERCENT)


def is_undefined(num: Optional[float]) -> bool:
    """True for the undefined float sentinel (``None`` or NaN)."""
    return num is None or math.isnan(num)


@dataclass(frozen=True)
class Edges:
    """Per-edge values for margin, padding, border or position.

    ``left``/``top``/``right``/``bottom`` are the physical slots; the
    remaining fields are shorthands that only take part in
    :func:`computed_edge_value`.
    """

    left: Value = VALUE_UNDEFINED
    top: Value = VALUE_UNDEFINED
    right: Value = VALUE_UNDEFINED
    bottom: Value = VALUE_UNDEFINED
    start: Value = VALUE_UNDEFINED
    end: Value = VALUE_UNDEFINED
    horizontal: Value = VALUE_UNDEFINED
    vertical: Value = VALUE_UNDEFINED
    all: Value = VALUE_UNDEFINED

    def __getitem__(self, edge: Edge) -> Value:
        return getattr(self, edge.value)

    @property
    def physical(self) -> tuple[Value, Value, Value, Value]:
        """The four physical values in left, top, right, bottom order."""
        return (self.left, self.top, self.right, self.bottom)

    def with_edge(self, edge: Edge, value: Value) -> Edges:
        return replace(self, **{edge.value: value})

    @classmethod
    def uniform(cls, value: Value) -> Edges:
        """Edges with every physical slot set to ``value``."""
        return cls(**{edge.value: value for edge in PHYSICAL_EDGES})


def computed_edge_value(
    edges: Edges, edge: Edge, default: Value = VALUE_UNDEFINED
) -> Value:
    """Resolve ``edge`` through the shorthand slots.

    Order: the edge itself, then ``vertical`` (top/bottom) or
    ``horizontal`` (left/right/start/end), then ``all``, then ``default``.
    """
    explicit = edges[edge]
    if not explicit.is_undefined:
        return explicit

    if edge in (Edge.TOP, Edge.BOTTOM) and not edges.vertical.is_undefined:
        return edges.vertical

    if (
        edge in (Edge.LEFT, Edge.RIGHT, Edge.START, Edge.END)
        and not edges.horizontal.is_undefined
    ):
        return edges.horizontal

    if not edges.all.is_undefined:
        return edges.all

    return default


@dataclass(frozen=True)
class Style:
    """Style snapshot of a node. ``Style()`` is the unconfigured default."""

    flex_direction: FlexDirection = FlexDirection.COLUMN
    justify_content: Justify = Justify.FLEX_START
    align_items: Align = Align.STRETCH
    align_content: Align = Align.FLEX_START
    align_self: Align = Align.AUTO
    flex_grow: Optional[float] = None
    flex_shrink: Optional[float] = None
    flex: Optional[float] = None
    flex_basis: Value = VALUE_AUTO
    flex_wrap: Wrap = Wrap.NO_WRAP
    overflow: Overflow = Overflow.VISIBLE
    display: Display = Display.FLEX
    margin: Edges = field(default_factory=Edges)
    padding: Edges = field(default_factory=Edges)
    border: Edges = field(default_factory=Edges)
    width: Value = VALUE_AUTO
    height: Value = VALUE_AUTO
    min_width: Value = VALUE_UNDEFINED
    min_height: Value = VALUE_UNDEFINED
    max_width: Value = VALUE_UNDEFINED
    max_height: Value = VALUE_UNDEFINED
    position_type: PositionType = PositionType.RELATIVE
    position: Edges = field(default_factory=Edges)


DEFAULT_STYLE = Style()
"""Style of a freshly constructed node; the baseline for printing."""


@dataclass
class Layout:
    """Computed layout of a node, relative to its parent."""

    width: float = 0.0
    height: float = 0.0
    top: float = 0.0
    left: float = 0.0


PrintFunc = Callable[["Node", TextIO], None]


@dataclass
class Node:
    """A node in a layout tree."""

    id: str = ""
    style: Style = DEFAULT_STYLE
    layout: Layout = field(default_factory=Layout)
    children: list[Node] = field(default_factory=list)
    # Diagnostics hook, called with the node and the output buffer
    print_func: Optional[PrintFunc] = None
    has_measure_func: bool = False

    def add_child(self, child: Node) -> None:
        self.children.append(child)

    def walk(self) -> Iterator[Node]:
        """Yield this node and its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def depth(self) -> int:
        """Number of levels in the subtree rooted here (a leaf is 1)."""
        if not self.children:
            return 1
        return 1 + max(child.depth() for child in self.children)
