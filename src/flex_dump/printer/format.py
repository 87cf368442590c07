"""Text formatting primitives for the tree printer.

Each helper appends ``"key: value; "`` fragments to a text buffer, or
nothing at all when the value is uninteresting for its field.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, TextIO

from flex_dump.node.enums import PHYSICAL_EDGES, Edge, Unit
from flex_dump.node.model import (
    VALUE_UNDEFINED,
    Edges,
    Value,
    computed_edge_value,
    is_undefined,
)
from flex_dump.printer.constants import INDENT_UNIT

__all__ = [
    "format_number",
    "indent",
    "append_float",
    "append_value",
    "append_value_unless_auto",
    "append_value_unless_zero",
    "append_edges",
    "append_computed_edge",
    "append_enum_if_changed",
]

_UNIT_SUFFIX = {
    Unit.POINT: "px",
    Unit.PERCENT: "%",
}


def format_number(num: float) -> str:
    """Shortest text that round-trips ``num``, without a trailing ``.0``."""
    text = repr(float(num))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def indent(buffer: TextIO, level: int) -> None:
    for _ in range(level):
        buffer.write(INDENT_UNIT)


def append_float(buffer: TextIO, key: str, num: Optional[float]) -> None:
    if not is_undefined(num):
        buffer.write(f"{key}: {format_number(num)}; ")


def append_value(buffer: TextIO, key: str, value: Value) -> None:
    """Append a dimension value; undefined values are skipped."""
    if value.unit is Unit.UNDEFINED:
        return
    if value.unit is Unit.AUTO:
        buffer.write(f"{key}: auto; ")
    else:
        buffer.write(f"{key}: {format_number(value.value)}{_UNIT_SUFFIX[value.unit]}; ")


def append_value_unless_auto(buffer: TextIO, key: str, value: Value) -> None:
    if value.unit is not Unit.AUTO:
        append_value(buffer, key, value)


def append_value_unless_zero(buffer: TextIO, key: str, value: Value) -> None:
    if value.value != 0:
        append_value(buffer, key, value)


def _four_values_equal(edges: Edges) -> bool:
    first, *rest = edges.physical
    return all(first == other for other in rest)


def append_edges(buffer: TextIO, key: str, edges: Edges) -> None:
    """Append an edge block, collapsed to ``key`` when all four agree."""
    if _four_values_equal(edges):
        append_value_unless_zero(buffer, key, edges.left)
        return
    for edge in PHYSICAL_EDGES:
        append_value_unless_zero(buffer, f"{key}-{edge.value}", edges[edge])


def append_computed_edge(buffer: TextIO, key: str, edges: Edges, edge: Edge) -> None:
    append_value(buffer, key, computed_edge_value(edges, edge, VALUE_UNDEFINED))


def append_enum_if_changed(buffer: TextIO, key: str, value: Enum, default: Enum) -> None:
    if value != default:
        buffer.write(f"{key}: {value.value}; ")
