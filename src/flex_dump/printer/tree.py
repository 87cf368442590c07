"""Serialize a layout tree as nested ``<div>`` elements.

The output is meant for humans inspecting a tree: computed layout goes in
a ``layout`` attribute, and only the style properties that differ from a
freshly constructed node go in a ``style`` attribute. Field order and the
historical ``flexWrap`` key are stable so dumps can be diffed.
"""

from __future__ import annotations

__all__ = ["serialize", "node_to_string", "print_node"]

import io
import logging
from typing import TextIO

from flex_dump.node.enums import Edge, PrintOptions
from flex_dump.node.model import DEFAULT_STYLE, Node
from flex_dump.printer.constants import DEFAULT_PRINT_OPTIONS
from flex_dump.printer.format import (
    append_computed_edge,
    append_edges,
    append_enum_if_changed,
    append_float,
    append_value_unless_auto,
    format_number,
    indent,
)

logger = logging.getLogger(__name__)


def serialize(
    buffer: TextIO,
    node: Node,
    options: PrintOptions,
    level: int = 0,
) -> None:
    """Append the serialized subtree rooted at ``node`` to ``buffer``.

    ``options`` selects the layout, style and children blocks
    independently. ``level`` is the indentation level of ``node``.
    """
    if node is None:
        raise TypeError("cannot serialize a null node")

    indent(buffer, level)
    buffer.write("<div ")
    if node.print_func is not None:
        node.print_func(node, buffer)

    if options & PrintOptions.LAYOUT:
        _append_layout(buffer, node)

    if options & PrintOptions.STYLE:
        _append_style(buffer, node)
        if node.has_measure_func:
            buffer.write('has-custom-measure="true"')
    buffer.write(">")

    if options & PrintOptions.CHILDREN and node.children:
        for child in node.children:
            buffer.write("\n")
            serialize(buffer, child, options, level + 1)
        buffer.write("\n")
        indent(buffer, level)
    buffer.write("</div>")


def _append_layout(buffer: TextIO, node: Node) -> None:
    layout = node.layout
    buffer.write('layout="')
    buffer.write(f"width: {format_number(layout.width)}; ")
    buffer.write(f"height: {format_number(layout.height)}; ")
    buffer.write(f"top: {format_number(layout.top)}; ")
    buffer.write(f"left: {format_number(layout.left)};")
    buffer.write('" ')


def _append_style(buffer: TextIO, node: Node) -> None:
    style = node.style
    default = DEFAULT_STYLE
    buffer.write('style="')

    append_enum_if_changed(
        buffer, "flex-direction", style.flex_direction, default.flex_direction
    )
    append_enum_if_changed(
        buffer, "justify-content", style.justify_content, default.justify_content
    )
    append_enum_if_changed(buffer, "align-items", style.align_items, default.align_items)
    append_enum_if_changed(
        buffer, "align-content", style.align_content, default.align_content
    )
    append_enum_if_changed(buffer, "align-self", style.align_self, default.align_self)

    append_float(buffer, "flex-grow", style.flex_grow)
    append_float(buffer, "flex-shrink", style.flex_shrink)
    append_value_unless_auto(buffer, "flex-basis", style.flex_basis)
    append_float(buffer, "flex", style.flex)

    append_enum_if_changed(buffer, "flexWrap", style.flex_wrap, default.flex_wrap)
    append_enum_if_changed(buffer, "overflow", style.overflow, default.overflow)
    append_enum_if_changed(buffer, "display", style.display, default.display)

    append_edges(buffer, "margin", style.margin)
    append_edges(buffer, "padding", style.padding)
    append_edges(buffer, "border", style.border)

    append_value_unless_auto(buffer, "width", style.width)
    append_value_unless_auto(buffer, "height", style.height)
    append_value_unless_auto(buffer, "max-width", style.max_width)
    append_value_unless_auto(buffer, "max-height", style.max_height)
    append_value_unless_auto(buffer, "min-width", style.min_width)
    append_value_unless_auto(buffer, "min-height", style.min_height)

    append_enum_if_changed(
        buffer, "position", style.position_type, default.position_type
    )

    # Offsets print "auto" rather than suppressing it
    for edge in (Edge.LEFT, Edge.RIGHT, Edge.TOP, Edge.BOTTOM):
        append_computed_edge(buffer, edge.value, style.position, edge)

    buffer.write('" ')


def node_to_string(
    node: Node,
    options: PrintOptions = DEFAULT_PRINT_OPTIONS,
    level: int = 0,
) -> str:
    """Serialize ``node`` into a new string."""
    buffer = io.StringIO()
    serialize(buffer, node, options, level)
    return buffer.getvalue()


def print_node(node: Node, options: PrintOptions = DEFAULT_PRINT_OPTIONS) -> None:
    """Log the serialized tree at DEBUG level."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug("%s", node_to_string(node, options))
