"""Tests for the tree printer."""

import io
import logging
import re

import pytest

from flex_dump.node.enums import (
    Align,
    Display,
    FlexDirection,
    Justify,
    Overflow,
    PositionType,
    PrintOptions,
    Wrap,
)
from flex_dump.node.model import (
    VALUE_AUTO,
    Edges,
    Layout,
    Node,
    Style,
    percent,
    point,
)
from flex_dump.printer import node_to_string, print_node, serialize

ALL = PrintOptions.LAYOUT | PrintOptions.STYLE | PrintOptions.CHILDREN


def _style_only(style: Style, **kwargs) -> str:
    return node_to_string(Node(style=style, **kwargs), PrintOptions.STYLE)


def _two_child_tree() -> Node:
    return Node(
        id="root",
        style=Style(flex_direction=FlexDirection.ROW),
        layout=Layout(width=100, height=50),
        children=[
            Node(id="a", layout=Layout(width=40, height=50)),
            Node(id="b", layout=Layout(width=60, height=50, left=40)),
        ],
    )


def test_default_node_all_options():
    assert node_to_string(Node(), ALL) == (
        '<div layout="width: 0; height: 0; top: 0; left: 0;" style="" ></div>'
    )


def test_layout_block_is_unconditional():
    node = Node(layout=Layout(width=120.5, height=30, top=-4, left=0.25))
    assert node_to_string(node, PrintOptions.LAYOUT) == (
        '<div layout="width: 120.5; height: 30; top: -4; left: 0.25;" ></div>'
    )


def test_empty_style_block_still_emitted():
    assert _style_only(Style()) == '<div style="" ></div>'


def test_default_enums_are_not_printed():
    out = _style_only(Style())
    for key in ("flex-direction:", "justify-content:", "align-items:",
                "align-content:", "align-self:", "flexWrap:", "overflow:",
                "display:", "position:"):
        assert key not in out


def test_changed_enums_are_printed():
    style = Style(
        flex_direction=FlexDirection.ROW_REVERSE,
        justify_content=Justify.SPACE_BETWEEN,
        align_items=Align.CENTER,
        align_content=Align.STRETCH,
        align_self=Align.BASELINE,
        flex_wrap=Wrap.WRAP,
        overflow=Overflow.HIDDEN,
        display=Display.NONE,
        position_type=PositionType.ABSOLUTE,
    )
    assert _style_only(style) == (
        '<div style="'
        "flex-direction: row-reverse; "
        "justify-content: space-between; "
        "align-items: center; "
        "align-content: stretch; "
        "align-self: baseline; "
        "flexWrap: wrap; "
        "overflow: hidden; "
        "display: none; "
        "position: absolute; "
        '" ></div>'
    )


def test_style_field_order():
    style = Style(
        flex_direction=FlexDirection.ROW,
        flex_grow=1,
        flex_shrink=0,
        flex_basis=point(10),
        flex=2,
        flex_wrap=Wrap.WRAP,
        margin=Edges.uniform(point(1)),
        padding=Edges.uniform(percent(2)),
        border=Edges.uniform(point(3)),
        width=point(100),
        height=percent(50),
        max_width=point(200),
        max_height=point(300),
        min_width=point(10),
        min_height=point(20),
        position_type=PositionType.ABSOLUTE,
        position=Edges(left=point(1), right=point(2), top=point(3), bottom=point(4)),
    )
    assert _style_only(style) == (
        '<div style="'
        "flex-direction: row; "
        "flex-grow: 1; flex-shrink: 0; flex-basis: 10px; flex: 2; "
        "flexWrap: wrap; "
        "margin: 1px; padding: 2%; border: 3px; "
        "width: 100px; height: 50%; max-width: 200px; max-height: 300px; "
        "min-width: 10px; min-height: 20px; "
        "position: absolute; "
        "left: 1px; right: 2px; top: 3px; bottom: 4px; "
        '" ></div>'
    )


def test_uniform_margin_collapses():
    out = _style_only(Style(margin=Edges.uniform(point(5))))
    assert out.count("margin: 5px;") == 1
    for side in ("left", "top", "right", "bottom"):
        assert f"margin-{side}:" not in out


def test_differing_margin_expands():
    margin = Edges(left=point(5), top=point(5), right=point(5), bottom=point(6))
    out = _style_only(Style(margin=margin))
    for side in ("left", "top", "right", "bottom"):
        assert out.count(f"margin-{side}:") == 1
    assert "margin:" not in out


def test_auto_width_hidden_but_auto_offset_shown():
    style = Style(width=VALUE_AUTO, position=Edges(top=VALUE_AUTO))
    out = _style_only(style)
    assert "width:" not in out
    assert "top: auto;" in out


def test_auto_flex_basis_hidden():
    assert "flex-basis" not in _style_only(Style(flex_basis=VALUE_AUTO))
    assert "flex-basis: 25%;" in _style_only(Style(flex_basis=percent(25)))


def test_position_offsets_resolve_shorthands():
    style = Style(position=Edges(left=point(2), all=point(1)))
    assert _style_only(style) == (
        '<div style="left: 2px; right: 1px; top: 1px; bottom: 1px; " ></div>'
    )


def test_has_custom_measure_follows_style_block():
    out = _style_only(Style(), has_measure_func=True)
    assert out == '<div style="" has-custom-measure="true"></div>'


def test_has_custom_measure_requires_style_flag():
    node = Node(has_measure_func=True)
    assert "has-custom-measure" not in node_to_string(node, PrintOptions.LAYOUT)


def test_children_only():
    out = node_to_string(_two_child_tree(), PrintOptions.CHILDREN)
    assert out == "<div >\n  <div ></div>\n  <div ></div>\n</div>"
    assert 'layout="' not in out
    assert 'style="' not in out


def test_children_flag_off_skips_children():
    out = node_to_string(_two_child_tree(), PrintOptions.LAYOUT)
    assert out.count("<div") == 1
    assert "\n" not in out


def test_no_flags_any_shape():
    tree = Node(children=[Node(children=[Node(), Node()]), Node()])
    for node in tree.walk():
        assert node_to_string(node, PrintOptions.NONE) == "<div ></div>"


def test_full_tree():
    out = node_to_string(_two_child_tree(), ALL)
    assert out == (
        '<div layout="width: 100; height: 50; top: 0; left: 0;" '
        'style="flex-direction: row; " >\n'
        '  <div layout="width: 40; height: 50; top: 0; left: 0;" style="" ></div>\n'
        '  <div layout="width: 60; height: 50; top: 0; left: 40;" style="" ></div>\n'
        "</div>"
    )


def test_initial_indent_level():
    root = Node(children=[Node(children=[Node()])])
    out = node_to_string(root, PrintOptions.CHILDREN, level=1)
    assert out == (
        "  <div >\n"
        "    <div >\n"
        "      <div ></div>\n"
        "    </div>\n"
        "  </div>"
    )


def test_children_kept_in_insertion_order():
    root = Node(children=[Node(id=name) for name in "cab"])
    seen = []
    for child in root.children:
        child.print_func = lambda node, buf: seen.append(node.id)
    node_to_string(root, PrintOptions.CHILDREN)
    assert seen == ["c", "a", "b"]


def test_print_func_writes_after_open_tag():
    def hook(node, buffer):
        buffer.write(f'id="{node.id}" ')

    node = Node(id="card", print_func=hook, layout=Layout(width=1, height=2))
    assert node_to_string(node, PrintOptions.LAYOUT) == (
        '<div id="card" layout="width: 1; height: 2; top: 0; left: 0;" ></div>'
    )


def test_serialize_appends_to_existing_buffer():
    buf = io.StringIO()
    buf.write("prefix:")
    result = serialize(buf, Node(), PrintOptions.NONE)
    assert result is None
    assert buf.getvalue() == "prefix:<div ></div>"


def test_serialize_accepts_any_writer():
    class Collector:
        def __init__(self):
            self.parts = []

        def write(self, text):
            self.parts.append(text)

    out = Collector()
    serialize(out, _two_child_tree(), PrintOptions.CHILDREN)
    assert "".join(out.parts) == node_to_string(_two_child_tree(), PrintOptions.CHILDREN)


def test_null_root_rejected():
    with pytest.raises(TypeError):
        serialize(io.StringIO(), None, ALL)


def test_deterministic_output():
    tree = _two_child_tree()
    assert node_to_string(tree, ALL) == node_to_string(tree, ALL)


def test_tree_not_mutated():
    tree = _two_child_tree()
    before = (tree.style, tree.layout, [c.layout for c in tree.children])
    node_to_string(tree, ALL)
    assert (tree.style, tree.layout, [c.layout for c in tree.children]) == before


def test_no_undefined_unit_in_output():
    out = node_to_string(_two_child_tree(), ALL)
    assert "undefined" not in out
    assert not re.search(r"\bnan\b", out)


def test_print_node_logs_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="flex_dump.printer.tree")
    print_node(_two_child_tree(), PrintOptions.CHILDREN)
    assert "<div >\n  <div ></div>" in caplog.text


def test_print_node_silent_above_debug(caplog):
    caplog.set_level(logging.INFO, logger="flex_dump.printer.tree")
    print_node(_two_child_tree())
    assert caplog.text == ""
