"""Load layout trees from JSON documents.

Two document shapes are accepted. A node table::

    {"root": "app",
     "nodes": {"app": {"style": {"flex-direction": "row"},
                       "layout": {"width": 100, "height": 40},
                       "children": ["left", "right"]},
               "left": {...}, "right": {...}}}

or a single inline node, whose ``children`` are nested node objects. Both
forms may be mixed: a child entry is either an id into ``nodes`` or an
inline node object.

Style keys use the CSS names the printer emits. Dimensions are numbers
(points) or strings such as ``"auto"``, ``"12px"``, ``"12"`` or ``"50%"``.

``margin``, ``padding`` and ``border`` accept ``-left``/``-top``/``-right``/
``-bottom`` plus the ``-horizontal``/``-vertical``/``-all`` shorthands, which
are folded onto the four physical edges while loading.
"""

from __future__ import annotations

__all__ = ["parse_tree", "load_tree"]

import json
import math
import logging
import re
from collections import Counter
from enum import Enum
from typing import Any

import networkx as nx

from flex_dump.node.enums import (
    PHYSICAL_EDGES,
    Align,
    Display,
    Edge,
    FlexDirection,
    Justify,
    Overflow,
    PositionType,
    Wrap,
)
from flex_dump.node.model import (
    VALUE_AUTO,
    VALUE_UNDEFINED,
    Edges,
    Layout,
    Node,
    Style,
    Value,
    computed_edge_value,
    percent,
    point,
)

logger = logging.getLogger(__name__)

_VALUE_PATTERN = re.compile(
    r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*(px|%)?\s*$"
)

_NODE_KEYS = {"id", "style", "layout", "children", "measure"}
_LAYOUT_KEYS = ("width", "height", "top", "left")

_ENUM_KEYS: dict[str, tuple[str, type[Enum]]] = {
    "flex-direction": ("flex_direction", FlexDirection),
    "justify-content": ("justify_content", Justify),
    "align-items": ("align_items", Align),
    "align-content": ("align_content", Align),
    "align-self": ("align_self", Align),
    "flex-wrap": ("flex_wrap", Wrap),
    "flexWrap": ("flex_wrap", Wrap),
    "overflow": ("overflow", Overflow),
    "display": ("display", Display),
    "position": ("position_type", PositionType),
}

_FLOAT_KEYS = {
    "flex-grow": "flex_grow",
    "flex-shrink": "flex_shrink",
    "flex": "flex",
}

_VALUE_KEYS = {
    "flex-basis": "flex_basis",
    "width": "width",
    "height": "height",
    "min-width": "min_width",
    "min-height": "min_height",
    "max-width": "max_width",
    "max-height": "max_height",
}

_EDGE_BLOCKS = ("margin", "padding", "border")

# Position offsets: CSS-style inset names for the shorthand slots
_POSITION_KEYS = {
    "left": Edge.LEFT,
    "top": Edge.TOP,
    "right": Edge.RIGHT,
    "bottom": Edge.BOTTOM,
    "start": Edge.START,
    "end": Edge.END,
    "inset-horizontal": Edge.HORIZONTAL,
    "inset-vertical": Edge.VERTICAL,
    "inset": Edge.ALL,
}


def parse_tree(text: str) -> Node:
    """Parse a JSON tree document and return its root node."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e
    return load_tree(data)


def load_tree(data: Any) -> Node:
    """Build a node tree from an already decoded JSON document."""
    if not isinstance(data, dict):
        raise ValueError("Tree document must be a JSON object")

    if "nodes" in data:
        table = data["nodes"]
        if not isinstance(table, dict) or not table:
            raise ValueError("'nodes' must be a non-empty object of id -> node")
        root_id = data.get("root")
    else:
        root_id = data.get("id", "root")
        table = {root_id: data}

    specs: dict[str, dict] = {}
    child_ids: dict[str, list[str]] = {}
    for node_id, spec in table.items():
        _flatten(str(node_id), spec, specs, child_ids)

    root_id = _check_tree_shape(specs, child_ids, root_id)

    nodes = {node_id: _build_node(node_id, spec) for node_id, spec in specs.items()}
    for node_id, kids in child_ids.items():
        nodes[node_id].children = [nodes[kid] for kid in kids]

    logger.debug("Loaded %d nodes rooted at %r", len(nodes), root_id)
    return nodes[root_id]


def _flatten(
    node_id: str,
    spec: Any,
    specs: dict[str, dict],
    child_ids: dict[str, list[str]],
) -> None:
    """Register ``spec`` and its inline descendants under generated ids."""
    if not isinstance(spec, dict):
        raise ValueError(f"Node '{node_id}' must be a JSON object")
    if node_id in specs:
        raise ValueError(f"Duplicate node id '{node_id}'")
    unknown = set(spec) - _NODE_KEYS
    if unknown:
        raise ValueError(
            f"Node '{node_id}' has unknown keys: {', '.join(sorted(unknown))}"
        )

    specs[node_id] = spec
    kids: list[str] = []
    children = spec.get("children", [])
    if not isinstance(children, list):
        raise ValueError(f"Node '{node_id}': 'children' must be a list")
    for index, child in enumerate(children):
        if isinstance(child, str):
            kids.append(child)
        else:
            child_id = (
                str(child["id"])
                if isinstance(child, dict) and "id" in child
                else f"{node_id}.{index}"
            )
            _flatten(child_id, child, specs, child_ids)
            kids.append(child_id)
    child_ids[node_id] = kids


def _check_tree_shape(
    specs: dict[str, dict],
    child_ids: dict[str, list[str]],
    root_id: str | None,
) -> str:
    """Ensure the child references form a single tree and return its root."""
    G = nx.DiGraph()
    G.add_nodes_from(specs)
    refs: Counter[str] = Counter()
    for parent, kids in child_ids.items():
        for kid in kids:
            if kid not in specs:
                raise ValueError(f"Node '{parent}' references unknown child '{kid}'")
            refs[kid] += 1
            G.add_edge(parent, kid)

    shared = sorted(kid for kid, count in refs.items() if count > 1)
    if shared:
        raise ValueError(f"Nodes with more than one parent: {', '.join(shared)}")

    if not nx.is_directed_acyclic_graph(G):
        cycle = nx.find_cycle(G)
        path = " -> ".join([u for u, _ in cycle] + [cycle[0][0]])
        raise ValueError(f"Child references form a cycle: {path}")

    roots = [n for n in G.nodes if G.in_degree(n) == 0]
    if root_id is None:
        if len(roots) != 1:
            raise ValueError(
                f"Cannot infer the root: found {len(roots)} parentless nodes "
                f"({', '.join(sorted(roots))}); set 'root' explicitly"
            )
        root_id = roots[0]
    root_id = str(root_id)
    if root_id not in specs:
        raise ValueError(f"Root '{root_id}' is not defined")
    if G.in_degree(root_id) != 0:
        raise ValueError(f"Root '{root_id}' is the child of another node")

    unreachable = set(specs) - nx.descendants(G, root_id) - {root_id}
    if unreachable:
        raise ValueError(
            f"Nodes not reachable from root '{root_id}': "
            f"{', '.join(sorted(unreachable))}"
        )
    return root_id


def _build_node(node_id: str, spec: dict) -> Node:
    return Node(
        id=node_id,
        style=_parse_style(node_id, spec.get("style", {})),
        layout=_parse_layout(node_id, spec.get("layout", {})),
        has_measure_func=bool(spec.get("measure", False)),
    )


def _parse_layout(node_id: str, raw: Any) -> Layout:
    if not isinstance(raw, dict):
        raise ValueError(f"Node '{node_id}': 'layout' must be an object")
    unknown = set(raw) - set(_LAYOUT_KEYS)
    if unknown:
        raise ValueError(
            f"Node '{node_id}': unknown layout keys: {', '.join(sorted(unknown))}"
        )
    values = {}
    for key in _LAYOUT_KEYS:
        if key in raw:
            values[key] = _parse_float(node_id, f"layout.{key}", raw[key])
            if values[key] is None:
                raise ValueError(f"Node '{node_id}': layout.{key} must be defined")
    return Layout(**values)


def _parse_style(node_id: str, raw: Any) -> Style:
    if not isinstance(raw, dict):
        raise ValueError(f"Node '{node_id}': 'style' must be an object")

    fields: dict[str, Any] = {}
    blocks = {name: Edges() for name in (*_EDGE_BLOCKS, "position")}

    for key, value in raw.items():
        if key in _ENUM_KEYS:
            attr, enum_cls = _ENUM_KEYS[key]
            fields[attr] = _parse_enum(node_id, key, enum_cls, value)
        elif key in _FLOAT_KEYS:
            fields[_FLOAT_KEYS[key]] = _parse_float(node_id, key, value)
        elif key in _VALUE_KEYS:
            fields[_VALUE_KEYS[key]] = _parse_value(node_id, key, value)
        elif key in _EDGE_BLOCKS:
            blocks[key] = blocks[key].with_edge(
                Edge.ALL, _parse_value(node_id, key, value)
            )
        elif key in _POSITION_KEYS:
            blocks["position"] = blocks["position"].with_edge(
                _POSITION_KEYS[key], _parse_value(node_id, key, value)
            )
        else:
            block, _, edge_name = key.partition("-")
            edge = _edge_or_none(edge_name)
            if block not in _EDGE_BLOCKS or edge is None:
                raise ValueError(f"Node '{node_id}': unknown style property '{key}'")
            if edge in (Edge.START, Edge.END):
                raise ValueError(
                    f"Node '{node_id}': '{key}' depends on layout direction; "
                    f"use {block}-left or {block}-right"
                )
            blocks[block] = blocks[block].with_edge(
                edge, _parse_value(node_id, key, value)
            )

    for block in _EDGE_BLOCKS:
        blocks[block] = _resolve_physical(blocks[block])

    return Style(**fields, **blocks)


def _resolve_physical(edges: Edges) -> Edges:
    """Fold shorthand slots onto the four physical edges.

    A specific edge beats ``horizontal``/``vertical``, which beat ``all``.
    """
    return Edges(**{edge.value: computed_edge_value(edges, edge) for edge in PHYSICAL_EDGES})


def _edge_or_none(name: str) -> Edge | None:
    try:
        return Edge(name)
    except ValueError:
        return None


def _parse_enum(node_id: str, key: str, enum_cls: type[Enum], raw: Any) -> Enum:
    try:
        return enum_cls(raw)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ValueError(
            f"Node '{node_id}': invalid {key} '{raw}' (expected one of: {choices})"
        ) from None


def _parse_float(node_id: str, key: str, raw: Any) -> float | None:
    if raw is None or raw == "undefined":
        return None
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValueError(f"Node '{node_id}': {key} must be a number, got {raw!r}")
    if not math.isfinite(raw):
        raise ValueError(f"Node '{node_id}': {key} must be finite, got {raw!r}")
    return float(raw)


def _parse_value(node_id: str, key: str, raw: Any) -> Value:
    """Parse a dimension: number, ``"auto"``, ``"<n>px"``, ``"<n>%"``."""
    if raw is None or raw == "undefined":
        return VALUE_UNDEFINED
    if raw == "auto":
        return VALUE_AUTO
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        if math.isfinite(raw):
            return point(raw)
    if isinstance(raw, str):
        m = _VALUE_PATTERN.match(raw)
        if m:
            number = float(m.group(1))
            if not math.isfinite(number):
                raise ValueError(f"Node '{node_id}': {key} must be finite, got {raw!r}")
            return percent(number) if m.group(2) == "%" else point(number)
    raise ValueError(f"Node '{node_id}': invalid value for {key}: {raw!r}")
