"""flex-dump: readable dumps of flexbox layout trees."""

__version__ = "0.1.0"

from flex_dump.node import DEFAULT_STYLE, Layout, Node, PrintOptions, Style  # noqa: E402
from flex_dump.printer import node_to_string, print_node, serialize  # noqa: E402

__all__ = [
    "__version__",
    "DEFAULT_STYLE",
    "Layout",
    "Node",
    "PrintOptions",
    "Style",
    "node_to_string",
    "print_node",
    "serialize",
]
