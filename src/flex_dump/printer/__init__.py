"""Human-readable serialization of layout trees."""

from flex_dump.printer.tree import node_to_string, print_node, serialize

__all__ = ["serialize", "node_to_string", "print_node"]
