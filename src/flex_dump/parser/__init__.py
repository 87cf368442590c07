"""Loaders that build layout trees from documents."""

from flex_dump.parser.tree import load_tree, parse_tree

__all__ = ["load_tree", "parse_tree"]
