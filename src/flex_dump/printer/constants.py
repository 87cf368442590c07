"""Printer constants."""

from flex_dump.node.enums import PrintOptions

INDENT_UNIT: str = "  "
"""Text appended once per indentation level."""

DEFAULT_PRINT_OPTIONS: PrintOptions = (
    PrintOptions.LAYOUT | PrintOptions.STYLE | PrintOptions.CHILDREN
)
"""Options used when the caller does not choose any."""
