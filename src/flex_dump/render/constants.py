"""Render constants for layout box diagrams.

Theme-dependent values live in style.py.
"""

CANVAS_PADDING: float = 20.0
"""Default padding around the whole diagram."""

LABEL_INSET_X: float = 4.0
"""Horizontal inset of a node label from its box's left edge."""

LABEL_INSET_Y: float = 3.0
"""Vertical inset of a node label from its box's top edge."""

MIN_LABEL_HEIGHT: float = 12.0
"""Boxes shorter than this are drawn without a label."""
