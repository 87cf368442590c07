"""SVG rendering of computed layouts."""

from flex_dump.render.svg import render_svg

__all__ = ["render_svg"]
