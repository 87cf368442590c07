"""Dark theme."""

from flex_dump.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    box_stroke="#e0e0e0",
    box_stroke_width=1.0,
    box_fills=[
        "rgba(255, 255, 255, 0.04)",
        "rgba(120, 180, 255, 0.10)",
        "rgba(120, 255, 180, 0.10)",
        "rgba(255, 200, 120, 0.10)",
    ],
    label_color="#e0e0e0",
    measured_stroke="#f0c040",
)
