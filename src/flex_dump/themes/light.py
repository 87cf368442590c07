"""Light theme."""

from flex_dump.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="none",
    box_stroke="#333333",
    box_stroke_width=1.0,
    box_fills=[
        "rgba(0, 0, 0, 0.03)",
        "rgba(30, 90, 200, 0.08)",
        "rgba(30, 160, 90, 0.08)",
        "rgba(220, 130, 30, 0.08)",
    ],
    label_color="#333333",
    measured_stroke="#c07000",
)
