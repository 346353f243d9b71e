"""C5 — Color Optimization.

Rewrite functional ``rgb(r, g, b)`` fill/stroke values with integer channels
in 0–255 to ``#rrggbb``. Everything else (hex, named colors, currentColor,
percentages, out-of-range channels) is left as is.
"""

from __future__ import annotations

from svgjsx.engine.registry import cleaning_pass
from svgjsx.models.options import CleaningOptions
from svgjsx.models.svg_document import Document

COLOR_ATTRIBUTES = ("fill", "stroke")


def rgb_to_hex(value: str) -> str | None:
    """``rgb(255, 0, 0)`` → ``#ff0000``; None when the value is not that form."""
    text = value.strip()
    if not (text[:4].lower() == "rgb(" and text.endswith(")")):
        return None
    channels = [c.strip() for c in text[4:-1].split(",")]
    if len(channels) != 3:
        return None
    rgb: list[int] = []
    for channel in channels:
        if not channel.isdigit() or not channel.isascii():
            return None
        number = int(channel)
        if number > 255:
            return None
        rgb.append(number)
    return "#" + "".join(f"{c:02x}" for c in rgb)


@cleaning_pass(
    id="C5",
    order=5,
    option="optimize_colors",
    description="Optimized {count} color values",
)
def optimize_colors(document: Document, options: CleaningOptions) -> int:
    optimized = 0
    for element in document.iter():
        for name in COLOR_ATTRIBUTES:
            value = element.get(name)
            if not value:
                continue
            hex_value = rgb_to_hex(value)
            if hex_value is not None:
                element.attributes[name] = hex_value
                optimized += 1
    return optimized
