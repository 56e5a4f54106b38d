"""
Paint Styles Module
===================

Colour + opacity values used by the default primitives.

Design:
- supervision.Color for the RGB part (same type the drawing layer consumes)
- Opacity kept beside the colour, supervision colours carry no alpha
- Default palette exposed as factories, supervision colours are mutable
"""

import supervision as sv
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Paint:
    """
    Immutable colour with opacity.

    Attributes:
        color: RGB colour
        opacity: Alpha in [0, 1]
    """

    color: sv.Color
    opacity: float = 1.0

    def __post_init__(self):
        """Validate opacity range."""
        if not 0.0 <= self.opacity <= 1.0:
            raise ValueError(f"opacity must be in [0.0, 1.0], got {self.opacity}")

    @classmethod
    def from_hex(cls, color_hex: str, opacity: float = 1.0) -> "Paint":
        """
        Build from a hex string such as ``"#ff0000"`` or ``"f00"``.

        Raises:
            ValueError: If the hex string is invalid
        """
        return cls(color=sv.Color.from_hex(color_hex), opacity=opacity)

    def as_rgba(self) -> Tuple[int, int, int, float]:
        """(r, g, b, alpha) tuple for renderers that take straight RGBA."""
        r, g, b = self.color.as_rgb()
        return r, g, b, self.opacity


def default_marker_paint() -> Paint:
    """Red at 80% opacity."""
    return Paint(color=sv.Color(r=244, g=67, b=54), opacity=0.8)


def default_polyline_paint() -> Paint:
    """Blue at 80% opacity."""
    return Paint(color=sv.Color(r=33, g=150, b=243), opacity=0.8)


def default_polygon_border_paint() -> Paint:
    """Black at 80% opacity."""
    return Paint(color=sv.Color(r=0, g=0, b=0), opacity=0.8)


def default_polygon_fill_paint() -> Paint:
    """Black at 10% opacity."""
    return Paint(color=sv.Color(r=0, g=0, b=0), opacity=0.1)


DEFAULT_MARKER_ICON = "location_pin"
DEFAULT_POLYLINE_STROKE_WIDTH = 3.0
DEFAULT_POLYGON_BORDER_STROKE_WIDTH = 1.0
DEFAULT_POLYGON_IS_FILLED = True
