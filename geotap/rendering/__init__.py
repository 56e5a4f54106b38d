"""
Rendering Layer
===============

Bounded Context: Renderable map primitives and their styles.

Responsibilities:
- Describe markers, polylines and polygons for a drawing backend
- Carry feature properties alongside geometry
- Default colours, strokes and icon

Non-responsibilities:
- Drawing pixels or projecting coordinates (caller's renderer)
- Parsing (handled by parsing)
- Hit resolution (handled by geometry)
"""

from geotap.rendering.styles import Paint
from geotap.rendering.primitives import (
    MarkerTapCallback,
    PropertyBag,
    TaggedMarker,
    TaggedPolygon,
    TaggedPolyline,
)

__all__ = [
    "Paint",
    "MarkerTapCallback",
    "PropertyBag",
    "TaggedMarker",
    "TaggedPolygon",
    "TaggedPolyline",
]
