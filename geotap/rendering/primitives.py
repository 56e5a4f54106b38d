"""
Renderable Primitives Module
============================

Plain, renderer-agnostic map primitives produced by the default creation
callbacks of the parser.

Design:
- Frozen dataclasses (value objects, safe to share between layers)
- Properties travel with the geometry untouched
- TaggedPolygon precomputes its vertex array and bounding box for hit-testing
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

from geotap.geometry.shapes import BoundingBox, GeoPoint, Ring, ring_to_array
from geotap.rendering.styles import (
    DEFAULT_MARKER_ICON,
    DEFAULT_POLYGON_BORDER_STROKE_WIDTH,
    DEFAULT_POLYGON_IS_FILLED,
    DEFAULT_POLYLINE_STROKE_WIDTH,
    Paint,
    default_marker_paint,
    default_polygon_border_paint,
    default_polygon_fill_paint,
    default_polyline_paint,
)

PropertyBag = Dict[str, Any]
MarkerTapCallback = Callable[[PropertyBag], None]


@dataclass(frozen=True)
class TaggedMarker:
    """
    Point marker with its feature properties.

    Attributes:
        point: Marker position
        properties: Feature properties
        icon: Icon glyph name
        paint: Icon colour
        on_tap: Called with ``properties`` when the marker is tapped
    """

    point: GeoPoint
    properties: PropertyBag = field(default_factory=dict)
    icon: str = DEFAULT_MARKER_ICON
    paint: Paint = field(default_factory=default_marker_paint)
    on_tap: Optional[MarkerTapCallback] = field(default=None, compare=False, repr=False)

    def tap(self) -> None:
        """Notify the registered tap callback, if any."""
        if self.on_tap is not None:
            self.on_tap(self.properties)


@dataclass(frozen=True)
class TaggedPolyline:
    """Open line with its feature properties."""

    points: Ring
    properties: PropertyBag = field(default_factory=dict)
    paint: Paint = field(default_factory=default_polyline_paint)
    stroke_width: float = DEFAULT_POLYLINE_STROKE_WIDTH
    tag: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "points", tuple(self.points))


@dataclass(frozen=True)
class TaggedPolygon:
    """
    Polygon with optional holes and its feature properties.

    The outer ring is stored as given: it is neither closed nor checked for
    winding order.

    Attributes:
        points: Outer ring
        hole_points_list: Hole rings, in input order
        properties: Feature properties
        tag: Free-form caller label
        border_paint: Outline colour
        fill_paint: Fill colour
        border_stroke_width: Outline width
        is_filled: Whether the interior is painted
    """

    points: Ring
    hole_points_list: Tuple[Ring, ...] = ()
    properties: PropertyBag = field(default_factory=dict)
    tag: Optional[str] = None
    border_paint: Paint = field(default_factory=default_polygon_border_paint)
    fill_paint: Paint = field(default_factory=default_polygon_fill_paint)
    border_stroke_width: float = DEFAULT_POLYGON_BORDER_STROKE_WIDTH
    is_filled: bool = DEFAULT_POLYGON_IS_FILLED

    def __post_init__(self):
        """Normalize containers to tuples and cache derived geometry."""
        object.__setattr__(self, "points", tuple(self.points))
        object.__setattr__(
            self,
            "hole_points_list",
            tuple(tuple(hole) for hole in (self.hole_points_list or ())),
        )
        object.__setattr__(self, "_vertices", ring_to_array(self.points))
        bbox = BoundingBox.from_points(self.points) if self.points else None
        object.__setattr__(self, "_bounding_box", bbox)

    @property
    def vertices(self) -> np.ndarray:
        """Read-only Nx2 array of outer ring (lon, lat) vertices."""
        return self._vertices

    @property
    def bounding_box(self) -> Optional[BoundingBox]:
        """Outer ring bounds, None for an empty ring."""
        return self._bounding_box
