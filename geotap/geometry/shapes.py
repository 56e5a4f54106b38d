"""
Geometric Primitives Module
===========================

Pure geometric representations - NO state, NO side effects.

Design:
- Immutable value types (frozen dataclass pattern)
- GeoPoint.from_geojson is the only place a GeoJSON [lon, lat] position
  becomes a (lat, lon) point
- Rings become Nx2 (x=lon, y=lat) numpy arrays for vectorized queries
"""

import math

import numpy as np
from dataclasses import dataclass
from typing import Any, Iterable, Sequence, Tuple

from geotap.errors import MalformedCoordinatesError


@dataclass(frozen=True)
class GeoPoint:
    """
    Immutable (latitude, longitude) pair.

    Attributes:
        latitude: Degrees north (y)
        longitude: Degrees east (x)
    """

    latitude: float
    longitude: float

    @classmethod
    def from_geojson(cls, position: Any) -> "GeoPoint":
        """
        Build a point from a GeoJSON position ``[longitude, latitude, ...]``.

        Members beyond the second (altitude) are ignored.

        Raises:
            MalformedCoordinatesError: If position is not a sequence of at
                least two finite numbers
        """
        if not isinstance(position, (list, tuple)):
            raise MalformedCoordinatesError(
                f"position must be an array, got {type(position).__name__}"
            )
        if len(position) < 2:
            raise MalformedCoordinatesError(
                f"position must have at least 2 members, got {len(position)}"
            )

        lon, lat = position[0], position[1]
        for value in (lon, lat):
            # bool is an int subclass, JSON true/false is not a coordinate
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise MalformedCoordinatesError(
                    f"position members must be numbers, got {value!r}"
                )

        try:
            latitude, longitude = float(lat), float(lon)
        except (OverflowError, ValueError) as e:
            raise MalformedCoordinatesError(
                f"position members must fit in a float: {e}"
            ) from e

        # json accepts NaN and Infinity literals
        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            raise MalformedCoordinatesError(
                f"position members must be finite, got {[lon, lat]!r}"
            )

        return cls(latitude=latitude, longitude=longitude)

    def to_geojson(self) -> list:
        """Serialize back to a GeoJSON ``[longitude, latitude]`` position."""
        return [self.longitude, self.latitude]


Ring = Tuple[GeoPoint, ...]


def ring_from_geojson(positions: Any) -> Ring:
    """
    Convert a GeoJSON position array into a ring (or line) of GeoPoints.

    Order is preserved verbatim; no closing, dedup or winding normalization.

    Raises:
        MalformedCoordinatesError: If positions is not an array of positions
    """
    if not isinstance(positions, list):
        raise MalformedCoordinatesError(
            f"expected an array of positions, got {type(positions).__name__}"
        )
    return tuple(GeoPoint.from_geojson(position) for position in positions)


def ring_to_array(points: Sequence[GeoPoint]) -> np.ndarray:
    """
    Convert a ring into an Nx2 float array of (x=lon, y=lat) vertices.

    Returns:
        Read-only array of shape (N, 2); shape (0, 2) for an empty ring
    """
    vertices = np.array(
        [(p.longitude, p.latitude) for p in points], dtype=np.float64
    ).reshape(-1, 2)
    vertices.flags.writeable = False
    return vertices


@dataclass(frozen=True)
class BoundingBox:
    """
    Immutable axis-aligned box in (lat, lon) space.

    Invariants:
        - min_lat <= max_lat
        - min_lon <= max_lon
    """

    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float

    def __post_init__(self):
        """Validate invariants."""
        if self.min_lat > self.max_lat or self.min_lon > self.max_lon:
            raise ValueError(
                f"BoundingBox min must not exceed max, got "
                f"({self.min_lat}, {self.min_lon}) > ({self.max_lat}, {self.max_lon})"
            )

    @classmethod
    def from_points(cls, points: Iterable[GeoPoint]) -> "BoundingBox":
        """
        Smallest box containing all points.

        Raises:
            ValueError: If points is empty
        """
        vertices = ring_to_array(tuple(points))
        if len(vertices) == 0:
            raise ValueError("BoundingBox requires at least one point")

        min_lon, min_lat = vertices.min(axis=0)
        max_lon, max_lat = vertices.max(axis=0)
        return cls(
            min_lat=float(min_lat),
            min_lon=float(min_lon),
            max_lat=float(max_lat),
            max_lon=float(max_lon),
        )

    def contains(self, point: GeoPoint) -> bool:
        """Inclusive containment test."""
        return (
            self.min_lat <= point.latitude <= self.max_lat
            and self.min_lon <= point.longitude <= self.max_lon
        )

    def is_overlapping(self, other: "BoundingBox") -> bool:
        """True if the boxes share at least one point (edges included)."""
        return not (
            other.min_lat > self.max_lat
            or other.max_lat < self.min_lat
            or other.min_lon > self.max_lon
            or other.max_lon < self.min_lon
        )

    def expanded(self, margin: float) -> "BoundingBox":
        """Box grown by ``margin`` on every side."""
        if margin < 0:
            raise ValueError(f"margin must be >= 0, got {margin}")
        return BoundingBox(
            min_lat=self.min_lat - margin,
            min_lon=self.min_lon - margin,
            max_lat=self.max_lat + margin,
            max_lon=self.max_lon + margin,
        )
