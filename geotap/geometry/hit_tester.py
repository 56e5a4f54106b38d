"""
Polygon Hit Tester Module
=========================

Stateless point-in-polygon resolution for pointer taps.

Design:
- Ray casting (PNPOLY) vectorized over ring edges with numpy
- Returns every matching polygon in input order; the caller resolves ambiguity
- Outer ring only by default: a tap inside a hole still hits the polygon
- No error conditions, always returns a list

Boundary rule:
    An edge (a, b) is crossed when exactly one endpoint lies strictly above
    the query latitude and the crossing longitude is strictly greater than
    the query longitude (half-open edges). With this rule points on a left
    or bottom edge of an axis-aligned square are inside, points on a right
    or top edge are outside.
"""

import numpy as np
from typing import List, Optional, Protocol, Sequence, TypeVar

from geotap.geometry.shapes import BoundingBox, GeoPoint, ring_to_array


class OuterRingShape(Protocol):
    """Anything exposing an outer ring as ``points`` can be hit-tested."""

    points: Sequence[GeoPoint]


P = TypeVar("P", bound=OuterRingShape)


def ring_contains(vertices: np.ndarray, point: GeoPoint) -> bool:
    """
    Ray-casting containment test for one ring.

    Args:
        vertices: Nx2 array of (x=lon, y=lat); treated as closed
        point: Query point in the same coordinate space

    Returns:
        True if the crossing count is odd. Rings with < 3 vertices never match.
    """
    if len(vertices) < 3:
        return False

    x, y = point.longitude, point.latitude
    xi, yi = vertices[:, 0], vertices[:, 1]
    # Previous vertex for every vertex closes the ring implicitly
    xj, yj = np.roll(xi, 1), np.roll(yi, 1)

    straddles = (yi > y) != (yj > y)
    # Horizontal edges divide by zero but never straddle, so they are masked out
    with np.errstate(divide="ignore", invalid="ignore"):
        x_cross = (xj - xi) * (y - yi) / (yj - yi) + xi

    crossings = np.count_nonzero(straddles & (x < x_cross))
    return bool(crossings % 2)


def distance_to_ring(vertices: np.ndarray, point: GeoPoint) -> float:
    """
    Shortest distance from point to the closed ring's edges.

    Returns:
        Euclidean distance in coordinate units, inf for an empty ring
    """
    if len(vertices) == 0:
        return float("inf")

    p = np.array([point.longitude, point.latitude])
    a = np.roll(vertices, 1, axis=0)
    ab = vertices - a
    length_sq = np.einsum("ij,ij->i", ab, ab)

    with np.errstate(divide="ignore", invalid="ignore"):
        t = np.einsum("ij,ij->i", p - a, ab) / length_sq
    # Zero-length edges collapse onto their start vertex
    t = np.clip(np.nan_to_num(t, nan=0.0, posinf=0.0, neginf=0.0), 0.0, 1.0)

    closest = a + t[:, None] * ab
    return float(np.min(np.linalg.norm(closest - p, axis=1)))


def _vertices_of(shape: OuterRingShape) -> np.ndarray:
    vertices = getattr(shape, "vertices", None)
    if isinstance(vertices, np.ndarray):
        return vertices
    return ring_to_array(shape.points)


def _bounding_box_of(shape: OuterRingShape) -> Optional[BoundingBox]:
    bbox = getattr(shape, "bounding_box", None)
    if isinstance(bbox, BoundingBox):
        return bbox
    if len(shape.points) == 0:
        return None
    return BoundingBox.from_points(shape.points)


class PolygonHitTester:
    """
    Resolves which polygons contain a query point.

    Design Philosophy:
    - No mutable state after construction
    - Pure queries, safe to call on every pointer event
    - Query point must already be in the polygons' coordinate space

    Usage:
        tester = PolygonHitTester()
        hits = tester.hit_test(GeoPoint(5, 5), parser.polygons)
        if not hits:
            ...  # miss
    """

    def __init__(self, respect_holes: bool = False):
        """
        Args:
            respect_holes: Exclude points inside hole rings. Off by default:
                hit-testing against the outer ring only is the established
                behavior callers rely on.
        """
        self.respect_holes = respect_holes

    def contains(
        self,
        point: GeoPoint,
        polygon: OuterRingShape,
        tolerance: float = 0.0,
    ) -> bool:
        """
        Test a single polygon.

        Args:
            point: Query point
            polygon: Shape with an outer ring (and optionally hole_points_list)
            tolerance: Points within this distance of the outer ring also match
        """
        vertices = _vertices_of(polygon)
        if len(vertices) < 3:
            return False

        inside = ring_contains(vertices, point)
        if not inside and tolerance > 0:
            inside = distance_to_ring(vertices, point) <= tolerance

        if inside and self.respect_holes:
            for hole in getattr(polygon, "hole_points_list", None) or ():
                if ring_contains(ring_to_array(hole), point):
                    return False

        return inside

    def hit_test(
        self,
        point: GeoPoint,
        polygons: Sequence[P],
        tolerance: float = 0.0,
        bounds: Optional[BoundingBox] = None,
    ) -> List[P]:
        """
        Find every polygon containing the point.

        Args:
            point: Query point (lat, lon) in polygon vertex space
            polygons: Candidate polygons, tested in order
            tolerance: Pointer tolerance in coordinate units; a point this close
                to an outer ring counts as a hit. 0 means exact containment.
            bounds: Optional visible bounds; polygons whose bounding box does
                not overlap are culled before testing

        Returns:
            Matching polygons in input order (empty list on miss)
        """
        if tolerance < 0:
            tolerance = 0.0

        candidates: List[P] = []
        for polygon in polygons:
            bbox = _bounding_box_of(polygon)
            if bbox is None:
                continue
            if bounds is not None and not bbox.is_overlapping(bounds):
                continue
            # Cheap rejection before the per-edge test
            if not bbox.expanded(tolerance).contains(point):
                continue
            if self.contains(point, polygon, tolerance):
                candidates.append(polygon)

        return candidates
