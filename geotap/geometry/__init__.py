"""
Geometry Layer
==============

Bounded Context: Pure geometric values and spatial queries.

Responsibilities:
- Point, ring and bounding-box representation (immutable)
- GeoJSON [lon, lat] to (lat, lon) conversion
- Point-in-polygon tests
- NO parsing policy, NO styling, NO callbacks
"""

from geotap.geometry.shapes import (
    BoundingBox,
    GeoPoint,
    Ring,
    ring_from_geojson,
    ring_to_array,
)
from geotap.geometry.hit_tester import (
    PolygonHitTester,
    distance_to_ring,
    ring_contains,
)

__all__ = [
    "BoundingBox",
    "GeoPoint",
    "Ring",
    "ring_from_geojson",
    "ring_to_array",
    "PolygonHitTester",
    "distance_to_ring",
    "ring_contains",
]
