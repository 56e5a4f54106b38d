"""
Polygon Tap Handler Module
==========================

Routes pointer taps over a polygon layer to tap / miss callbacks.

The caller converts the raw screen position into the polygons' coordinate
space (its viewport transform) before calling ``handle_tap``.

Design:
- Holds the layer's polygons and callbacks, delegates geometry to PolygonHitTester
- Exactly one callback per tap: on_tap for >= 1 hit, on_miss for none
- Optional culling against the visible bounds
"""

from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from geotap.geometry.hit_tester import OuterRingShape, PolygonHitTester
from geotap.geometry.shapes import BoundingBox, GeoPoint
from geotap.logging import LogEvent, StructuredLogger, create_logger

P = TypeVar("P", bound=OuterRingShape)


class PolygonTapHandler(Generic[P]):
    """
    Tap dispatcher for a list of polygons.

    Usage:
        handler = PolygonTapHandler(
            polygons=parser.polygons,
            on_tap=lambda hits, point: select(hits[0]),
            on_miss=lambda point: clear_selection(),
        )
        handler.handle_tap(GeoPoint(latitude=52.37, longitude=4.89))
    """

    def __init__(
        self,
        polygons: Sequence[P] = (),
        on_tap: Optional[Callable[[List[P], GeoPoint], None]] = None,
        on_miss: Optional[Callable[[GeoPoint], None]] = None,
        pointer_distance_tolerance: float = 0.0,
        polygon_culling: bool = False,
        hit_tester: Optional[PolygonHitTester] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            polygons: Tappable polygons (kept by reference, later appends are seen)
            on_tap: Called with (hits, point) when at least one polygon is hit
            on_miss: Called with point when nothing is hit
            pointer_distance_tolerance: Distance in coordinate units within
                which a tap just outside an outer ring still counts
            polygon_culling: Only test polygons overlapping ``visible_bounds``
            hit_tester: Custom tester (e.g. PolygonHitTester(respect_holes=True))
            logger: Structured logger (default: geotap.tap_handler)
        """
        if pointer_distance_tolerance < 0:
            raise ValueError(
                f"pointer_distance_tolerance must be >= 0, got {pointer_distance_tolerance}"
            )

        self.polygons = polygons
        self.on_tap = on_tap
        self.on_miss = on_miss
        self.pointer_distance_tolerance = pointer_distance_tolerance
        self.polygon_culling = polygon_culling
        self.visible_bounds: Optional[BoundingBox] = None
        self.hit_tester = hit_tester or PolygonHitTester()
        self.logger = logger or create_logger("tap_handler")

    def set_visible_bounds(self, bounds: Optional[BoundingBox]) -> None:
        """Update the viewport bounds used when polygon culling is on."""
        self.visible_bounds = bounds

    def handle_tap(self, point: GeoPoint) -> List[P]:
        """
        Resolve a tap and notify the matching callback.

        Args:
            point: Tap position in polygon coordinate space

        Returns:
            Hit polygons in layer order (empty on miss)
        """
        bounds = self.visible_bounds if self.polygon_culling else None
        candidates = self.hit_tester.hit_test(
            point,
            self.polygons,
            tolerance=self.pointer_distance_tolerance,
            bounds=bounds,
        )

        metadata = {
            "latitude": point.latitude,
            "longitude": point.longitude,
            "hits": len(candidates),
        }

        if candidates:
            self.logger.debug(
                event=LogEvent.HIT_TEST_TAP,
                message=f"Tap hit {len(candidates)} polygon(s)",
                metadata=metadata,
            )
            if self.on_tap is not None:
                self.on_tap(candidates, point)
        else:
            self.logger.debug(
                event=LogEvent.HIT_TEST_MISS,
                message="Tap missed all polygons",
                metadata=metadata,
            )
            if self.on_miss is not None:
                self.on_miss(point)

        return candidates
