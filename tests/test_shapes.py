"""Tests for GeoPoint, rings and BoundingBox."""

import numpy as np
import pytest

from geotap import BoundingBox, GeoPoint, MalformedCoordinatesError, TaggedPolygon
from geotap.geometry import ring_from_geojson, ring_to_array


class TestGeoPoint:

    def test_from_geojson_swaps_lon_lat(self):
        point = GeoPoint.from_geojson([4.8952, 52.3702])
        assert point.latitude == pytest.approx(52.3702)
        assert point.longitude == pytest.approx(4.8952)

    def test_integers_become_floats(self):
        point = GeoPoint.from_geojson([1, 2])
        assert point == GeoPoint(latitude=2.0, longitude=1.0)
        assert isinstance(point.latitude, float)

    def test_altitude_is_ignored(self):
        assert GeoPoint.from_geojson([1.0, 2.0, 350.0]) == GeoPoint(2.0, 1.0)

    def test_to_geojson_restores_order(self):
        assert GeoPoint(52.0, 4.0).to_geojson() == [4.0, 52.0]

    @pytest.mark.parametrize("position", [
        [1.0],
        [],
        "1,2",
        {"lon": 1, "lat": 2},
        None,
        ["1", 2],
        [True, False],
        [1.0, None],
        [10**400, 1],
        [float("nan"), 1],
        [1, float("inf")],
        [float("-inf"), 0.0],
    ])
    def test_malformed_positions(self, position):
        with pytest.raises(MalformedCoordinatesError):
            GeoPoint.from_geojson(position)

    def test_is_immutable(self):
        point = GeoPoint(1.0, 2.0)
        with pytest.raises(AttributeError):
            point.latitude = 3.0


class TestRings:

    def test_ring_preserves_order_and_duplicates(self):
        ring = ring_from_geojson([[0, 0], [1, 0], [1, 0], [0, 0]])
        assert ring == (
            GeoPoint(0, 0), GeoPoint(0, 1), GeoPoint(0, 1), GeoPoint(0, 0)
        )

    def test_ring_requires_array(self):
        with pytest.raises(MalformedCoordinatesError):
            ring_from_geojson([0, 0])

    def test_ring_to_array_is_lon_lat(self):
        vertices = ring_to_array((GeoPoint(10.0, 20.0), GeoPoint(11.0, 21.0)))
        assert vertices.shape == (2, 2)
        np.testing.assert_array_equal(vertices, [[20.0, 10.0], [21.0, 11.0]])

    def test_ring_to_array_is_read_only(self):
        vertices = ring_to_array((GeoPoint(0, 0),))
        with pytest.raises(ValueError):
            vertices[0, 0] = 1.0

    def test_empty_ring_array(self):
        assert ring_to_array(()).shape == (0, 2)


class TestBoundingBox:

    def test_from_points(self):
        bbox = BoundingBox.from_points([GeoPoint(1, 5), GeoPoint(-2, 3), GeoPoint(4, 0)])
        assert bbox == BoundingBox(min_lat=-2, min_lon=0, max_lat=4, max_lon=5)

    def test_from_no_points_raises(self):
        with pytest.raises(ValueError):
            BoundingBox.from_points([])

    def test_inverted_box_rejected(self):
        with pytest.raises(ValueError):
            BoundingBox(min_lat=1, min_lon=0, max_lat=0, max_lon=1)

    def test_contains_is_inclusive(self):
        bbox = BoundingBox(0, 0, 10, 10)
        assert bbox.contains(GeoPoint(10, 10))
        assert bbox.contains(GeoPoint(5, 0))
        assert not bbox.contains(GeoPoint(10.1, 5))

    def test_overlap(self):
        bbox = BoundingBox(0, 0, 10, 10)
        assert bbox.is_overlapping(BoundingBox(5, 5, 15, 15))
        assert bbox.is_overlapping(BoundingBox(10, 10, 20, 20))
        assert not bbox.is_overlapping(BoundingBox(11, 0, 20, 10))

    def test_expanded(self):
        assert BoundingBox(0, 0, 1, 1).expanded(0.5) == BoundingBox(-0.5, -0.5, 1.5, 1.5)
        with pytest.raises(ValueError):
            BoundingBox(0, 0, 1, 1).expanded(-1)


class TestTaggedPolygonGeometry:

    def test_vertices_and_bounds_cached(self, unit_square):
        assert unit_square.vertices.shape == (4, 2)
        assert unit_square.bounding_box == BoundingBox(0, 0, 10, 10)

    def test_lists_are_normalized_to_tuples(self):
        polygon = TaggedPolygon(
            points=[GeoPoint(0, 0), GeoPoint(0, 1), GeoPoint(1, 1)],
            hole_points_list=[[GeoPoint(0.1, 0.1), GeoPoint(0.1, 0.2), GeoPoint(0.2, 0.2)]],
        )
        assert isinstance(polygon.points, tuple)
        assert isinstance(polygon.hole_points_list[0], tuple)

    def test_empty_polygon_has_no_bounds(self):
        polygon = TaggedPolygon(points=())
        assert polygon.bounding_box is None
        assert polygon.hole_points_list == ()
