"""Shared fixtures for geotap tests."""

import pytest

from geotap import GeoJsonParser, GeoPoint, TaggedPolygon


def square(min_lat, min_lon, max_lat, max_lon, **kwargs):
    """Axis-aligned TaggedPolygon, corners listed without closing vertex."""
    return TaggedPolygon(
        points=(
            GeoPoint(min_lat, min_lon),
            GeoPoint(min_lat, max_lon),
            GeoPoint(max_lat, max_lon),
            GeoPoint(max_lat, min_lon),
        ),
        **kwargs,
    )


def feature(geometry_type, coordinates, properties=None, include_properties=True):
    result = {
        "type": "Feature",
        "geometry": {"type": geometry_type, "coordinates": coordinates},
    }
    if include_properties:
        result["properties"] = properties if properties is not None else {}
    return result


def collection(*features):
    return {"type": "FeatureCollection", "features": list(features)}


@pytest.fixture
def parser():
    return GeoJsonParser()


@pytest.fixture
def unit_square():
    """The (0,0),(0,10),(10,10),(10,0) square."""
    return square(0, 0, 10, 10, tag="unit")


@pytest.fixture
def mixed_document():
    return collection(
        feature("Point", [4.8952, 52.3702], {"name": "Dam"}),
        feature(
            "LineString",
            [[4.88, 52.36], [4.89, 52.37], [4.90, 52.38]],
            {"name": "Route"},
        ),
        feature(
            "Polygon",
            [
                [[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]],
                [[2, 2], [4, 2], [4, 4], [2, 4], [2, 2]],
            ],
            {"name": "Block"},
        ),
    )
