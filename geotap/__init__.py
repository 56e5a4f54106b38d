"""
GeoTap
======

Bounded Context: GeoJSON layers for interactive maps.

Design Philosophy:
- Separation of Concerns: Geometry, Parsing, Rendering, Interaction separated
- Pure data out: the caller renders and projects
- Pluggable construction: one creation callback per output kind

Architecture:

    geotap/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── shapes.py      # GeoPoint, BoundingBox, rings
    │   └── hit_tester.py  # PolygonHitTester (ray casting)
    │
    ├── rendering/         # Renderable primitives + styles
    │   ├── styles.py      # Paint, default palette
    │   └── primitives.py  # TaggedMarker, TaggedPolyline, TaggedPolygon
    │
    ├── parsing/           # GeoJSON ingestion (accumulating)
    │   ├── parser.py      # GeoJsonParser
    │   └── builder.py     # GeoJsonParserBuilder
    │
    ├── interaction/       # Pointer taps
    │   └── tap_handler.py # PolygonTapHandler
    │
    ├── logging/           # Structured JSON logs
    ├── config.py          # ParserConfig
    └── errors.py          # Exception taxonomy

Usage:

    # 1. Parse (appends to the parser's lists)
    from geotap import GeoJsonParser

    parser = GeoJsonParser(on_marker_tap=lambda props: print(props["name"]))
    parser.parse_geojson_as_string(text)

    # 2. Render parser.markers / parser.polylines / parser.polygons

    # 3. Hit-test (point already converted to lat/lon by the viewport)
    from geotap import GeoPoint, PolygonHitTester

    hits = PolygonHitTester().hit_test(GeoPoint(52.37, 4.89), parser.polygons)

    # 4. Or route taps to callbacks
    from geotap import PolygonTapHandler

    handler = PolygonTapHandler(parser.polygons, on_tap=select, on_miss=deselect)
    handler.handle_tap(GeoPoint(52.37, 4.89))
"""

# Geometry Layer
from geotap.geometry.shapes import BoundingBox, GeoPoint
from geotap.geometry.hit_tester import PolygonHitTester

# Rendering Layer
from geotap.rendering.styles import Paint
from geotap.rendering.primitives import TaggedMarker, TaggedPolygon, TaggedPolyline

# Parsing Layer
from geotap.config import ParserConfig
from geotap.parsing.parser import FeatureDiagnostic, GeoJsonParser, ParseReport
from geotap.parsing.builder import GeoJsonParserBuilder

# Interaction Layer
from geotap.interaction.tap_handler import PolygonTapHandler

from geotap.errors import (
    ConfigError,
    GeoJsonDecodeError,
    GeoJsonStructureError,
    GeoTapError,
    MalformedCoordinatesError,
    MalformedFeatureError,
)

__all__ = [
    # Geometry
    "BoundingBox",
    "GeoPoint",
    "PolygonHitTester",
    # Rendering
    "Paint",
    "TaggedMarker",
    "TaggedPolygon",
    "TaggedPolyline",
    # Parsing
    "ParserConfig",
    "FeatureDiagnostic",
    "GeoJsonParser",
    "GeoJsonParserBuilder",
    "ParseReport",
    # Interaction
    "PolygonTapHandler",
    # Errors
    "ConfigError",
    "GeoJsonDecodeError",
    "GeoJsonStructureError",
    "GeoTapError",
    "MalformedCoordinatesError",
    "MalformedFeatureError",
]

__version__ = "1.0.0"
