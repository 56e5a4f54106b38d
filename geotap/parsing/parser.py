"""
GeoJSON Parser Module
=====================

Turns a GeoJSON FeatureCollection into three ordered lists of renderable
primitives: markers, polylines and polygons.

Supported geometry types: Point, MultiPoint, LineString, MultiLineString,
Polygon, MultiPolygon. Anything else (GeometryCollection included) is skipped.

Error policy:
- Structural errors (no ``features`` array, a feature without a ``geometry``
  object) raise GeoJsonStructureError and abort the whole parse. Output is
  staged per call and committed only at the end, so the parser lists are left
  exactly as they were.
- Malformed coordinates or properties drop that one feature; a
  FeatureDiagnostic is recorded and parsing continues.
- Exceptions raised by creation callbacks propagate (same abort semantics).

Accumulation:
    Each call appends to ``markers``, ``polylines`` and ``polygons``. Parsing
    the same document twice doubles every list. Call ``clear()`` to start over.

Example
-------
>>> parser = GeoJsonParser()
>>> report = parser.parse_geojson_as_string(text)
>>> report.polygons, len(parser.polygons)
(3, 3)
"""

import copy
import dataclasses
import json
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from geotap.config import ParserConfig
from geotap.errors import (
    ConfigError,
    GeoJsonDecodeError,
    GeoJsonStructureError,
    MalformedCoordinatesError,
    MalformedFeatureError,
)
from geotap.geometry.shapes import GeoPoint, Ring, ring_from_geojson
from geotap.logging import LogEvent, StructuredLogger, create_logger
from geotap.rendering.primitives import (
    PropertyBag,
    TaggedMarker,
    TaggedPolygon,
    TaggedPolyline,
)


@dataclass(frozen=True)
class FeatureDiagnostic:
    """A feature dropped because of malformed content."""

    feature_index: int
    geometry_type: str
    reason: str


@dataclass(frozen=True)
class ParseReport:
    """
    Outcome of one parse call.

    Counts cover only what this call appended.
    """

    markers: int = 0
    polylines: int = 0
    polygons: int = 0
    skipped: int = 0
    diagnostics: Tuple[FeatureDiagnostic, ...] = ()
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        """True when no feature was dropped as malformed."""
        return not self.diagnostics


# ---------------------------------------------------------------------------
# Coordinate extraction (pure, raise MalformedCoordinatesError)
# ---------------------------------------------------------------------------

def _require_list(value: Any, what: str) -> list:
    if not isinstance(value, list):
        raise MalformedCoordinatesError(
            f"{what} must be an array, got {type(value).__name__}"
        )
    return value


def _point(coordinates: Any) -> List[GeoPoint]:
    return [GeoPoint.from_geojson(coordinates)]


def _multi_point(coordinates: Any) -> List[GeoPoint]:
    return [
        GeoPoint.from_geojson(position)
        for position in _require_list(coordinates, "MultiPoint coordinates")
    ]


def _line_string(coordinates: Any) -> List[Ring]:
    return [ring_from_geojson(coordinates)]


def _multi_line_string(coordinates: Any) -> List[Ring]:
    return [
        ring_from_geojson(line)
        for line in _require_list(coordinates, "MultiLineString coordinates")
    ]


def _polygon_rings(coordinates: Any) -> Tuple[Ring, List[Ring]]:
    rings = _require_list(coordinates, "Polygon coordinates")
    if not rings:
        raise MalformedCoordinatesError("Polygon must have an outer ring")
    # Ring 0 is the outer boundary, every later ring is a hole
    outer, *holes = [ring_from_geojson(ring) for ring in rings]
    return outer, holes


def _polygon(coordinates: Any) -> List[Tuple[Ring, List[Ring]]]:
    return [_polygon_rings(coordinates)]


def _multi_polygon(coordinates: Any) -> List[Tuple[Ring, List[Ring]]]:
    return [
        _polygon_rings(polygon)
        for polygon in _require_list(coordinates, "MultiPolygon coordinates")
    ]


# geometry type -> (output list, extractor)
_EXTRACTORS: Dict[str, Tuple[str, Callable[[Any], list]]] = {
    "Point": ("markers", _point),
    "MultiPoint": ("markers", _multi_point),
    "LineString": ("polylines", _line_string),
    "MultiLineString": ("polylines", _multi_line_string),
    "Polygon": ("polygons", _polygon),
    "MultiPolygon": ("polygons", _multi_polygon),
}

SUPPORTED_GEOMETRY_TYPES = frozenset(_EXTRACTORS)


class GeoJsonParser:
    """
    Parses GeoJSON and accumulates markers, polylines and polygons.

    Creation of every output item is delegated to the callbacks of
    ``config``; when a callback is None the default builder creates a
    TaggedMarker / TaggedPolyline / TaggedPolygon from the default styles.

    Not safe for concurrent use: give each thread its own parser and merge
    the lists afterwards.

    Attributes:
        markers: Items built by the marker callback, in document order
        polylines: Items built by the polyline callback
        polygons: Items built by the polygon callback
        diagnostics: Malformed features dropped across all calls
        config: Active configuration
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        logger: Optional[StructuredLogger] = None,
        **overrides: Any,
    ):
        """
        Args:
            config: Parser configuration (default: ParserConfig())
            logger: Structured logger (default: geotap.parser)
            **overrides: ParserConfig fields applied on top of ``config``
        """
        self.config = config if config is not None else ParserConfig()
        self.logger = logger or create_logger("parser")

        self.markers: List[Any] = []
        self.polylines: List[Any] = []
        self.polygons: List[Any] = []
        self.diagnostics: List[FeatureDiagnostic] = []

        if overrides:
            self.configure(**overrides)

    def configure(self, **overrides: Any) -> "GeoJsonParser":
        """
        Replace configuration options (colours, strokes, icon, callbacks).

        Example:
            parser.configure(polyline_stroke_width=5.0, on_marker_tap=print)

        Raises:
            ConfigError: On unknown option names or invalid values
        """
        try:
            self.config = dataclasses.replace(self.config, **overrides)
        except TypeError as e:
            raise ConfigError(
                f"{e}. Valid options: {', '.join(ParserConfig.option_names())}"
            ) from e
        return self

    def clear(self) -> None:
        """Drop everything accumulated so far."""
        self.markers.clear()
        self.polylines.clear()
        self.polygons.clear()
        self.diagnostics.clear()

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse_geojson_as_string(self, text: Union[str, bytes]) -> ParseReport:
        """
        Decode GeoJSON text and parse it.

        Raises:
            GeoJsonDecodeError: If text is not valid JSON
            GeoJsonStructureError: If the document shape is unusable
        """
        try:
            document = json.loads(text)
        except (ValueError, UnicodeDecodeError) as e:
            error = GeoJsonDecodeError(f"Invalid GeoJSON text: {e}")
            self.logger.error(
                event=LogEvent.DECODE_ERROR,
                message="GeoJSON text is not valid JSON",
                exc_info=error,
            )
            raise error from e

        return self.parse_geojson(document)

    def parse_geojson(self, document: Mapping[str, Any]) -> ParseReport:
        """
        Parse a decoded GeoJSON FeatureCollection.

        Args:
            document: Decoded JSON object with a ``features`` array

        Returns:
            ParseReport for this call

        Raises:
            GeoJsonStructureError: Whole-document abort, nothing appended
        """
        stopwatch = time.perf_counter()

        staged: Dict[str, list] = {"markers": [], "polylines": [], "polygons": []}
        diagnostics: List[FeatureDiagnostic] = []
        skipped = 0

        try:
            features = self._features_of(document)
            for index, feature in enumerate(features):
                geometry_type, coordinates = self._geometry_of(feature, index)

                if geometry_type not in _EXTRACTORS:
                    skipped += 1
                    self.logger.debug(
                        event=LogEvent.GEOJSON_FEATURE_SKIPPED,
                        message=f"Skipping unsupported geometry type '{geometry_type}'",
                        metadata={"feature_index": index, "geometry_type": geometry_type},
                    )
                    continue

                output, extractor = _EXTRACTORS[geometry_type]
                try:
                    properties = self._properties_of(feature)
                    parts = extractor(coordinates)
                except MalformedFeatureError as e:
                    diagnostic = FeatureDiagnostic(index, geometry_type, str(e))
                    diagnostics.append(diagnostic)
                    self.logger.warning(
                        event=LogEvent.GEOJSON_FEATURE_MALFORMED,
                        message="Dropped malformed feature",
                        metadata=dataclasses.asdict(diagnostic),
                    )
                    continue

                staged[output].extend(self._create(output, parts, properties))
        except GeoJsonStructureError as e:
            self.logger.error(
                event=LogEvent.STRUCTURE_ERROR,
                message="GeoJSON document rejected, nothing appended",
                metadata={"feature_index": e.feature_index},
                exc_info=e,
            )
            raise

        # Commit only once the whole document went through
        self.markers.extend(staged["markers"])
        self.polylines.extend(staged["polylines"])
        self.polygons.extend(staged["polygons"])
        self.diagnostics.extend(diagnostics)

        report = ParseReport(
            markers=len(staged["markers"]),
            polylines=len(staged["polylines"]),
            polygons=len(staged["polygons"]),
            skipped=skipped,
            diagnostics=tuple(diagnostics),
            elapsed_ms=(time.perf_counter() - stopwatch) * 1000.0,
        )
        self.logger.info(
            event=LogEvent.GEOJSON_PARSE_COMPLETED,
            message=f"parse_geojson() executed in {report.elapsed_ms:.2f} ms",
            metadata={
                "markers": report.markers,
                "polylines": report.polylines,
                "polygons": report.polygons,
                "skipped": report.skipped,
                "malformed": len(report.diagnostics),
                "elapsed_ms": round(report.elapsed_ms, 3),
            },
        )
        return report

    @staticmethod
    def _features_of(document: Any) -> list:
        if not isinstance(document, Mapping):
            raise GeoJsonStructureError(
                f"GeoJSON root must be an object, got {type(document).__name__}"
            )
        features = document.get("features")
        if not isinstance(features, list):
            raise GeoJsonStructureError("GeoJSON root must contain a 'features' array")
        return features

    @staticmethod
    def _geometry_of(feature: Any, index: int) -> Tuple[str, Any]:
        if not isinstance(feature, Mapping):
            raise GeoJsonStructureError(
                f"feature must be an object, got {type(feature).__name__}", index
            )
        geometry = feature.get("geometry")
        if not isinstance(geometry, Mapping):
            raise GeoJsonStructureError("feature has no 'geometry' object", index)
        geometry_type = geometry.get("type")
        if not isinstance(geometry_type, str):
            raise GeoJsonStructureError("geometry has no string 'type'", index)
        return geometry_type, geometry.get("coordinates")

    @staticmethod
    def _properties_of(feature: Mapping[str, Any]) -> PropertyBag:
        properties = feature.get("properties")
        if properties is None:
            return {}
        if not isinstance(properties, Mapping):
            raise MalformedFeatureError(
                f"properties must be an object, got {type(properties).__name__}"
            )
        return dict(properties)

    def _create(self, output: str, parts: list, properties: PropertyBag) -> list:
        """Run the creation callback once per part, each with its own properties copy."""
        if output == "markers":
            create_marker = self.config.marker_creation_callback or self.create_default_marker
            return [create_marker(point, copy.deepcopy(properties)) for point in parts]

        if output == "polylines":
            create_polyline = (
                self.config.polyline_creation_callback or self.create_default_polyline
            )
            return [create_polyline(line, copy.deepcopy(properties)) for line in parts]

        create_polygon = self.config.polygon_creation_callback or self.create_default_polygon
        return [
            create_polygon(outer, holes, copy.deepcopy(properties))
            for outer, holes in parts
        ]

    # ------------------------------------------------------------------
    # Default creation callbacks
    # ------------------------------------------------------------------

    def create_default_marker(self, point: GeoPoint, properties: PropertyBag) -> TaggedMarker:
        """Default marker builder: configured icon and colour, tap routed to on_marker_tap."""
        return TaggedMarker(
            point=point,
            properties=properties,
            icon=self.config.marker_icon,
            paint=self.config.marker_paint,
            on_tap=self.marker_tapped,
        )

    def create_default_polyline(self, points: Ring, properties: PropertyBag) -> TaggedPolyline:
        """Default polyline builder."""
        return TaggedPolyline(
            points=points,
            properties=properties,
            paint=self.config.polyline_paint,
            stroke_width=self.config.polyline_stroke_width,
        )

    def create_default_polygon(
        self,
        outer_ring: Ring,
        holes: Optional[List[Ring]],
        properties: PropertyBag,
    ) -> TaggedPolygon:
        """Default polygon builder."""
        return TaggedPolygon(
            points=outer_ring,
            hole_points_list=tuple(holes or ()),
            properties=properties,
            border_paint=self.config.polygon_border_paint,
            fill_paint=self.config.polygon_fill_paint,
            border_stroke_width=self.config.polygon_border_stroke_width,
            is_filled=self.config.polygon_is_filled,
        )

    def marker_tapped(self, properties: PropertyBag) -> None:
        """Forward a marker tap to the configured callback (looked up at tap time)."""
        if self.config.on_marker_tap is not None:
            self.config.on_marker_tap(properties)
