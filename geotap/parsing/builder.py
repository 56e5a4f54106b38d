"""
Parser Builder Module
=====================

Fluent construction of a configured GeoJsonParser.

Usage:
    parser = (
        GeoJsonParserBuilder()
        .with_config_file("styles.yaml")
        .with_polygon_creation_callback(make_district)
        .with_marker_tap_callback(show_popup)
        .build()
    )
"""

import dataclasses
from pathlib import Path
from typing import Any, Dict, Optional, Union

from geotap.config import (
    MarkerCreationCallback,
    ParserConfig,
    PolygonCreationCallback,
    PolylineCreationCallback,
)
from geotap.logging import StructuredLogger
from geotap.parsing.parser import GeoJsonParser
from geotap.rendering.primitives import MarkerTapCallback
from geotap.rendering.styles import Paint


class GeoJsonParserBuilder:
    """
    Builder for GeoJsonParser.

    Design:
    - Fluent API, every option optional
    - Validation happens once, in build() (ParserConfig fails fast)
    - A YAML style file provides the base, explicit calls override it
    """

    def __init__(self):
        self._config_file: Optional[Path] = None
        self._options: Dict[str, Any] = {}
        self._logger: Optional[StructuredLogger] = None

    def with_config_file(self, yaml_path: Union[str, Path]) -> "GeoJsonParserBuilder":
        """Load base styles from YAML."""
        self._config_file = Path(yaml_path)
        return self

    def with_logger(self, logger: StructuredLogger) -> "GeoJsonParserBuilder":
        """Set structured logger."""
        self._logger = logger
        return self

    def with_marker_creation_callback(
        self, callback: MarkerCreationCallback
    ) -> "GeoJsonParserBuilder":
        """Replace the default marker builder."""
        self._options["marker_creation_callback"] = callback
        return self

    def with_polyline_creation_callback(
        self, callback: PolylineCreationCallback
    ) -> "GeoJsonParserBuilder":
        """Replace the default polyline builder."""
        self._options["polyline_creation_callback"] = callback
        return self

    def with_polygon_creation_callback(
        self, callback: PolygonCreationCallback
    ) -> "GeoJsonParserBuilder":
        """Replace the default polygon builder."""
        self._options["polygon_creation_callback"] = callback
        return self

    def with_marker_color(self, paint: Paint) -> "GeoJsonParserBuilder":
        self._options["marker_paint"] = paint
        return self

    def with_marker_icon(self, icon: str) -> "GeoJsonParserBuilder":
        self._options["marker_icon"] = icon
        return self

    def with_marker_tap_callback(self, callback: MarkerTapCallback) -> "GeoJsonParserBuilder":
        """Called with the marker's properties when a default marker is tapped."""
        self._options["on_marker_tap"] = callback
        return self

    def with_polyline_color(self, paint: Paint) -> "GeoJsonParserBuilder":
        self._options["polyline_paint"] = paint
        return self

    def with_polyline_stroke_width(self, width: float) -> "GeoJsonParserBuilder":
        self._options["polyline_stroke_width"] = width
        return self

    def with_polygon_border_color(self, paint: Paint) -> "GeoJsonParserBuilder":
        self._options["polygon_border_paint"] = paint
        return self

    def with_polygon_fill_color(self, paint: Paint) -> "GeoJsonParserBuilder":
        self._options["polygon_fill_paint"] = paint
        return self

    def with_polygon_border_stroke_width(self, width: float) -> "GeoJsonParserBuilder":
        self._options["polygon_border_stroke_width"] = width
        return self

    def with_polygon_filled(self, is_filled: bool) -> "GeoJsonParserBuilder":
        self._options["polygon_is_filled"] = is_filled
        return self

    def build(self) -> GeoJsonParser:
        """
        Build the parser.

        Raises:
            ConfigError: If any option is invalid
            FileNotFoundError: If the config file does not exist
        """
        if self._config_file is not None:
            base = ParserConfig.from_yaml(self._config_file)
        else:
            base = ParserConfig()

        config = dataclasses.replace(base, **self._options)
        return GeoJsonParser(config=config, logger=self._logger)
