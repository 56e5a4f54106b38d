"""
Configuration schema for GeoJsonParser.

Defines the creation callbacks and default styling used when materializing
GeoJSON features, plus loading of the styling part from YAML.
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Union
import yaml

from geotap.errors import ConfigError
from geotap.logging import LogEvent, create_logger
from geotap.geometry.shapes import GeoPoint, Ring
from geotap.rendering.primitives import MarkerTapCallback, PropertyBag
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

MarkerCreationCallback = Callable[[GeoPoint, PropertyBag], Any]
PolylineCreationCallback = Callable[[Ring, PropertyBag], Any]
PolygonCreationCallback = Callable[[Ring, List[Ring], PropertyBag], Any]

# YAML key -> (paint field, which half of the paint it sets)
_PAINT_KEYS = {
    "marker_color": ("marker_paint", "color"),
    "marker_opacity": ("marker_paint", "opacity"),
    "polyline_color": ("polyline_paint", "color"),
    "polyline_opacity": ("polyline_paint", "opacity"),
    "polygon_border_color": ("polygon_border_paint", "color"),
    "polygon_border_opacity": ("polygon_border_paint", "opacity"),
    "polygon_fill_color": ("polygon_fill_paint", "color"),
    "polygon_fill_opacity": ("polygon_fill_paint", "opacity"),
}

_SCALAR_KEYS = {
    "marker_icon",
    "polyline_stroke_width",
    "polygon_border_stroke_width",
    "polygon_is_filled",
}


@dataclass(frozen=True)
class ParserConfig:
    """
    Parser configuration.

    Every option is optional. Callbacks left as None fall back to the
    parser's default primitive builders, which read the style fields below.
    Immutable after construction (frozen dataclass); use
    ``dataclasses.replace`` or ``GeoJsonParser.configure`` to derive variants.
    """

    # Creation strategies
    marker_creation_callback: Optional[MarkerCreationCallback] = None
    polyline_creation_callback: Optional[PolylineCreationCallback] = None
    polygon_creation_callback: Optional[PolygonCreationCallback] = None

    # Marker defaults
    marker_paint: Paint = field(default_factory=default_marker_paint)
    marker_icon: str = DEFAULT_MARKER_ICON
    on_marker_tap: Optional[MarkerTapCallback] = None

    # Polyline defaults
    polyline_paint: Paint = field(default_factory=default_polyline_paint)
    polyline_stroke_width: float = DEFAULT_POLYLINE_STROKE_WIDTH

    # Polygon defaults
    polygon_border_paint: Paint = field(default_factory=default_polygon_border_paint)
    polygon_fill_paint: Paint = field(default_factory=default_polygon_fill_paint)
    polygon_border_stroke_width: float = DEFAULT_POLYGON_BORDER_STROKE_WIDTH
    polygon_is_filled: bool = DEFAULT_POLYGON_IS_FILLED

    def __post_init__(self):
        """Validate configuration."""
        for name in (
            "marker_creation_callback",
            "polyline_creation_callback",
            "polygon_creation_callback",
            "on_marker_tap",
        ):
            value = getattr(self, name)
            if value is not None and not callable(value):
                raise ConfigError(f"{name} must be callable, got {type(value).__name__}")

        for name in (
            "marker_paint",
            "polyline_paint",
            "polygon_border_paint",
            "polygon_fill_paint",
        ):
            if not isinstance(getattr(self, name), Paint):
                raise ConfigError(f"{name} must be a Paint, got {type(getattr(self, name)).__name__}")

        if not isinstance(self.marker_icon, str) or not self.marker_icon:
            raise ConfigError("marker_icon cannot be empty")

        for name in ("polyline_stroke_width", "polygon_border_stroke_width"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                raise ConfigError(f"{name} must be a number >= 0, got {value!r}")

        if not isinstance(self.polygon_is_filled, bool):
            raise ConfigError(
                f"polygon_is_filled must be a bool, got {self.polygon_is_filled!r}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any], **callbacks: Any) -> "ParserConfig":
        """
        Build a configuration from plain style values.

        Colours are hex strings, opacities floats in [0, 1]. Callbacks cannot
        be expressed in data and are passed as keyword arguments.

        Example:
            {
                "marker_color": "#e91e63",
                "marker_opacity": 0.9,
                "marker_icon": "place",
                "polyline_stroke_width": 2.5,
                "polygon_is_filled": false
            }

        Raises:
            ConfigError: On unknown keys or invalid values
        """
        unknown = set(data) - set(_PAINT_KEYS) - _SCALAR_KEYS
        if unknown:
            raise ConfigError(f"Unknown config keys: {sorted(unknown)}")

        defaults = cls()
        paints: Dict[str, Dict[str, Any]] = {}
        for key, value in data.items():
            if key in _PAINT_KEYS:
                paint_field, part = _PAINT_KEYS[key]
                paints.setdefault(paint_field, {})[part] = value

        kwargs: Dict[str, Any] = {key: data[key] for key in _SCALAR_KEYS if key in data}
        for paint_field, parts in paints.items():
            base: Paint = getattr(defaults, paint_field)
            try:
                if "color" in parts:
                    paint = Paint.from_hex(str(parts["color"]), float(parts.get("opacity", base.opacity)))
                else:
                    paint = Paint(color=base.color, opacity=float(parts["opacity"]))
            except (TypeError, ValueError) as e:
                raise ConfigError(f"Invalid {paint_field}: {e}") from e
            kwargs[paint_field] = paint

        kwargs.update(callbacks)
        try:
            return cls(**kwargs)
        except TypeError as e:
            raise ConfigError(str(e)) from e

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path], **callbacks: Any) -> "ParserConfig":
        """
        Load configuration from a YAML file.

        Example YAML:
            marker_color: "#f44336"
            marker_opacity: 0.8
            marker_icon: "location_pin"

            polyline_color: "#2196f3"
            polyline_stroke_width: 3.0

            polygon_border_color: "#000000"
            polygon_fill_color: "#000000"
            polygon_fill_opacity: 0.1
            polygon_border_stroke_width: 1.0
            polygon_is_filled: true
        """
        with open(yaml_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be a mapping: {yaml_path}")

        config = cls.from_dict(data, **callbacks)
        create_logger("config").info(
            event=LogEvent.CONFIG_LOADED,
            message="Loaded parser config",
            metadata={"path": str(yaml_path), "keys": sorted(data)},
        )
        return config

    @classmethod
    def option_names(cls) -> Sequence[str]:
        """Names accepted by ``GeoJsonParser.configure``."""
        return tuple(f.name for f in fields(cls))
