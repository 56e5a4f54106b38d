"""
GeoTap Errors
=============

Exception taxonomy shared by parsing, configuration and hit-testing.

Hierarchy:

    GeoTapError
    ├── GeoJsonStructureError      (aborts the whole parse)
    │   └── GeoJsonDecodeError     (text is not valid JSON)
    ├── MalformedFeatureError      (skips one feature, reported as diagnostic)
    │   └── MalformedCoordinatesError
    └── ConfigError

Structural and configuration errors also derive from ValueError so callers
that only know about built-in exceptions can still catch them.
"""

from typing import Optional


class GeoTapError(Exception):
    """Base class for all geotap errors."""


class GeoJsonStructureError(GeoTapError, ValueError):
    """
    Document shape is unusable (missing ``features``, missing ``geometry``...).

    Attributes:
        feature_index: Index of the offending feature, None for top-level problems
    """

    def __init__(self, message: str, feature_index: Optional[int] = None):
        self.feature_index = feature_index
        if feature_index is not None:
            message = f"feature[{feature_index}]: {message}"
        super().__init__(message)


class GeoJsonDecodeError(GeoJsonStructureError):
    """Raw GeoJSON text could not be decoded as JSON."""


class MalformedFeatureError(GeoTapError, ValueError):
    """A single feature carries data that cannot be materialized."""


class MalformedCoordinatesError(MalformedFeatureError):
    """Coordinates have the wrong nesting, arity or element types."""


class ConfigError(GeoTapError, ValueError):
    """Invalid parser configuration."""
