"""
Parsing Layer
=============

Bounded Context: GeoJSON ingestion.

Responsibilities:
- Validate document structure (abort on structural errors)
- Extract coordinates per geometry type ([lon, lat] -> GeoPoint)
- Delegate item creation to pluggable callbacks
- Accumulate results across calls
"""

from geotap.parsing.parser import (
    SUPPORTED_GEOMETRY_TYPES,
    FeatureDiagnostic,
    GeoJsonParser,
    ParseReport,
)
from geotap.parsing.builder import GeoJsonParserBuilder

__all__ = [
    "SUPPORTED_GEOMETRY_TYPES",
    "FeatureDiagnostic",
    "GeoJsonParser",
    "GeoJsonParserBuilder",
    "ParseReport",
]
