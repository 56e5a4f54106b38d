"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for geotap structured logging.

Event Naming Convention:
    <component>.<category>.<action>

    component: geojson, hit_test, config, error
    category: parse, feature
    action: completed, skipped, malformed

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, metadata.feature_index, metadata.reason
    | filter event = "geojson.feature.malformed"
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - geojson.*: Document parsing
    - hit_test.*: Pointer hit resolution
    - config.*: Configuration lifecycle
    - error.*: Error conditions
    """

    # ========== Parsing Events ==========
    GEOJSON_PARSE_COMPLETED = "geojson.parse.completed"
    """Document parsed and output committed to the parser lists."""

    GEOJSON_FEATURE_SKIPPED = "geojson.feature.skipped"
    """Feature with an unsupported geometry type was ignored."""

    GEOJSON_FEATURE_MALFORMED = "geojson.feature.malformed"
    """Feature dropped because its coordinates or properties are malformed."""

    # ========== Hit-Test Events ==========
    HIT_TEST_TAP = "hit_test.tap"
    """Pointer hit one or more polygons."""

    HIT_TEST_MISS = "hit_test.miss"
    """Pointer hit no polygon."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Parser configuration loaded from file."""

    # ========== Error Events ==========
    STRUCTURE_ERROR = "error.structure"
    """Document rejected, parse aborted."""

    DECODE_ERROR = "error.decode"
    """GeoJSON text is not valid JSON."""


PARSING_EVENTS = {
    LogEvent.GEOJSON_PARSE_COMPLETED,
    LogEvent.GEOJSON_FEATURE_SKIPPED,
    LogEvent.GEOJSON_FEATURE_MALFORMED,
}

HIT_TEST_EVENTS = {
    LogEvent.HIT_TEST_TAP,
    LogEvent.HIT_TEST_MISS,
}

ERROR_EVENTS = {
    LogEvent.STRUCTURE_ERROR,
    LogEvent.DECODE_ERROR,
}
