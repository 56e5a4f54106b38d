"""
Structured Logging for GeoTap
=============================

Bounded Context: Observability

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from geotap.logging import create_logger, LogEvent
    >>> logger = create_logger("parser")
    >>> logger.info(
    ...     event=LogEvent.GEOJSON_PARSE_COMPLETED,
    ...     message="Parsed 12 features",
    ...     metadata={'polygons': 12}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, JSONFormatter, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'JSONFormatter',
    'create_logger',
]
