"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

JSON-structured logging for the parser and hit tester.

Design:
- JSON output (compatible with log aggregators)
- Wraps Python's logging module
- Type-safe events (LogEvent enum)
- Never influences parse or hit-test results

Example:
    >>> logger = StructuredLogger(component="parser")
    >>> logger.info(
    ...     event=LogEvent.GEOJSON_PARSE_COMPLETED,
    ...     message="Parsed document",
    ...     metadata={'markers': 3, 'elapsed_ms': 0.4}
    ... )

Output:
    {
        "timestamp": "2026-10-17T09:12:01.402117+00:00",
        "level": "INFO",
        "component": "parser",
        "event": "geojson.parse.completed",
        "message": "Parsed document",
        "metadata": {"markers": 3, "elapsed_ms": 0.4}
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Attributes:
        component: Component name (e.g., "parser", "hit_tester")
        logger: Underlying Python logger instance
    """

    def __init__(
        self,
        component: str,
        level: Optional[int] = None,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "parser")
            level: Logging level (default: inherit the level already set on the
                logger, so host configuration is left alone)
            logger_name: Custom logger name (default: geotap.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"geotap.{component}"
        self.logger = logging.getLogger(self.logger_name)
        if level is not None:
            self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        # default=str keeps property values like Decimal from breaking a log call
        self.logger.log(
            log_level,
            json.dumps(log_entry, default=str),
            exc_info=exc_info if level == 'ERROR' else None
        )

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log DEBUG level message."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
        """
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log WARNING level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context

        Example:
            >>> logger.warning(
            ...     event=LogEvent.GEOJSON_FEATURE_MALFORMED,
            ...     message="Dropped feature",
            ...     metadata={'feature_index': 4}
            ... )
        """
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log ERROR level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception instance for traceback
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        """Change logging level dynamically."""
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """
    Pass-through formatter: StructuredLogger already renders the JSON payload.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: Optional[int] = None
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Args:
        component: Component identifier
        level: Logging level (default: inherit the level already set on the
            logger, so host configuration is left alone)

    Returns:
        Configured StructuredLogger instance
    """
    return StructuredLogger(component=component, level=level)
