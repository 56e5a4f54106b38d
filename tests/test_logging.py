"""Tests for structured logging and the events emitted by parser and tap handler."""

import json
import logging

import pytest

from conftest import collection, feature, square
from geotap import GeoJsonParser, GeoJsonStructureError, GeoPoint, PolygonTapHandler
from geotap.logging import JSONFormatter, LogEvent, StructuredLogger, create_logger


def events(caplog, logger_name):
    return [
        json.loads(record.getMessage())
        for record in caplog.records
        if record.name == logger_name
    ]


class TestStructuredLogger:

    def test_entry_shape(self, caplog):
        logger = StructuredLogger(component="unit", logger_name="geotap.test.unit")
        with caplog.at_level(logging.INFO, logger="geotap.test.unit"):
            logger.info(LogEvent.CONFIG_LOADED, "hello", metadata={"k": 1})

        (entry,) = events(caplog, "geotap.test.unit")
        assert entry["level"] == "INFO"
        assert entry["component"] == "unit"
        assert entry["event"] == "config.loaded"
        assert entry["message"] == "hello"
        assert entry["metadata"] == {"k": 1}
        assert "timestamp" in entry

    def test_error_includes_exception(self, caplog):
        logger = StructuredLogger(component="unit", logger_name="geotap.test.error")
        with caplog.at_level(logging.INFO, logger="geotap.test.error"):
            logger.error(LogEvent.STRUCTURE_ERROR, "boom", exc_info=ValueError("bad"))

        (entry,) = events(caplog, "geotap.test.error")
        assert entry["exception"] == {"type": "ValueError", "message": "bad"}

    def test_debug_suppressed_at_info(self, caplog):
        logger = StructuredLogger(component="unit", logger_name="geotap.test.quiet")
        with caplog.at_level(logging.INFO, logger="geotap.test.quiet"):
            logger.debug(LogEvent.HIT_TEST_MISS, "quiet")
        assert events(caplog, "geotap.test.quiet") == []

    def test_create_logger_name(self):
        logger = create_logger("parser-x", level=logging.WARNING)
        assert logger.logger.name == "geotap.parser-x"
        assert logger.logger.level == logging.WARNING
        assert isinstance(logger.logger.handlers[0].formatter, JSONFormatter)

    def test_host_level_is_kept(self):
        host_logger = logging.getLogger("geotap.parser")
        previous = host_logger.level
        host_logger.setLevel(logging.ERROR)
        try:
            GeoJsonParser()
            assert host_logger.level == logging.ERROR
        finally:
            host_logger.setLevel(previous)

    def test_default_level_is_unset(self):
        logger = create_logger("unset")
        assert logger.logger.level == logging.NOTSET

    def test_set_level(self):
        logger = create_logger("levels")
        logger.set_level(logging.ERROR)
        assert logger.logger.level == logging.ERROR


class TestEmittedEvents:

    def test_parse_completed(self, caplog, mixed_document):
        parser = GeoJsonParser()
        with caplog.at_level(logging.INFO, logger="geotap.parser"):
            parser.parse_geojson(mixed_document)

        completed = [e for e in events(caplog, "geotap.parser") if e["event"] == "geojson.parse.completed"]
        assert len(completed) == 1
        metadata = completed[0]["metadata"]
        assert (metadata["markers"], metadata["polylines"], metadata["polygons"]) == (1, 1, 1)
        assert metadata["elapsed_ms"] >= 0

    def test_skipped_and_malformed(self, caplog):
        parser = GeoJsonParser()
        document = collection(
            {"geometry": {"type": "GeometryCollection", "geometries": []}},
            feature("Point", ["bad", 0]),
        )
        with caplog.at_level(logging.DEBUG, logger="geotap.parser"):
            parser.parse_geojson(document)

        names = [e["event"] for e in events(caplog, "geotap.parser")]
        assert "geojson.feature.skipped" in names
        assert "geojson.feature.malformed" in names

    def test_structure_error_logged(self, caplog):
        parser = GeoJsonParser()
        with caplog.at_level(logging.INFO, logger="geotap.parser"):
            with pytest.raises(GeoJsonStructureError):
                parser.parse_geojson({"type": "FeatureCollection"})

        names = [e["event"] for e in events(caplog, "geotap.parser")]
        assert names == ["error.structure"]

    def test_tap_and_miss(self, caplog):
        handler = PolygonTapHandler([square(0, 0, 10, 10)])
        with caplog.at_level(logging.DEBUG, logger="geotap.tap_handler"):
            handler.handle_tap(GeoPoint(5, 5))
            handler.handle_tap(GeoPoint(50, 50))

        names = [e["event"] for e in events(caplog, "geotap.tap_handler")]
        assert names == ["hit_test.tap", "hit_test.miss"]

    def test_logging_does_not_change_results(self, mixed_document):
        quiet = GeoJsonParser()
        quiet.logger.set_level(logging.CRITICAL)
        loud = GeoJsonParser()
        loud.logger.set_level(logging.DEBUG)

        assert quiet.parse_geojson(mixed_document).polygons == loud.parse_geojson(mixed_document).polygons
