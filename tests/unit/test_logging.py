"""
Tests for logging configuration.
"""
import io
import json

import pytest
from pathlib import Path
import tempfile
from geohash_poly.utils.logging_config import configure_logging, get_logger


def test_get_logger():
    """Test getting a logger instance."""
    logger = get_logger(__name__)
    assert logger is not None


def test_configure_logging_console():
    """Test console logging configuration."""
    configure_logging(log_level="INFO", json_output=False)
    logger = get_logger(__name__)

    # Should not raise exception
    logger.info("test_message", key="value")
    logger.debug("debug_message")  # May not print (INFO level)


def test_configure_logging_json():
    """Test JSON logging configuration."""
    configure_logging(log_level="DEBUG", json_output=True)
    logger = get_logger(__name__)

    # Should not raise exception
    logger.info("coverage_started", polygons=2, precision=6)


def test_configure_logging_with_file():
    """Test logging to file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        log_file = Path(tmpdir) / "logs" / "test.log"

        configure_logging(
            log_level="INFO",
            log_file=log_file,
            json_output=False
        )

        logger = get_logger(__name__)
        logger.info("test_file_logging", message="hello")

        # Verify file was created
        assert log_file.exists()

        # Verify content
        content = log_file.read_text()
        assert "test_file_logging" in content


def test_logging_with_exception():
    """Test logging with exception traceback."""
    configure_logging(log_level="ERROR", json_output=False)
    logger = get_logger(__name__)

    try:
        raise ValueError("Test error")
    except ValueError:
        # Should not raise exception
        logger.error("exception_occurred", exc_info=True)


def test_configure_logging_stream():
    """Test log lines go to the given stream at the configured level."""
    buffer = io.StringIO()
    configure_logging(log_level="INFO", json_output=True, stream=buffer)
    logger = get_logger("geohash_poly.tests")

    logger.debug("polygon_scan_started", clipped=False)
    logger.info("coverage_completed", rows=6, cells=18)

    lines = buffer.getvalue().splitlines()
    assert len(lines) == 1

    event = json.loads(lines[0])
    assert event["event"] == "coverage_completed"
    assert event["cells"] == 18
    assert event["level"] == "info"
    assert event["logger"] == "geohash_poly.tests"


def test_reconfigure_after_first_use():
    """Test an already-used logger follows a later configuration."""
    logger = get_logger("geohash_poly.tests")

    console = io.StringIO()
    configure_logging(log_level="INFO", json_output=False, stream=console)
    logger.info("coverage_started", polygons=1)

    structured = io.StringIO()
    configure_logging(log_level="INFO", json_output=True, stream=structured)
    logger.info("coverage_started", polygons=2)

    assert "coverage_started" in console.getvalue()
    assert json.loads(structured.getvalue().splitlines()[0])["polygons"] == 2
