"""
Structured logging configuration using structlog.

Coverage writes its cells to stdout, so log lines default to stderr.
Logs are human-readable by default or JSON for machine consumption, and
can be mirrored to a file.
"""
import sys
import logging
import structlog
from pathlib import Path
from typing import IO, Optional


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    json_output: bool = False,
    stream: Optional[IO[str]] = None
):
    """
    Configure structured logging for coverage runs.

    Calling it again replaces the previous configuration, including for
    loggers that have already been used.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file that receives a copy of every log line
        json_output: If True, output JSON logs; else human-readable console
        stream: Destination for log lines (default: stderr)

    Example:
        >>> from geohash_poly.utils.logging_config import configure_logging, get_logger
        >>> configure_logging(log_level="DEBUG", json_output=True)
        >>> logger = get_logger(__name__)
        >>> logger.debug("polygon_scan_started", bounds=(0.0, 0.0, 1.0, 1.0), clipped=False)
    """
    level = getattr(logging, log_level.upper())

    logging.basicConfig(
        format="%(message)s",
        stream=stream if stream is not None else sys.stderr,
        level=level,
        force=True,
    )

    processors = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(),
    ]

    # Module-level loggers are created at import time; leaving them uncached
    # lets a later configure_logging call take effect
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter('%(message)s'))
        logging.getLogger().addHandler(file_handler)


def get_logger(name: str):
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Structured logger with bound context

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("coverage_completed", rows=12, cells=140)
        >>> logger.error("coverage_stage_failed", stage="row", exc_info=True)
    """
    return structlog.get_logger(name)
