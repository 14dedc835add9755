"""
Centralized logging configuration for the contract library.

This module provides standardized logging configuration using structlog
for all components. Library modules only ask for loggers; applications
embedding the library call configure_logging once at start-up.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_codec_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the shortcode subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for shortcode encoding and decoding
    """
    # Lazy proxy, binds on first use.
    return structlog.get_logger(name, subsystem="shortcode")


def log_decode_outcome(
    logger: FilteringBoundLogger,
    shortcode: str,
    outcome: str,
    reason: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a shortcode decode decision with standardized format.

    Legacy fallbacks are logged at info level so that unrecognised
    shortcodes remain visible; grammar matches are debug noise.

    Args:
        logger: Structlog logger instance
        shortcode: The shortcode being decoded
        outcome: Grammar that matched ("barriered", "barrierless") or "legacy"
        reason: Why the outcome was chosen
        context: Additional context data
    """
    bound_logger = logger.bind(
        shortcode=shortcode,
        decode_outcome=outcome,
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if outcome == "legacy":
        bound_logger.info("Shortcode decoded as legacy placeholder")
    else:
        bound_logger.debug("Shortcode decoded")
