"""Structured logging utilities for argguard.

This module configures structlog for the CLI and for hosts that embed argguard.
Every event passes through a ``CommandLineScrubber`` before rendering, so a
sensitive ``command_line`` field never reaches the output.
"""

import logging
import sys
import time

import structlog
from structlog.types import EventDict, Processor

from argguard.constants import SENSITIVE_ARGUMENTS_MESSAGE
from argguard.redaction import CommandLineScrubber

#: Level names accepted by configure_logging() and the config file.
VALID_LOG_LEVELS: frozenset[str] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)


def add_timestamp(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add a unix timestamp to log entries."""
    event_dict["timestamp"] = time.time()
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    json_output: bool = True,
    redaction_message: str = SENSITIVE_ARGUMENTS_MESSAGE,
) -> None:
    """Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: If True, output JSON format. If False, use console format.
        redaction_message: Logged in place of a sensitive ``command_line`` field.

    Raises:
        ValueError: If ``log_level`` is not a known level name.
    """
    level_name = log_level.upper()
    if level_name not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: '{log_level}'. Supported values: {sorted(VALID_LOG_LEVELS)}."
        )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        add_timestamp,
        structlog.processors.add_log_level,
        CommandLineScrubber(redaction_message),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level_name)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str = "argguard") -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance.

    Args:
        name: Logger name (typically module name)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


# Sensible defaults; the CLI reconfigures from the loaded config.
configure_logging()
