"""Logging utilities for graphql-config.

This module provides a standalone structlog logger factory. Loggers are
self-contained and do not modify global structlog configuration, so embedding
applications keep full control over their own logging setup.
"""

import logging
import sys
from os import getenv
from typing import TYPE_CHECKING, Literal, TextIO, cast

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

LogFormatType = Literal["json", "text"]

DEBUG_ENV_VAR = "GRAPHQL_CONFIG_DEBUG"
LOG_LEVEL_ENV_VAR = "GRAPHQL_CONFIG_LOG_LEVEL"


def _get_log_level() -> int:
    """Get the log level from environment variables.

    Checks GRAPHQL_CONFIG_DEBUG first (sets DEBUG if present), then
    GRAPHQL_CONFIG_LOG_LEVEL. Defaults to INFO if neither is set.

    Returns:
        The logging level as an integer.
    """
    if getenv(DEBUG_ENV_VAR, None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(getenv(LOG_LEVEL_ENV_VAR, "info").upper(), logging.INFO)


def _log_level_from_string(level: str) -> int:
    """Convert a log level string to a logging level integer.

    GRAPHQL_CONFIG_DEBUG overrides the given level.
    """
    if getenv(DEBUG_ENV_VAR, None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.INFO)


def create_logger(
    *,
    level: str | None = None,
    log_format: LogFormatType = "text",
    file: TextIO | None = None,
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a standalone structlog logger for configuration parsing.

    The log level is determined by (in order of precedence):
    1. GRAPHQL_CONFIG_DEBUG environment variable (if set, enables DEBUG level)
    2. The `level` parameter (if provided)
    3. GRAPHQL_CONFIG_LOG_LEVEL environment variable
    4. Default: INFO

    Args:
        level: Optional log level string (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        file: Stream to write to. Defaults to stderr.

    Returns:
        A configured FilteringBoundLogger instance.
    """
    effective_level = (
        _log_level_from_string(level) if level is not None else _get_log_level()
    )
    logger_factory = structlog.WriteLoggerFactory(
        file=file if file is not None else sys.stderr
    )

    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Text format: "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    wrapper_class = structlog.make_filtering_bound_logger(effective_level)

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            logger_factory(),
            processors=processors,
            wrapper_class=wrapper_class,
            context_class=dict,
        ),
    )
