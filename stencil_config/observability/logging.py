"""Structured logging configuration."""

import logging
import sys
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any, Final, TextIO

import structlog

from stencil_config.constants import SECRET_ENV_VARS, SECRET_FIELDS


REDACTED_VALUE: Final = "[REDACTED]"

# Event keys that may carry a token, in config and env var spelling
SECRET_LOG_KEYS: Final[frozenset[str]] = frozenset(
    {*SECRET_FIELDS, *SECRET_ENV_VARS.values(), "access_token", "github_token"}
)


def redact_secret_fields(
    _logger: Any,
    _method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Replace non-empty token values in an event with a placeholder."""
    for key in SECRET_LOG_KEYS.intersection(event_dict):
        if event_dict[key]:
            event_dict[key] = REDACTED_VALUE
    return event_dict


def configure_logging(
    level: int = logging.INFO,
    output: TextIO = sys.stderr,
    json_format: bool = False,
) -> None:
    """Configure structured logging for the application.

    Sets up structlog with processors for timestamps, log levels, context
    binding and token redaction. Console output is the default since
    config notices are read by people at a terminal.

    Args:
        level: Logging level (default: INFO).
        output: Output stream (default: stderr).
        json_format: Whether to use JSON format (default: False).
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        redact_secret_fields,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=output.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=output,
        level=level,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a bound logger instance.

    Args:
        name: Optional logger name.

    Returns:
        Bound logger instance.
    """
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger


def bind_theme_logger(
    theme_path: Path,
    component: str,
    logger: structlog.stdlib.BoundLogger | None = None,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """Bind theme and component context for one operation.

    Args:
        theme_path: Theme project directory.
        component: Log component name.
        logger: Logger to bind onto (default: a fresh ``get_logger()``).
        **context: Extra key-value context, e.g. ``operation``.

    Returns:
        Bound logger instance.
    """
    base = logger if logger is not None else get_logger()
    return base.bind(component=component, theme_path=str(theme_path), **context)
