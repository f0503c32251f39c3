"""Observability module for logging."""

from stencil_config.observability.logging import (
    bind_theme_logger,
    configure_logging,
    get_logger,
    redact_secret_fields,
)


__all__ = [
    "bind_theme_logger",
    "configure_logging",
    "get_logger",
    "redact_secret_fields",
]
