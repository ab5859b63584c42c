"""Structured logging for settle.

settle emits events through structlog. Until an application configures
structlog itself, the first ``get_logger`` call installs a WARNING level
filter, so only failed sources are reported and per-run summaries stay
quiet. ``configure_logging``, or any ``structlog.configure`` call that sets
``wrapper_class``, replaces that default. An existing configuration is
never touched.

Usage:
    from settle import configure_logging

    configure_logging(level="DEBUG")
    # chain_source_failed  index=1 error="ValueError('x')"
"""

from __future__ import annotations

import logging
import typing

import structlog


def configure_logging(level: str = "INFO", json_format: bool = False) -> None:
    """
    Configure structlog for settle events.

    Args:
        level: Minimum level (DEBUG, INFO, WARNING, ERROR)
        json_format: JSON lines instead of the colored console renderer
    """
    processors: list[structlog.types.Processor] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def get_logger(name: str | None = None) -> typing.Any:
    """Get a structured logger (usually ``get_logger(__name__)``)."""
    if not structlog.is_configured():
        structlog.configure(
            wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING)
        )
    return structlog.get_logger(name)


__all__ = ("configure_logging", "get_logger")
