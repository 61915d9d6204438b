"""Structured logging for pysatl_variates.

Loggers are structlog ``BoundLogger`` objects wrapping standard library
loggers, so library output obeys the application's ``logging`` levels and
handlers. Nothing is emitted until the application configures logging,
either itself or through :func:`configure_logging`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import sys
from typing import Any

import structlog

__all__ = [
    "configure_logging",
    "get_logger",
]

_ROOT_LOGGER_NAME = "pysatl_variates"


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _get_renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(level: str = "INFO", *, json_output: bool = False) -> None:
    """Route pysatl_variates events through a structlog formatter on stderr.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_get_shared_processors(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    for old_handler in list(package_logger.handlers):
        if not isinstance(old_handler, logging.NullHandler):
            package_logger.removeHandler(old_handler)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger bound to the stdlib logger ``name``.

    Args:
        name: Logger name, normally the caller's ``__name__``. Defaults to the
            package root logger.

    Returns:
        A structlog ``BoundLogger``.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or _ROOT_LOGGER_NAME),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
