"""Structured logging configuration for mathexpr.

The evaluator emits structlog events (``expression_evaluated``,
``expression_rejected``, ``angle_mode_changed``) at DEBUG level. Nothing is
configured on import; applications that want to see the events call
configure_logging() once at startup.

Output format:
- Pretty console output (default)
- JSON lines when MATHEXPR_LOG_FORMAT=json

Usage:
    from mathexpr.logging import configure_logging, get_logger

    configure_logging(level=logging.DEBUG)

    log = get_logger(__name__).bind(formula="tax_rate")
    log.info("formula_loaded")
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.types import Processor

from mathexpr.constants import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
)

__all__ = [
    "get_logger",
    "configure_logging",
    "bind_context",
    "clear_context",
]


def _get_log_level() -> int:
    """Read the log level from MATHEXPR_LOG_LEVEL, falling back to INFO."""
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.INFO)


def _is_json_output() -> bool:
    return os.environ.get(LOG_FORMAT_ENV_VAR, "").lower() == "json"


def _get_shared_processors() -> list[Processor]:
    """Get processors shared between stdlib and structlog records.

    Returns:
        List of common processors for log processing.
    """
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _get_renderer(use_json: bool) -> Processor:
    if use_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.plain_traceback,
    )


def _get_processors(use_json: bool) -> list[Processor]:
    """Get the full structlog processor chain for the chosen output format.

    Args:
        use_json: Render JSON lines instead of console output.

    Returns:
        Shared processors, an exception formatter, and the final renderer.
    """
    exception_processor: Processor = (
        structlog.processors.dict_tracebacks
        if use_json
        else structlog.processors.format_exc_info
    )
    return [
        *_get_shared_processors(),
        exception_processor,
        _get_renderer(use_json),
    ]


def configure_logging(
    *,
    force_json: bool = False,
    level: int | None = None,
) -> None:
    """Configure structlog and the stdlib root logger.

    Subsequent calls reconfigure logging, replacing the handler installed by
    the previous call.

    Args:
        force_json: Force JSON output regardless of MATHEXPR_LOG_FORMAT.
        level: Override log level. If None, reads MATHEXPR_LOG_LEVEL.

    Example:
        configure_logging()
        configure_logging(force_json=True, level=logging.DEBUG)
    """
    use_json = force_json or _is_json_output()
    log_level = level if level is not None else _get_log_level()

    structlog.configure(
        processors=_get_processors(use_json),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    # stdlib records from other libraries go through the same renderer
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _get_renderer(use_json),
            ],
            foreign_pre_chain=_get_shared_processors(),
        )
    )
    root_logger.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by the stdlib logger ``name``.

    Events pass through stdlib level filtering even before configure_logging()
    runs, so an unconfigured application only sees warnings and errors (on
    stderr, via the stdlib last-resort handler).

    Args:
        name: Logger name. If None, the root logger is used.

    Returns:
        A bound structlog logger.
    """
    log: structlog.stdlib.BoundLogger = structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    return log


def bind_context(**context: Any) -> None:
    """Bind context variables included in every subsequent log event.

    Args:
        **context: Key-value pairs to bind to log context.

    Example:
        bind_context(formula_set="pricing")
        evaluator.evaluate("2*pi()")  # events carry formula_set
    """
    structlog.contextvars.bind_contextvars(**context)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
