# src/meterline/core/logging.py
"""Structured logging for the Meterline agent.

Bootstrap events (plugins initialized, checkpoints reached, expectation
checks, failures) are emitted through structlog. Plugins are free to use
plain logging.getLogger(__name__); both end up on the same handler with
the same rendering, because stdlib records are passed through structlog's
processor chain by ProcessorFormatter.

Usage:
    from meterline.core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("agent_started", sources=3)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.stdlib import ProcessorFormatter

# Dependencies that log their internals at DEBUG level.
_NOISY_LOGGERS: tuple[str, ...] = (
    "dynaconf",
    "pluggy",
)


def _drop_formatter_bookkeeping(
    logger: logging.Logger | None,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Strip the _record and _from_structlog keys ProcessorFormatter always adds."""
    del event_dict["_record"]
    del event_dict["_from_structlog"]
    return event_dict


def _renderers(json_output: bool) -> list[Any]:
    if json_output:
        return [
            _drop_formatter_bookkeeping,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [
        _drop_formatter_bookkeeping,
        structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
    ]


def configure_logging(
    *,
    json_output: bool = False,
    level: str = "INFO",
) -> None:
    """Route structlog and stdlib logging to stdout with one renderer.

    Replaces the root handlers, so calling it again reconfigures output.

    Args:
        json_output: One JSON object per line instead of console rendering.
        level: Root log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    pre_chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]

    structlog.configure(
        processors=[*pre_chain, ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Reconfiguration must reach loggers created before this call
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ProcessorFormatter(processors=_renderers(json_output), foreign_pre_chain=pre_chain))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(log_level)

    # Noisy dependencies stay at WARNING or at the root level, whichever is stricter.
    for logger_name in _NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(max(log_level, logging.WARNING))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return the structlog logger used by Meterline modules.

    Args:
        name: Logger name (typically __name__).
    """
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
