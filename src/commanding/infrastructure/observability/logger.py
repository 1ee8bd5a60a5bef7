"""
Command Logging
structlog setup for delegation, listener and hydration log lines
"""
from __future__ import annotations

import logging
import sys

import structlog


def _processors(json_logs: bool) -> list:
    # contextvars first so values bound around a command run reach every line
    chain = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    chain.append(
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(colors=False)
    )
    return chain


def configure_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """
    Route command log lines through the standard library at ``log_level``.

    Aggregate commands log each child delegation at INFO ("Executing child
    command", "Child command executed successfully"), a vetoed child at
    WARNING and a failing child at ERROR. Event manager and hydrator details
    are DEBUG.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        json_logs: Render one JSON object per line instead of console text
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    structlog.configure(
        processors=_processors(json_logs),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from_settings() -> None:
    """Apply ``COMMANDING_LOG_LEVEL`` and ``COMMANDING_JSON_LOGS``."""
    from commanding.config import get_settings

    settings = get_settings()
    configure_logging(log_level=settings.log_level, json_logs=settings.json_logs)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Module logger for command code.

    Usage:
        logger = get_logger(__name__)
        logger.info("Child command executed successfully", extra={"event_name": "-send-email-command"})
    """
    return structlog.get_logger(name)
