"""
Observability Infrastructure
Structured logging
"""
from commanding.infrastructure.observability.logger import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)

__all__ = [
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
]
