"""
Infrastructure Layer
Event manager, hydration and observability
"""
from commanding.infrastructure.hydration import (
    ClassMethodsHydrator,
    DataclassHydrator,
    FilterComposite,
    HydratorInterface,
    MethodMatchFilter,
)
from commanding.infrastructure.messaging import EventManager, ResponseCollection
from commanding.infrastructure.observability import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)

__all__ = [
    # Messaging
    "EventManager",
    "ResponseCollection",
    # Hydration
    "HydratorInterface",
    "ClassMethodsHydrator",
    "DataclassHydrator",
    "FilterComposite",
    "MethodMatchFilter",
    # Observability
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
]
