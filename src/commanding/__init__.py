"""
commanding
Executable commands, aggregate commands that wrap child execution in named
events, and the event manager / hydrator collaborators they rely on
"""

# Domain layer
from commanding.domain import CommandEvent, Event

# Infrastructure layer
from commanding.infrastructure import (
    ClassMethodsHydrator,
    DataclassHydrator,
    EventManager,
    FilterComposite,
    HydratorInterface,
    MethodMatchFilter,
    ResponseCollection,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)

# Application layer
from commanding.application import (
    AbstractAggregateCommand,
    AbstractCommand,
    CommandInterface,
    guess_event_name,
)

from commanding.config import Settings, get_settings
from commanding.exceptions import (
    CommandingError,
    HydrationError,
    InvalidCommandError,
    InvalidListenerError,
)

__all__ = [
    # Domain
    "Event",
    "CommandEvent",
    # Infrastructure - Messaging
    "EventManager",
    "ResponseCollection",
    # Infrastructure - Hydration
    "HydratorInterface",
    "ClassMethodsHydrator",
    "DataclassHydrator",
    "FilterComposite",
    "MethodMatchFilter",
    # Infrastructure - Observability
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    # Application
    "CommandInterface",
    "AbstractCommand",
    "AbstractAggregateCommand",
    "guess_event_name",
    # Config
    "Settings",
    "get_settings",
    # Errors
    "CommandingError",
    "InvalidCommandError",
    "InvalidListenerError",
    "HydrationError",
]
