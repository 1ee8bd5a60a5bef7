"""
Domain Layer
Event types with no framework dependencies
"""
from commanding.domain.command_event import CommandEvent
from commanding.domain.event import Event

__all__ = [
    "Event",
    "CommandEvent",
]
