"""
Messaging Infrastructure
Synchronous event manager and listener responses
"""
from commanding.infrastructure.messaging.event_manager import EventManager
from commanding.infrastructure.messaging.response_collection import ResponseCollection

__all__ = [
    "EventManager",
    "ResponseCollection",
]
