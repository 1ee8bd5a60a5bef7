"""
Event Manager
Synchronous named-event registry used by commands to wrap delegated work
"""
from __future__ import annotations

import functools
import itertools
from collections import defaultdict
from typing import Any, Callable, Iterable

from commanding.domain.event import Event
from commanding.exceptions import InvalidListenerError
from commanding.infrastructure.messaging.response_collection import ResponseCollection
from commanding.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

Listener = Callable[[Event], Any]

DEFAULT_PRIORITY = 1


def _listener_name(listener: Callable) -> str:
    return getattr(listener, "__qualname__", None) or repr(listener)


class EventManager:
    """
    In-memory, per-owner event registry.

    Listeners are attached under an event name and invoked synchronously by
    :meth:`trigger`, on the caller's thread, each receiving the same event
    object. Higher priorities run first; listeners sharing a priority run in
    the order they were attached.

    Nothing here is thread-safe. An instance shared between threads needs
    external locking around attach/trigger.

    Attributes:
        _listeners: Event name -> list of (priority, sequence, listener)
    """

    def __init__(self, identifiers: Iterable[str] | None = None) -> None:
        """
        Initialize an empty registry.

        Args:
            identifiers: Names describing the owner (usually its class names)
        """
        self._identifiers: list[str] = list(identifiers or [])
        self._listeners: dict[str, list[tuple[int, int, Listener]]] = defaultdict(list)
        self._sequence = itertools.count()

    @property
    def identifiers(self) -> list[str]:
        return list(self._identifiers)

    def add_identifiers(self, identifiers: Iterable[str]) -> None:
        for identifier in identifiers:
            if identifier not in self._identifiers:
                self._identifiers.append(identifier)

    def attach(self, event_name: str, listener: Listener, priority: int = DEFAULT_PRIORITY) -> Listener:
        """
        Attach a listener to an event name.

        Args:
            event_name: Name the listener reacts to
            listener: Callable receiving the triggered event
            priority: Higher values run earlier

        Returns:
            The listener, so it can later be passed to :meth:`detach`

        Raises:
            InvalidListenerError: If listener is not callable
        """
        if not callable(listener):
            raise InvalidListenerError(
                f"Listener for {event_name!r} must be callable",
                details={"event_name": event_name, "listener_type": type(listener).__name__},
            )

        self._listeners[event_name].append((priority, next(self._sequence), listener))
        logger.debug(
            f"Listener attached to {event_name}",
            extra={"listener": _listener_name(listener), "priority": priority},
        )
        return listener

    def once(self, event_name: str, listener: Listener, priority: int = DEFAULT_PRIORITY) -> Listener:
        """
        Attach a listener that is detached the first time it is triggered.

        Returns:
            The wrapper actually registered; detaching either the wrapper or
            the original listener removes it.
        """
        if not callable(listener):
            raise InvalidListenerError(
                f"Listener for {event_name!r} must be callable",
                details={"event_name": event_name, "listener_type": type(listener).__name__},
            )

        @functools.wraps(listener)
        def one_shot(event: Event) -> Any:
            self.detach(one_shot, event_name)
            return listener(event)

        return self.attach(event_name, one_shot, priority)

    def detach(self, listener: Listener, event_name: str | None = None) -> bool:
        """
        Remove a listener from one event name, or from every name.

        Returns:
            True if at least one registration was removed
        """
        names = [event_name] if event_name is not None else list(self._listeners)
        removed = False

        for name in names:
            entries = self._listeners.get(name)
            if not entries:
                continue
            kept = [
                entry for entry in entries
                if entry[2] is not listener and getattr(entry[2], "__wrapped__", None) is not listener
            ]
            if len(kept) != len(entries):
                removed = True
                if kept:
                    self._listeners[name] = kept
                else:
                    del self._listeners[name]
                logger.debug(
                    f"Listener detached from {name}",
                    extra={"listener": _listener_name(listener)},
                )

        return removed

    def trigger(self, event: Event) -> ResponseCollection:
        """
        Run every listener attached to ``event.name``.

        Listener exceptions are not caught; the first one aborts the trigger
        and reaches the caller unchanged.

        Args:
            event: Event handed to each listener by reference

        Returns:
            Listener return values
        """
        return self._trigger_listeners(event)

    def trigger_until(self, callback: Callable[[Any], bool], event: Event) -> ResponseCollection:
        """
        Like :meth:`trigger`, but stop as soon as ``callback`` returns a truthy
        value for a listener's return value.
        """
        return self._trigger_listeners(event, callback)

    def _trigger_listeners(
        self,
        event: Event,
        callback: Callable[[Any], bool] | None = None,
    ) -> ResponseCollection:
        responses = ResponseCollection()
        listeners = self.get_listeners(event.name)

        if not listeners:
            logger.debug(f"No listeners for event: {event.name}")
            return responses

        logger.debug(
            f"Triggering event: {event.name}",
            extra={"listener_count": len(listeners)},
        )

        for listener in listeners:
            responses.append(listener(event))

            if event.propagation_is_stopped:
                responses.stopped = True
                break
            if callback is not None and callback(responses.last()):
                responses.stopped = True
                break

        return responses

    def get_events(self) -> list[str]:
        """Names that currently have at least one listener."""
        return [name for name, entries in self._listeners.items() if entries]

    def get_listeners(self, event_name: str) -> list[Listener]:
        """Listeners for a name, in the order they would run."""
        entries = sorted(self._listeners.get(event_name, []), key=lambda e: (-e[0], e[1]))
        return [entry[2] for entry in entries]

    def clear_listeners(self, event_name: str | None = None) -> None:
        """
        Clear all listeners for an event name, or all listeners.

        Args:
            event_name: Event name to clear (None for all)
        """
        if event_name is not None:
            self._listeners.pop(event_name, None)
        else:
            self._listeners.clear()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(identifiers={self._identifiers!r})"
