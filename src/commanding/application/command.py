"""
Command Contract
Anything that can be executed and that exposes its hydrator and event manager
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Protocol, runtime_checkable

from commanding.infrastructure.hydration.class_methods import ClassMethodsHydrator
from commanding.infrastructure.hydration.filters import FilterComposite, MethodMatchFilter
from commanding.infrastructure.hydration.hydrator import HydratorInterface
from commanding.infrastructure.messaging.event_manager import EventManager

# Accessors that are infrastructure, not command data
_INFRASTRUCTURE_ACCESSORS = ("get_hydrator", "get_event_manager")


@runtime_checkable
class CommandInterface(Protocol):
    """
    Structural type for commands.

    Concrete commands do not have to inherit from AbstractCommand; providing
    these three methods is enough for an aggregate to delegate to them.
    """

    def execute(self) -> Any: ...

    def get_hydrator(self) -> HydratorInterface: ...

    def get_event_manager(self) -> EventManager: ...


class AbstractCommand(ABC):
    """
    Base class for commands.

    Supplies lazily created, per-instance hydrator and event manager. Works
    for plain classes and for (frozen) dataclass subclasses alike, since it
    declares no ``__init__`` and writes its private attributes directly.

    Example:
        @dataclass
        class SendEmailCommand(AbstractCommand):
            recipient: str = ""

            def get_recipient(self) -> str:
                return self.recipient

            def execute(self) -> bool:
                return mailer.send(self.recipient)
    """

    # Extra names added to the event manager's identifiers
    event_identifiers: ClassVar[tuple[str, ...]] = ()

    _hydrator: HydratorInterface | None = None
    _event_manager: EventManager | None = None

    @abstractmethod
    def execute(self) -> Any:
        """
        Run the command.

        Returns:
            Command-specific result
        """
        pass

    def get_hydrator(self) -> HydratorInterface:
        """
        Return the hydrator, building a ClassMethodsHydrator on first access.

        The default hydrator never extracts ``get_hydrator`` or
        ``get_event_manager``.
        """
        if self._hydrator is None:
            hydrator = ClassMethodsHydrator()
            for method in _INFRASTRUCTURE_ACCESSORS:
                hydrator.add_filter(method, MethodMatchFilter(method), FilterComposite.CONDITION_AND)
            self.set_hydrator(hydrator)

        return self._hydrator

    def set_hydrator(self, hydrator: HydratorInterface) -> AbstractCommand:
        object.__setattr__(self, "_hydrator", hydrator)
        return self

    def get_event_manager(self) -> EventManager:
        """Return the event manager, creating an empty one on first access."""
        if self._event_manager is None:
            self.set_event_manager(EventManager())

        return self._event_manager

    def set_event_manager(self, event_manager: EventManager) -> AbstractCommand:
        """
        Install an event manager, tagging it with this command's identifiers.

        Args:
            event_manager: Registry to use for this command's events
        """
        cls = type(self)
        event_manager.add_identifiers(
            [f"{cls.__module__}.{cls.__qualname__}", cls.__qualname__, *self.event_identifiers]
        )
        object.__setattr__(self, "_event_manager", event_manager)
        return self
