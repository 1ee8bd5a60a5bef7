"""
Named Event Base Class
Carried by reference through every listener an EventManager triggers
"""
from __future__ import annotations

from typing import Any


class Event:
    """
    A named event passed to listeners.

    Listeners receive the same instance, so anything one listener writes
    (params, or fields added by subclasses) is visible to the next one and to
    whoever triggered the event.

    Attributes:
        name: Event identifier listeners are attached under
        target: Object the event concerns (fixed at construction)
        params: Free-form listener parameters
    """

    def __init__(
        self,
        name: str,
        target: Any = None,
        params: dict[str, Any] | None = None,
    ) -> None:
        self.name: str = name
        self._target = target
        self.params: dict[str, Any] = dict(params or {})
        self._propagation_stopped = False

    @property
    def target(self) -> Any:
        return self._target

    def get_param(self, name: str, default: Any = None) -> Any:
        return self.params.get(name, default)

    def set_param(self, name: str, value: Any) -> None:
        self.params[name] = value

    def stop_propagation(self, flag: bool = True) -> None:
        """Ask the EventManager not to call any further listeners."""
        self._propagation_stopped = flag

    @property
    def propagation_is_stopped(self) -> bool:
        return self._propagation_stopped

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, target={self._target!r})"
