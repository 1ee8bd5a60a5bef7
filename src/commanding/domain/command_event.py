"""
Command Event
Correlates an event name with the command being run and, afterwards, its result
"""
from __future__ import annotations

from typing import Any

from commanding.domain.event import Event


class CommandEvent(Event):
    """
    Event raised around the execution of a child command.

    ``target`` is the command; ``result`` stays ``None`` until a listener that
    executes the command stores its return value. An instance lives for a
    single delegation call and is never reused.
    """

    def __init__(
        self,
        name: str,
        target: Any,
        params: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(name, target, params)
        self._result: Any = None
        self._has_result = False

    @property
    def result(self) -> Any:
        return self._result

    @result.setter
    def result(self, value: Any) -> None:
        self._result = value
        self._has_result = True

    def get_result(self) -> Any:
        return self._result

    def set_result(self, result: Any) -> CommandEvent:
        self.result = result
        return self

    @property
    def has_result(self) -> bool:
        """True once a listener stored a result, even if that result is None."""
        return self._has_result
