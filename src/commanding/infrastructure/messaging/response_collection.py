"""
Listener Response Collection
Return values gathered while an EventManager triggers an event
"""
from __future__ import annotations

from typing import Any


class ResponseCollection(list):
    """
    List of listener return values, in the order the listeners ran.

    Attributes:
        stopped: True when triggering ended early, either because a listener
            stopped propagation or because a ``trigger_until`` callback matched
    """

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)
        self.stopped: bool = False

    def first(self) -> Any:
        return self[0] if self else None

    def last(self) -> Any:
        return self[-1] if self else None

    def contains(self, value: Any) -> bool:
        return value in self
