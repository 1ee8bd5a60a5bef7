"""
Hydration Strategies
Per-key value conversion applied on extract and hydrate
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable


class StrategyInterface(ABC):
    @abstractmethod
    def extract(self, value: Any) -> Any:
        """Convert an object value into its plain representation."""

    @abstractmethod
    def hydrate(self, value: Any) -> Any:
        """Convert a plain value back into what the object expects."""


class ClosureStrategy(StrategyInterface):
    """
    Strategy built from two callables; either may be omitted to pass values
    through unchanged.

    Example:
        hydrator.add_strategy(
            "sent_at",
            ClosureStrategy(extract=datetime.isoformat, hydrate=datetime.fromisoformat),
        )
    """

    def __init__(
        self,
        extract: Callable[[Any], Any] | None = None,
        hydrate: Callable[[Any], Any] | None = None,
    ) -> None:
        self._extract = extract
        self._hydrate = hydrate

    def extract(self, value: Any) -> Any:
        return self._extract(value) if self._extract else value

    def hydrate(self, value: Any) -> Any:
        return self._hydrate(value) if self._hydrate else value
