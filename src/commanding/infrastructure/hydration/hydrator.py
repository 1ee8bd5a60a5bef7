"""
Hydrator Contracts
Map an object to a plain dict and back
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from commanding.infrastructure.hydration.filters import FilterComposite, FilterInterface
from commanding.infrastructure.hydration.strategies import StrategyInterface


class HydratorInterface(ABC):
    """
    Converts between an object and a plain key/value mapping.

    Example:
        data = hydrator.extract(command)
        hydrator.hydrate(data, SendEmailCommand())
    """

    @abstractmethod
    def extract(self, obj: Any) -> dict[str, Any]:
        """
        Extract values from an object.

        Args:
            obj: Object to read

        Returns:
            Mapping of keys to (strategy-converted) values
        """
        pass

    @abstractmethod
    def hydrate(self, data: dict[str, Any], obj: Any) -> Any:
        """
        Populate an object from a mapping.

        Args:
            data: Key/value pairs to apply
            obj: Object to write into

        Returns:
            The hydrated object
        """
        pass


class AbstractHydrator(HydratorInterface):
    """
    Shared filter and strategy handling for concrete hydrators.

    Attributes:
        _filter_composite: Decides which names are extracted
        _strategies: Key -> value conversion strategy
    """

    def __init__(self) -> None:
        self._filter_composite = FilterComposite()
        self._strategies: dict[str, StrategyInterface] = {}

    # Filters
    def get_filter(self) -> FilterComposite:
        return self._filter_composite

    def add_filter(
        self,
        name: str,
        filter: FilterInterface,
        condition: int = FilterComposite.CONDITION_OR,
    ) -> None:
        self._filter_composite.add_filter(name, filter, condition)

    def remove_filter(self, name: str) -> None:
        self._filter_composite.remove_filter(name)

    def has_filter(self, name: str) -> bool:
        return self._filter_composite.has_filter(name)

    # Strategies
    def add_strategy(self, name: str, strategy: StrategyInterface) -> None:
        self._strategies[name] = strategy

    def remove_strategy(self, name: str) -> None:
        self._strategies.pop(name, None)

    def has_strategy(self, name: str) -> bool:
        return name in self._strategies

    def extract_value(self, name: str, value: Any) -> Any:
        strategy = self._strategies.get(name)
        return strategy.extract(value) if strategy else value

    def hydrate_value(self, name: str, value: Any) -> Any:
        strategy = self._strategies.get(name)
        return strategy.hydrate(value) if strategy else value
