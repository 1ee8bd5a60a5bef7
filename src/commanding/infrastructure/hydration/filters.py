"""
Hydrator Filters
Decide which accessor methods (or fields) a hydrator includes when extracting
"""
from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import Any


class FilterInterface(ABC):
    """A predicate over a method or field name."""

    @abstractmethod
    def filter(self, name: str, instance: Any = None) -> bool:
        """
        Return True if ``name`` should be included.

        Args:
            name: Method or field name being considered
            instance: Object being extracted, for filters that inspect it
        """


class GetFilter(FilterInterface):
    def filter(self, name: str, instance: Any = None) -> bool:
        return name.startswith("get_")


class IsFilter(FilterInterface):
    def filter(self, name: str, instance: Any = None) -> bool:
        return name.startswith("is_")


class HasFilter(FilterInterface):
    def filter(self, name: str, instance: Any = None) -> bool:
        return name.startswith("has_")


class MethodMatchFilter(FilterInterface):
    """
    Matches one exact method name.

    With ``exclude=True`` (the default) the named method is rejected and every
    other name passes; with ``exclude=False`` only the named method passes.
    """

    def __init__(self, method: str, exclude: bool = True) -> None:
        self.method = method
        self.exclude = exclude

    def filter(self, name: str, instance: Any = None) -> bool:
        matches = name == self.method
        return not matches if self.exclude else matches


class NumberOfParameterFilter(FilterInterface):
    """Accepts bound methods taking exactly ``number`` required arguments, keyword-only included."""

    def __init__(self, number: int = 0) -> None:
        self.number = number

    def filter(self, name: str, instance: Any = None) -> bool:
        if instance is None:
            return False
        member = getattr(instance, name, None)
        if not callable(member):
            return False
        try:
            signature = inspect.signature(member)
        except (TypeError, ValueError):
            return False

        required = [
            p for p in signature.parameters.values()
            if p.default is inspect.Parameter.empty
            and p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        ]
        return len(required) == self.number


class FilterComposite(FilterInterface):
    """
    Named filters combined under two conditions.

    A name passes when at least one OR filter accepts it (or there are no OR
    filters) and every AND filter accepts it. With no filters at all,
    everything passes.
    """

    CONDITION_OR = 1
    CONDITION_AND = 2

    def __init__(
        self,
        or_filters: dict[str, FilterInterface] | None = None,
        and_filters: dict[str, FilterInterface] | None = None,
    ) -> None:
        self._or_filters: dict[str, FilterInterface] = dict(or_filters or {})
        self._and_filters: dict[str, FilterInterface] = dict(and_filters or {})

    def add_filter(self, name: str, filter: FilterInterface, condition: int = CONDITION_OR) -> None:
        if not isinstance(filter, FilterInterface):
            raise TypeError(f"Filter {name!r} must implement FilterInterface")
        if condition == self.CONDITION_OR:
            self._or_filters[name] = filter
        elif condition == self.CONDITION_AND:
            self._and_filters[name] = filter
        else:
            raise ValueError(f"Unknown filter condition {condition!r}")

    def remove_filter(self, name: str) -> None:
        self._or_filters.pop(name, None)
        self._and_filters.pop(name, None)

    def has_filter(self, name: str) -> bool:
        return name in self._or_filters or name in self._and_filters

    def filter(self, name: str, instance: Any = None) -> bool:
        if self._or_filters:
            passed = any(f.filter(name, instance) for f in self._or_filters.values())
        else:
            passed = True

        if not passed:
            return False
        return all(f.filter(name, instance) for f in self._and_filters.values())
