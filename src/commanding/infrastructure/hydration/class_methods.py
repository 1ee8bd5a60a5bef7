"""
Accessor-Method Hydrator
Extracts through get_/is_/has_ methods and hydrates through set_ methods
"""
from __future__ import annotations

import inspect
import re
from typing import Any

from commanding.exceptions import HydrationError
from commanding.infrastructure.hydration.filters import (
    FilterComposite,
    GetFilter,
    HasFilter,
    IsFilter,
    NumberOfParameterFilter,
)
from commanding.infrastructure.hydration.hydrator import AbstractHydrator
from commanding.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _to_camel(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _to_snake(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


class ClassMethodsHydrator(AbstractHydrator):
    """
    Hydrator driven by an object's public accessor methods.

    ``get_foo()`` is extracted as ``foo``; ``is_foo()`` and ``has_foo()`` keep
    their prefix. Only methods taking no required arguments are considered.
    Hydration calls ``set_<key>(value)`` for each key that has a mutator and
    silently skips the rest.

    Attributes:
        underscore_separated_keys: Keep snake_case keys (True) or camelCase them
    """

    def __init__(self, underscore_separated_keys: bool = True) -> None:
        super().__init__()
        self.underscore_separated_keys = underscore_separated_keys

        self.add_filter("is", IsFilter())
        self.add_filter("has", HasFilter())
        self.add_filter("get", GetFilter())
        self.add_filter("parameter", NumberOfParameterFilter(0), FilterComposite.CONDITION_AND)

    def extract(self, obj: Any) -> dict[str, Any]:
        self._ensure_instance(obj, "extract")

        data: dict[str, Any] = {}
        for name in dir(obj):
            if name.startswith("_"):
                continue
            if not inspect.isfunction(inspect.getattr_static(obj, name, None)):
                continue
            if not self._filter_composite.filter(name, obj):
                continue

            key = name[len("get_"):] if name.startswith("get_") else name
            if not self.underscore_separated_keys:
                key = _to_camel(key)
            data[key] = self.extract_value(key, getattr(obj, name)())

        return data

    def hydrate(self, data: dict[str, Any], obj: Any) -> Any:
        self._ensure_instance(obj, "hydrate")

        for key, value in data.items():
            mutator = "set_" + (key if self.underscore_separated_keys else _to_snake(key))
            method = getattr(obj, mutator, None)
            if not callable(method):
                logger.debug(
                    f"No mutator for key {key}",
                    extra={"object": obj.__class__.__name__, "mutator": mutator},
                )
                continue
            method(self.hydrate_value(key, value))

        return obj

    @staticmethod
    def _ensure_instance(obj: Any, operation: str) -> None:
        if obj is None or isinstance(obj, type):
            raise HydrationError(
                f"{operation}() expects an object instance",
                details={"received": repr(obj)},
            )
