"""
Declarative Field Hydrator
Maps the declared fields of a dataclass, without looking at its methods
"""
from __future__ import annotations

import dataclasses
from typing import Any

from commanding.exceptions import HydrationError
from commanding.infrastructure.hydration.hydrator import AbstractHydrator

# Field metadata key; ``field(metadata={HYDRATE: False})`` keeps a field out of the mapping.
HYDRATE = "hydrate"


class DataclassHydrator(AbstractHydrator):
    """
    Hydrator over ``dataclasses.fields()``.

    The field list is whatever the dataclass declares; filters (by field name)
    and the ``hydrate`` metadata flag narrow it further.

    Example:
        @dataclass
        class SendEmailCommand(AbstractCommand):
            recipient: str = ""
            retries: int = field(default=0, metadata={HYDRATE: False})
    """

    def extract(self, obj: Any) -> dict[str, Any]:
        return {
            f.name: self.extract_value(f.name, getattr(obj, f.name))
            for f in self._mapped_fields(obj, "extract")
        }

    def hydrate(self, data: dict[str, Any], obj: Any) -> Any:
        mapped = {f.name for f in self._mapped_fields(obj, "hydrate")}
        if obj.__dataclass_params__.frozen:
            raise HydrationError(
                f"Cannot hydrate frozen dataclass {obj.__class__.__name__}",
                details={"object": obj.__class__.__name__},
            )

        for key, value in data.items():
            if key in mapped:
                setattr(obj, key, self.hydrate_value(key, value))
        return obj

    def _mapped_fields(self, obj: Any, operation: str) -> list[dataclasses.Field]:
        if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
            raise HydrationError(
                f"{operation}() expects a dataclass instance",
                details={"received": type(obj).__name__},
            )
        return [
            f for f in dataclasses.fields(obj)
            if f.metadata.get(HYDRATE, True) and self._filter_composite.filter(f.name, obj)
        ]
