"""
Hydration Infrastructure
Object <-> dict mapping with name filters and value strategies
"""
from commanding.infrastructure.hydration.class_methods import ClassMethodsHydrator
from commanding.infrastructure.hydration.dataclass_fields import HYDRATE, DataclassHydrator
from commanding.infrastructure.hydration.filters import (
    FilterComposite,
    FilterInterface,
    GetFilter,
    HasFilter,
    IsFilter,
    MethodMatchFilter,
    NumberOfParameterFilter,
)
from commanding.infrastructure.hydration.hydrator import AbstractHydrator, HydratorInterface
from commanding.infrastructure.hydration.strategies import ClosureStrategy, StrategyInterface

__all__ = [
    "HydratorInterface",
    "AbstractHydrator",
    "ClassMethodsHydrator",
    "DataclassHydrator",
    "HYDRATE",
    "FilterInterface",
    "FilterComposite",
    "GetFilter",
    "IsFilter",
    "HasFilter",
    "MethodMatchFilter",
    "NumberOfParameterFilter",
    "StrategyInterface",
    "ClosureStrategy",
]
