"""Query objects and the protocol a printable model has to satisfy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol, runtime_checkable


class OptimizationSense(Enum):
    MIN_SENSE = "min"
    MAX_SENSE = "max"
    FEASIBILITY_SENSE = "feasibility"


MIN_SENSE = OptimizationSense.MIN_SENSE
MAX_SENSE = OptimizationSense.MAX_SENSE
FEASIBILITY_SENSE = OptimizationSense.FEASIBILITY_SENSE


@dataclass(frozen=True)
class ConstraintIndex:
    """Handle of a constraint of type ``function_type``-in-``set_type``."""

    function_type: type
    set_type: type
    value: int


@dataclass(frozen=True)
class ObjectiveSense:
    pass


@dataclass(frozen=True)
class ObjectiveFunctionType:
    pass


@dataclass(frozen=True)
class ObjectiveFunction:
    function_type: Optional[type] = None


@dataclass(frozen=True)
class ListOfConstraints:
    """Ordered ``(function_type, set_type)`` pairs present in the model."""


@dataclass(frozen=True)
class ListOfConstraintIndices:
    function_type: type
    set_type: type


@dataclass(frozen=True)
class ConstraintFunction:
    pass


@dataclass(frozen=True)
class ConstraintSet:
    pass


@dataclass(frozen=True)
class ConstraintName:
    pass


@dataclass(frozen=True)
class VariableName:
    pass


@dataclass(frozen=True)
class ListOfVariableIndices:
    pass


@dataclass(frozen=True)
class NumberOfVariables:
    pass


@runtime_checkable
class ModelLike(Protocol):
    """Read-only query interface consumed by the renderers.

    ``get`` answers a query object, optionally for a variable or constraint
    index. ``supports`` reports whether an attribute is available for the
    given index type. An empty name string means "no name".
    """

    def get(self, attr: Any, index: Any = None) -> Any:
        ...

    def supports(self, attr: Any, index_type: Optional[type] = None) -> bool:
        ...


__all__ = [
    "OptimizationSense",
    "MIN_SENSE",
    "MAX_SENSE",
    "FEASIBILITY_SENSE",
    "ConstraintIndex",
    "ObjectiveSense",
    "ObjectiveFunctionType",
    "ObjectiveFunction",
    "ListOfConstraints",
    "ListOfConstraintIndices",
    "ConstraintFunction",
    "ConstraintSet",
    "ConstraintName",
    "VariableName",
    "ListOfVariableIndices",
    "NumberOfVariables",
    "ModelLike",
]
