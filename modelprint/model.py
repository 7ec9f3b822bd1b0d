"""In-memory model implementing the :class:`~modelprint.attributes.ModelLike` queries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .attributes import (
    ConstraintFunction,
    ConstraintIndex,
    ConstraintName,
    ConstraintSet,
    FEASIBILITY_SENSE,
    ListOfConstraintIndices,
    ListOfConstraints,
    ListOfVariableIndices,
    NumberOfVariables,
    ObjectiveFunction,
    ObjectiveFunctionType,
    ObjectiveSense,
    OptimizationSense,
    VariableName,
)
from .errors import (
    AddConstraintNotAllowed,
    AddVariableNotAllowed,
    SetAttributeNotAllowed,
    UnsupportedAttribute,
    UnsupportedConstraint,
)
from .functions import (
    ScalarAffineFunction,
    SingleVariable,
    VariableIndex,
    VectorAffineFunction,
    VectorOfVariables,
)
from .render.document import ModelPrintMixin
from .sets import SCALAR_SETS, VECTOR_SETS

logger = logging.getLogger(__name__)

_SCALAR_FUNCTIONS = (SingleVariable, ScalarAffineFunction)
_VECTOR_FUNCTIONS = (VectorOfVariables, VectorAffineFunction)

ConstraintKey = Tuple[type, type]


class InvalidIndex(LookupError):
    """Raised for a variable or constraint index the model does not hold."""


@dataclass
class _ConstraintRecord:
    function: Any
    set: Any
    name: str = ""


def _supported_family(function_type: type, set_type: type) -> bool:
    if function_type in _SCALAR_FUNCTIONS:
        return set_type in SCALAR_SETS
    if function_type in _VECTOR_FUNCTIONS:
        return set_type in VECTOR_SETS
    return False


class Model(ModelPrintMixin):
    """Minimal model store.

    Variables are numbered from 1. Constraint families are listed in the
    order their first constraint was added, constraints in insertion order.
    With ``supports_names=False`` the model behaves like a solver that has no
    notion of names: names are neither stored nor queried.
    """

    def __init__(self, *, supports_names: bool = True) -> None:
        self._supports_names = supports_names
        self._variable_names: List[str] = []
        self._constraints: Dict[ConstraintKey, Dict[int, _ConstraintRecord]] = {}
        self._last_constraint = 0
        self._sense = FEASIBILITY_SENSE
        self._objective: Any = ScalarAffineFunction([], 0.0)
        self._frozen = False

    def __repr__(self) -> str:
        return (
            f"<Model: {len(self._variable_names)} variable(s), "
            f"{sum(len(c) for c in self._constraints.values())} constraint(s)>"
        )

    def freeze(self) -> None:
        """Reject any further modification."""

        self._frozen = True

    # Modification

    def add_variable(self, name: str = "") -> VariableIndex:
        if self._frozen:
            raise AddVariableNotAllowed("the model is frozen")
        self._variable_names.append(name if self._supports_names else "")
        return VariableIndex(len(self._variable_names))

    def add_variables(self, count: int) -> List[VariableIndex]:
        return [self.add_variable() for _ in range(count)]

    def add_constraint(self, func: Any, set_: Any, name: str = "") -> ConstraintIndex:
        key = (type(func), type(set_))
        if not _supported_family(*key):
            raise UnsupportedConstraint(*key)
        if self._frozen:
            raise AddConstraintNotAllowed(*key, "the model is frozen")
        self._last_constraint += 1
        record = _ConstraintRecord(func, set_, name if self._supports_names else "")
        self._constraints.setdefault(key, {})[self._last_constraint] = record
        logger.debug(
            "Added %s-in-%s constraint %d", key[0].__name__, key[1].__name__, self._last_constraint
        )
        return ConstraintIndex(key[0], key[1], self._last_constraint)

    def set_objective(self, sense: OptimizationSense, func: Optional[Any] = None) -> None:
        if self._frozen:
            raise SetAttributeNotAllowed(ObjectiveSense(), "the model is frozen")
        self._sense = sense
        if func is not None:
            self._objective = func

    def set(self, attr: Any, index: Any, value: Any) -> None:
        if isinstance(attr, (VariableName, ConstraintName)) and not self._supports_names:
            raise UnsupportedAttribute(attr, action="setting")
        if self._frozen:
            raise SetAttributeNotAllowed(attr, "the model is frozen")
        if isinstance(attr, VariableName):
            self._check_variable(index)
            self._variable_names[index.value - 1] = value
        elif isinstance(attr, ConstraintName):
            self._record(index).name = value
        else:
            raise UnsupportedAttribute(attr, action="setting")

    # Queries

    def supports(self, attr: Any, index_type: Optional[type] = None) -> bool:
        if isinstance(attr, VariableName):
            return self._supports_names and index_type in (None, VariableIndex)
        if isinstance(attr, ConstraintName):
            return self._supports_names and index_type in (None, ConstraintIndex)
        return isinstance(
            attr,
            (
                ObjectiveSense,
                ObjectiveFunctionType,
                ObjectiveFunction,
                ListOfConstraints,
                ListOfConstraintIndices,
                ConstraintFunction,
                ConstraintSet,
                ListOfVariableIndices,
                NumberOfVariables,
            ),
        )

    def get(self, attr: Any, index: Any = None) -> Any:
        if isinstance(attr, ObjectiveSense):
            return self._sense
        if isinstance(attr, ObjectiveFunctionType):
            return type(self._objective)
        if isinstance(attr, ObjectiveFunction):
            if attr.function_type is not None and not isinstance(self._objective, attr.function_type):
                raise TypeError(
                    f"objective is a {type(self._objective).__name__}, "
                    f"not a {attr.function_type.__name__}"
                )
            return self._objective
        if isinstance(attr, ListOfConstraints):
            return [key for key, records in self._constraints.items() if records]
        if isinstance(attr, ListOfConstraintIndices):
            records = self._constraints.get((attr.function_type, attr.set_type), {})
            return [ConstraintIndex(attr.function_type, attr.set_type, value) for value in records]
        if isinstance(attr, ListOfVariableIndices):
            return [VariableIndex(i + 1) for i in range(len(self._variable_names))]
        if isinstance(attr, NumberOfVariables):
            return len(self._variable_names)
        if isinstance(attr, ConstraintFunction):
            return self._record(index).function
        if isinstance(attr, ConstraintSet):
            return self._record(index).set
        if self._supports_names and isinstance(attr, ConstraintName):
            return self._record(index).name
        if self._supports_names and isinstance(attr, VariableName):
            self._check_variable(index)
            return self._variable_names[index.value - 1]
        raise UnsupportedAttribute(attr)

    def _check_variable(self, index: Any) -> None:
        if not isinstance(index, VariableIndex) or not 1 <= index.value <= len(self._variable_names):
            raise InvalidIndex(f"invalid variable index {index!r}")

    def _record(self, index: Any) -> _ConstraintRecord:
        if not isinstance(index, ConstraintIndex):
            raise InvalidIndex(f"invalid constraint index {index!r}")
        try:
            return self._constraints[(index.function_type, index.set_type)][index.value]
        except KeyError:
            raise InvalidIndex(f"invalid constraint index {index!r}") from None
