"""Build a :class:`~modelprint.model.Model` from a JSON description."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence, Union

from .attributes import FEASIBILITY_SENSE, MAX_SENSE, MIN_SENSE
from .errors import UnsupportedConstraint
from .functions import (
    ScalarAffineFunction,
    ScalarAffineTerm,
    SingleVariable,
    VariableIndex,
    VectorAffineFunction,
    VectorAffineTerm,
    VectorOfVariables,
)
from .model import Model
from .sets import (
    EqualTo,
    GreaterThan,
    Integer,
    Interval,
    LessThan,
    Nonnegatives,
    Nonpositives,
    SecondOrderCone,
    ZeroOne,
    Zeros,
)

logger = logging.getLogger(__name__)

_SENSES = {
    "min": MIN_SENSE,
    "max": MAX_SENSE,
    "feasibility": FEASIBILITY_SENSE,
}

_VECTOR_SETS = {
    "zeros": Zeros,
    "nonnegatives": Nonnegatives,
    "nonpositives": Nonpositives,
    "second_order_cone": SecondOrderCone,
}


class ModelFormatError(ValueError):
    """Raised when a model description is malformed."""


def _fail(path: str, message: str) -> ModelFormatError:
    return ModelFormatError(f"{path}: {message}")


def _number(value: Any, path: str) -> Union[int, float, complex]:
    if isinstance(value, bool):
        raise _fail(path, f"expected a number, got {value!r}")
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, (list, tuple)) and len(value) == 2:
        real = _number(value[0], f"{path}[0]")
        imag = _number(value[1], f"{path}[1]")
        return complex(real, imag)
    if isinstance(value, str):
        text = value.replace(" ", "")
        try:
            return float(text)
        except ValueError:
            pass
        try:
            return complex(text)
        except ValueError:
            raise _fail(path, f"cannot parse number {value!r}") from None
    raise _fail(path, f"expected a number, got {value!r}")


class _Builder:
    def __init__(self, model: Model, names: Sequence[str]) -> None:
        self.model = model
        self.by_name: Dict[str, VariableIndex] = {}
        self.variables: List[VariableIndex] = []
        for name in names:
            index = model.add_variable(name)
            self.variables.append(index)
            if not name:
                continue
            if name in self.by_name:
                raise _fail("$.variables", f"duplicate variable name {name!r}")
            self.by_name[name] = index

    def variable(self, ref: Any, path: str) -> VariableIndex:
        if isinstance(ref, str):
            try:
                return self.by_name[ref]
            except KeyError:
                raise _fail(path, f"unknown variable {ref!r}") from None
        if isinstance(ref, int) and not isinstance(ref, bool):
            if not 1 <= ref <= len(self.variables):
                raise _fail(path, f"variable index {ref} out of range")
            return self.variables[ref - 1]
        raise _fail(path, f"expected a variable name or index, got {ref!r}")

    def function(self, data: Any, path: str) -> Any:
        if isinstance(data, (str, int)) and not isinstance(data, bool):
            return SingleVariable(self.variable(data, path))
        if not isinstance(data, Mapping):
            raise _fail(path, f"expected a function, got {data!r}")
        if "vector" in data:
            return self._vector(data["vector"], f"{path}.vector")
        raw_terms = data.get("terms", [])
        if not isinstance(raw_terms, list):
            raise _fail(f"{path}.terms", "expected a list")
        terms = []
        for i, term in enumerate(raw_terms):
            term_path = f"{path}.terms[{i}]"
            if not isinstance(term, (list, tuple)) or len(term) != 2:
                raise _fail(term_path, "expected a [coefficient, variable] pair")
            terms.append(
                ScalarAffineTerm(_number(term[0], term_path), self.variable(term[1], term_path))
            )
        constant = _number(data.get("constant", 0.0), f"{path}.constant")
        return ScalarAffineFunction(terms, constant)

    def _vector(self, data: Any, path: str) -> Any:
        if not isinstance(data, list) or not data:
            raise _fail(path, "expected a non-empty list of functions")
        rows = [self.function(row, f"{path}[{i}]") for i, row in enumerate(data)]
        if all(isinstance(row, SingleVariable) for row in rows):
            return VectorOfVariables([row.variable for row in rows])
        terms: List[VectorAffineTerm] = []
        constants: List[Any] = []
        for i, row in enumerate(rows):
            if isinstance(row, SingleVariable):
                row = ScalarAffineFunction([ScalarAffineTerm(1.0, row.variable)], 0.0)
            if not isinstance(row, ScalarAffineFunction):
                raise _fail(f"{path}[{i}]", "vector rows must be scalar functions")
            terms.extend(VectorAffineTerm(i, term) for term in row.terms)
            constants.append(row.constant)
        return VectorAffineFunction(terms, constants)


def _set(data: Any, path: str) -> Any:
    if not isinstance(data, Mapping) or "type" not in data:
        raise _fail(path, "expected a set with a 'type' field")
    kind = data["type"]

    def field(name: str) -> Any:
        if name not in data:
            raise _fail(path, f"{kind} set requires {name!r}")
        return _number(data[name], f"{path}.{name}")

    if kind == "less_than":
        return LessThan(field("upper"))
    if kind == "greater_than":
        return GreaterThan(field("lower"))
    if kind == "equal_to":
        return EqualTo(field("value"))
    if kind == "interval":
        return Interval(field("lower"), field("upper"))
    if kind == "zero_one":
        return ZeroOne()
    if kind == "integer":
        return Integer()
    if kind in _VECTOR_SETS:
        dimension = data.get("dimension")
        if not isinstance(dimension, int) or isinstance(dimension, bool) or dimension < 1:
            raise _fail(path, f"{kind} set requires a positive integer 'dimension'")
        return _VECTOR_SETS[kind](dimension)
    raise _fail(path, f"unknown set type {kind!r}")


def load_model(data: Mapping[str, Any], *, supports_names: bool = True) -> Model:
    """Build a model from an already decoded JSON document."""

    if not isinstance(data, Mapping):
        raise _fail("$", "expected an object at the top level")

    names = data.get("variables", [])
    if isinstance(names, int) and not isinstance(names, bool):
        names = [""] * names
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        raise _fail("$.variables", "expected a list of names or a variable count")

    model = Model(supports_names=supports_names)
    builder = _Builder(model, names)

    sense_name = str(data.get("sense", "feasibility")).lower()
    if sense_name not in _SENSES:
        raise _fail("$.sense", f"unknown sense {data.get('sense')!r}")
    objective = None
    if "objective" in data:
        objective = builder.function(data["objective"], "$.objective")
    model.set_objective(_SENSES[sense_name], objective)

    constraints = data.get("constraints", [])
    if not isinstance(constraints, list):
        raise _fail("$.constraints", "expected a list")
    for i, entry in enumerate(constraints):
        path = f"$.constraints[{i}]"
        if not isinstance(entry, Mapping) or "function" not in entry or "set" not in entry:
            raise _fail(path, "expected an object with 'function' and 'set'")
        func = builder.function(entry["function"], f"{path}.function")
        set_ = _set(entry["set"], f"{path}.set")
        name = entry.get("name", "")
        if not isinstance(name, str):
            raise _fail(f"{path}.name", "expected a string")
        try:
            model.add_constraint(func, set_, name)
        except UnsupportedConstraint as exc:
            raise _fail(path, str(exc)) from exc

    logger.info(
        "Loaded model with %d variable(s) and %d constraint(s)",
        len(builder.variables),
        len(constraints),
    )
    return model


def load_model_file(path: Union[str, Path], *, supports_names: bool = True) -> Model:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ModelFormatError(f"{path}: not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ModelFormatError(f"{path}: invalid JSON: {exc}") from exc
    return load_model(data, supports_names=supports_names)
