"""Rendering of function values (variables, affine and vector functions)."""

from __future__ import annotations

from typing import Any, Callable, List

from ..attributes import ModelLike, VariableName
from ..functions import ScalarAffineFunction, SingleVariable, VariableIndex
from .symbols import MathSymbol, PrintMode, math_symbol
from .terms import (
    binary_sign_string,
    is_zero_for_printing,
    sign_and_text,
    unary_sign_string,
)

VariableNamer = Callable[[VariableIndex], str]
ModelVariableNamer = Callable[[ModelLike, VariableIndex], str]


def default_name(variable: VariableIndex) -> str:
    return f"x[{variable.value}]"


def name_or_default_name(model: ModelLike, variable: VariableIndex) -> str:
    name = model.get(VariableName(), variable)
    return name if name else default_name(variable)


def name_or_noname(model: ModelLike, variable: VariableIndex) -> str:
    name = model.get(VariableName(), variable)
    return name if name else "noname"


def _variable_string(mode: PrintMode, variable: VariableIndex, variable_name: VariableNamer) -> str:
    name = variable_name(variable)
    if not mode.is_markup:
        return name
    # TODO: wrong when the name contains a "]" before the index bracket closes.
    name = name.replace("[", math_symbol(mode, MathSymbol.ind_open), 1)
    return name.replace("]", math_symbol(mode, MathSymbol.ind_close), 1)


def _constant_string(mode: PrintMode, constant: Any) -> str:
    sign, text = sign_and_text(mode, constant, False)
    return unary_sign_string(sign) + text


def _affine_string(
    mode: PrintMode,
    func: ScalarAffineFunction,
    variable_name: VariableNamer,
    show_constant: bool,
) -> str:
    pieces: List[str] = []
    for term in func.terms:
        if is_zero_for_printing(term.coefficient):
            continue
        sign, coefficient = sign_and_text(mode, term.coefficient, True)
        pieces.append(binary_sign_string(sign) if pieces else unary_sign_string(sign))
        name = _variable_string(mode, term.variable, variable_name)
        pieces.append(f"{coefficient} {name}" if coefficient else name)

    if not pieces:
        # Empty, or every term cancelled out.
        return _constant_string(mode, func.constant) if show_constant else "0"

    if show_constant and not is_zero_for_printing(func.constant):
        sign, text = sign_and_text(mode, func.constant, False)
        pieces.append(binary_sign_string(sign))
        pieces.append(text)
    return "".join(pieces)


def function_string(
    mode: PrintMode,
    func: Any,
    variable_name: VariableNamer = default_name,
    *,
    show_constant: bool = True,
) -> str:
    """Return ``func`` as text in ``mode``.

    ``variable_name`` maps a :class:`VariableIndex` to its display name.
    Vector functions are recognized by their ``scalarize`` method and
    printed as ``[f1, f2, ...]``.
    """

    if isinstance(func, VariableIndex):
        return _variable_string(mode, func, variable_name)
    if isinstance(func, SingleVariable):
        return _variable_string(mode, func.variable, variable_name)
    if isinstance(func, ScalarAffineFunction):
        return _affine_string(mode, func, variable_name, show_constant)
    if hasattr(func, "scalarize"):
        components = [
            function_string(mode, component, variable_name, show_constant=show_constant)
            for component in func.scalarize()
        ]
        return "[" + ", ".join(components) + "]"
    raise TypeError(f"cannot print function of type {type(func).__name__}")


def model_function_string(
    mode: PrintMode,
    model: ModelLike,
    func: Any,
    variable_name: ModelVariableNamer = name_or_default_name,
) -> str:
    """Like :func:`function_string`, taking variable names from ``model`` when it has them."""

    if model.supports(VariableName(), VariableIndex):
        return function_string(mode, func, lambda v: variable_name(model, v))
    return function_string(mode, func)
