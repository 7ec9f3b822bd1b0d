"""Assembly of whole-model documents from objective and constraint strings."""

from __future__ import annotations

import logging
import sys
from typing import Any, List, Optional, TextIO

from ..attributes import (
    ConstraintFunction,
    ConstraintIndex,
    ConstraintName,
    ConstraintSet,
    FEASIBILITY_SENSE,
    ListOfConstraintIndices,
    ListOfConstraints,
    MAX_SENSE,
    MIN_SENSE,
    ModelLike,
    ObjectiveFunction,
    ObjectiveFunctionType,
    ObjectiveSense,
)
from ..config import get_print_defaults
from ..logging_utils import apply_debug_logging
from .functions import (
    ModelVariableNamer,
    model_function_string,
    name_or_default_name,
    name_or_noname,
)
from .sets import in_set_string
from .symbols import ASCII_TERMINAL, MARKUP, TERMINAL, PrintMode

logger = logging.getLogger(__name__)

ALIGN_BEGIN = "\\begin{alignat*}{1}"
ALIGN_END = "\\end{alignat*}\n"


def wrap_in_math_mode(text: str) -> str:
    return f"$$ {text} $$"


def wrap_in_inline_math_mode(text: str) -> str:
    return f"$ {text} $"


def constraint_body_string(
    mode: PrintMode,
    model: ModelLike,
    func: Any,
    set_: Any,
    variable_name: ModelVariableNamer = name_or_default_name,
) -> str:
    """Return ``<function> <set phrase>`` without any name."""

    func_str = model_function_string(mode, model, func, variable_name)
    in_set_str = in_set_string(mode, set_)
    if mode.is_markup:
        return f"{func_str} {in_set_str}"
    lines = func_str.split("\n")
    lines[len(lines) // 2] += " " + in_set_str
    return "\n".join(lines)


def named_constraint_string(
    mode: PrintMode,
    model: ModelLike,
    constraint_name: str,
    func: Any,
    set_: Any,
    variable_name: ModelVariableNamer = name_or_default_name,
    *,
    in_math_mode: bool = False,
) -> str:
    body = constraint_body_string(mode, model, func, set_, variable_name)
    if mode.is_markup and not in_math_mode:
        body = wrap_in_inline_math_mode(body)
    # Names don't print well in LaTeX math mode
    if not constraint_name or (mode.is_markup and in_math_mode):
        return body
    return f"{constraint_name} : {body}"


def constraint_string(
    mode: PrintMode,
    model: ModelLike,
    index: ConstraintIndex,
    variable_name: ModelVariableNamer = name_or_default_name,
    *,
    in_math_mode: bool = False,
) -> str:
    """Render the constraint ``index`` of ``model``, prefixed by its name if it has one."""

    func = model.get(ConstraintFunction(), index)
    set_ = model.get(ConstraintSet(), index)
    name = ""
    if model.supports(ConstraintName(), type(index)):
        name = model.get(ConstraintName(), index)
    return named_constraint_string(
        mode, model, name, func, set_, variable_name, in_math_mode=in_math_mode
    )


def constraints_string(
    mode: PrintMode,
    model: ModelLike,
    variable_name: ModelVariableNamer = name_or_default_name,
) -> List[str]:
    """Return one string per constraint of ``model``, in model order."""

    strings: List[str] = []
    for function_type, set_type in model.get(ListOfConstraints()):
        for index in model.get(ListOfConstraintIndices(function_type, set_type)):
            strings.append(
                constraint_string(mode, model, index, variable_name, in_math_mode=True)
            )
    logger.debug("constraints_string: rendered %d constraint(s)", len(strings))
    return strings


def objective_function_string(
    mode: PrintMode,
    model: ModelLike,
    variable_name: ModelVariableNamer = name_or_default_name,
) -> str:
    function_type = model.get(ObjectiveFunctionType())
    objective = model.get(ObjectiveFunction(function_type))
    return model_function_string(mode, model, objective, variable_name)


def model_string(
    mode: PrintMode,
    model: ModelLike,
    variable_name: ModelVariableNamer = name_or_default_name,
) -> str:
    """Return the full formulation of ``model``.

    Terminal mode yields plain lines::

        Min 3 x + 1
        Subject to
         x ≤ 10

    Markup mode yields a single ``alignat*`` environment.
    """

    markup = mode.is_markup
    sep = " & " if markup else " "
    eol = "\\\\\n" if markup else "\n"

    sense = model.get(ObjectiveSense())
    if sense == MAX_SENSE:
        text = "\\max" if markup else "Max"
    elif sense == MIN_SENSE:
        text = "\\min" if markup else "Min"
    else:
        text = "\\text{feasibility}" if markup else "Feasibility"
    if sense != FEASIBILITY_SENSE:
        if markup:
            text += "\\quad"
        text += sep + objective_function_string(mode, model, variable_name)
    text += eol
    text += "\\text{Subject to} \\quad" if markup else "Subject to" + eol

    constraints = constraints_string(mode, model, variable_name)
    if not markup:
        constraints = [c.replace("\n", eol + sep) for c in constraints]
    if constraints:
        text += sep + (eol + sep).join(constraints) + eol
    if markup:
        text = ALIGN_BEGIN + text + ALIGN_END
    return text


def _default_variable_name(noname: bool) -> ModelVariableNamer:
    return name_or_noname if noname else name_or_default_name


def print_model(
    model: ModelLike,
    file: Optional[TextIO] = None,
    *,
    variable_name: Optional[ModelVariableNamer] = None,
    unicode: Optional[bool] = None,
) -> None:
    """Write the terminal formulation of ``model`` to ``file`` (stdout by default)."""

    defaults = get_print_defaults()
    if unicode is None:
        unicode = defaults.unicode
    if variable_name is None:
        variable_name = _default_variable_name(defaults.noname)
    mode = TERMINAL if unicode else ASCII_TERMINAL
    stream = file if file is not None else sys.stdout
    stream.write(model_string(mode, model, variable_name))


def latex_formulation(
    model: ModelLike,
    *,
    variable_name: Optional[ModelVariableNamer] = None,
) -> str:
    """Return the markup formulation of ``model`` as a display-math block."""

    if variable_name is None:
        variable_name = _default_variable_name(get_print_defaults().noname)
    return wrap_in_math_mode(model_string(MARKUP, model, variable_name))


class ModelPrintMixin:
    """Gives a :class:`ModelLike` a printable ``str`` and a Jupyter LaTeX repr."""

    def __str__(self) -> str:
        defaults = get_print_defaults()
        mode = TERMINAL if defaults.unicode else ASCII_TERMINAL
        return model_string(mode, self, _default_variable_name(defaults.noname))

    def _repr_latex_(self) -> str:
        return latex_formulation(self)


apply_debug_logging(globals(), logger=logger)
