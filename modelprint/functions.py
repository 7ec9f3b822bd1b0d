"""Function values that can appear as objectives or constraint functions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Sequence

Number = Any


class _Printable:
    """Terminal rendering for ``str`` and notebook rendering for Jupyter."""

    def __str__(self) -> str:
        from .render.functions import function_string
        from .render.symbols import TERMINAL

        return function_string(TERMINAL, self)

    def _repr_latex_(self) -> str:
        from .render.document import wrap_in_math_mode
        from .render.functions import function_string
        from .render.symbols import MARKUP

        return wrap_in_math_mode(function_string(MARKUP, self))


@dataclass(frozen=True)
class VariableIndex(_Printable):
    value: int


@dataclass
class SingleVariable(_Printable):
    variable: VariableIndex


@dataclass
class ScalarAffineTerm:
    coefficient: Number
    variable: VariableIndex


@dataclass
class ScalarAffineFunction(_Printable):
    """``sum(coefficient * variable) + constant``; term order is kept for printing."""

    terms: List[ScalarAffineTerm] = field(default_factory=list)
    constant: Number = 0.0


@dataclass
class VectorOfVariables(_Printable):
    variables: List[VariableIndex] = field(default_factory=list)

    def scalarize(self) -> List[SingleVariable]:
        return [SingleVariable(v) for v in self.variables]


@dataclass
class VectorAffineTerm:
    output_index: int
    scalar_term: ScalarAffineTerm


@dataclass
class VectorAffineFunction(_Printable):
    """Vector of affine rows; ``output_index`` is 0-based into ``constants``."""

    terms: List[VectorAffineTerm] = field(default_factory=list)
    constants: Sequence[Number] = field(default_factory=list)

    def scalarize(self) -> List[ScalarAffineFunction]:
        rows: List[ScalarAffineFunction] = [
            ScalarAffineFunction([], constant) for constant in self.constants
        ]
        for term in self.terms:
            if not 0 <= term.output_index < len(rows):
                raise IndexError(
                    f"output index {term.output_index} out of range for "
                    f"{len(rows)} output(s)"
                )
            rows[term.output_index].terms.append(term.scalar_term)
        return rows


def affine(terms: Sequence[tuple], constant: Number = 0.0) -> ScalarAffineFunction:
    """Build a :class:`ScalarAffineFunction` from ``(coefficient, variable)`` pairs."""

    return ScalarAffineFunction(
        [ScalarAffineTerm(coef, var) for coef, var in terms], constant
    )


__all__ = [
    "VariableIndex",
    "SingleVariable",
    "ScalarAffineTerm",
    "ScalarAffineFunction",
    "VectorOfVariables",
    "VectorAffineTerm",
    "VectorAffineFunction",
    "affine",
]
