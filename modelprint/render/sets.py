from __future__ import annotations

from typing import Any

from ..sets import EqualTo, GreaterThan, Integer, Interval, LessThan, ZeroOne
from .numbers import format_number
from .symbols import MathSymbol, PrintMode, math_symbol


def in_set_string(mode: PrintMode, set_: Any) -> str:
    """Return the membership phrase of ``set_``, e.g. ``≤ 10`` or ``∈ [2, 5]``."""

    if isinstance(set_, LessThan):
        return f"{math_symbol(mode, MathSymbol.leq)} {format_number(mode, set_.upper)}"
    if isinstance(set_, GreaterThan):
        return f"{math_symbol(mode, MathSymbol.geq)} {format_number(mode, set_.lower)}"
    if isinstance(set_, EqualTo):
        return f"{math_symbol(mode, MathSymbol.eq)} {format_number(mode, set_.value)}"
    if isinstance(set_, Interval):
        return (
            f"{math_symbol(mode, MathSymbol.in_)} "
            f"{math_symbol(mode, MathSymbol.open_rng)}{format_number(mode, set_.lower)}, "
            f"{format_number(mode, set_.upper)}{math_symbol(mode, MathSymbol.close_rng)}"
        )
    if isinstance(set_, ZeroOne):
        return "binary"
    if isinstance(set_, Integer):
        return "integer"
    # TODO: give vector sets proper LaTeX names instead of their repr.
    return f"{math_symbol(mode, MathSymbol.in_)} {set_}"
