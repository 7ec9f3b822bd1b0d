from __future__ import annotations

import math
from typing import Any

import numpy as np

from .symbols import MathSymbol, PrintMode, math_symbol

# Shortest round-trip digits are printed positionally inside this range and
# in ``<mantissa>e<exp>`` form outside of it.
_POSITIONAL_LOWER = 1e-4
_POSITIONAL_UPPER = 1e6


def _shortest_string(value: Any) -> str:
    magnitude = abs(value)
    if _POSITIONAL_LOWER <= magnitude < _POSITIONAL_UPPER:
        return np.format_float_positional(value, unique=True, trim="0")
    text = np.format_float_scientific(value, unique=True, trim="0", exp_digits=1)
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent)}"


def format_number(mode: PrintMode, value: Any) -> str:
    """Render a scalar for printing.

    e.g.  5.3  =>  5.3
          1.0  =>  1
          1e10 =>  1.0 \\times 10^{10}   (markup)
    """

    if not isinstance(value, (float, np.floating)):
        return str(value)
    if value == 0:
        return "0"  # strip sign off zero
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        infty = math_symbol(mode, MathSymbol.infty)
        return infty if value > 0 else "-" + infty
    text = _shortest_string(value)
    if mode.is_markup and "e" in text:
        mantissa, exponent = text.split("e", 1)
        text = f"{mantissa} \\times 10^{{{exponent}}}"
    if text.endswith(".0"):
        text = text[:-2]
    return text
