"""Sign and coefficient composition for terms of a printed expression."""

from __future__ import annotations

import numbers
from typing import Any, Tuple

from .numbers import format_number
from .symbols import PrintMode

ZERO_TOLERANCE = 1e-10


def _is_complex(value: Any) -> bool:
    return isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real)


def _is_negative(value: Any) -> bool:
    if _is_complex(value):
        return False
    try:
        return bool(value < 0)
    except TypeError:
        return False


def is_zero_for_printing(coefficient: Any) -> bool:
    """Whether ``coefficient`` is zero for the purposes of printing it."""

    return abs(coefficient) < ZERO_TOLERANCE


def is_one_for_printing(coefficient: Any) -> bool:
    """Whether ``coefficient`` is one for the purposes of printing it."""

    if _is_complex(coefficient):
        return is_one_for_printing(coefficient.real) and is_zero_for_printing(coefficient.imag)
    return is_zero_for_printing(abs(coefficient) - 1)


def unary_sign_string(sign: int) -> str:
    return "-" if sign < 0 else ""


def binary_sign_string(sign: int) -> str:
    return " - " if sign < 0 else " + "


def imaginary_unit(mode: PrintMode) -> str:
    return "i" if mode.is_markup else "im"


def _coefficient_text(mode: PrintMode, coefficient: Any, elide_unit: bool) -> str:
    if elide_unit and is_one_for_printing(coefficient):
        return ""
    return format_number(mode, coefficient)


def sign_and_text(mode: PrintMode, coefficient: Any, elide_unit: bool) -> Tuple[int, str]:
    """Split ``coefficient`` into a sign and the text of its magnitude.

    With ``elide_unit`` a coefficient of magnitude one yields empty text so
    only the sign and the variable are printed. Complex coefficients with
    both parts nonzero are parenthesized with their sign embedded and are
    always returned with sign ``+1``.
    """

    if _is_complex(coefficient):
        return _complex_sign_and_text(mode, coefficient, elide_unit)
    if _is_negative(coefficient):
        return -1, _coefficient_text(mode, -coefficient, elide_unit)
    return 1, _coefficient_text(mode, coefficient, elide_unit)


def _complex_sign_and_text(mode: PrintMode, coefficient: Any, elide_unit: bool) -> Tuple[int, str]:
    real, imag = coefficient.real, coefficient.imag
    if real == 0:
        if imag == 0:
            return sign_and_text(mode, 0, elide_unit)
        sign, text = sign_and_text(mode, imag, elide_unit)
        return sign, text + imaginary_unit(mode)
    if imag == 0:
        return sign_and_text(mode, real, elide_unit)
    real_sign, real_text = sign_and_text(mode, real, False)
    imag_sign, imag_text = sign_and_text(mode, imag, elide_unit)
    text = (
        f"({unary_sign_string(real_sign)}{real_text}"
        f"{binary_sign_string(imag_sign)}{imag_text}{imaginary_unit(mode)})"
    )
    return 1, text
