"""Terminal and LaTeX rendering of optimization models."""

from .document import (
    ModelPrintMixin,
    constraint_body_string,
    constraint_string,
    constraints_string,
    latex_formulation,
    model_string,
    named_constraint_string,
    objective_function_string,
    print_model,
    wrap_in_inline_math_mode,
    wrap_in_math_mode,
)
from .functions import (
    default_name,
    function_string,
    model_function_string,
    name_or_default_name,
    name_or_noname,
)
from .numbers import format_number
from .sets import in_set_string
from .symbols import (
    ASCII_TERMINAL,
    MARKUP,
    TERMINAL,
    Format,
    MathSymbol,
    PrintMode,
    SymbolTableError,
    math_symbol,
)
from .terms import (
    binary_sign_string,
    is_one_for_printing,
    is_zero_for_printing,
    sign_and_text,
    unary_sign_string,
)

__all__ = [
    "ModelPrintMixin",
    "constraint_body_string",
    "constraint_string",
    "constraints_string",
    "latex_formulation",
    "model_string",
    "named_constraint_string",
    "objective_function_string",
    "print_model",
    "wrap_in_inline_math_mode",
    "wrap_in_math_mode",
    "default_name",
    "function_string",
    "model_function_string",
    "name_or_default_name",
    "name_or_noname",
    "format_number",
    "in_set_string",
    "ASCII_TERMINAL",
    "MARKUP",
    "TERMINAL",
    "Format",
    "MathSymbol",
    "PrintMode",
    "SymbolTableError",
    "math_symbol",
    "binary_sign_string",
    "is_one_for_printing",
    "is_zero_for_printing",
    "sign_and_text",
    "unary_sign_string",
]
