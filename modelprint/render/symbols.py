"""Print modes and the per-mode math symbol table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Format(Enum):
    TERMINAL = "terminal"
    MARKUP = "markup"


@dataclass(frozen=True)
class PrintMode:
    """Output grammar plus the charset switch for terminal output.

    ``unicode=False`` restricts terminal output to characters that survive a
    Windows-1252 console. Markup output ignores the flag.
    """

    format: Format
    unicode: bool = True

    @property
    def is_markup(self) -> bool:
        return self.format is Format.MARKUP


TERMINAL = PrintMode(Format.TERMINAL)
ASCII_TERMINAL = PrintMode(Format.TERMINAL, unicode=False)
MARKUP = PrintMode(Format.MARKUP)


class MathSymbol(Enum):
    leq = "leq"
    geq = "geq"
    eq = "eq"
    times = "times"
    sq = "sq"
    ind_open = "ind_open"
    ind_close = "ind_close"
    for_all = "for_all"
    in_ = "in"
    open_set = "open_set"
    dots = "dots"
    close_set = "close_set"
    union = "union"
    infty = "infty"
    open_rng = "open_rng"
    close_rng = "close_rng"
    integer = "integer"
    succeq0 = "succeq0"
    Vert = "Vert"
    sub2 = "sub2"


class SymbolTableError(RuntimeError):
    """Raised for a symbol missing from a mode's table (a bug, never user input)."""


_TERMINAL_SYMBOLS: Dict[MathSymbol, str] = {
    MathSymbol.leq: "≤",
    MathSymbol.geq: "≥",
    MathSymbol.eq: "=",
    MathSymbol.times: "*",
    MathSymbol.sq: "²",
    MathSymbol.ind_open: "[",
    MathSymbol.ind_close: "]",
    MathSymbol.for_all: "∀",
    MathSymbol.in_: "∈",
    MathSymbol.open_set: "{",
    MathSymbol.dots: "…",
    MathSymbol.close_set: "}",
    MathSymbol.union: "∪",
    MathSymbol.infty: "∞",
    MathSymbol.open_rng: "[",
    MathSymbol.close_rng: "]",
    MathSymbol.integer: "integer",
    MathSymbol.succeq0: " is semidefinite",
    MathSymbol.Vert: "‖",
    MathSymbol.sub2: "₂",
}

# Anything in Windows-1252 prints fine on a restricted console, the rest
# falls back to ASCII.
_ASCII_OVERRIDES: Dict[MathSymbol, str] = {
    MathSymbol.leq: "<=",
    MathSymbol.geq: ">=",
    MathSymbol.eq: "==",
    MathSymbol.for_all: "for all",
    MathSymbol.in_: "in",
    MathSymbol.dots: "..",
    MathSymbol.union: "or",
    MathSymbol.infty: "Inf",
    MathSymbol.Vert: "||",
    MathSymbol.sub2: "_2",
}

_MARKUP_SYMBOLS: Dict[MathSymbol, str] = {
    MathSymbol.leq: "\\leq",
    MathSymbol.geq: "\\geq",
    MathSymbol.eq: "=",
    MathSymbol.times: "\\times ",
    MathSymbol.sq: "^2",
    MathSymbol.ind_open: "_{",
    MathSymbol.ind_close: "}",
    MathSymbol.for_all: "\\quad\\forall",
    MathSymbol.in_: "\\in",
    MathSymbol.open_set: "\\{",
    MathSymbol.dots: "\\dots",
    MathSymbol.close_set: "\\}",
    MathSymbol.union: "\\cup",
    MathSymbol.infty: "\\infty",
    MathSymbol.open_rng: "[",
    MathSymbol.close_rng: "]",
    MathSymbol.integer: "\\in \\mathbb{Z}",
    MathSymbol.succeq0: "\\succeq 0",
    MathSymbol.Vert: "\\Vert",
    MathSymbol.sub2: "_2",
}


def math_symbol(mode: PrintMode, name: MathSymbol) -> str:
    """Return the literal for ``name`` in ``mode``.

    ``name`` may also be given as the tag string (``"leq"``, ``"in"``, ...).
    """

    try:
        symbol = MathSymbol(name)
    except ValueError:
        raise SymbolTableError(f"Internal error: Unrecognized symbol {name!r}.") from None
    if mode.is_markup:
        table = _MARKUP_SYMBOLS
    elif mode.unicode:
        table = _TERMINAL_SYMBOLS
    else:
        table = _ASCII_OVERRIDES
        if symbol not in table:
            table = _TERMINAL_SYMBOLS
    try:
        return table[symbol]
    except KeyError:
        raise SymbolTableError(
            f"Internal error: Unrecognized symbol {symbol.value!r} for {mode.format.value} mode."
        ) from None


__all__ = [
    "Format",
    "PrintMode",
    "TERMINAL",
    "ASCII_TERMINAL",
    "MARKUP",
    "MathSymbol",
    "SymbolTableError",
    "math_symbol",
]
