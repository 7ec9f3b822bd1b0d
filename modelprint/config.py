"""Defaults used by the top-level printing entry points."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class PrintDefaults:
    """Settings read by :func:`print_model` and friends when not passed explicitly.

    ``unicode`` selects Unicode glyphs over the ASCII fallback for terminal
    output. ``noname`` prints unnamed variables as ``noname`` instead of
    ``x[<index>]``.
    """

    unicode: bool = True
    noname: bool = False


_PRINT_DEFAULTS = PrintDefaults()


def get_print_defaults() -> PrintDefaults:
    return copy.deepcopy(_PRINT_DEFAULTS)


def set_print_defaults(defaults: PrintDefaults) -> None:
    global _PRINT_DEFAULTS
    _PRINT_DEFAULTS = copy.deepcopy(defaults)
