"""Sets a constraint function can be constrained to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

Number = Any


@dataclass(frozen=True)
class LessThan:
    upper: Number


@dataclass(frozen=True)
class GreaterThan:
    lower: Number


@dataclass(frozen=True)
class EqualTo:
    value: Number


@dataclass(frozen=True)
class Interval:
    lower: Number
    upper: Number


@dataclass(frozen=True)
class ZeroOne:
    """Binary domain ``{0, 1}``."""


@dataclass(frozen=True)
class Integer:
    pass


# Vector sets have no dedicated phrase and print as ``∈ <repr>``.


@dataclass(frozen=True)
class Zeros:
    dimension: int


@dataclass(frozen=True)
class Nonnegatives:
    dimension: int


@dataclass(frozen=True)
class Nonpositives:
    dimension: int


@dataclass(frozen=True)
class SecondOrderCone:
    dimension: int


SCALAR_SETS = (LessThan, GreaterThan, EqualTo, Interval, ZeroOne, Integer)
VECTOR_SETS = (Zeros, Nonnegatives, Nonpositives, SecondOrderCone)

__all__ = [
    "LessThan",
    "GreaterThan",
    "EqualTo",
    "Interval",
    "ZeroOne",
    "Integer",
    "Zeros",
    "Nonnegatives",
    "Nonpositives",
    "SecondOrderCone",
    "SCALAR_SETS",
    "VECTOR_SETS",
]
