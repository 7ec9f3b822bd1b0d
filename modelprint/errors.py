"""Errors a model raises for operations it cannot carry out.

Two families are distinguished:

* :class:`UnsupportedError` -- the model never implements the operation.
* :class:`CannotError` -- the operation is implemented but the model's
  current state forbids it.

Every concrete error provides :attr:`operation_name`, the operation in
gerund form (``"adding a constraint"``). It is inserted into the message
verbatim.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import Any

CACHING_HINT = (
    "You may want to use a CachingOptimizer in AUTOMATIC mode or you may need "
    "to call reset_optimizer before doing this operation if the "
    "CachingOptimizer is in MANUAL mode."
)


class _ModelError(Exception, metaclass=ABCMeta):
    # BaseException.__new__ skips the abstract method check object.__new__ does.
    def __new__(cls, *args: Any, **kwargs: Any) -> _ModelError:
        if cls.__abstractmethods__:
            missing = ", ".join(sorted(cls.__abstractmethods__))
            raise TypeError(f"Can't instantiate abstract class {cls.__name__} without {missing}")
        return super().__new__(cls, *args)

    @property
    @abstractmethod
    def operation_name(self) -> str:
        """The operation in gerund form, e.g. ``"adding a variable"``."""

    def __str__(self) -> str:
        return error_message(self)


class UnsupportedError(_ModelError):
    """Base class for operations that are not supported by the model."""


class CannotError(_ModelError):
    """Base class for supported operations that cannot run right now."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


def _constraint_kind(function_type: type, set_type: type) -> str:
    return f"`{function_type.__name__}`-in-`{set_type.__name__}`"


class UnsupportedAttribute(UnsupportedError):
    def __init__(self, attr: Any, action: str = "querying") -> None:
        super().__init__(attr)
        self.attr = attr
        self.action = action

    @property
    def operation_name(self) -> str:
        return f"{self.action} attribute {self.attr!r}"


class UnsupportedConstraint(UnsupportedError):
    def __init__(self, function_type: type, set_type: type) -> None:
        super().__init__(function_type, set_type)
        self.function_type = function_type
        self.set_type = set_type

    @property
    def operation_name(self) -> str:
        return f"adding a {_constraint_kind(self.function_type, self.set_type)} constraint"


class AddVariableNotAllowed(CannotError):
    operation_name = "adding a variable"


class AddConstraintNotAllowed(CannotError):
    def __init__(self, function_type: type, set_type: type, message: str = "") -> None:
        super().__init__(message)
        self.function_type = function_type
        self.set_type = set_type

    @property
    def operation_name(self) -> str:
        return f"adding a {_constraint_kind(self.function_type, self.set_type)} constraint"


class SetAttributeNotAllowed(CannotError):
    def __init__(self, attr: Any, message: str = "") -> None:
        super().__init__(message)
        self.attr = attr

    @property
    def operation_name(self) -> str:
        return f"setting attribute {self.attr!r}"


def error_message(err: Exception) -> str:
    """Return the display text of an :class:`UnsupportedError` or :class:`CannotError`."""

    name = type(err).__name__
    if isinstance(err, UnsupportedError):
        return f"{name}: {err.operation_name} is not supported by the model."
    if isinstance(err, CannotError):
        text = (
            f"{name}: {err.operation_name} cannot be performed in the current "
            "state of the model even if the operation is supported"
        )
        text += f": {err.message}" if err.message else "."
        return f"{text} {CACHING_HINT}"
    raise TypeError(f"no model error message for {name}")


__all__ = [
    "CACHING_HINT",
    "UnsupportedError",
    "CannotError",
    "UnsupportedAttribute",
    "UnsupportedConstraint",
    "AddVariableNotAllowed",
    "AddConstraintNotAllowed",
    "SetAttributeNotAllowed",
    "error_message",
]
