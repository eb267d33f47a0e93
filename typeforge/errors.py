"""Exception types raised by typeforge.

Only caller mistakes are raised: out-of-domain enum values, illegal tritype
combinations, malformed quiz answers and out-of-order quiz session calls.
Disabled systems and stat budget overruns are not errors.
"""
from __future__ import annotations


class TypeforgeError(Exception):
    """Base class for all typeforge errors."""


class InvalidInputError(TypeforgeError, ValueError):
    """A selection or answer violates its input contract."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class QuizStateError(TypeforgeError, RuntimeError):
    """A quiz session method was called in a state that does not allow it."""
