"""Exception hierarchy for the unit algebra.

Every error raised by the library derives from :class:`MeasureError` and also
from the closest builtin exception, so callers may catch either.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class MeasureError(Exception):
    """Base class for all unit algebra errors."""


class UnitParseError(MeasureError, ValueError):
    """Raised when a unit expression cannot be parsed.

    Attributes:
        text: The complete input that failed to parse.
        token: The offending token (or a description of it).
        position: Zero-based character offset of the offending token.
        reason: Short human readable explanation.
    """

    def __init__(self, text: str, token: str, position: int, reason: str = "unexpected input"):
        self.text = text
        self.token = token
        self.position = position
        self.reason = reason
        super().__init__(f"{reason}: {token!r} at position {position} in {text!r}")


class LabelValidationError(MeasureError, ValueError):
    """Raised when a label or alias is not a valid unit identifier."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name!r} is not a valid unit identifier")


class RegistryFrozenError(MeasureError):
    """Raised when a frozen unit registry receives a write."""


class UnsupportedOperationError(MeasureError, ArithmeticError):
    """Raised for algebraically meaningless requests.

    Examples are raising a non-linear unit to a power inside a product or
    taking a fractional power of a scaled unit.
    """


class ConversionError(UnsupportedOperationError):
    """Raised when no converter exists between two units."""

    def __init__(self, source: Any, target: Any):
        self.source = source
        self.target = target
        super().__init__(f"cannot convert {source!r} to {target!r}: standard units differ")


class QuantityLookupError(MeasureError, LookupError):
    """Base class for failures of the quantity resolver."""

    def __init__(self, unit: Any, message: str):
        self.unit = unit
        super().__init__(message)


class UnknownQuantityError(QuantityLookupError):
    """Raised when no quantity matches a unit."""

    def __init__(self, unit: Any):
        super().__init__(unit, f"no quantity matches {unit!r}")


class AmbiguousQuantityError(QuantityLookupError):
    """Raised when several quantities match a unit equally well."""

    def __init__(self, unit: Any, candidates: Sequence[Any]):
        self.candidates = tuple(candidates)
        names = ", ".join(getattr(c, "name", repr(c)) for c in self.candidates)
        super().__init__(unit, f"{unit!r} is ambiguous between: {names}")
