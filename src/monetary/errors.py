"""
errors.py — Error taxonomy for monetary operations

Every failure detected by the engine is raised as a MonetaryError subclass
carrying an ErrorKind, so callers can either catch a specific class or branch
on `err.kind`. Where a matching builtin exists the class also derives from it
(AssetMismatchError is a TypeError, DivisionByZeroError a ZeroDivisionError,
parse failures are ValueErrors), so generic handlers keep working.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(Enum):
    """Stable identifiers for each failure mode."""
    NIL_AMOUNT = "NIL_AMOUNT"
    NEGATIVE_AMOUNT = "NEGATIVE_AMOUNT"
    ASSET_MISMATCH = "ASSET_MISMATCH"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    INVALID_FORMAT = "INVALID_FORMAT"
    EMPTY_INPUT = "EMPTY_INPUT"


class MonetaryError(Exception):
    """
    Base class for all monetary failures.

    Args:
        message: human-readable description
        context: structured details (asset codes, offending input, ...)
    """
    kind: ErrorKind

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"

    def __repr__(self) -> str:
        context_str = f", context={self.context}" if self.context else ""
        return f"{self.__class__.__name__}(message='{self.message}'{context_str})"


class NilAmountError(MonetaryError):
    """Amount absent where one is required."""
    kind = ErrorKind.NIL_AMOUNT

    def __init__(self, message: str = "amount cannot be None", **kwargs: Any):
        super().__init__(message, **kwargs)


class NegativeAmountError(MonetaryError):
    """Value, operand, or arithmetic result below zero."""
    kind = ErrorKind.NEGATIVE_AMOUNT

    def __init__(self, message: str = "amount cannot be negative", **kwargs: Any):
        super().__init__(message, **kwargs)


class AssetMismatchError(MonetaryError, TypeError):
    """Operands reference different asset codes."""
    kind = ErrorKind.ASSET_MISMATCH

    def __init__(self, left: str, right: str, operation: str = "operate on"):
        super().__init__(
            f"cannot {operation} different assets: {left} and {right}",
            context={"left": left, "right": right},
        )


class DivisionByZeroError(MonetaryError, ZeroDivisionError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, message: str = "division by zero", **kwargs: Any):
        super().__init__(message, **kwargs)


class InvalidFormatError(MonetaryError, ValueError):
    """Unparseable decimal or integer text, or malformed serialized payload."""
    kind = ErrorKind.INVALID_FORMAT


class EmptyInputError(MonetaryError, ValueError):
    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, message: str = "amount string cannot be empty", **kwargs: Any):
        super().__init__(message, **kwargs)
