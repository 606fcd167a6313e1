"""
core.py — Monetary value engine

================================================================================
DESIGN PRINCIPLES
================================================================================

1. INTERNAL REPRESENTATION
   Arbitrary-precision int in the asset's smallest unit (cents for USD,
   satoshi for BTC, wei for ETH). Never floating point internally.

2. NON-NEGATIVITY
   A valid Monetary has a present amount >= 0. Constructors that validate
   (from_integer, from_decimal_string) and every arithmetic operation enforce
   it. Subtraction never clamps: going below zero is an error.

3. ABSENT AMOUNT
   amount=None is a distinct, representable state for partial values
   (e.g. deserialized from an empty field). Arithmetic rejects it;
   formatting renders it as "nil".

4. ASSET SAFETY
   Operands must share the same asset code. Arithmetic and ordering raise
   AssetMismatchError; equality simply answers False.

5. IMMUTABILITY
   Frozen dataclass. Every operation returns a new instance.

6. EXACT DECIMAL BRIDGE
   Conversion between smallest units and decimals uses decimal.Decimal with
   a context wide enough to be exact, truncating toward zero.

================================================================================
SERIALIZATION
================================================================================

    {"asset": {"asset": "USD", "precision": 2, "symbol": "$", "class": "currency"},
     "amount": "10050"}

The amount is a base-10 string in the smallest unit, never a JSON number:
consumers with 53-bit or 64-bit integers would lose precision on 18-decimal
tokens. An absent amount is the empty string.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, Overflow, localcontext
from typing import Any, Dict, Optional, Union
import json
import re

from .asset import Asset
from .errors import (
    AssetMismatchError,
    DivisionByZeroError,
    EmptyInputError,
    InvalidFormatError,
    NegativeAmountError,
    NilAmountError,
)


DecimalInput = Union[Decimal, int, float]

# Optional sign, digits with optional fraction, or a bare fraction.
# No exponent, no thousands separators, no surrounding whitespace.
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

NIL = "nil"


# ==============================================================================
# DECIMAL HELPERS
# ==============================================================================

def _as_decimal(value: DecimalInput) -> Decimal:
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        # repr gives the shortest string that round-trips: 0.29 stays 0.29
        result = Decimal(repr(value))
    elif isinstance(value, int):
        result = Decimal(value)
    else:
        raise TypeError(f"expected Decimal, int or float, got {type(value).__name__}")

    if not result.is_finite():
        raise InvalidFormatError(f"invalid decimal value: {value}", context={"value": str(value)})
    return result


def _scale(value: Decimal, exponent: int) -> Decimal:
    """value * 10**exponent, exact."""
    with localcontext() as ctx:
        ctx.prec = max(len(value.as_tuple().digits) + 1, ctx.prec)
        return value.scaleb(exponent)


def _to_smallest_unit(value: Decimal, precision: int) -> int:
    # int() truncates toward zero
    return int(_scale(value, precision))


def _int_text(value: int) -> str:
    """Base-10 text of an int of any length (str() is capped at 4300 digits)."""
    return format(Decimal(value), "f")


# ==============================================================================
# MONETARY
# ==============================================================================

@dataclass(frozen=True, slots=True, eq=False)
class Monetary:
    """
    An amount of a specific asset, stored in the asset's smallest unit.

    USAGE:
        price = Monetary.from_decimal_string(USD, "100.50")   # 10050 cents
        total = price.add(Monetary.from_decimal_string(USD, "50.25"))
        total.format_amount()   # "150.75"
        str(total)              # "[USD ($) 150.75]"
    """
    asset: Asset
    amount: Optional[int]

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_integer(cls, asset: Asset, amount: Optional[int]) -> Monetary:
        """
        Build from a smallest-unit integer (cents, satoshi, ...).

        Raises:
            NilAmountError: amount is None
            NegativeAmountError: amount < 0
        """
        if amount is None:
            raise NilAmountError()
        if not isinstance(amount, int):
            raise TypeError(f"amount must be int, got {type(amount).__name__}")
        if amount < 0:
            raise NegativeAmountError(context={"amount": amount})
        return cls(asset=asset, amount=int(amount))

    @classmethod
    def from_decimal_string(cls, asset: Asset, text: str) -> Monetary:
        """
        Parse a human-readable decimal ("100.50", "0.00000001", "1000").

        Digits beyond the asset's precision are truncated toward zero.

        Raises:
            EmptyInputError: text is ""
            InvalidFormatError: text is not a plain decimal number
            NegativeAmountError: the parsed value is below zero
        """
        if text == "":
            raise EmptyInputError()
        if not _DECIMAL_RE.fullmatch(text):
            raise InvalidFormatError(f"invalid decimal format: {text}", context={"text": text})

        try:
            value = Decimal(text)
        except InvalidOperation as e:
            raise InvalidFormatError(f"invalid decimal format: {text}", context={"text": text}) from e

        if value < 0:
            raise NegativeAmountError(f"amount cannot be negative: {text}", context={"text": text})

        return cls.from_decimal(asset, value)

    @classmethod
    def from_decimal(cls, asset: Asset, value: Optional[DecimalInput]) -> Monetary:
        """
        Build from a major-unit decimal: amount = trunc(value * 10**precision).

        None yields a Monetary with an absent amount. This constructor does
        not check non-negativity; call validate() when that matters.
        """
        if value is None:
            return cls(asset=asset, amount=None)
        try:
            amount = _to_smallest_unit(_as_decimal(value), asset.precision)
        except Overflow as e:
            raise InvalidFormatError("decimal value out of range") from e
        return cls(asset=asset, amount=amount)

    @classmethod
    def zero(cls, asset: Asset) -> Monetary:
        """Zero of the given asset. Always valid."""
        return cls(asset=asset, amount=0)

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(self) -> None:
        """
        Raises:
            NilAmountError: amount is absent
            NegativeAmountError: amount < 0
        """
        if self.amount is None:
            raise NilAmountError()
        if self.amount < 0:
            raise NegativeAmountError(context={"amount": self.amount})

    def _check_same_asset(self, other: Monetary, operation: str) -> None:
        if not isinstance(other, Monetary):
            raise TypeError(
                f"cannot {operation} Monetary and {type(other).__name__}"
            )
        if self.asset.code != other.asset.code:
            raise AssetMismatchError(self.asset.code, other.asset.code, operation)

    def _checked_operands(self, other: Monetary, operation: str) -> None:
        self._check_same_asset(other, operation)
        self.validate()
        other.validate()

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: Monetary) -> Monetary:
        self._checked_operands(other, "add")
        return Monetary(self.asset, self.amount + other.amount)

    def subtract(self, other: Monetary) -> Monetary:
        """
        Raises NegativeAmountError when other > self. Never clamps to zero.
        """
        self._checked_operands(other, "subtract")
        result = self.amount - other.amount
        if result < 0:
            raise NegativeAmountError(
                "subtraction result would be negative: "
                f"{_int_text(self.amount)} - {_int_text(other.amount)}",
                context={"left": self.amount, "right": other.amount},
            )
        return Monetary(self.asset, result)

    def multiply(self, factor: Optional[int]) -> Monetary:
        """Multiply by a non-negative integer quantity."""
        if factor is None:
            raise NilAmountError("factor cannot be None")
        if not isinstance(factor, int):
            raise TypeError(
                f"Monetary can only be multiplied by int, not {type(factor).__name__}"
            )
        if factor < 0:
            raise NegativeAmountError("factor cannot be negative", context={"factor": factor})
        self.validate()
        return Monetary(self.asset, self.amount * factor)

    def divide(self, divisor: Optional[int]) -> Monetary:
        """
        Integer division, remainder discarded.

        Works in smallest units: 100 cents / 3 = 33 cents, not 33.33.
        """
        if divisor is None:
            raise NilAmountError("divisor cannot be None")
        if not isinstance(divisor, int):
            raise TypeError(
                f"Monetary can only be divided by int, not {type(divisor).__name__}"
            )
        if divisor == 0:
            raise DivisionByZeroError()
        if divisor < 0:
            raise NegativeAmountError("divisor cannot be negative", context={"divisor": divisor})
        self.validate()
        # Both operands are non-negative here, so floor division truncates toward zero
        return Monetary(self.asset, self.amount // divisor)

    def __add__(self, other: Monetary) -> Monetary:
        return self.add(other)

    def __sub__(self, other: Monetary) -> Monetary:
        return self.subtract(other)

    def __mul__(self, factor: int) -> Monetary:
        return self.multiply(factor)

    def __rmul__(self, factor: int) -> Monetary:
        return self.multiply(factor)

    def __floordiv__(self, divisor: int) -> Monetary:
        return self.divide(divisor)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def equal(self, other: Monetary) -> bool:
        """Same asset code and same amount. Different assets are just unequal."""
        if not isinstance(other, Monetary):
            return False
        return self.asset.code == other.asset.code and self.amount == other.amount

    def _ordered_operands(self, other: Monetary, operation: str) -> None:
        self._check_same_asset(other, operation)
        if self.amount is None or other.amount is None:
            raise NilAmountError(f"cannot {operation} an absent amount")

    def greater_than(self, other: Monetary) -> bool:
        self._ordered_operands(other, "compare")
        return self.amount > other.amount

    def less_than(self, other: Monetary) -> bool:
        self._ordered_operands(other, "compare")
        return self.amount < other.amount

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Monetary):
            return self.equal(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.asset.code, self.amount))

    def __gt__(self, other: Monetary) -> bool:
        return self.greater_than(other)

    def __lt__(self, other: Monetary) -> bool:
        return self.less_than(other)

    def __ge__(self, other: Monetary) -> bool:
        return not self.less_than(other)

    def __le__(self, other: Monetary) -> bool:
        return not self.greater_than(other)

    # -------------------------------------------------------------------------
    # Properties and output
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        """True only for a present amount equal to zero."""
        return self.amount is not None and self.amount == 0

    @property
    def has_amount(self) -> bool:
        return self.amount is not None

    def to_decimal(self) -> Optional[Decimal]:
        """Amount in major units as an exact Decimal, or None if absent."""
        if self.amount is None:
            return None
        return _scale(Decimal(self.amount), -self.asset.precision)

    def format_amount(self) -> str:
        """
        Fixed-point rendering with exactly `precision` fractional digits.

        Never fails: an absent amount renders as "nil".
        """
        if self.amount is None:
            return NIL

        # The scaled Decimal has exponent -precision, so "f" keeps every digit
        return format(self.to_decimal(), "f")

    def copy(self) -> Monetary:
        """Independent duplicate with the same asset and amount."""
        return Monetary(self.asset, self.amount)

    def __copy__(self) -> Monetary:
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> Monetary:
        return self.copy()

    def __str__(self) -> str:
        return f"[{self.asset} {self.format_amount()}]"

    def __repr__(self) -> str:
        amount = "None" if self.amount is None else _int_text(self.amount)
        return f"Monetary(asset={self.asset.code!r}, amount={amount})"

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize for storage/API.

        Format: {"asset": {...}, "amount": "<smallest-unit integer or empty>"}
        """
        return {
            "asset": self.asset.to_dict(),
            "amount": "" if self.amount is None else _int_text(self.amount),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Monetary:
        """
        Inverse of to_dict(). An empty amount string restores the absent state.

        Raises:
            InvalidFormatError: malformed payload or non-integer amount
        """
        try:
            asset = Asset.from_dict(data["asset"])
            raw_amount = data["amount"]
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidFormatError(f"invalid monetary payload: {e}") from e

        if not isinstance(raw_amount, str):
            raise InvalidFormatError(
                f"amount must be a string, got {type(raw_amount).__name__}"
            )
        if raw_amount == "":
            return cls(asset=asset, amount=None)
        if not _INTEGER_RE.fullmatch(raw_amount):
            raise InvalidFormatError(
                f"invalid amount format: {raw_amount}", context={"amount": raw_amount}
            )
        # int(str) is capped at 4300 digits, int(Decimal) is not
        return cls(asset=asset, amount=int(Decimal(raw_amount)))

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, payload: Union[str, bytes]) -> Monetary:
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise InvalidFormatError(f"invalid JSON: {e.msg}") from e
        return cls.from_dict(data)


def validate_monetary(value: Monetary) -> None:
    """Module-level form of Monetary.validate()."""
    value.validate()
