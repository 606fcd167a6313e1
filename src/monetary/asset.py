"""
asset.py — Asset value type

An Asset is a named unit of value (fiat currency or cryptocurrency) with a
fixed fractional precision: the number of decimal digits between the smallest
unit (cents, satoshi, wei) and the human-readable amount.

Assets are immutable and compared by code only. Two assets with the same code
are the same asset, whatever their display symbol says.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict


# ==============================================================================
# ASSET CLASSES
# ==============================================================================

# Plain strings so that callers can tag their own assets ("commodity", ...)
CURRENCY = "currency"
CRYPTOCURRENCY = "cryptocurrency"


# ==============================================================================
# ASSET
# ==============================================================================

@dataclass(frozen=True, slots=True)
class Asset:
    """
    Immutable description of an asset.

    Attributes:
        code: uppercase ticker, unique within the registry (USD, BTC, ...)
        precision: digits after the radix point in the smallest unit
        symbol: display glyph, not unique ("$" is shared by several currencies)
        asset_class: CURRENCY or CRYPTOCURRENCY (serialized as "class")
    """
    code: str
    precision: int = field(compare=False)
    symbol: str = field(compare=False)
    asset_class: str = field(compare=False, default=CURRENCY)

    def __post_init__(self) -> None:
        if not isinstance(self.precision, int) or isinstance(self.precision, bool):
            raise TypeError(f"precision must be int, got {type(self.precision).__name__}")
        if self.precision < 0:
            raise ValueError(f"precision must be >= 0, got {self.precision}")

    @property
    def multiplier(self) -> int:
        """Conversion factor from major units to the smallest unit."""
        return 10 ** self.precision

    @property
    def is_crypto(self) -> bool:
        return self.asset_class == CRYPTOCURRENCY

    def __str__(self) -> str:
        return f"{self.code} ({self.symbol})"

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Wire form: {"asset": code, "precision": int, "symbol": str, "class": str}."""
        return {
            "asset": self.code,
            "precision": self.precision,
            "symbol": self.symbol,
            "class": self.asset_class,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Asset:
        return cls(
            code=data["asset"],
            precision=data["precision"],
            symbol=data["symbol"],
            asset_class=data["class"],
        )
