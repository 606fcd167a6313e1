"""
monetary — Precise amounts of fiat currencies and cryptocurrencies

Amounts are arbitrary-precision integers in the asset's smallest unit
(cents, satoshi, wei). Arithmetic never goes below zero, never mixes assets,
and never touches floating point.

================================================================================
QUICK START
================================================================================

    from monetary import Monetary, USD, BTC, find_by_name

    price = Monetary.from_decimal_string(USD, "100.50")
    total = price + Monetary.from_decimal_string(USD, "50.25")
    total.amount            # 15075
    total.format_amount()   # "150.75"
    str(total)              # "[USD ($) 150.75]"

    # Smallest-unit semantics: the remainder is discarded
    Monetary.from_decimal_string(USD, "1.00").divide(3).format_amount()  # "0.33"

    # Lookups are case-insensitive and return None on a miss
    find_by_name("btc")     # BTC

    # Storage / wire form keeps the amount as a string
    Monetary.from_dict(total.to_dict()) == total   # True

================================================================================
"""

from .asset import Asset, CURRENCY, CRYPTOCURRENCY
from .core import Monetary, validate_monetary
from .errors import (
    ErrorKind,
    MonetaryError,
    NilAmountError,
    NegativeAmountError,
    AssetMismatchError,
    DivisionByZeroError,
    InvalidFormatError,
    EmptyInputError,
)
from .registry import (
    all_assets,
    find_by_symbol,
    find_by_name,
    # Currencies
    BRL, USD, GBP, CHF, JPY, ARS, CLP, CAD, MXN, COP,
    # Cryptocurrencies
    BTC, ETH, USDT, USDC, DAI, SOL, TRX, BNB, MATIC, AVAX, LINK, ATOM, DOGE, SHIB,
)

__version__ = "1.0.0"

__all__ = [
    # Core
    "Asset",
    "CURRENCY",
    "CRYPTOCURRENCY",
    "Monetary",
    "validate_monetary",
    # Registry
    "all_assets",
    "find_by_symbol",
    "find_by_name",
    "BRL", "USD", "GBP", "CHF", "JPY", "ARS", "CLP", "CAD", "MXN", "COP",
    "BTC", "ETH", "USDT", "USDC", "DAI", "SOL", "TRX", "BNB", "MATIC",
    "AVAX", "LINK", "ATOM", "DOGE", "SHIB",
    # Errors
    "ErrorKind",
    "MonetaryError",
    "NilAmountError",
    "NegativeAmountError",
    "AssetMismatchError",
    "DivisionByZeroError",
    "InvalidFormatError",
    "EmptyInputError",
]
