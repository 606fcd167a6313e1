"""
registry.py — Static catalog of known assets

The catalog is process-wide, read-only data built once at import time.
There is no insertion or removal API. Lookups are case-insensitive exact
matches and return None on a miss: not finding an asset is an expected
outcome, not an error.
"""

from __future__ import annotations
from typing import Optional, Tuple

from .asset import Asset, CURRENCY, CRYPTOCURRENCY


# ==============================================================================
# FIAT CURRENCIES (ISO 4217)
# ==============================================================================

BRL = Asset("BRL", 2, "R$", CURRENCY)
USD = Asset("USD", 2, "$", CURRENCY)
GBP = Asset("GBP", 2, "£", CURRENCY)
CHF = Asset("CHF", 2, "CHF", CURRENCY)
JPY = Asset("JPY", 0, "¥", CURRENCY)    # no minor unit
ARS = Asset("ARS", 2, "$", CURRENCY)
CLP = Asset("CLP", 0, "$", CURRENCY)    # no minor unit
CAD = Asset("CAD", 2, "$", CURRENCY)
MXN = Asset("MXN", 2, "$", CURRENCY)
COP = Asset("COP", 2, "$", CURRENCY)


# ==============================================================================
# CRYPTOCURRENCIES
# ==============================================================================

BTC = Asset("BTC", 8, "BTC", CRYPTOCURRENCY)      # 1 BTC = 100,000,000 satoshi
ETH = Asset("ETH", 18, "ETH", CRYPTOCURRENCY)     # 1 ETH = 10^18 wei
USDT = Asset("USDT", 6, "USDT", CRYPTOCURRENCY)
USDC = Asset("USDC", 6, "USDC", CRYPTOCURRENCY)
DAI = Asset("DAI", 18, "DAI", CRYPTOCURRENCY)
SOL = Asset("SOL", 9, "SOL", CRYPTOCURRENCY)      # lamports
TRX = Asset("TRX", 6, "TRX", CRYPTOCURRENCY)
BNB = Asset("BNB", 18, "BNB", CRYPTOCURRENCY)
MATIC = Asset("MATIC", 18, "MATIC", CRYPTOCURRENCY)
AVAX = Asset("AVAX", 18, "AVAX", CRYPTOCURRENCY)
LINK = Asset("LINK", 18, "LINK", CRYPTOCURRENCY)
ATOM = Asset("ATOM", 6, "ATOM", CRYPTOCURRENCY)
DOGE = Asset("DOGE", 8, "DOGE", CRYPTOCURRENCY)
SHIB = Asset("SHIB", 18, "SHIB", CRYPTOCURRENCY)


# Lookup order matters: the first match wins, so "$" resolves to USD.
_CATALOG: Tuple[Asset, ...] = (
    # Currencies
    BRL, USD, GBP, CHF, JPY, ARS, CLP, CAD, MXN, COP,
    # Cryptocurrencies
    BTC, ETH, USDT, USDC, DAI, SOL, TRX, BNB, MATIC, AVAX, LINK, ATOM, DOGE, SHIB,
)


def all_assets() -> Tuple[Asset, ...]:
    """Every known asset, fiat first, in lookup order."""
    return _CATALOG


def find_by_symbol(symbol: str) -> Optional[Asset]:
    """
    First asset whose display symbol matches, ignoring case.

    Whitespace is significant: " $ " does not match "$".
    """
    wanted = symbol.casefold()
    for asset in _CATALOG:
        if asset.symbol.casefold() == wanted:
            return asset
    return None


def find_by_name(code: str) -> Optional[Asset]:
    """Asset whose code matches, ignoring case ("usd" -> USD)."""
    wanted = code.casefold()
    for asset in _CATALOG:
        if asset.code.casefold() == wanted:
            return asset
    return None
