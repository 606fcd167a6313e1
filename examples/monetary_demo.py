#!/usr/bin/env python3
"""
monetary_demo.py — Walkthrough of the monetary value engine

================================================================================
WHY SMALLEST UNITS
================================================================================

    >>> 0.1 + 0.2
    0.30000000000000004

Money stored as a float drifts. Money stored as an integer count of the
asset's smallest unit (cents, satoshi, wei) does not, whatever the magnitude:
an 18-decimal token amount is just a big int.

Run with the package installed:

    python examples/monetary_demo.py

================================================================================
"""

from monetary import (
    Monetary,
    MonetaryError,
    AssetMismatchError,
    NegativeAmountError,
    find_by_name,
    find_by_symbol,
    USD,
    BTC,
    ETH,
)
from monetary.config import get_settings
from monetary.logging import setup_logging


log = setup_logging(get_settings())


def demonstrate_arithmetic():
    print("=" * 60)
    print("ARITHMETIC")
    print("=" * 60)
    print()

    a = Monetary.from_decimal_string(USD, "100.50")
    b = Monetary.from_decimal_string(USD, "50.25")
    total = a + b
    print(f"{a} + {b} = {total}")
    print(f"Stored as {total.amount} cents")
    print()

    third = Monetary.from_decimal_string(USD, "1.00").divide(3)
    print(f"$1.00 / 3 = {third}   (remainder discarded)")
    print()


def demonstrate_safety():
    print("=" * 60)
    print("SAFETY")
    print("=" * 60)
    print()

    cash = Monetary.from_decimal_string(USD, "0.01")
    bill = Monetary.from_decimal_string(USD, "100.00")
    try:
        cash.subtract(bill)
    except NegativeAmountError as e:
        print(f">>> cash - bill\n{e}")
    print()

    try:
        cash.add(Monetary.from_integer(BTC, 1))
    except AssetMismatchError as e:
        print(f">>> usd + btc\n{e}")
    print()

    print(f"USD == BTC with same amount? {Monetary.zero(USD) == Monetary.zero(BTC)}")
    print()


def demonstrate_precision():
    print("=" * 60)
    print("PRECISION")
    print("=" * 60)
    print()

    satoshi = Monetary.from_integer(BTC, 1)
    wei = Monetary.from_decimal_string(ETH, "1.123456789012345678")
    print(f"One satoshi: {satoshi}")
    print(f"ETH:         {wei}")
    print(f"As Decimal:  {wei.to_decimal()!r}")
    print()


def demonstrate_lookup_and_serialization():
    print("=" * 60)
    print("LOOKUP AND SERIALIZATION")
    print("=" * 60)
    print()

    print(f"find_by_name('btc')   -> {find_by_name('btc')}")
    print(f"find_by_symbol('$')   -> {find_by_symbol('$')}")
    print(f"find_by_name(' USD ') -> {find_by_name(' USD ')}")
    print()

    original = Monetary.from_decimal_string(ETH, "2.5")
    payload = original.to_json()
    print(f"JSON:     {payload}")
    print(f"Restored: {Monetary.from_json(payload)}")
    print()


def main():
    demonstrate_arithmetic()
    demonstrate_safety()
    demonstrate_precision()
    demonstrate_lookup_and_serialization()

    try:
        Monetary.from_decimal_string(USD, "1,000.00")
    except MonetaryError as e:
        log.warning("Rejected input: {}", e)


if __name__ == "__main__":
    main()
