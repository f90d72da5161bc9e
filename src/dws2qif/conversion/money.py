from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from dws2qif.conv import parse_locale_number

_MONEY_Q = Decimal("0.01")


def abs_decimal(value: Decimal) -> Decimal:
    """Return the absolute value using Decimal.copy_abs for stability."""
    return value.copy_abs()


def normalize(value: str | Decimal) -> Decimal:
    """Absolute numeric value of a DWS decimal string.

    The sign is discarded; the QIF action carries the direction.
    """
    return abs_decimal(parse_locale_number(value))


def quantize_money(value: Decimal) -> Decimal:
    return value.quantize(_MONEY_Q, rounding=ROUND_HALF_UP)


def format_money(value: Decimal) -> str:
    """Fixed two-decimal rendering, e.g. Decimal('10.000') -> '10.00'."""
    return f"{quantize_money(value):f}"
