"""Conversions between human token amounts and on-chain fixed-point integers.

All Decimal arithmetic runs in a high-precision context so that amounts up
to uint256 (~10^77) convert exactly.
"""

from __future__ import annotations

import decimal
from decimal import Decimal, InvalidOperation

# 78 digits of precision, enough for uint256 values
DECIMAL_HIGH_PREC_CONTEXT = decimal.Context(prec=78)


def to_decimal(value: str | int | Decimal) -> Decimal:
    """Coerce a value to Decimal, refusing binary floats.

    Raises:
        TypeError: If value is a float or an unsupported type
        ValueError: If a string is not a valid number
    """
    if isinstance(value, bool):
        raise TypeError("amount must be a string, int or Decimal, not bool")
    if isinstance(value, float):
        raise TypeError("amount must be a string, int or Decimal, not float")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as err:
            raise ValueError(f"Invalid amount: '{value}'") from err
    else:
        raise TypeError(f"amount must be a string, int or Decimal, got {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Amount must be finite: {value}")
    return result


def parse_units(amount: str | int | Decimal, decimals: int) -> int:
    """Convert a human amount (e.g. "1.5") to its raw integer representation.

    Args:
        amount: Human-readable amount
        decimals: Token decimal precision

    Returns:
        Raw integer amount in the token's smallest unit

    Raises:
        ValueError: If the amount has more precision than decimals allow
    """
    if decimals < 0:
        raise ValueError("decimals must be non-negative")
    sign, digits, exponent = to_decimal(amount).as_tuple()
    assert isinstance(exponent, int)
    significant = "".join(map(str, digits)).rstrip("0")
    if not significant:
        return 0

    # Integer arithmetic only: no context rounding for very long inputs
    exponent += len(digits) - len(significant)
    if exponent + decimals < 0:
        raise ValueError(f"Amount {amount} has more precision than {decimals} decimals allow")
    raw = int(significant) * 10 ** (exponent + decimals)
    return -raw if sign else raw


def format_units(raw: int, decimals: int) -> Decimal:
    """Convert a raw integer amount to a human Decimal with `decimals` places."""
    if decimals < 0:
        raise ValueError("decimals must be non-negative")
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        return Decimal(raw).scaleb(-decimals)


__all__ = ["DECIMAL_HIGH_PREC_CONTEXT", "format_units", "parse_units", "to_decimal"]
