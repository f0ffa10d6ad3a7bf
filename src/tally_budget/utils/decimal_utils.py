"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from user input or a persisted payload.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_cents(value) -> Decimal:
    """Round a numeric value to the nearest cent.

    Args:
        value: Raw numeric value.

    Returns:
        Decimal: Value quantized to two decimal places, half up.
    """
    return coerce_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def has_cent_precision(value: Decimal) -> bool:
    """Return True when the value carries at most two decimal places."""
    exponent = value.as_tuple().exponent
    return isinstance(exponent, int) and exponent >= -2


__all__ = ["CENT", "coerce_decimal", "round_cents", "has_cent_precision"]
