"""Domain validation helpers for user supplied values."""

from decimal import Decimal, InvalidOperation

from tally_budget.domain.errors import ValidationError
from tally_budget.utils.decimal_utils import coerce_decimal, round_cents

INVALID_AMOUNT_MESSAGE = "Please enter a valid amount."


def parse_amount(raw) -> Decimal:
    """Parse a user supplied amount into a cent-rounded Decimal.

    Args:
        raw: String, int, float or Decimal amount.

    Returns:
        Decimal: Parsed amount rounded to the nearest cent.

    Raises:
        ValidationError: If the value is not a finite number.
    """
    if isinstance(raw, bool) or raw is None:
        raise ValidationError(INVALID_AMOUNT_MESSAGE)
    if isinstance(raw, str):
        raw = raw.strip().replace(",", "").lstrip("$")
        if not raw:
            raise ValidationError(INVALID_AMOUNT_MESSAGE)
    try:
        value = coerce_decimal(raw)
        if value.is_finite():
            return round_cents(value)
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(INVALID_AMOUNT_MESSAGE) from exc
    raise ValidationError(INVALID_AMOUNT_MESSAGE)


def parse_positive_amount(raw) -> Decimal:
    """Parse an amount that must be strictly positive after rounding."""
    amount = parse_amount(raw)
    if amount <= 0:
        raise ValidationError("Please enter a positive amount.")
    return amount


def parse_non_negative_amount(raw) -> Decimal:
    amount = parse_amount(raw)
    if amount < 0:
        raise ValidationError("Amount cannot be negative.")
    return amount


def require_text(value: str | None, label: str) -> str:
    """Return stripped text or reject blanks.

    Args:
        value: Raw text input.
        label: Field name used in the message.

    Returns:
        str: Stripped text.
    """
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"Please enter a {label}.")
    return cleaned


__all__ = [
    "INVALID_AMOUNT_MESSAGE",
    "parse_amount",
    "parse_positive_amount",
    "parse_non_negative_amount",
    "require_text",
]
