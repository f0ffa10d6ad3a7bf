"""Tests for amount parsing and cent rounding."""

from decimal import Decimal

import pytest

from tally_budget.domain.errors import ValidationError
from tally_budget.domain.services.validation import (
    INVALID_AMOUNT_MESSAGE,
    parse_amount,
    parse_non_negative_amount,
    parse_positive_amount,
    require_text,
)
from tally_budget.utils.decimal_utils import has_cent_precision, round_cents


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("10", Decimal("10.00")),
        ("10.005", Decimal("10.01")),
        ("10.004", Decimal("10.00")),
        ("$1,234.5", Decimal("1234.50")),
        (" 7.1 ", Decimal("7.10")),
        (3, Decimal("3.00")),
        (0.1, Decimal("0.10")),
        (Decimal("-2.345"), Decimal("-2.35")),
    ],
)
def test_parse_amount_rounds_half_up_to_cents(raw, expected) -> None:
    """Amounts are rounded to the nearest cent, halves away from zero."""
    value = parse_amount(raw)

    assert value == expected
    assert has_cent_precision(value)


@pytest.mark.parametrize(
    "raw", [None, True, "", "   ", "abc", "1.2.3", "NaN", "Infinity", "1e30"]
)
def test_parse_amount_rejects_non_numbers(raw) -> None:
    with pytest.raises(ValidationError, match=INVALID_AMOUNT_MESSAGE):
        parse_amount(raw)


@pytest.mark.parametrize("raw", ["0", "0.004", "-5"])
def test_parse_positive_amount_rejects_zero_after_rounding(raw) -> None:
    """Values that round to zero or below are not positive."""
    with pytest.raises(ValidationError, match="positive amount"):
        parse_positive_amount(raw)


def test_parse_non_negative_amount_allows_zero() -> None:
    assert parse_non_negative_amount("0") == Decimal("0.00")
    with pytest.raises(ValidationError):
        parse_non_negative_amount("-0.01")


@pytest.mark.parametrize("steps", [1, 7, 33, 250])
def test_repeated_rounded_sums_keep_cent_precision(steps: int) -> None:
    """Summing rounded amounts never introduces sub-cent digits."""
    total = Decimal("0.00")
    for index in range(steps):
        total += round_cents(Decimal(index) / Decimal(3))

    assert has_cent_precision(total)


def test_require_text_strips_and_rejects_blanks() -> None:
    assert require_text("  Rent ", "category name") == "Rent"
    with pytest.raises(ValidationError, match="Please enter a goal title."):
        require_text("   ", "goal title")
