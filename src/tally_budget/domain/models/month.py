"""Month key model used to index month-scoped collections."""

import re
from dataclasses import dataclass
from datetime import date, datetime

from tally_budget.domain.errors import LedgerInvariantError, ValidationError

_MONTH_PATTERN = re.compile(r"^\s*(\d{4})-(\d{1,2})\s*$")


@dataclass(frozen=True, order=True)
class MonthKey:
    """Calendar month identifier with the day truncated.

    Attributes:
        year: Four digit calendar year.
        month: Month number in 1..12.
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise LedgerInvariantError(
                f"Month out of range: {self.year}-{self.month}"
            )
        if not 1 <= self.year <= 9999:
            raise LedgerInvariantError(f"Year out of range: {self.year}")

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @classmethod
    def from_date(cls, value: date | datetime) -> "MonthKey":
        """Return the key of the month containing ``value``."""
        return cls(value.year, value.month)

    @classmethod
    def parse(cls, raw: str) -> "MonthKey":
        """Parse a ``YYYY-MM`` string.

        Args:
            raw: Text such as ``2025-02``.

        Returns:
            MonthKey: Parsed key.

        Raises:
            ValidationError: If the text is not a valid month.
        """
        match = _MONTH_PATTERN.match(raw or "")
        if not match:
            raise ValidationError(f"Invalid month: {raw!r}")
        year, month = int(match.group(1)), int(match.group(2))
        if not 1 <= month <= 12:
            raise ValidationError(f"Invalid month: {raw!r}")
        return cls(year, month)

    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def previous(self) -> "MonthKey":
        if self.month == 1:
            return MonthKey(self.year - 1, 12)
        return MonthKey(self.year, self.month - 1)

    def next(self) -> "MonthKey":
        if self.month == 12:
            return MonthKey(self.year + 1, 1)
        return MonthKey(self.year, self.month + 1)

    def contains(self, value: date | datetime) -> bool:
        return value.year == self.year and value.month == self.month


__all__ = ["MonthKey"]
