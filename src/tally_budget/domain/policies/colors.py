"""Color assignment policy for new categories."""

from collections.abc import Iterable

from tally_budget.domain.constants import CATEGORY_COLORS, FALLBACK_COLOR
from tally_budget.domain.models import CategoryBudget


def next_available_color(categories: Iterable[CategoryBudget]) -> str:
    """Return the first palette color no category uses yet."""
    used = {category.color for category in categories}
    for color in CATEGORY_COLORS:
        if color not in used:
            return color
    return FALLBACK_COLOR


__all__ = ["next_available_color"]
