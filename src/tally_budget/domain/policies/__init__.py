"""Domain policies package."""

from .category_guard import category_is_referenced
from .colors import next_available_color

__all__ = ["category_is_referenced", "next_available_color"]
