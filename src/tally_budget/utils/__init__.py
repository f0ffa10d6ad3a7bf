"""Shared utility helpers."""

from .decimal_utils import (
    CENT,
    coerce_decimal,
    has_cent_precision,
    round_cents,
)
from .utils import get_project_root

__all__ = [
    "CENT",
    "coerce_decimal",
    "has_cent_precision",
    "round_cents",
    "get_project_root",
]
