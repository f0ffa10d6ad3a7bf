"""Structured outcome of a mutating ledger operation."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class OperationResult:
    """Success flag, user-facing message and optional produced value."""

    ok: bool
    message: str = ""
    value: Any = None

    @classmethod
    def success(cls, value: Any = None, message: str = "") -> "OperationResult":
        return cls(ok=True, message=message, value=value)

    @classmethod
    def failure(cls, message: str) -> "OperationResult":
        return cls(ok=False, message=message)


__all__ = ["OperationResult"]
