"""Domain exceptions for the budget ledger."""


class LedgerError(Exception):
    """Base class for ledger errors."""


class ValidationError(LedgerError):
    """User input rejected by a ledger rule; no state is changed."""


class LedgerInvariantError(LedgerError):
    """Data-consistency bug such as a failed calendar computation."""


__all__ = ["LedgerError", "ValidationError", "LedgerInvariantError"]
