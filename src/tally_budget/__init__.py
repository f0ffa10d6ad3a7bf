"""Tally budget ledger: monthly budgets, rollover and savings goals."""

__version__ = "0.1.0"
