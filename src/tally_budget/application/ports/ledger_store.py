"""Persistence port for the ledger's named collections.

Adapters save and load whole collections under the canonical names listed in
``tally_budget.domain.constants.COLLECTION_NAMES``. Failures are logged by the
adapter and never raised to the caller.
"""

from typing import Any, Protocol


class LedgerStorePort(Protocol):
    """Port exposing durable storage of named ledger collections."""

    def save(self, collection: Any, name: str) -> None:
        """Serialize ``collection`` under ``name``, replacing any prior value.

        Args:
            collection: Domain collection (list or mapping) to persist.
            name: Canonical collection name.
        """

    def load(self, name: str) -> Any | None:
        """Return the decoded collection stored under ``name``.

        Args:
            name: Canonical collection name.

        Returns:
            Any | None: Decoded collection, or None when absent or malformed.
        """


__all__ = ["LedgerStorePort"]
