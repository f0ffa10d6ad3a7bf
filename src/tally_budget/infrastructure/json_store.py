"""Ledger store writing one JSON document per collection."""

import os
import tempfile
from pathlib import Path
from typing import Any

from tally_budget.application.ports.ledger_store import LedgerStorePort
from tally_budget.infrastructure.logging.logger import get_app_logger
from tally_budget.infrastructure.serialization import (
    decode_collection,
    encode_collection,
)


class JsonFileLedgerStore(LedgerStorePort):
    """Persist collections as ``<directory>/<name>.json`` files."""

    def __init__(self, directory: Path | str, logger=None) -> None:
        """Initialize the store.

        Args:
            directory: Folder holding the JSON documents; created on save.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._directory = Path(directory)
        self._logger = logger or get_app_logger()

    def path_for(self, name: str) -> Path:
        return self._directory / f"{name}.json"

    def save(self, collection: Any, name: str) -> None:
        """Write a collection, replacing the previous document atomically."""
        target = self.path_for(name)
        try:
            payload = encode_collection(name, collection)
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=target.parent, prefix=f".{name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, target)
            except OSError:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, KeyError, TypeError, ValueError) as exc:
            self._logger.error(f"Error saving {name} to {target}: {exc}")
            return
        self._logger.debug(f"Saved {name} to {target}")

    def load(self, name: str) -> Any | None:
        """Read a collection, or None when absent or unreadable."""
        target = self.path_for(name)
        if not target.exists():
            self._logger.info(f"No stored {name} at {target}")
            return None
        try:
            with target.open("r", encoding="utf-8") as handle:
                return decode_collection(name, handle.read())
        except (OSError, KeyError, TypeError, ValueError) as exc:
            self._logger.warning(f"Error loading {name} from {target}: {exc}")
            return None


__all__ = ["JsonFileLedgerStore"]
