"""Settings helpers for infrastructure adapters."""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

import dotenv

from tally_budget.domain.errors import ValidationError
from tally_budget.domain.models import MonthKey
from tally_budget.infrastructure.logging.logger import get_app_logger
from tally_budget.utils.utils import get_project_root

STORE_BACKENDS = ("json", "sqlalchemy")


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger session and its store.

    Attributes:
        epoch_month: First month of the rollover computation, when explicit.
        store_backend: Store identifier (json or sqlalchemy).
        data_dir: Folder for JSON documents and the default SQLite file.
        db_url: SQLAlchemy URL used by the sqlalchemy backend.
    """

    epoch_month: Optional[MonthKey] = None
    store_backend: str = "json"
    data_dir: Path = Path("data")
    db_url: Optional[str] = None

    @property
    def ledger_db_url(self) -> str:
        """Return the configured URL, or a SQLite file inside ``data_dir``."""
        return self.db_url or f"sqlite:///{self.data_dir / 'tally.db'}"

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables and a ``.env`` file.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("TALLY_STORE_BACKEND", "json").strip().lower()
        if backend not in STORE_BACKENDS:
            logger.warning(
                f"Unknown TALLY_STORE_BACKEND={backend!r}; using json"
            )
            backend = "json"
        raw_dir = os.getenv("TALLY_DATA_DIR")
        data_dir = (
            Path(raw_dir).expanduser().resolve()
            if raw_dir
            else get_project_root() / "data"
        )
        settings = cls(
            epoch_month=cls._parse_epoch(os.getenv("TALLY_EPOCH_MONTH"), logger),
            store_backend=backend,
            data_dir=data_dir,
            db_url=os.getenv("TALLY_DB_URL"),
        )
        return replace(settings, db_url=settings.ledger_db_url)

    @staticmethod
    def _parse_epoch(raw: str | None, logger) -> Optional[MonthKey]:
        """Parse the configured epoch month.

        Args:
            raw: ``YYYY-MM`` text or None.
            logger: Logger used for warnings.

        Returns:
            Optional[MonthKey]: Parsed month, None when unset or invalid.
        """
        if not raw:
            return None
        try:
            return MonthKey.parse(raw)
        except ValidationError:
            logger.warning(
                f"Ignoring invalid TALLY_EPOCH_MONTH={raw!r}; "
                "the epoch will be inferred from the ledger data"
            )
            return None


__all__ = ["LedgerSettings", "STORE_BACKENDS"]
