"""Generic project helpers."""

import os
from pathlib import Path


def get_project_root() -> Path:
    """Return the project root directory.

    ``TALLY_HOME`` takes precedence so installed copies can keep logs and data
    outside of site-packages.
    """
    override = os.getenv("TALLY_HOME")
    if override:
        return Path(override).expanduser().resolve()
    return Path(__file__).resolve().parents[3]


__all__ = ["get_project_root"]
