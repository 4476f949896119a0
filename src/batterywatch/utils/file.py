"""File utility functions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

logger: Final = logging.getLogger(__name__)


def ensure_directory_exists(directory: Path) -> None:
    """Create directory if it doesn't exist.

    Args:
        directory: Path to create
    """
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug("Created directory: %s", directory)


def resolve_path(path: str | Path) -> Path:
    """Expand ``~`` in a user-supplied path.

    Args:
        path: Path as written in configuration or on the command line

    Returns:
        Path with the home directory expanded
    """
    return Path(path).expanduser()
