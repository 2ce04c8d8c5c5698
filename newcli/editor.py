"""Utilities for launching the platform opener on a created file."""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


class EditorError(RuntimeError):
    """Raised when the opener process cannot be started."""


def default_opener(platform: str = sys.platform) -> str:
    """Return the opener command for ``platform``."""

    if platform.startswith("win"):
        return "notepad3"
    if platform == "darwin":
        return "open"
    return "xdg-open"


DEFAULT_OPENER = default_opener()


def open_file(path: Path, opener: str = DEFAULT_OPENER) -> None:
    """Spawn ``opener`` on ``path`` without waiting for it to exit."""

    logger.debug("Spawning %s %s", opener, path)
    try:
        subprocess.Popen([opener, str(path)])
    except OSError as exc:
        raise EditorError(f"Unable to open file with {opener}: {exc}") from exc
