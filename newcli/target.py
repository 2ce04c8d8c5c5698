"""Destination path checks and writing for new files."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class TargetPathError(ValueError):
    """Raised when the destination would land outside the working directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"Target file path '{path}' is not inside the current working directory."
        )
        self.path = path


class TargetWriteError(RuntimeError):
    """Raised when the destination file cannot be written."""


def resolve_target_path(working_dir: Path, filename: str, extension: str) -> Path:
    """Return the absolute destination for ``<filename>.<extension>``.

    The canonical working directory must be the direct parent of the result.
    """

    try:
        canonical_dir = working_dir.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise TargetWriteError(
            f"Unable to canonicalize current directory {working_dir}: {exc}"
        ) from exc

    target_path = canonical_dir / f"{filename}.{extension}"
    if target_path.parent != canonical_dir:
        raise TargetPathError(target_path)
    return target_path


def write_target(path: Path, content: str) -> None:
    """Write ``content`` to ``path``, replacing any existing file."""

    logger.debug("Writing %d characters to %s", len(content), path)
    try:
        path.write_text(content, encoding="utf-8", newline="")
    except OSError as exc:
        raise TargetWriteError(f"Unable to create file {path.name}: {exc}") from exc
