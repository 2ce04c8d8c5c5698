"""Template lookup with containment checks."""

from __future__ import annotations

import logging
from pathlib import Path

from .store import TemplateStoreError

logger = logging.getLogger(__name__)


def _canonical(path: Path) -> Path | None:
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError):
        return None


def _contained(path: Path, root: Path) -> Path | None:
    """Return the canonical ``path`` if it lies strictly below ``root``."""

    canonical = _canonical(path)
    if canonical is None or canonical == root:
        return None
    if not canonical.is_relative_to(root):
        logger.debug("Ignoring %s: resolves outside %s", path, root)
        return None
    return canonical


def find_template_file(
    template_dir: Path, filename: str, extension: str
) -> Path | None:
    """Locate the template to use for ``<filename>.<extension>``.

    Lookup order:
    1) ``template_dir/<filename>.<extension>``
    2) the first file directly inside ``template_dir`` (by name) whose suffix
       is ``.<extension>``

    Candidates are only returned when their canonical path stays inside the
    canonical template directory, so symlinks pointing elsewhere are skipped.
    Returns ``None`` when nothing qualifies.
    """

    root = _canonical(template_dir)
    if root is None:
        return None

    specified = template_dir / f"{filename}.{extension}"
    if specified.is_file():
        resolved = _contained(specified, root)
        if resolved is not None:
            return resolved

    wanted_suffix = f".{extension}"
    try:
        entries = sorted(template_dir.iterdir())
    except OSError:
        return None

    for entry in entries:
        if entry.suffix != wanted_suffix or not entry.is_file():
            continue
        resolved = _contained(entry, root)
        if resolved is not None:
            return resolved

    return None


def read_template(path: Path) -> str:
    """Return the text of the template at ``path``, line endings untouched."""

    try:
        with path.open("r", encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateStoreError(f"Unable to read template file {path}: {exc}") from exc
