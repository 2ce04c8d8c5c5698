"""On-disk template store for new-cli."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

from .config import DEFAULT_TEMPLATE_NAME

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_PACKAGE = "newcli"
DEFAULT_TEMPLATE_RESOURCE = f"default_template/{DEFAULT_TEMPLATE_NAME}"


class TemplateStoreError(RuntimeError):
    """Raised when the template directory cannot be created or read."""


def default_template_content() -> str:
    """Return the built-in template seeded into a fresh store."""

    return (
        resources.files(DEFAULT_TEMPLATE_PACKAGE)
        .joinpath(DEFAULT_TEMPLATE_RESOURCE)
        .read_text("utf-8")
    )


def ensure_template_dir(template_dir: Path) -> Path:
    """Create ``template_dir`` with the default template if it is missing.

    An existing directory is left untouched, whatever it contains. Returns the
    canonical directory path.
    """

    try:
        exists = template_dir.exists()
    except OSError as exc:
        raise TemplateStoreError(
            f"Unable to access template directory {template_dir}: {exc}"
        ) from exc
    if exists:
        return template_dir.resolve()

    # Load the seed before creating anything on disk.
    try:
        content = default_template_content()
    except OSError as exc:
        raise TemplateStoreError(
            f"Unable to load built-in default template: {exc}"
        ) from exc

    logger.debug("Seeding template directory %s", template_dir)
    try:
        template_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise TemplateStoreError(
            f"Unable to create template directory {template_dir}: {exc}"
        ) from exc

    target_path = template_dir / DEFAULT_TEMPLATE_NAME
    try:
        target_path.write_text(content, encoding="utf-8", newline="")
    except OSError as exc:
        raise TemplateStoreError(
            f"Unable to write default template to {target_path}: {exc}"
        ) from exc

    return template_dir.resolve()
