"""Shared helpers for the new-cli command line."""

from __future__ import annotations

from typing import Any

import click

from ..app import AppContext, bootstrap
from ..config import ConfigError
from ..store import TemplateStoreError

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}


class NewCliError(click.ClickException):
    """Shared Click exception wrapper for CLI failures."""


def get_app() -> AppContext:
    """Bootstrap the application, mapping failures to CLI errors."""

    try:
        return bootstrap()
    except (ConfigError, TemplateStoreError) as exc:
        raise NewCliError(str(exc)) from exc
