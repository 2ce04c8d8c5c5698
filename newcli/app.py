"""Application bootstrap and context container for new-cli."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import NewCliConfig, load_config
from .store import ensure_template_dir


@dataclass(slots=True)
class AppContext:
    """Aggregates the resolved environment for one invocation."""

    config: NewCliConfig
    template_dir: Path


def bootstrap(
    home: Path | None = None, working_dir: Path | None = None
) -> AppContext:
    """Resolve the environment and make sure the template store exists."""

    # Errors are mapped to user-facing messages by the CLI.
    config = load_config(home=home, working_dir=working_dir)
    template_dir = ensure_template_dir(config.template_dir)
    return AppContext(config=config, template_dir=template_dir)
