"""Environment resolution for new-cli."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .editor import DEFAULT_OPENER

TEMPLATE_SUBDIR = Path(".new-cli") / "template"
DEFAULT_TEMPLATE_NAME = "index.html"


class ConfigError(RuntimeError):
    """Raised when the runtime environment cannot be resolved."""


@dataclass(slots=True)
class NewCliConfig:
    """Paths and programs used by a single invocation."""

    template_dir: Path
    working_dir: Path
    opener: str = DEFAULT_OPENER


def template_dir_for(home: Path) -> Path:
    """Return the template store location under ``home``."""

    return home / TEMPLATE_SUBDIR


def load_config(
    home: Path | None = None, working_dir: Path | None = None
) -> NewCliConfig:
    """Resolve the template directory and working directory.

    Parameters
    ----------
    home:
        Home directory to use instead of ``Path.home()``.
    working_dir:
        Directory new files are created in. Defaults to ``Path.cwd()``.

    Raises
    ------
    ConfigError
        If the home directory or the current directory cannot be determined.
    """

    if home is None:
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as exc:
            raise ConfigError(f"Unable to determine home directory: {exc}") from exc

    if working_dir is None:
        try:
            working_dir = Path.cwd()
        except OSError as exc:
            raise ConfigError(f"Unable to determine current directory: {exc}") from exc

    return NewCliConfig(
        template_dir=template_dir_for(home.expanduser()),
        working_dir=working_dir,
    )
