"""Create a file from the best matching template and open it."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from ..app import AppContext
from ..editor import EditorError
from ..editor import open_file as default_open_file
from ..resolver import find_template_file, read_template
from ..target import resolve_target_path, write_target

NotifyFunc = Callable[[str], None]
WarnFunc = Callable[[str], None]
OpenFunc = Callable[[Path, str], None]


@dataclass(slots=True)
class ScaffoldResult:
    """Outcome of a scaffold run."""

    target_path: Path
    template_path: Path | None
    opened: bool


def _noop(message: str) -> None:
    return


def create_from_template(
    ctx: AppContext,
    filename: str,
    extension: str,
    *,
    open_fn: OpenFunc = default_open_file,
    notify: NotifyFunc = _noop,
    warn: WarnFunc = _noop,
) -> ScaffoldResult:
    """Write ``<filename>.<extension>`` into the working directory and open it.

    Inputs are expected to have passed ``validate_cli_inputs``. The target
    path is still checked for containment before anything is written. A
    failure to start the opener is reported through ``warn`` and does not
    raise, since the file already exists at that point.
    """

    template_path = find_template_file(ctx.template_dir, filename, extension)
    if template_path is None:
        notify(
            f"No template {filename}.{extension} or any .{extension} file found; "
            "creating an empty file."
        )
        content = ""
    else:
        content = read_template(template_path)

    target_path = resolve_target_path(ctx.config.working_dir, filename, extension)
    write_target(target_path, content)
    notify(f"Created file: {target_path.name}")

    opener = ctx.config.opener
    try:
        open_fn(target_path, opener)
    except EditorError as exc:
        warn(f"Failed to open file: {exc}")
        opened = False
    else:
        notify(f"Opened file with {opener}")
        opened = True

    return ScaffoldResult(
        target_path=target_path, template_path=template_path, opened=opened
    )
