"""new-cli command line."""

from __future__ import annotations

from typing import Sequence

import click

from .. import __version__
from ..editor import open_file
from ..services.scaffold import create_from_template
from ..store import TemplateStoreError
from ..target import TargetPathError, TargetWriteError
from ..validation import ValidationError, validate_cli_inputs
from ._common import CONTEXT_SETTINGS, NewCliError, get_app

__all__ = ["cli", "main", "NewCliError"]


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("filename", default="index")
@click.argument("extension", default="html")
@click.version_option(__version__, prog_name="new")
def cli(filename: str, extension: str) -> None:
    """Create FILENAME.EXTENSION from a template and open it.

    Templates live in ~/.new-cli/template/. When no template matches the
    exact name, any template with the same extension is used; otherwise the
    file is created empty. An existing file of the same name is overwritten.
    """

    try:
        validate_cli_inputs(filename, extension)
    except ValidationError as exc:
        raise NewCliError(str(exc)) from exc

    app = get_app()

    try:
        create_from_template(
            app,
            filename,
            extension,
            open_fn=open_file,
            notify=click.echo,
            warn=lambda msg: click.echo(msg, err=True),
        )
    except (TargetPathError, TargetWriteError, TemplateStoreError) as exc:
        raise NewCliError(str(exc)) from exc


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name="new", standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        return int(exc.code or 0)
    return 0
