"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from profctl import __version__
from profctl.cli.commands import activate, add, deactivate, remove, status
from profctl.core.log import configure_logging, resolve_level
from profctl.core.paths import STORE_ENV_VAR, get_default_store_path

# Create main Typer app
app = typer.Typer(
    name="profctl",
    help="Manage (configuration) files based on profiles.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"profctl version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config: Annotated[
        Path,
        typer.Option(
            "--config",
            "-c",
            envvar=STORE_ENV_VAR,
            help="Profiles file.",
        ),
    ] = get_default_store_path(),
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only log warnings and errors, suppress summaries.",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Also write log records to this file.",
        ),
    ] = None,
) -> None:
    """profctl - swap sets of files between named profiles.

    Each managed file keeps a pristine copy (FILE.org) and one copy per
    profile (FILE.PROFILE). Activating a profile copies its variants over
    the live files; deactivating restores the pristine copies.
    """
    try:
        configure_logging(resolve_level(verbose=verbose, quiet=quiet), log_file)
    except OSError as e:
        raise typer.BadParameter(f"Cannot open log file: {e}", param_hint="--log-file") from e

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.command(name="add")(add.add)
app.command(name="remove")(remove.remove)
app.command(name="activate")(activate.activate)
app.command(name="deactivate")(deactivate.deactivate)
app.command(name="status")(status.status)


if __name__ == "__main__":
    app()
