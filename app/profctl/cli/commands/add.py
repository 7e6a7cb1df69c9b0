"""Add command.

Registers a file under a profile, snapshotting its current content as
both the pristine copy and the profile's variant.
"""

from pathlib import Path
from typing import Annotated

import typer

from profctl.cli.types import is_quiet, run_swap
from profctl.core.engine import Command
from profctl.utils.formatting import print_success


def add(
    ctx: typer.Context,
    profile: Annotated[str, typer.Argument(help="Profile name (created if missing).")],
    file: Annotated[Path, typer.Argument(help="File to manage.")],
) -> None:
    """Add a file to a profile (create profile if it doesn't exist).

    Examples:
        profctl add work ~/.gitconfig
    """
    result = run_swap(ctx, Command.ADD, profile=profile, file=file)

    if not is_quiet(ctx):
        managed = result.applied[0].source
        print_success('Added "{}" to profile "{}".', managed, profile)
