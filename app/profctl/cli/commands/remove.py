"""Remove command.

Unregisters a file from a profile and deletes its snapshots.
"""

from pathlib import Path
from typing import Annotated

import typer

from profctl.cli.types import is_quiet, run_swap
from profctl.core.engine import Command
from profctl.utils.formatting import print_info, print_success


def remove(
    ctx: typer.Context,
    profile: Annotated[str, typer.Argument(help="Profile name.")],
    file: Annotated[Path, typer.Argument(help="Managed file to remove.")],
) -> None:
    """Remove a file from a profile (delete profile if it's empty).

    Examples:
        profctl remove work ~/.gitconfig
    """
    result = run_swap(ctx, Command.REMOVE, profile=profile, file=file)

    if is_quiet(ctx):
        return

    print_success(
        'Removed "{}" from profile "{}" ({} snapshot(s) deleted).',
        file,
        profile,
        len(result.deleted),
    )
    if result.profile_dropped:
        print_info('Profile "{}" was empty and has been removed.', profile)
