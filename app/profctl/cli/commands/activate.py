"""Activate command.

Copies a profile's variants over the live files, after restoring every
managed file to its pristine content.
"""

from typing import Annotated

import typer

from profctl.cli.types import is_quiet, run_swap
from profctl.core.engine import Command
from profctl.utils.formatting import print_success


def activate(
    ctx: typer.Context,
    profile: Annotated[str, typer.Argument(help="Profile to activate.")],
) -> None:
    """Activate a specific profile (de-activates all others).

    Examples:
        profctl activate work
    """
    result = run_swap(ctx, Command.ACTIVATE, profile=profile)

    if not is_quiet(ctx):
        print_success('Profile "{}" active ({} file(s)).', profile, len(result.applied))
