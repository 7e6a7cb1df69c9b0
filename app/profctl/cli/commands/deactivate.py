"""Deactivate command.

Restores every managed file of every profile to its pristine content.
"""

import typer

from profctl.cli.types import is_quiet, run_swap
from profctl.core.engine import Command
from profctl.utils.formatting import print_info, print_success


def deactivate(ctx: typer.Context) -> None:
    """De-activate all profiles, resetting all managed files to their original state."""
    result = run_swap(ctx, Command.DEACTIVATE)

    if is_quiet(ctx):
        return

    if not result.restored:
        print_info("No managed files.")
        return
    print_success("Restored {} file(s) to their original content.", len(result.restored))
