"""Status command.

Read-only overview of the registry: every profile, its files, and
whether each live file currently shows the profile's variant, the
pristine content, or something else.
"""

import logging
from enum import Enum
from typing import Annotated

import typer

from profctl.cli.display import create_status_table, statuses_to_json
from profctl.cli.types import get_store_path
from profctl.core.engine import SwapEngine
from profctl.core.errors import ProfileNotFoundError
from profctl.core.store import require_registry
from profctl.models.status import FileState
from profctl.utils.formatting import console, print_info, print_warning

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Output format options for status."""

    TABLE = "table"
    JSON = "json"


def status(
    ctx: typer.Context,
    profile: Annotated[
        str | None,
        typer.Option("--profile", "-p", help="Only show this profile."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show profiles, their files and the live state of each file.

    Does not modify any file or the profiles file.
    """
    registry = require_registry(get_store_path(ctx))
    if profile is not None and profile not in registry:
        logger.error("%s", ProfileNotFoundError(profile))
        raise typer.Exit(code=1)

    statuses = SwapEngine(registry).status()
    if profile is not None:
        statuses = [s for s in statuses if s.profile == profile]

    if output_format == OutputFormat.JSON:
        console.print_json(statuses_to_json(statuses))
        return

    if not statuses:
        print_info("No profiles defined.")
        return

    console.print(create_status_table(statuses))

    missing = sum(1 for s in statuses if s.state == FileState.MISSING)
    if missing:
        print_warning("{} file(s) or their snapshots are missing.", missing)
