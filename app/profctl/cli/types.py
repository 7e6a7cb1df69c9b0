"""Shared helpers for CLI commands.

Every state-changing command follows the same sequence: load the
registry, run the command through the swap engine (which deactivates
first) and persist the registry only if the command succeeded.
"""

import logging
from pathlib import Path

import typer

from profctl.core.engine import Command, CommandResult, SwapEngine
from profctl.core.errors import ProfctlError, StoreError
from profctl.core.paths import get_default_store_path
from profctl.core.store import require_registry, save_registry

logger = logging.getLogger(__name__)


def get_store_path(ctx: typer.Context) -> Path:
    """Get the profile store path selected by the global --config option."""
    obj = ctx.find_root().obj or {}
    return obj.get("config") or get_default_store_path()


def is_quiet(ctx: typer.Context) -> bool:
    """Whether summaries should be suppressed."""
    obj = ctx.find_root().obj or {}
    return bool(obj.get("quiet", False))


def run_swap(
    ctx: typer.Context,
    command: Command,
    profile: str | None = None,
    file: Path | None = None,
) -> CommandResult:
    """Execute a command against the store and persist the result.

    A failed command leaves the store untouched. A failure to persist is
    reported; file operations already performed are not rolled back.

    Args:
        ctx: Typer context carrying the global options.
        command: Command to run.
        profile: Profile argument, if any.
        file: File argument, if any.

    Returns:
        CommandResult of the successful command.

    Raises:
        typer.Exit: With code 1 on any error.
    """
    store_path = get_store_path(ctx)
    registry = require_registry(store_path)
    engine = SwapEngine(registry)

    try:
        result = engine.execute(command, profile=profile, file=file)
    except ProfctlError as e:
        logger.error("%s", e)
        raise typer.Exit(code=1) from e

    try:
        save_registry(registry, store_path)
    except StoreError as e:
        logger.error("%s", e)
        raise typer.Exit(code=1) from e

    return result
