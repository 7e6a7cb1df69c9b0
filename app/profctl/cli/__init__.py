"""CLI package for profctl.

This package contains the Typer application and all subcommands.
"""

from profctl.cli.main import app

__all__ = ["app"]
