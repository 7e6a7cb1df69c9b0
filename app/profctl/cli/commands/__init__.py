"""CLI commands for profctl.

This package contains all subcommand implementations.
"""

from profctl.cli.commands import activate, add, deactivate, remove, status

__all__ = ["activate", "add", "deactivate", "remove", "status"]
