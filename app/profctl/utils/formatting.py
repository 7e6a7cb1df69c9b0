"""Console output helpers for the profctl CLI.

Summary lines go to stdout and warnings to stderr. Values passed to the
helpers are escaped before they are substituted into the message, so a
file named ``conf[dev].toml`` prints literally instead of being read as
Rich markup.
"""

import sys

from rich.console import Console
from rich.markup import escape

from profctl.core.theme import get_theme


def _make_console(*, stderr: bool) -> Console:
    """Create a themed console; full color only on an interactive stream."""
    stream = sys.stderr if stderr else sys.stdout
    color_system = "truecolor" if stream.isatty() else None
    return Console(theme=get_theme(), stderr=stderr, color_system=color_system)


console = _make_console(stderr=False)
err_console = _make_console(stderr=True)


def render(message: str, *values: object) -> str:
    """Substitute escaped values into the ``{}`` placeholders of message."""
    return message.format(*(escape(str(value)) for value in values))


def print_info(message: str, *values: object) -> None:
    """Print an info line."""
    console.print(f"[info]{render(message, *values)}[/]")


def print_success(message: str, *values: object) -> None:
    """Print a success line."""
    console.print(f"[success]{render(message, *values)}[/]")


def print_warning(message: str, *values: object) -> None:
    """Print a warning line to stderr."""
    err_console.print(f"[warning]Warning:[/] {render(message, *values)}")
