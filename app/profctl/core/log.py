"""Logging configuration for the profctl CLI.

Log records go to stderr through Rich and, optionally, to a plain log
file. Library modules only create module-level loggers; handlers are
installed here, once per invocation.
"""

import logging
from pathlib import Path

from rich.logging import RichHandler

from profctl.utils.formatting import err_console

LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Map the global CLI flags to a log level.

    --verbose wins over --quiet; the default is INFO.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(level: int = logging.INFO, log_file: Path | None = None) -> None:
    """Install the root log handlers, replacing any existing ones.

    Args:
        level: Minimum level for all handlers.
        log_file: Optional file receiving the same records in plain text.
    """
    handlers: list[logging.Handler] = [
        RichHandler(
            console=err_console,
            show_time=False,
            show_path=False,
            markup=False,
        )
    ]
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)
