"""Utility modules for profctl.

This module exports commonly used utility functions.
"""

from profctl.utils.formatting import (
    console,
    err_console,
    print_info,
    print_success,
    print_warning,
    render,
)

__all__ = [
    "console",
    "err_console",
    "print_info",
    "print_success",
    "print_warning",
    "render",
]
