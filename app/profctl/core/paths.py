"""Path management for profctl.

The profile store lives in the working directory by default, while user
preferences such as the console theme follow the XDG Base Directory
Specification.

XDG defaults:
- Config: ~/.config/profctl/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "profctl"

# Default profile store filename, resolved against the working directory
DEFAULT_STORE_NAME = "profiles.toml"

# Environment variable overriding the profile store location
STORE_ENV_VAR = "PROFCTL_CONFIG"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/profctl/ (or XDG_CONFIG_HOME/profctl/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_default_store_path() -> Path:
    """Get the default profile store path.

    Returns:
        Relative path to profiles.toml in the current working directory.
    """
    return Path(DEFAULT_STORE_NAME)


def get_theme_path() -> Path:
    """Get the user theme configuration path.

    Returns:
        Path to ~/.config/profctl/theme.toml.
    """
    return get_config_dir() / "theme.toml"
