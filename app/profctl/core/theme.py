"""Console theme for profctl.

The palette is a pydantic model so that a user override in
``$XDG_CONFIG_HOME/profctl/theme.toml`` is validated before it reaches
rich. Only the ``[colors]`` table of that file is read::

    [colors]
    active = "#c1ff62"
    missing = "#f53263"

A broken override is logged and ignored; profctl never refuses to run
because of its colors.
"""

import functools
import logging
import re
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from profctl.core.paths import get_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Palette used by the status table and the message helpers."""

    model_config = ConfigDict(extra="forbid")

    # Messages
    info: str = "#0ec1c8"
    success: str = "#03b971"
    warning: str = "#f5b332"

    # Status table chrome
    header: str = "#69B9A1"
    border: str = "#29526d"
    profile: str = "#ffffff"

    # One color per file state
    active: str = "#c1ff62"
    pristine: str = "#69B9A1"
    modified: str = "#f5b332"
    missing: str = "#f53263"

    @field_validator("*", mode="before")
    @classmethod
    def _check_hex(cls, value: object) -> str:
        if not isinstance(value, str) or not _HEX_COLOR.fullmatch(value.strip()):
            msg = f"{value!r} is not a hex color (#RGB or #RRGGBB)"
            raise ValueError(msg)
        return value.strip()

    def styles(self) -> dict[str, str]:
        """Map the palette onto the style names the CLI refers to."""
        return {
            "info": self.info,
            "success": self.success,
            "warning": f"bold {self.warning}",
            "bold_header": f"bold {self.header}",
            "border": self.border,
            "profile.name": f"bold {self.profile}",
            "state.active": f"bold {self.active}",
            "state.pristine": self.pristine,
            "state.modified": self.modified,
            "state.missing": f"bold {self.missing}",
        }


def read_user_colors(path: Path) -> dict[str, object]:
    """Return the ``[colors]`` table of a theme file.

    A missing file yields an empty mapping. An unreadable or malformed
    file is logged and also yields an empty mapping.
    """
    try:
        with path.open("rb") as f:
            colors = tomllib.load(f).get("colors", {})
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}
    return colors


def load_theme(path: Path | None = None) -> ThemeColors:
    """Build the palette from the defaults plus the user's overrides."""
    path = path or get_theme_path()
    overrides = read_user_colors(path)
    if not overrides:
        return ThemeColors()

    try:
        colors = ThemeColors.model_validate(overrides)
    except ValidationError as e:
        logger.warning(
            "Ignoring theme file %s (%d invalid entries): %s",
            path,
            e.error_count(),
            "; ".join(f"{err['loc'][0]}: {err['msg']}" for err in e.errors()),
        )
        return ThemeColors()

    logger.debug("Loaded %d theme override(s) from %s", len(overrides), path)
    return colors


@functools.cache
def get_theme() -> Theme:
    """Return the process-wide rich theme, reading the user file once."""
    return Theme(load_theme().styles())


def reload_theme() -> Theme:
    """Drop the cached theme and read the user file again."""
    get_theme.cache_clear()
    return get_theme()
