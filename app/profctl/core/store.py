"""Profile store I/O operations.

This module provides functions for loading and saving the profile
registry in TOML format with validation using Pydantic models. The store
is read once at the start of an invocation and rewritten whole at the end.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile

import tomli_w
from pydantic import ValidationError

from profctl.core.errors import RegistryLoadError, StoreAccessError, StoreError
from profctl.core.paths import get_default_store_path
from profctl.models.registry import Registry

logger = logging.getLogger(__name__)


def load_registry(path: Path | None = None) -> Registry:
    """Load and validate the registry from a TOML store.

    An absent store is created empty and yields an empty registry.

    Args:
        path: Path to the store file. If None, uses the default store path.

    Returns:
        Validated Registry object.

    Raises:
        StoreAccessError: If the store is a directory, cannot be created or
            cannot be read.
        RegistryLoadError: If the TOML syntax or the content is invalid.
    """
    store_path = path or get_default_store_path()

    if store_path.is_dir():
        raise StoreAccessError(f'Profiles file "{store_path}" is a directory. Aborting.')

    if not store_path.exists():
        logger.warning('Profiles file "%s" doesn\'t exist. Creating an empty one.', store_path)
        try:
            store_path.touch()
        except OSError as e:
            msg = f'Profiles file "{store_path}" could not be created ({e}). Aborting.'
            raise StoreAccessError(msg) from e
        return Registry()

    try:
        with open(store_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise RegistryLoadError(f'Failed to parse profiles file "{store_path}": {e}') from e
    except OSError as e:
        raise StoreAccessError(f'Failed opening profiles file "{store_path}": {e}') from e

    try:
        return Registry.from_toml_dict(data)
    except ValidationError as e:
        raise RegistryLoadError(f'Invalid profiles file "{store_path}": {e}') from e


def save_registry(registry: Registry, path: Path | None = None) -> Path:
    """Save the registry to a TOML store, replacing its full contents.

    The file is written atomically by first writing to a temporary file
    in the same directory and then using os.replace(). The temporary file
    is cleaned up on failure.

    Args:
        registry: The Registry to save.
        path: Path of the store. If None, uses the default store path.

    Returns:
        Path where the registry was saved.

    Raises:
        StoreAccessError: If the file cannot be written.
    """
    store_path = path or get_default_store_path()
    data = registry.to_toml_dict()

    tmp_path: Path | None = None
    try:
        store_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=store_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(tmp_path, store_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise StoreAccessError(f'Failed writing "{store_path}": {e}') from e

    logger.debug('Wrote %d profile(s) to "%s"', len(registry), store_path)
    return store_path


def require_registry(store_path: Path | None = None) -> Registry:
    """Load the registry or exit with an error message.

    Convenience wrapper around load_registry() for CLI commands.

    Args:
        store_path: Optional custom store path.

    Returns:
        Loaded and validated Registry.

    Raises:
        typer.Exit: If the registry cannot be loaded.
    """
    import typer

    try:
        return load_registry(store_path)
    except StoreError as e:
        logger.error("%s", e)
        raise typer.Exit(code=1) from e
