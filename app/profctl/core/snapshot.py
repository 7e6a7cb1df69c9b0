"""Snapshot primitives.

Byte-for-byte copies between a live file and its snapshots, plus removal
of snapshots. These are the only functions in profctl that write managed
file contents.
"""

import logging
import shutil
from pathlib import Path

from profctl.core.errors import CopyError, DeletionError

logger = logging.getLogger(__name__)


def copy_file(source: Path, target: Path) -> int:
    """Copy the full content of source to target.

    The target is overwritten if it exists and created otherwise. Permission
    bits are copied along with the content.

    Args:
        source: File to read.
        target: File to write.

    Returns:
        Number of bytes copied.

    Raises:
        CopyError: If source is unreadable or target is unwritable.
    """
    logger.debug('Creating "%s" as a copy of "%s"', target, source)
    try:
        shutil.copyfile(source, target)
        shutil.copymode(source, target)
        return target.stat().st_size
    except OSError as e:
        raise CopyError(source, target, str(e)) from e


def delete_file(path: Path) -> None:
    """Delete a snapshot file.

    Raises:
        DeletionError: If the file cannot be removed.
    """
    logger.debug('Removing "%s"', path)
    try:
        path.unlink()
    except OSError as e:
        raise DeletionError(path, str(e)) from e
