"""Profile swap engine.

Implements the add / remove / activate / deactivate lifecycle on top of
the naming scheme, the snapshot primitives and the in-memory registry.

Every command first restores all managed files to their pristine content
(deactivate). Later steps rely on that: ``add`` snapshots the live file
as the new org content, and ``activate`` must never stack on top of
another profile's variant.
"""

import filecmp
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TypeVar

from profctl.core.naming import ORG_SUFFIX, derive_paths, with_suffix_appended
from profctl.core.snapshot import copy_file, delete_file
from profctl.models.registry import Registry, validate_profile_name
from profctl.models.status import FileState, FileStatus

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Command(str, Enum):
    """Commands that change profile state."""

    ADD = "add"
    REMOVE = "remove"
    ACTIVATE = "activate"
    DEACTIVATE = "deactivate"


@dataclass(frozen=True, slots=True)
class SwapRecord:
    """A single snapshot copy performed by the engine.

    Attributes:
        source: File that was read.
        target: File that was written.
        size: Number of bytes copied.
    """

    source: Path
    target: Path
    size: int


@dataclass(slots=True)
class CommandResult:
    """Outcome of a successfully executed command.

    Attributes:
        command: The executed command.
        profile: Profile the command applied to, None for deactivate.
        restored: Copies made while deactivating.
        applied: Copies made by the command itself.
        deleted: Snapshot files removed by the command.
        profile_dropped: Whether remove dropped the now-empty profile.
    """

    command: Command
    profile: str | None = None
    restored: list[SwapRecord] = field(default_factory=list)
    applied: list[SwapRecord] = field(default_factory=list)
    deleted: list[Path] = field(default_factory=list)
    profile_dropped: bool = False


class SwapEngine:
    """Swaps managed files between profile variants.

    The engine mutates the registry it was given in memory only; the
    caller persists it once the command succeeded.

    Attributes:
        registry: The registry being operated on.
    """

    def __init__(self, registry: Registry) -> None:
        self.registry = registry

    def execute(
        self,
        command: Command,
        profile: str | None = None,
        file: Path | None = None,
    ) -> CommandResult:
        """Run a command after restoring every managed file.

        Args:
            command: Command to run.
            profile: Profile name, required for all commands but deactivate.
            file: File path, required for add and remove.

        Returns:
            CommandResult describing the performed file operations.

        Raises:
            ProfctlError: On the first failing step. Nothing is rolled back.
        """
        result = CommandResult(command=command, profile=profile)

        # Reserved names are rejected before anything touches the disk
        if command == Command.ADD:
            validate_profile_name(_require(profile, "profile"))

        result.restored = self.deactivate()

        if command == Command.ADD:
            result.applied = self.add(_require(profile, "profile"), _require(file, "file"))
        elif command == Command.REMOVE:
            result.deleted, result.profile_dropped = self.remove(
                _require(profile, "profile"), _require(file, "file")
            )
        elif command == Command.ACTIVATE:
            result.applied = self.activate(_require(profile, "profile"))

        return result

    def add(self, name: str, file: Path) -> list[SwapRecord]:
        """Add a file to a profile, creating the profile if needed.

        Snapshots the current live content as both the org and the profile
        variant. An existing org snapshot is overwritten; callers must have
        deactivated first so that it receives pristine content.

        Args:
            name: Profile name.
            file: Path to the live file.

        Returns:
            The two snapshot copies made.

        Raises:
            ReservedNameError: If name is "org".
            InvalidProfileNameError: If name is otherwise unusable.
            PathResolutionError: If the file does not exist.
            CopyError: If a snapshot cannot be written.
        """
        validate_profile_name(name)
        paths = derive_paths(file, name)

        records = [
            SwapRecord(paths.canonical, paths.org, copy_file(paths.canonical, paths.org)),
            SwapRecord(paths.canonical, paths.variant, copy_file(paths.canonical, paths.variant)),
        ]

        self.registry.add_file(name, paths.canonical)
        logger.info('Added "%s" to profile "%s"', paths.canonical, name)
        return records

    def remove(self, name: str, file: Path) -> tuple[list[Path], bool]:
        """Remove a file from a profile and delete its snapshots.

        The registry entry is removed before the snapshots are deleted and
        is not restored if a deletion fails.

        Args:
            name: Profile name.
            file: Path to the live file.

        Returns:
            Tuple of (deleted snapshot paths, whether the profile was dropped).

        Raises:
            PathResolutionError: If the file does not exist.
            ProfileNotFoundError: If the profile does not exist.
            FileNotManagedError: If the file is not part of the profile.
            DeletionError: If a snapshot cannot be deleted.
        """
        paths = derive_paths(file, name)
        dropped = self.registry.remove_file(name, paths.canonical)

        deleted: list[Path] = []
        for snapshot in (paths.variant, paths.org):
            delete_file(snapshot)
            deleted.append(snapshot)

        logger.info('File "%s" removed from profile "%s"', paths.canonical, name)
        if dropped:
            logger.info('Profile "%s" is empty now, removing it', name)
        return deleted, dropped

    def activate(self, name: str) -> list[SwapRecord]:
        """Copy every variant of a profile over its live file, in list order.

        Stops at the first failing copy; files already swapped stay swapped.

        Raises:
            ProfileNotFoundError: If the profile does not exist.
            PathResolutionError: If a managed file no longer exists.
            CopyError: If a variant cannot be copied.
        """
        profile = self.registry.get(name)
        logger.info('Activating profile "%s"', name)

        records: list[SwapRecord] = []
        for file in profile.files:
            paths = derive_paths(file, name)
            size = copy_file(paths.variant, paths.canonical)
            records.append(SwapRecord(paths.variant, paths.canonical, size))
        return records

    def deactivate(self) -> list[SwapRecord]:
        """Restore every managed file to its org snapshot.

        Each path is restored once even when several profiles share it.
        Running it repeatedly yields the same live content.

        Raises:
            PathResolutionError: If a managed file no longer exists.
            CopyError: If an org snapshot cannot be copied.
        """
        logger.info("Deactivating all profiles ...")

        records: list[SwapRecord] = []
        for file in self.registry.managed_paths():
            canonical, _, org = derive_paths(file, ORG_SUFFIX)
            records.append(SwapRecord(org, canonical, copy_file(org, canonical)))
        return records

    def status(self) -> list[FileStatus]:
        """Report the live state of every (profile, file) pair.

        Read-only; does not deactivate.
        """
        statuses: list[FileStatus] = []
        for name, profile in self.registry.profiles.items():
            for file in profile.files:
                statuses.append(FileStatus(profile=name, path=file, state=_file_state(file, name)))
        return statuses


def _file_state(file: Path, name: str) -> FileState:
    """Classify a live file against its variant and org snapshots."""
    variant = with_suffix_appended(file, name)
    org = with_suffix_appended(file, ORG_SUFFIX)

    if not (file.is_file() and variant.is_file() and org.is_file()):
        return FileState.MISSING

    try:
        if filecmp.cmp(file, variant, shallow=False):
            return FileState.ACTIVE
        if filecmp.cmp(file, org, shallow=False):
            return FileState.PRISTINE
    except OSError as e:
        logger.warning('Cannot compare "%s" with its snapshots: %s', file, e)
        return FileState.MISSING
    return FileState.MODIFIED


def _require(value: T | None, what: str) -> T:
    if value is None:
        msg = f"A {what} is required for this command"
        raise ValueError(msg)
    return value
