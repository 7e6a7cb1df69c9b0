"""Exception hierarchy for profctl.

Every error raised by the core derives from ProfctlError so the CLI can
report it uniformly and exit with a non-zero status.
"""

from pathlib import Path


class ProfctlError(Exception):
    """Base exception for all profctl errors."""


class StoreError(ProfctlError):
    """Base exception for profile store errors."""


class StoreAccessError(StoreError):
    """Raised when the profile store cannot be created, opened or written."""


class RegistryLoadError(StoreError):
    """Raised when the profile store exists but cannot be parsed."""


class PathResolutionError(ProfctlError):
    """Raised when a managed file does not exist or cannot be canonicalized."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f'Failed to canonicalize "{path}": {reason}')


class InvalidProfileNameError(ProfctlError):
    """Raised when a profile name cannot be used as a file suffix."""


class ReservedNameError(InvalidProfileNameError):
    """Raised when the reserved profile name "org" is used."""


class ProfileNotFoundError(ProfctlError):
    """Raised when a profile is not present in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Profile "{name}" doesn\'t exist')


class FileNotManagedError(ProfctlError):
    """Raised when a file is not part of the given profile."""

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        super().__init__(f'File "{path}" not found in profile "{name}"')


class CopyError(ProfctlError):
    """Raised when copying a file snapshot fails."""

    def __init__(self, source: Path, target: Path, reason: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f'Error copying "{source}" to "{target}": {reason}')


class DeletionError(ProfctlError):
    """Raised when deleting a file snapshot fails."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f'Failed to remove file "{path}": {reason}')
