"""Registry models for profile management.

This module defines the Pydantic models representing the profiles.toml
store: a mapping of profile name to the ordered list of files it manages.
"""

from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from profctl.core.errors import (
    FileNotManagedError,
    InvalidProfileNameError,
    ProfileNotFoundError,
    ReservedNameError,
)
from profctl.core.naming import ORG_SUFFIX


def validate_profile_name(name: str) -> str:
    """Check that a profile name can be used as a snapshot suffix.

    Args:
        name: Profile name to check.

    Returns:
        The unchanged name.

    Raises:
        ReservedNameError: If the name is "org".
        InvalidProfileNameError: If the name is empty or contains a path separator.
    """
    if name == ORG_SUFFIX:
        msg = f'The profile name "{ORG_SUFFIX}" is reserved, please use another'
        raise ReservedNameError(msg)
    if not name:
        msg = "Profile name cannot be empty"
        raise InvalidProfileNameError(msg)
    if "/" in name or "\0" in name:
        msg = f'Profile name "{name}" must not contain path separators'
        raise InvalidProfileNameError(msg)
    return name


class Profile(BaseModel):
    """A named set of managed files.

    Attributes:
        files: Canonical paths of the managed files, in insertion order.
            Duplicates are kept as-is.
    """

    model_config = ConfigDict(extra="forbid")

    files: Annotated[list[Path], Field(description="Managed file paths")]


class Registry(BaseModel):
    """In-memory mapping of profile name to Profile.

    The registry is loaded once per invocation, mutated in memory and
    written back whole by profctl.core.store.

    Attributes:
        profiles: Profiles keyed by name.
    """

    model_config = ConfigDict(extra="forbid")

    profiles: Annotated[
        dict[str, Profile],
        Field(default_factory=dict, description="Profiles keyed by name"),
    ]

    @field_validator("profiles")
    @classmethod
    def validate_names(cls, v: dict[str, Profile]) -> dict[str, Profile]:
        """Reject stores that use reserved or unusable profile names."""
        for name in v:
            try:
                validate_profile_name(name)
            except InvalidProfileNameError as e:
                raise ValueError(str(e)) from None
        return v

    @classmethod
    def from_toml_dict(cls, data: dict[str, Any]) -> "Registry":
        """Build a registry from the parsed store document."""
        return cls.model_validate({"profiles": data})

    def to_toml_dict(self) -> dict[str, Any]:
        """Convert to a dictionary suitable for TOML serialization."""
        return {
            name: {"files": [str(path) for path in profile.files]}
            for name, profile in self.profiles.items()
        }

    @property
    def names(self) -> list[str]:
        """Profile names in store order."""
        return list(self.profiles)

    def __contains__(self, name: object) -> bool:
        return name in self.profiles

    def __len__(self) -> int:
        return len(self.profiles)

    def get(self, name: str) -> Profile:
        """Get a profile by name.

        Raises:
            ProfileNotFoundError: If the profile does not exist.
        """
        try:
            return self.profiles[name]
        except KeyError:
            raise ProfileNotFoundError(name) from None

    def add_file(self, name: str, path: Path) -> Profile:
        """Append a file to a profile, creating the profile if absent.

        Args:
            name: Profile name.
            path: Canonical path of the file.

        Returns:
            The updated profile.
        """
        profile = self.profiles.setdefault(name, Profile(files=[]))
        profile.files.append(path)
        return profile

    def remove_file(self, name: str, path: Path) -> bool:
        """Remove the first occurrence of a file from a profile.

        The profile is dropped from the registry when its file list
        becomes empty.

        Args:
            name: Profile name.
            path: Canonical path of the file.

        Returns:
            True if the profile was dropped, False otherwise.

        Raises:
            ProfileNotFoundError: If the profile does not exist.
            FileNotManagedError: If the file is not part of the profile.
        """
        profile = self.get(name)
        try:
            profile.files.remove(path)
        except ValueError:
            raise FileNotManagedError(name, path) from None

        if not profile.files:
            del self.profiles[name]
            return True
        return False

    def managed_paths(self) -> list[Path]:
        """Union of the files of all profiles, deduplicated, in first-seen order."""
        seen: dict[Path, None] = {}
        for profile in self.profiles.values():
            for path in profile.files:
                seen.setdefault(path, None)
        return list(seen)
