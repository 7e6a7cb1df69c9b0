"""Live-state reporting models.

These types describe how the live content of a managed file relates to
its snapshots, as reported by ``profctl status``.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class FileState(str, Enum):
    """Relationship between a live file and its snapshots.

    Attributes:
        ACTIVE: Live content equals the profile's variant.
        PRISTINE: Live content equals the org snapshot.
        MODIFIED: Live content matches neither snapshot.
        MISSING: The live file or one of its snapshots is missing.
    """

    ACTIVE = "active"
    PRISTINE = "pristine"
    MODIFIED = "modified"
    MISSING = "missing"


@dataclass(frozen=True, slots=True)
class FileStatus:
    """State of one (profile, file) pair.

    When the variant and org snapshots have identical content (as right
    after ``add``), the file is reported as ACTIVE.

    Attributes:
        profile: Profile name.
        path: Canonical path of the managed file.
        state: Live-state classification.
    """

    profile: str
    path: Path
    state: FileState
