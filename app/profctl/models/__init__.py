"""Data models for profctl.

This package contains the registry models and status types.
"""

from profctl.models.registry import Profile, Registry
from profctl.models.status import FileState, FileStatus

__all__ = ["FileState", "FileStatus", "Profile", "Registry"]
