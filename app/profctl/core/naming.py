"""Derivation of the on-disk representations of a managed file.

A managed file ``P`` has three forms on disk: the live file ``P``, the
pristine snapshot ``P.org`` and one snapshot ``P.<profile>`` per profile
that references it. This module only computes those paths; it never
touches file contents.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from profctl.core.errors import PathResolutionError

# Suffix of the pristine snapshot; also the reserved profile name
ORG_SUFFIX = "org"


@dataclass(frozen=True, slots=True)
class VariantPaths:
    """The three canonical paths of a managed file.

    Attributes:
        canonical: Resolved absolute path of the live file.
        variant: Snapshot path for the requested variant.
        org: Pristine snapshot path.
    """

    canonical: Path
    variant: Path
    org: Path

    def __iter__(self) -> Iterator[Path]:
        """Unpack as (canonical, variant, org)."""
        yield self.canonical
        yield self.variant
        yield self.org


def with_suffix_appended(path: Path, suffix: str) -> Path:
    """Append ``.suffix`` to the file name, keeping existing extensions.

    Unlike Path.with_suffix(), ``a.conf`` becomes ``a.conf.work``.
    """
    return path.with_name(f"{path.name}.{suffix}")


def derive_paths(basename: Path, variant: str) -> VariantPaths:
    """Derive the canonical, variant and org paths for a managed file.

    Args:
        basename: Path to the live file, relative or absolute.
        variant: Variant name, usually a profile name.

    Returns:
        VariantPaths for the file.

    Raises:
        PathResolutionError: If the file does not exist or cannot be
            resolved (broken symlink, symlink loop, permission denied).
    """
    try:
        canonical = Path(basename).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise PathResolutionError(Path(basename), str(e)) from e

    if not canonical.name:
        raise PathResolutionError(Path(basename), "not a regular file path")

    return VariantPaths(
        canonical=canonical,
        variant=with_suffix_appended(canonical, variant),
        org=with_suffix_appended(canonical, ORG_SUFFIX),
    )
