"""Infrastructure: upward search for the project manifest.

Starting from a directory, look for an entry named exactly like the
manifest (``Gemfile``) and climb one parent at a time until it is found or
the filesystem root is reached.

Rules
-----
* Presence only; the manifest is never opened or parsed.
* Exact, case-sensitive name match on directory entries; no globbing.
* Nothing is cached; every call walks the tree again.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

from pathlib import Path

from bundle_wrap.config import MANIFEST_NAME
from bundle_wrap.exceptions import ManifestNotFoundError, ManifestRootReachedError


def _contains_entry(directory: Path, name: str) -> bool:
    """Return whether *directory* lists an entry called *name*.

    Raises
    ------
    ManifestNotFoundError
        When *directory* cannot be listed.
    """
    try:
        return any(entry.name == name for entry in directory.iterdir())
    except OSError as exc:
        raise ManifestNotFoundError(
            f"Unable to read directory {directory}",
        ) from exc


def locate_manifest(start_dir: Path, manifest_name: str = MANIFEST_NAME) -> Path:
    """Return the nearest directory at or above *start_dir* holding *manifest_name*.

    *start_dir* is returned in the form it was given (no resolution), and
    so are its ancestors.  Relative paths therefore stop at their first
    component; callers wanting the full climb pass an absolute path.

    Raises
    ------
    ManifestNotFoundError
        When a directory on the way up cannot be read.
    ManifestRootReachedError
        When the root is reached without finding the manifest.
    """
    current = start_dir
    while True:
        if _contains_entry(current, manifest_name):
            return current
        parent = current.parent
        if parent == current:
            raise ManifestRootReachedError(
                f"Reached FS root without finding {manifest_name}",
            )
        current = parent
