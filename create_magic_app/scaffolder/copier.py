"""Recursive template copy.

Only regular files and directories are reproduced; file content is copied
byte for byte and permissions are left to the destination's defaults.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path

from create_magic_app.errors import SourceDirectoryError


@dataclass
class CopyStats:
    """Number of entries written by ``copy_tree``."""

    files: int = 0
    directories: int = 0


def copy_tree(source: str | Path, target: str | Path) -> CopyStats:
    """Copy every file and subdirectory of *source* into *target*.

    *target* is created (with parents) if it does not exist. Existing files
    with the same relative path are overwritten.

    Raises:
        SourceDirectoryError: If *source* is missing or not a directory.
    """
    source_dir = Path(source)
    target_dir = Path(target)
    if not source_dir.is_dir():
        raise SourceDirectoryError(f"Source directory does not exist: {source_dir}")

    target_dir.mkdir(parents=True, exist_ok=True)
    stats = CopyStats()
    _copy_entries(source_dir, target_dir, stats)
    return stats


def _copy_entries(source_dir: Path, target_dir: Path, stats: CopyStats) -> None:
    for entry in source_dir.iterdir():
        destination = target_dir / entry.name
        if entry.is_symlink():
            continue
        if entry.is_dir():
            destination.mkdir(exist_ok=True)
            stats.directories += 1
            _copy_entries(entry, destination, stats)
        elif entry.is_file():
            shutil.copyfile(entry, destination)
            stats.files += 1
