"""Removal of lockfiles that belong to other package managers."""

from __future__ import annotations

from pathlib import Path

from create_magic_app.scaffolder.package_manager import LOCK_FILES, PackageManagerInfo


def cleanup_lock_files(target_dir: str | Path, package_manager: PackageManagerInfo) -> list[Path]:
    """Delete every known lockfile except the one *package_manager* uses.

    Returns the paths that were removed; absent lockfiles are skipped.
    """
    removed: list[Path] = []
    for lock_file in LOCK_FILES:
        if lock_file == package_manager.lock_file:
            continue
        path = Path(target_dir) / lock_file
        if path.is_file():
            path.unlink()
            removed.append(path)
    return removed
