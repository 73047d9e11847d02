"""Template scaffolding -- copy, render and patch a starter project.

Quick usage::

    from create_magic_app.scaffolder import copy_tree, detect_package_manager

    pm = detect_package_manager("pnpm/9.1.0 npm/? node/v20.10.0")
    copy_tree(templates_dir / "mb-er-counter", Path("my-app"))
    rename_package_json("my-app", "my-app")
    update_anchor_toml("my-app", pm)
    cleanup_lock_files("my-app", pm)
"""

from create_magic_app.scaffolder.copier import CopyStats, copy_tree
from create_magic_app.scaffolder.lockfiles import cleanup_lock_files
from create_magic_app.scaffolder.package_manager import (
    LOCK_FILES,
    PACKAGE_MANAGERS,
    PackageManagerInfo,
    detect_package_manager,
)
from create_magic_app.scaffolder.patcher import rename_package_json, update_anchor_toml
from create_magic_app.scaffolder.renderer import PlaceholderRenderer, build_context
from create_magic_app.scaffolder.templates import (
    TEMPLATES,
    TemplateDescriptor,
    get_template,
    resolve_template_dir,
)

__all__ = [
    "CopyStats",
    "LOCK_FILES",
    "PACKAGE_MANAGERS",
    "PackageManagerInfo",
    "PlaceholderRenderer",
    "TEMPLATES",
    "TemplateDescriptor",
    "build_context",
    "cleanup_lock_files",
    "copy_tree",
    "detect_package_manager",
    "get_template",
    "rename_package_json",
    "resolve_template_dir",
    "update_anchor_toml",
]
