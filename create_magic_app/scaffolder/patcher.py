"""In-place edits of the config files shipped with a template.

``package.json`` is parsed and re-serialised; ``Anchor.toml`` is edited with
line-anchored regular expressions so comments and layout of every other line
survive untouched.
"""

from __future__ import annotations

import re
from pathlib import Path

from create_magic_app.scaffolder.package_manager import PackageManagerInfo
from create_magic_app.utils import load_json, print_warning, save_json

PACKAGE_JSON = "package.json"
ANCHOR_TOML = "Anchor.toml"

_PACKAGE_MANAGER_RE = re.compile(r'^package_manager\s*=\s*"[^"]*"', re.MULTILINE)
_TEST_SCRIPT_RE = re.compile(r'^test\s*=\s*"(npm run|yarn|pnpm|bun run)\s+ts-mocha', re.MULTILINE)


def rename_package_json(target_dir: str | Path, project_name: str) -> bool:
    """Set the ``name`` field of ``<target_dir>/package.json``.

    All other keys keep their values and their order. Returns ``False`` (after
    printing a warning) when the template ships no ``package.json``.
    """
    path = Path(target_dir) / PACKAGE_JSON
    if not path.is_file():
        print_warning("Warning: No package.json found in template")
        return False

    package = load_json(path)
    package["name"] = project_name
    save_json(package, path)
    return True


def update_anchor_toml(target_dir: str | Path, package_manager: PackageManagerInfo) -> bool:
    """Point ``<target_dir>/Anchor.toml`` at *package_manager*.

    Rewrites the first ``package_manager = "..."`` line and the
    ``test = "<run> ts-mocha`` prefix of the test script. Returns ``False``
    when the template has no ``Anchor.toml``.
    """
    path = Path(target_dir) / ANCHOR_TOML
    if not path.is_file():
        return False

    content = path.read_bytes().decode("utf-8")
    content = _PACKAGE_MANAGER_RE.sub(
        f'package_manager = "{package_manager.name}"', content, count=1
    )
    content = _TEST_SCRIPT_RE.sub(
        f'test = "{package_manager.run_command} ts-mocha', content, count=1
    )
    path.write_bytes(content.encode("utf-8"))
    return True
