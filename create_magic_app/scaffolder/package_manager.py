"""Package-manager detection.

The package manager that launched the tool (``npm create``, ``yarn create``,
``pnpm create``, ``bunx``) advertises itself through a user-agent string of
the form ``<name>/<version> ...``. Examples::

    npm/10.2.0 node/v20.10.0 darwin arm64
    yarn/1.22.19 npm/? node/v20.10.0 darwin arm64
    pnpm/8.10.0 npm/? node/v20.10.0 darwin arm64
    bun/1.0.0 node/v20.10.0 darwin arm64
"""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict

PackageManagerName = Literal["npm", "yarn", "pnpm", "bun"]

_USER_AGENT_RE = re.compile(r"^(npm|yarn|pnpm|bun)/(\S+)")


class PackageManagerInfo(BaseModel):
    """Commands and lockfile associated with one package manager."""

    model_config = ConfigDict(frozen=True)

    name: PackageManagerName
    version: str = "unknown"
    install_command: str
    run_command: str
    lock_file: str

    @property
    def install_args(self) -> list[str]:
        """``install_command`` split into an argv list."""
        return self.install_command.split()


PACKAGE_MANAGERS: dict[str, PackageManagerInfo] = {
    "npm": PackageManagerInfo(
        name="npm",
        install_command="npm install",
        run_command="npm run",
        lock_file="package-lock.json",
    ),
    "yarn": PackageManagerInfo(
        name="yarn",
        install_command="yarn",
        run_command="yarn",
        lock_file="yarn.lock",
    ),
    "pnpm": PackageManagerInfo(
        name="pnpm",
        install_command="pnpm install",
        run_command="pnpm",
        lock_file="pnpm-lock.yaml",
    ),
    "bun": PackageManagerInfo(
        name="bun",
        install_command="bun install",
        run_command="bun run",
        lock_file="bun.lockb",
    ),
}

LOCK_FILES: tuple[str, ...] = tuple(pm.lock_file for pm in PACKAGE_MANAGERS.values())


def detect_package_manager(user_agent: str | None) -> PackageManagerInfo:
    """Identify the package manager described by *user_agent*.

    Args:
        user_agent: Value of ``npm_config_user_agent``, or ``None`` when the
            variable is unset.

    Returns:
        The matching ``PackageManagerInfo`` with the parsed version. Missing
        or unrecognised input falls back to npm with version ``"unknown"``.
    """
    match = _USER_AGENT_RE.match(user_agent or "")
    if match is None:
        return PACKAGE_MANAGERS["npm"]

    name, version = match.groups()
    return PACKAGE_MANAGERS[name].model_copy(update={"version": version})
