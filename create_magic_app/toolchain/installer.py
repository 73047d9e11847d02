"""Dependency installation with the detected package manager."""

from __future__ import annotations

from pathlib import Path

from create_magic_app.errors import CommandError
from create_magic_app.scaffolder.package_manager import PackageManagerInfo
from create_magic_app.toolchain.runner import CommandResult, ProcessRunner


async def install_dependencies(
    target_dir: str | Path,
    package_manager: PackageManagerInfo,
    runner: ProcessRunner,
) -> CommandResult:
    """Run ``package_manager.install_command`` in *target_dir*.

    Output is streamed to the console.

    Raises:
        CommandError: If the install command exits non-zero.
    """
    command, *args = package_manager.install_args
    result = await runner.run(command, args, cwd=target_dir, stream=True)
    if not result.ok:
        raise CommandError(
            f"Dependency installation failed (exit {result.returncode}): "
            f"{package_manager.install_command}",
            command=package_manager.install_command,
            returncode=result.returncode,
            stderr=result.stderr,
        )
    return result
