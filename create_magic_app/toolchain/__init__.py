"""External toolchain integration: preflight, git and package installs."""

from create_magic_app.toolchain.git import init_git_repo
from create_magic_app.toolchain.installer import install_dependencies
from create_magic_app.toolchain.preflight import (
    REQUIRED_TOOLS,
    ToolCheck,
    ToolRequirement,
    check_dependencies,
)
from create_magic_app.toolchain.runner import CommandResult, ProcessRunner, SubprocessRunner

__all__ = [
    "CommandResult",
    "ProcessRunner",
    "REQUIRED_TOOLS",
    "SubprocessRunner",
    "ToolCheck",
    "ToolRequirement",
    "check_dependencies",
    "init_git_repo",
    "install_dependencies",
]
