"""Exception hierarchy for create-magic-app.

Every failure the CLI knows how to report derives from ``ScaffoldError`` and
carries the process exit code ``main()`` should terminate with.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from create_magic_app.toolchain.preflight import ToolCheck


class ScaffoldError(Exception):
    """Base class for errors that abort a scaffolding run."""

    exit_code: int = 1

    def __init__(self, message: str, exit_code: int | None = None) -> None:
        if exit_code is not None:
            self.exit_code = exit_code
        super().__init__(message)


class SetupCancelled(ScaffoldError):
    """Raised when the user aborts a prompt. Not an error for the shell."""

    exit_code = 0

    def __init__(self, message: str = "Setup cancelled.") -> None:
        super().__init__(message)


class InvalidProjectNameError(ScaffoldError):
    """Raised when a project name fails validation."""


class TemplateNotFoundError(ScaffoldError):
    """Raised when the selected template has no directory on disk."""

    def __init__(self, template: str, path: str) -> None:
        self.template = template
        self.path = path
        super().__init__(
            f'Template "{template}" not found at {path}. '
            "This template may not be available yet."
        )


class DirectoryConflictError(ScaffoldError):
    """Raised when the target directory already exists and is not empty."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f'Non-empty directory "{name}" already exists! '
            "Please choose a different name or delete the existing directory."
        )


class SourceDirectoryError(ScaffoldError):
    """Raised when a copy source is missing or is not a directory."""


class MissingDependenciesError(ScaffoldError):
    """Raised when one or more required toolchain binaries are absent."""

    def __init__(self, missing: list[ToolCheck]) -> None:
        self.missing = missing
        names = ", ".join(check.name for check in missing)
        super().__init__(
            f"Missing dependencies: {names}. Please install them and try again."
        )


class CommandError(ScaffoldError):
    """Raised when a required external command exits non-zero."""

    def __init__(self, message: str, command: str = "", returncode: int = 1, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)
