"""Git repository initialisation for a freshly scaffolded project."""

from __future__ import annotations

from pathlib import Path

from create_magic_app.toolchain.runner import ProcessRunner, format_command
from create_magic_app.utils import print_warning

INITIAL_COMMIT_MESSAGE = "Initial commit from create-magic-app"

_GIT_STEPS: tuple[tuple[str, ...], ...] = (
    ("init",),
    ("add", "-A"),
    ("commit", "-m", INITIAL_COMMIT_MESSAGE),
)


async def init_git_repo(target_dir: str | Path, runner: ProcessRunner) -> bool:
    """Run ``git init`` and create an initial commit in *target_dir*.

    A failing step (including a missing ``git`` binary or an unset commit
    identity) prints a warning and stops the sequence; the project itself
    is still usable, so no exception is raised.

    Returns:
        ``True`` if every git step succeeded.
    """
    for args in _GIT_STEPS:
        result = await runner.run("git", args, cwd=target_dir, stream=True)
        if not result.ok:
            detail = f": {result.stderr}" if result.stderr else ""
            print_warning(
                f"Warning: `{format_command('git', args)}` failed "
                f"(exit {result.returncode}){detail}. Skipping git setup."
            )
            return False
    return True
