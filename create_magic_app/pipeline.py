"""create-magic-app orchestrator.

Runs the scaffolding steps in a fixed order:

1. Detect the package manager from the user agent.
2. Preflight the Rust / Solana / Anchor toolchain.
3. Ask for a template and a project name.
4. Validate the template directory and the target directory.
5. Copy the template, render ``.j2`` placeholders, patch ``package.json``
   and ``Anchor.toml``, prune foreign lockfiles.
6. Initialise git and install dependencies.
7. Print the next steps.

Usage::

    create-magic-app
    create-magic-app --template mb-er-counter --name my-app --skip-install
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from create_magic_app.config import Config
from create_magic_app.errors import DirectoryConflictError, ScaffoldError
from create_magic_app.prompts import ProjectRequest, collect_request
from create_magic_app.scaffolder import (
    PackageManagerInfo,
    PlaceholderRenderer,
    build_context,
    cleanup_lock_files,
    copy_tree,
    detect_package_manager,
    rename_package_json,
    resolve_template_dir,
    update_anchor_toml,
)
from create_magic_app.toolchain import (
    ProcessRunner,
    SubprocessRunner,
    check_dependencies,
    init_git_repo,
    install_dependencies,
)
from create_magic_app.utils import (
    is_empty_dir,
    print_banner,
    print_error,
    print_next_steps,
    print_step,
    print_success,
    print_summary_table,
    print_warning,
)


class Scaffolder:
    """Drives one scaffolding run.

    Attributes:
        config: Run configuration.
        runner: Capability used for every external command.
        package_manager: Detected once at construction.
    """

    def __init__(self, config: Config, runner: ProcessRunner | None = None) -> None:
        self.config = config
        self.runner: ProcessRunner = runner or SubprocessRunner()
        self.package_manager: PackageManagerInfo = detect_package_manager(config.user_agent)

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def run(self, template: str | None = None, project_name: str | None = None) -> Path:
        """Execute the full flow and return the project directory.

        The prompts are asked between two ``asyncio.run`` calls rather than
        inside a running loop, so a single Ctrl+C reaches them as
        ``KeyboardInterrupt``.

        Raises:
            ScaffoldError: For every reportable failure (see ``errors``).
        """
        pm = self.package_manager
        print_banner(pm.name, pm.version)

        if not self.config.skip_checks:
            asyncio.run(check_dependencies(self.runner))

        request = collect_request(template, project_name)
        return asyncio.run(self.create(request))

    async def create(self, request: ProjectRequest) -> Path:
        """Scaffold *request*, then set up git and dependencies."""
        pm = self.package_manager
        target = await self.scaffold(request)
        print_summary_table(
            {
                "Project": request.project_name,
                "Template": request.template_id,
                "Package manager": f"{pm.name} ({pm.version})",
                "Location": str(target),
            },
            title="Project",
        )

        if not self.config.skip_git:
            print_step("Initializing git repository...")
            if await init_git_repo(target, self.runner):
                print_success("Git repository initialized")

        if self.config.skip_install:
            print_warning(f"Skipping dependency install. Run `{pm.install_command}` later.")
        else:
            print_step(f"Installing dependencies with {pm.name}...")
            await install_dependencies(target, pm, self.runner)

        print_next_steps(request.project_name, pm.run_command)
        return target

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def validate_target(self, request: ProjectRequest) -> Path:
        """Return the target directory, refusing one that has content.

        Raises:
            DirectoryConflictError: If the path exists and is a file or a
                non-empty directory.
        """
        target = self.config.target_path(request.project_name)
        if target.exists() and not is_empty_dir(target):
            raise DirectoryConflictError(request.project_name)
        return target

    async def scaffold(self, request: ProjectRequest) -> Path:
        """Create the project directory for *request* from its template.

        Nothing is written until both the template and the target have been
        validated.
        """
        source = resolve_template_dir(self.config.templates_dir, request.template_id)
        target = self.validate_target(request)
        pm = self.package_manager

        print_step("Creating project directory...")
        await asyncio.to_thread(target.mkdir, parents=True, exist_ok=True)

        print_step("Copying template files...")
        await asyncio.to_thread(copy_tree, source, target)

        print_step("Configuring project...")
        context = build_context(request.project_name, request.template_id, pm)
        await asyncio.to_thread(PlaceholderRenderer(target).render_all, context)
        await asyncio.to_thread(rename_package_json, target, request.project_name)
        await asyncio.to_thread(update_anchor_toml, target, pm)
        await asyncio.to_thread(cleanup_lock_files, target, pm)
        return target


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-magic-app``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="create-magic-app",
        description="Scaffold a MagicBlock / Anchor + React starter project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-magic-app\n"
            "  create-magic-app --template mb-er-counter --name my-app\n"
            "  create-magic-app --name my-app --skip-install --skip-git\n"
        ),
    )
    parser.add_argument("--template", default=None, help="Template identifier (prompted if omitted)")
    parser.add_argument("--name", default=None, help="Project name (prompted if omitted)")
    parser.add_argument("--templates-dir", default=None, help="Directory containing the templates")
    parser.add_argument("--skip-install", action="store_true", help="Do not install dependencies")
    parser.add_argument("--skip-git", action="store_true", help="Do not initialise a git repository")
    parser.add_argument("--skip-checks", action="store_true", help="Skip the toolchain preflight")

    args = parser.parse_args(argv)

    config = Config.from_env(
        templates_dir=Path(args.templates_dir) if args.templates_dir else None,
        skip_install=args.skip_install or None,
        skip_git=args.skip_git or None,
        skip_checks=args.skip_checks or None,
    )
    scaffolder = Scaffolder(config)

    try:
        scaffolder.run(args.template, args.name)
    except ScaffoldError as exc:
        if exc.exit_code == 0:
            print_warning(str(exc))
        else:
            print_error(f"Error: {exc}")
        sys.exit(exc.exit_code)
    except Exception as exc:
        print_error(f"An error occurred: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
