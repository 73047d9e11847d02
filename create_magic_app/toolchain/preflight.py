"""Toolchain preflight.

Before anything is written, the CLI confirms that the Rust compiler, Cargo,
the Solana CLI and the Anchor CLI are on ``PATH``. Every tool is probed and
reported so the user sees the full list of what is missing at once.
"""

from __future__ import annotations

from dataclasses import dataclass

from create_magic_app.errors import MissingDependenciesError
from create_magic_app.toolchain.runner import ProcessRunner
from create_magic_app.utils import console, print_error

RUST_INSTALL_URL = "https://www.rust-lang.org/learn/get-started"


@dataclass(frozen=True)
class ToolRequirement:
    """A command-line tool the generated project needs, and how to probe it."""

    name: str
    command: str
    args: tuple[str, ...]
    link: str


@dataclass(frozen=True)
class ToolCheck:
    """Result of probing one ``ToolRequirement``."""

    name: str
    command: str
    link: str
    version: str | None = None

    @property
    def installed(self) -> bool:
        return self.version is not None


REQUIRED_TOOLS: tuple[ToolRequirement, ...] = (
    ToolRequirement("rustc", "rustc", ("--version",), RUST_INSTALL_URL),
    ToolRequirement("cargo", "cargo", ("--version",), RUST_INSTALL_URL),
    ToolRequirement("solana", "solana", ("--version",), "https://solana.com/docs/intro/installation"),
    ToolRequirement("anchor", "anchor", ("--version",), "https://www.anchor-lang.com/docs/installation"),
)


async def probe_tool(runner: ProcessRunner, tool: ToolRequirement) -> ToolCheck:
    """Run the version command of *tool* and capture its output."""
    result = await runner.run(tool.command, tool.args)
    version = result.stdout.strip() if result.ok else None
    return ToolCheck(
        name=tool.name,
        command=" ".join([tool.command, *tool.args]),
        link=tool.link,
        version=version,
    )


async def check_dependencies(
    runner: ProcessRunner,
    tools: tuple[ToolRequirement, ...] = REQUIRED_TOOLS,
) -> list[ToolCheck]:
    """Probe every tool in order and print one line per tool.

    Returns:
        The ``ToolCheck`` for each tool.

    Raises:
        MissingDependenciesError: If at least one tool is missing, after
            all tools have been reported.
    """
    console.print("Checking dependencies...\n")
    checks: list[ToolCheck] = []
    for tool in tools:
        check = await probe_tool(runner, tool)
        checks.append(check)
        if check.installed:
            console.print(f"  [green]+[/green] {check.name}: {check.version}")
        else:
            print_error(f"  x {check.name} - Install instructions: {check.link}")

    missing = [check for check in checks if not check.installed]
    if missing:
        raise MissingDependenciesError(missing)

    console.print()
    return checks
