"""Shared pytest fixtures for the create-magic-app test suite.

Provides reusable fixtures for:
- Temporary template trees (package.json, Anchor.toml, lockfiles)
- A ``Config`` pointing at those templates
- A fake ``ProcessRunner`` that records invocations
- Mock asyncio subprocess helpers
"""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from create_magic_app.config import Config
from create_magic_app.toolchain.runner import CommandResult
from create_magic_app.utils import console


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Stop Rich from wrapping long messages in captured output."""
    monkeypatch.setattr(console, "width", 200)


# ---------------------------------------------------------------------------
# Sample file contents
# ---------------------------------------------------------------------------

SAMPLE_PACKAGE_JSON: dict[str, Any] = {
    "name": "old",
    "version": "0.1.0",
    "private": True,
    "scripts": {
        "frontend:dev": "vite",
        "program:build": "bash scripts/anchor-build.sh",
    },
    "dependencies": {"@coral-xyz/anchor": "^0.31.1"},
}

SAMPLE_ANCHOR_TOML = textwrap.dedent("""\
    # Anchor workspace
    [toolchain]
    anchor_version = "0.31.1"
    package_manager = "yarn"

    [provider]
    cluster = "localnet"
    wallet = "~/.config/solana/id.json"

    [scripts]
    test = "yarn ts-mocha -p ./tsconfig.json -t 1000000 tests/**/*.ts"
""")

ALL_LOCK_FILES = ["package-lock.json", "yarn.lock", "pnpm-lock.yaml", "bun.lockb"]


# ---------------------------------------------------------------------------
# Template trees
# ---------------------------------------------------------------------------

@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """A template root containing one ``mb-er-counter`` template."""
    root = tmp_path / "templates"
    template = root / "mb-er-counter"
    (template / "app" / "src").mkdir(parents=True)
    (template / "tests").mkdir()

    (template / "package.json").write_text(
        json.dumps(SAMPLE_PACKAGE_JSON, indent=2) + "\n", encoding="utf-8"
    )
    (template / "Anchor.toml").write_text(SAMPLE_ANCHOR_TOML, encoding="utf-8")
    (template / "README.md.j2").write_text("# {{ project_name }}\n", encoding="utf-8")
    (template / "app" / "src" / "main.tsx").write_text("export {};\n", encoding="utf-8")
    (template / "tests" / "counter.ts").write_text("// tests\n", encoding="utf-8")
    for lock_file in ALL_LOCK_FILES:
        (template / lock_file).write_text("lock\n", encoding="utf-8")
    return root


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Directory the CLI runs in; projects are created beneath it."""
    cwd = tmp_path / "workspace"
    cwd.mkdir()
    return cwd


@pytest.fixture
def config(templates_dir: Path, workspace: Path) -> Config:
    """Config wired to the temporary templates and workspace."""
    return Config(
        templates_dir=templates_dir,
        cwd=workspace,
        user_agent="pnpm/9.1.0 npm/? node/v20.10.0 linux x64",
    )


# ---------------------------------------------------------------------------
# Fake process runner
# ---------------------------------------------------------------------------

class FakeRunner:
    """Records every call and answers from a ``{command: CommandResult}`` map.

    Commands not present in *results* succeed with ``"<command> 1.0.0"`` on
    stdout.
    """

    def __init__(self, results: dict[str, CommandResult] | None = None) -> None:
        self.results = results or {}
        self.calls: list[dict[str, Any]] = []

    async def run(self, command, args=(), cwd=None, stream=False) -> CommandResult:
        self.calls.append(
            {"command": command, "args": list(args), "cwd": cwd, "stream": stream}
        )
        key = " ".join([command, *args])
        if key in self.results:
            return self.results[key]
        if command in self.results:
            return self.results[command]
        return CommandResult(0, f"{command} 1.0.0", "")

    @property
    def commands(self) -> list[str]:
        return [" ".join([c["command"], *c["args"]]) for c in self.calls]


@pytest.fixture
def fake_runner():
    """Factory for ``FakeRunner`` instances.

    Usage:
        def test_x(fake_runner):
            runner = fake_runner({"solana": CommandResult(127)})
    """
    def factory(results: dict[str, CommandResult] | None = None) -> FakeRunner:
        return FakeRunner(results)

    return factory


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=proc)):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
