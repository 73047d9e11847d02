"""Tests for the toolchain preflight (create_magic_app.toolchain.preflight)."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from create_magic_app.errors import MissingDependenciesError
from create_magic_app.toolchain.preflight import (
    REQUIRED_TOOLS,
    ToolCheck,
    ToolRequirement,
    check_dependencies,
    probe_tool,
)
from create_magic_app.toolchain.runner import CommandResult, SubprocessRunner

pytestmark = pytest.mark.unit


class TestRequiredTools:
    def test_four_version_checks(self):
        assert [t.name for t in REQUIRED_TOOLS] == ["rustc", "cargo", "solana", "anchor"]
        assert all(t.args == ("--version",) for t in REQUIRED_TOOLS)
        assert all(t.link.startswith("https://") for t in REQUIRED_TOOLS)

    def test_public_models_are_documented(self):
        assert ToolRequirement.__doc__ and ToolCheck.__doc__


class TestProbeTool:
    async def test_installed(self, fake_runner):
        runner = fake_runner({"solana --version": CommandResult(0, "solana-cli 1.18.26\n")})
        check = await probe_tool(runner, REQUIRED_TOOLS[2])
        assert check.installed
        assert check.version == "solana-cli 1.18.26"
        assert check.command == "solana --version"

    async def test_missing(self, fake_runner):
        runner = fake_runner({"anchor": CommandResult(127, "", "anchor: command not found")})
        check = await probe_tool(runner, REQUIRED_TOOLS[3])
        assert not check.installed
        assert check.version is None


class TestCheckDependencies:
    async def test_all_present(self, fake_runner, capsys):
        runner = fake_runner()

        checks = await check_dependencies(runner)

        assert [c.name for c in checks] == ["rustc", "cargo", "solana", "anchor"]
        assert all(c.installed for c in checks)
        assert runner.commands == [
            "rustc --version",
            "cargo --version",
            "solana --version",
            "anchor --version",
        ]
        assert "rustc: rustc 1.0.0" in capsys.readouterr().out

    async def test_reports_every_missing_tool(self, fake_runner, capsys):
        runner = fake_runner({
            "rustc": CommandResult(127),
            "anchor": CommandResult(1, "", "error"),
        })

        with pytest.raises(MissingDependenciesError) as exc_info:
            await check_dependencies(runner)

        assert [c.name for c in exc_info.value.missing] == ["rustc", "anchor"]
        assert exc_info.value.exit_code == 1
        # Every tool was still probed.
        assert len(runner.calls) == 4
        out = capsys.readouterr().out
        assert "https://www.rust-lang.org/learn/get-started" in out
        assert "https://www.anchor-lang.com/docs/installation" in out

    async def test_error_message_lists_names(self):
        missing = [ToolCheck(name="solana", command="solana --version", link="https://x")]
        assert "solana" in str(MissingDependenciesError(missing))


class TestUnusableExecutable:
    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
    async def test_non_executable_tool_reported_missing(self, tmp_path: Path, capsys):
        binary = tmp_path / "solana"
        binary.write_text("#!/bin/sh\necho solana-cli 1.18.26\n", encoding="utf-8")
        binary.chmod(0o644)
        tools = (ToolRequirement("solana", str(binary), ("--version",), "https://solana.com/docs/intro/installation"),)

        with pytest.raises(MissingDependenciesError) as exc_info:
            await check_dependencies(SubprocessRunner(), tools)

        assert [c.name for c in exc_info.value.missing] == ["solana"]
        assert "https://solana.com/docs/intro/installation" in capsys.readouterr().out
