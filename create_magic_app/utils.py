"""Shared console and JSON helpers for create-magic-app.

All user-facing output goes through the module-level Rich ``console`` so
tests can capture it and so colours stay consistent across components.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load a JSON object from *path*, preserving key order.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top-level value is not an object.
    """
    raw = Path(path).read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    return data


def save_json(data: dict[str, Any], path: str | Path) -> None:
    """Write *data* as 2-space indented JSON with a trailing newline."""
    content = json.dumps(data, indent=2, ensure_ascii=False)
    Path(path).write_text(content + "\n", encoding="utf-8")


# ---------------------------------------------------------------------------
# Directory helpers
# ---------------------------------------------------------------------------


def is_empty_dir(path: Path) -> bool:
    """Return ``True`` if *path* is a directory with no entries."""
    return path.is_dir() and next(path.iterdir(), None) is None


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(package_manager: str, version: str) -> None:
    """Print the startup banner naming the detected package manager."""
    console.print()
    console.print(Rule("[bold magenta] Create Magic App [/bold magenta]", style="magenta"))
    console.print(f"   Using [cyan]{package_manager}[/cyan] v{version}")
    console.print()


def print_step(message: str) -> None:
    """Print a progress line for one scaffolding step."""
    console.print(f"[cyan]>[/cyan] {message}")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_next_steps(project_name: str, run_command: str) -> None:
    """Print the post-scaffold instructions for the chosen package manager."""
    lines = [
        f"cd {project_name}",
        f"{run_command} frontend:dev",
        "",
        f"{run_command} program:build",
        f"{run_command} program:test   (or {run_command} program:test devnet)",
        f"{run_command} program:deploy (or {run_command} program:deploy devnet)",
    ]
    console.print()
    console.print(
        Panel(
            "\n".join(lines),
            title=f"[bold green]Successfully created {project_name}![/bold green]",
            subtitle="Next steps",
            style="green",
        )
    )


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
