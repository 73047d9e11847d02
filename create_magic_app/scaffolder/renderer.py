"""Jinja2 rendering of placeholder files inside a copied template.

A template may ship files ending in ``.j2`` (for example ``README.md.j2``).
After the copy, each one is rendered with the project context, written next
to itself without the suffix, and removed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape

from create_magic_app.errors import ScaffoldError
from create_magic_app.scaffolder.package_manager import PackageManagerInfo

TEMPLATE_SUFFIX = ".j2"


def build_context(
    project_name: str, template: str, package_manager: PackageManagerInfo
) -> dict[str, Any]:
    """Variables available inside ``.j2`` files."""
    return {
        "project_name": project_name,
        "template": template,
        "package_manager": package_manager.name,
        "run_command": package_manager.run_command,
        "install_command": package_manager.install_command,
    }


class PlaceholderRenderer:
    """Renders the ``.j2`` files found under a project root."""

    def __init__(self, project_root: str | Path) -> None:
        self.project_root = Path(project_root)
        self.env = Environment(
            loader=FileSystemLoader(str(self.project_root)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def list_templates(self) -> list[Path]:
        """Return every ``.j2`` file under the project root, sorted."""
        return sorted(self.project_root.rglob(f"*{TEMPLATE_SUFFIX}"))

    def render_all(self, context: dict[str, Any]) -> list[Path]:
        """Render all placeholder files and return the written paths.

        Raises:
            ScaffoldError: If a file fails to parse or references an
                unknown variable.
        """
        written: list[Path] = []
        for template_file in self.list_templates():
            rel = template_file.relative_to(self.project_root).as_posix()
            try:
                content = self.env.get_template(rel).render(**context)
            except TemplateError as exc:
                raise ScaffoldError(f"Failed to render {rel}: {exc}") from exc

            output = template_file.with_name(template_file.name[: -len(TEMPLATE_SUFFIX)])
            output.write_text(content, encoding="utf-8")
            template_file.unlink()
            written.append(output)
        return written
