"""Catalog of starter templates offered by the CLI."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from create_magic_app.errors import TemplateNotFoundError


class TemplateDescriptor(BaseModel):
    """One selectable template. ``value`` names its directory."""

    model_config = ConfigDict(frozen=True)

    value: str
    title: str
    description: str


TEMPLATES: tuple[TemplateDescriptor, ...] = (
    TemplateDescriptor(
        value="mb-er-counter",
        title="ER counter",
        description="Simple anchor counter program with MagicBlock ER and frontend already setup",
    ),
    TemplateDescriptor(
        value="mb-er-phaser",
        title="ER Game",
        description="Phaser live multiplayer with MagicBlock ER",
    ),
    TemplateDescriptor(
        value="mb-vrf",
        title="Verifiable Randomness (coming soon)",
        description="On chain verifiable randomness with MagicBlock ER",
    ),
    TemplateDescriptor(
        value="mb-per",
        title="Private ER (coming soon)",
        description="Private ER with MagicBlock",
    ),
)


def get_template(value: str) -> TemplateDescriptor | None:
    """Return the catalog entry whose ``value`` is *value*, if any."""
    for template in TEMPLATES:
        if template.value == value:
            return template
    return None


def resolve_template_dir(templates_dir: Path, value: str) -> Path:
    """Return the on-disk directory for template *value*.

    Raises:
        TemplateNotFoundError: If the directory does not exist.
    """
    source = templates_dir / value
    if not source.is_dir():
        raise TemplateNotFoundError(value, str(source))
    return source
