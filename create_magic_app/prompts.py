"""Interactive questions asked before scaffolding.

Two prompts are shown: a template picker and a project-name entry. Ctrl+C,
end-of-input or an empty answer at either prompt raises ``SetupCancelled``.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, field_validator
from rich.prompt import Prompt
from rich.table import Table

from create_magic_app.errors import InvalidProjectNameError, ScaffoldError, SetupCancelled
from create_magic_app.scaffolder.templates import TEMPLATES, TemplateDescriptor, get_template
from create_magic_app.utils import console, print_error

DEFAULT_PROJECT_NAME = "my-mb-project"
PROJECT_NAME_ERROR = "Project name should not contain special characters except hyphen (-)"

_PROJECT_NAME_RE = re.compile(r"[a-z0-9-]+")


# ---------------------------------------------------------------------------
# Project name rules
# ---------------------------------------------------------------------------


def normalize_project_name(raw: str) -> str:
    """Lowercase *raw* and turn each space into a hyphen.

    Examples::

        normalize_project_name("My Cool App") -> "my-cool-app"
        normalize_project_name("my_app!") -> "my_app!"
    """
    return raw.lower().replace(" ", "-")


def validate_project_name(name: str) -> bool | str:
    """Return ``True`` for a valid name, otherwise the error message."""
    if _PROJECT_NAME_RE.fullmatch(name):
        return True
    return PROJECT_NAME_ERROR


class ProjectRequest(BaseModel):
    """The user's answers, validated once and then read-only."""

    model_config = ConfigDict(frozen=True)

    template_id: str
    project_name: str

    @field_validator("project_name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        outcome = validate_project_name(value)
        if outcome is not True:
            raise ValueError(outcome)
        return value


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------


def _ask(question: str, **kwargs: object) -> str:
    try:
        answer = Prompt.ask(question, console=console, **kwargs)
    except (KeyboardInterrupt, EOFError) as exc:
        raise SetupCancelled() from exc
    if not answer:
        raise SetupCancelled()
    return answer.strip()


def ask_template(templates: tuple[TemplateDescriptor, ...] = TEMPLATES) -> str:
    """Show the template catalog and return the chosen template's ``value``.

    The user may answer with the row number or the template identifier.
    """
    table = Table(title="Select template", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Template", style="bold")
    table.add_column("Description")
    for index, template in enumerate(templates, start=1):
        table.add_row(str(index), template.title, template.description)
    console.print(table)

    by_number = {str(index): t.value for index, t in enumerate(templates, start=1)}
    choices = list(by_number) + [t.value for t in templates]
    answer = _ask("Select template", choices=choices, default="1", show_choices=False)
    return by_number.get(answer, answer)


def ask_project_name(default: str = DEFAULT_PROJECT_NAME) -> str:
    """Ask for a project name until a valid one is entered."""
    while True:
        name = normalize_project_name(_ask("Enter your project name", default=default))
        outcome = validate_project_name(name)
        if outcome is True:
            return name
        print_error(outcome)


def collect_request(template: str | None = None, project_name: str | None = None) -> ProjectRequest:
    """Build a ``ProjectRequest``, prompting for whatever was not supplied.

    Values passed in (from command-line flags) go through the same rules as
    typed answers.

    Raises:
        ScaffoldError: If *template* is not in the catalog.
        InvalidProjectNameError: If *project_name* fails validation.
        SetupCancelled: If the user aborts a prompt.
    """
    if template is None:
        template = ask_template()
    elif get_template(template) is None:
        known = ", ".join(t.value for t in TEMPLATES)
        raise ScaffoldError(f'Unknown template "{template}". Available templates: {known}')

    if project_name is None:
        project_name = ask_project_name()
    else:
        project_name = normalize_project_name(project_name)
        outcome = validate_project_name(project_name)
        if outcome is not True:
            raise InvalidProjectNameError(f'Invalid project name "{project_name}": {outcome}')

    return ProjectRequest(template_id=template, project_name=project_name)
