"""create-magic-app configuration.

Typed run configuration built once by the CLI entry point and passed to the
``Scaffolder``. Environment lookups happen here and nowhere else, so every
other component receives its inputs as explicit parameters.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"

USER_AGENT_ENV = "npm_config_user_agent"
TEMPLATES_DIR_ENV = "CREATE_MAGIC_APP_TEMPLATES_DIR"


class Config(BaseModel):
    """Settings for a single scaffolding run."""

    templates_dir: Path = Field(default=DEFAULT_TEMPLATES_DIR)
    cwd: Path = Field(default_factory=Path.cwd)
    user_agent: str | None = Field(
        default=None, description="Package-manager user agent, e.g. 'pnpm/9.1.0 npm/? node/v20'"
    )
    skip_install: bool = Field(default=False)
    skip_git: bool = Field(default=False)
    skip_checks: bool = Field(default=False, description="Skip the toolchain preflight")

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def target_path(self, project_name: str) -> Path:
        """Directory the project named *project_name* is created in."""
        return self.cwd / project_name

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, **overrides: object) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            npm_config_user_agent, CREATE_MAGIC_APP_TEMPLATES_DIR.

        Keyword arguments whose value is not ``None`` take precedence over
        the environment.
        """
        values: dict[str, object] = {}
        if os.environ.get(USER_AGENT_ENV):
            values["user_agent"] = os.environ[USER_AGENT_ENV]
        if os.environ.get(TEMPLATES_DIR_ENV):
            values["templates_dir"] = Path(os.environ[TEMPLATES_DIR_ENV])

        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
