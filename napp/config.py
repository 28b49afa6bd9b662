"""napp configuration.

Typed settings for a scaffolding run. Values come from defaults, then
``NAPP_*`` environment variables, then command-line flags, each layer
overriding the previous one.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool | None:
    """Return the boolean value of environment variable *name*, or ``None`` if unset."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip().lower() in _TRUTHY


class Config(BaseModel):
    """Settings for one ``napp init`` run."""

    output_dir: Path = Field(
        default=Path("."), description="Parent directory in which the project is created"
    )
    include_makefile: bool = Field(default=True, description="Write a Makefile")
    include_dockerfile: bool = Field(default=True, description="Write a Dockerfile")
    session_secret: str = Field(
        default="secret",
        min_length=1,
        description="Placeholder cookie store secret written to .env",
    )
    verbose: bool = Field(default=False, description="Print a table of written files")

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def enabled_features(self) -> set[str]:
        """Return the optional outputs switched on for this run."""
        features: set[str] = set()
        if self.include_makefile:
            features.add("makefile")
        if self.include_dockerfile:
            features.add("dockerfile")
        return features

    def project_root(self, project_name: str) -> Path:
        """Path of the directory that will hold *project_name*."""
        return self.output_dir / project_name

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            NAPP_OUTPUT_DIR, NAPP_SESSION_SECRET, NAPP_NO_MAKEFILE,
            NAPP_NO_DOCKERFILE, NAPP_VERBOSE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("NAPP_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["NAPP_OUTPUT_DIR"])
        if os.environ.get("NAPP_SESSION_SECRET"):
            kwargs["session_secret"] = os.environ["NAPP_SESSION_SECRET"]

        no_makefile = _env_flag("NAPP_NO_MAKEFILE")
        if no_makefile is not None:
            kwargs["include_makefile"] = not no_makefile
        no_dockerfile = _env_flag("NAPP_NO_DOCKERFILE")
        if no_dockerfile is not None:
            kwargs["include_dockerfile"] = not no_dockerfile
        verbose = _env_flag("NAPP_VERBOSE")
        if verbose is not None:
            kwargs["verbose"] = verbose

        return cls(**kwargs)

    def with_overrides(self, **overrides: Any) -> "Config":
        """Return a copy with every non-``None`` override applied.

        Used by the CLI so that unset flags leave environment values alone.
        """
        updates = {key: value for key, value in overrides.items() if value is not None}
        return self.model_validate({**self.model_dump(), **updates})
