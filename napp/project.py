"""Project request model and command-line argument validation.

A ``ProjectRequest`` is built once from the single ``init`` argument and
carries every derived form of the project name that the templates need:

* ``upper_snake_case`` -- ``my-app`` -> ``MY_APP`` (environment variable prefix)
* ``title_case``       -- ``my-app`` -> ``My App`` (page titles and headings)
* ``db_filename``      -- ``my-app`` -> ``my-app.db`` (SQLite file)
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


PROJECT_NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")

COOKIE_SECRET_SUFFIX = "_COOKIE_STORE_SECRET"
DB_PATH_SUFFIX = "_DB_PATH"
ENV_FILENAME = ".env"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ArgumentError(Exception):
    """Raised when the ``init`` arguments cannot produce a project request."""


class NoArgumentsError(ArgumentError):
    def __init__(self) -> None:
        super().__init__("Oops! Received no arguments, wanted 1")


class TooManyArgumentsError(ArgumentError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"Oops! Received {count} arguments, wanted 1 (too many arguments)"
        )


class InvalidProjectNameError(ArgumentError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            "Oops! Project name must be in the following format: <project-name> "
            "(lowercase letters, digits and hyphens only)"
        )


# ---------------------------------------------------------------------------
# Name transformations
# ---------------------------------------------------------------------------


def is_valid_project_name(name: str) -> bool:
    """Return ``True`` if *name* only contains lowercase letters, digits and hyphens."""
    return bool(PROJECT_NAME_PATTERN.fullmatch(name))


def to_upper_snake_case(name: str) -> str:
    """Convert ``my-app`` to ``MY_APP``.

    Applying the conversion to its own output returns the same string.
    """
    return name.upper().replace("-", "_")


def to_title_case(name: str) -> str:
    """Convert ``my-app`` to ``My App``."""
    return " ".join(segment.capitalize() for segment in name.split("-"))


def to_db_filename(name: str) -> str:
    """Convert ``my-app`` to ``my-app.db``."""
    return f"{name.lower()}.db"


# ---------------------------------------------------------------------------
# Request model
# ---------------------------------------------------------------------------


class ProjectRequest(BaseModel):
    """A validated request to scaffold one project."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name, e.g. 'my-app'")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not is_valid_project_name(value):
            raise ValueError(f"invalid project name {value!r}")
        return value

    @property
    def upper_snake_case(self) -> str:
        return to_upper_snake_case(self.name)

    @property
    def title_case(self) -> str:
        return to_title_case(self.name)

    @property
    def db_filename(self) -> str:
        return to_db_filename(self.name)

    @property
    def cookie_secret_env(self) -> str:
        """Environment variable holding the session cookie secret."""
        return self.upper_snake_case + COOKIE_SECRET_SUFFIX

    @property
    def db_path_env(self) -> str:
        """Environment variable holding the SQLite database path."""
        return self.upper_snake_case + DB_PATH_SUFFIX

    @property
    def binary_name(self) -> str:
        return self.name

    def template_context(self) -> dict[str, Any]:
        """Return the named-placeholder context for every project template."""
        return {
            "project_name": self.name,
            "title": self.title_case,
            "upper_snake_case": self.upper_snake_case,
            "db_filename": self.db_filename,
            "env_filename": ENV_FILENAME,
            "cookie_secret_env": self.cookie_secret_env,
            "db_path_env": self.db_path_env,
            "binary_name": self.binary_name,
        }


def validate_arguments(args: Sequence[str]) -> ProjectRequest:
    """Turn the positional ``init`` arguments into a ``ProjectRequest``.

    Raises:
        NoArgumentsError: No argument was given.
        TooManyArgumentsError: More than one argument was given.
        InvalidProjectNameError: The name does not match ``^[a-z0-9-]+$``.
    """
    if not args:
        raise NoArgumentsError()
    if len(args) > 1:
        raise TooManyArgumentsError(len(args))

    name = args[0]
    if not is_valid_project_name(name):
        raise InvalidProjectNameError(name)
    return ProjectRequest(name=name)
