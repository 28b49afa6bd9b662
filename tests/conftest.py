"""Shared pytest fixtures for the napp test suite.

Provides reusable fixtures for:
- A clean ``NAPP_*`` environment
- A validated project request and a config pointing at ``tmp_path``
- A fully generated project tree
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from napp.config import Config
from napp.project import ProjectRequest
from napp.scaffolder import ProjectGenerator


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_napp_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every ``NAPP_*`` variable so tests never see the caller's settings."""
    for key in list(os.environ):
        if key.startswith("NAPP_"):
            monkeypatch.delenv(key)


# ---------------------------------------------------------------------------
# Requests & config
# ---------------------------------------------------------------------------

@pytest.fixture
def project_request() -> ProjectRequest:
    """The canonical ``my-app`` request."""
    return ProjectRequest(name="my-app")


@pytest.fixture
def tmp_config(tmp_path: Path) -> Config:
    """Config that writes projects under the test's temporary directory."""
    return Config(output_dir=tmp_path)


# ---------------------------------------------------------------------------
# Generated projects
# ---------------------------------------------------------------------------

@pytest.fixture
def generated_project(project_request: ProjectRequest, tmp_config: Config) -> Path:
    """A freshly generated ``my-app`` project root."""
    return ProjectGenerator(project_request, tmp_config).generate()


_EXPECTED_DIRS = ["cmd", "template", "static"]

_EXPECTED_FILES = [
    "cmd/main.go",
    "template/index.html",
    "template/dashboard.html",
    "static/htmx.min.js",
    "static/twcolors.min.css",
    "static/styles.css",
    ".gitignore",
    ".env",
    "my-app.db",
    "Makefile",
    "Dockerfile",
]


def _tree_of(root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in root.rglob("*")}


@pytest.fixture
def expected_files() -> list[str]:
    """Every file a default ``my-app`` run writes, in write order."""
    return list(_EXPECTED_FILES)


@pytest.fixture
def expected_tree() -> set[str]:
    """Every directory and file of a default ``my-app`` project."""
    return set(_EXPECTED_DIRS) | set(_EXPECTED_FILES)


@pytest.fixture
def tree_of():
    """Return a helper listing every path under a root, relative and slash-separated."""
    return _tree_of
