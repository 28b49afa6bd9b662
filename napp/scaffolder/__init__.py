"""napp scaffolder -- materialises a Go + HTMX + SQLite project.

Quick usage::

    from napp.project import ProjectRequest
    from napp.scaffolder import ProjectGenerator

    generator = ProjectGenerator(ProjectRequest(name="my-app"))
    project_path = generator.generate("/tmp/output")
"""

from napp.scaffolder.errors import (
    DirectoryCreationError,
    DirectoryExistsError,
    FileWriteError,
    ScaffoldError,
)
from napp.scaffolder.generator import ProjectGenerator
from napp.scaffolder.store import TEMPLATE_STORE, TemplateEntry
from napp.scaffolder.templates import TemplateRenderer

__all__ = [
    "DirectoryCreationError",
    "DirectoryExistsError",
    "FileWriteError",
    "ProjectGenerator",
    "ScaffoldError",
    "TEMPLATE_STORE",
    "TemplateEntry",
    "TemplateRenderer",
]
