"""Main scaffolding orchestrator.

Takes a ``ProjectRequest`` and a ``Config`` and materialises a complete Go +
HTMX + SQLite project directory from the bundled template store.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any

from napp.config import Config
from napp.project import ProjectRequest
from napp.utils import print_warning

from .deploy_gen import DeployGenerator
from .errors import DirectoryCreationError, DirectoryExistsError, FileWriteError, ScaffoldError
from .store import APP_FILES, PROJECT_SUBDIRS, TemplateEntry, entries_for
from .templates import TemplateRenderer


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``ProjectRequest``, generates a directory tree containing:
    - ``cmd/main.go`` server entry point
    - ``template/`` HTML page templates
    - ``static/`` script and stylesheet assets
    - ``.gitignore``, ``.env`` and an empty SQLite database file
    - ``Makefile`` and ``Dockerfile`` (optional, on by default)

    Any failure after the root directory has been created removes that
    directory again, so a run either produces the whole tree or nothing.
    """

    def __init__(self, request: ProjectRequest, config: Config | None = None) -> None:
        self.request = request
        self.config = config or Config()
        self.renderer = TemplateRenderer()
        self.deploy_gen = DeployGenerator(self.renderer)
        self.written: list[Path] = []

    # -- Public API --------------------------------------------------------

    def generate(self, output_dir: str | Path | None = None) -> Path:
        """Generate the complete project structure.

        Args:
            output_dir: Parent directory where the project folder will be
                created.  Defaults to ``config.output_dir``.

        Returns:
            Path to the generated project root.

        Raises:
            DirectoryExistsError: The project directory already exists.
            DirectoryCreationError: A directory could not be created.
            FileWriteError: An output file could not be rendered or written.
        """
        base = Path(output_dir) if output_dir is not None else self.config.output_dir
        project_root = base / self.request.name
        self.written = []

        # 1. Create the root directory; an existing one is never touched
        self._create_root(project_root)

        try:
            context = self._build_context()

            # 2. Create the fixed subdirectories
            self._create_directory_structure(project_root)

            # 3-7. Render and copy the application files
            self._render_app_files(project_root, context)

            # 8. Create the empty SQLite database file
            self._create_database_file(project_root)

            # 9-10. Makefile and Dockerfile
            deploy_files = self.deploy_gen.generate_all(
                project_root, context, self.config.enabled_features()
            )
            self.written.extend(deploy_files.values())
        except ScaffoldError:
            self._remove_partial(project_root)
            raise

        return project_root

    def planned_files(self) -> list[str]:
        """Return the relative paths a run with the current config would write."""
        enabled = entries_for(self.config.enabled_features())
        planned = [e.target for e in enabled if not e.optional]
        planned.append(self.request.db_filename)
        planned.extend(e.target for e in enabled if e.optional)
        return planned

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the template context from the request and config."""
        return {
            **self.request.template_context(),
            "session_secret": self.config.session_secret,
        }

    # -- Directory structure -----------------------------------------------

    def _create_root(self, root: Path) -> None:
        try:
            root.mkdir(parents=True)
        except FileExistsError as exc:
            raise DirectoryExistsError(root) from exc
        except OSError as exc:
            raise DirectoryCreationError(root, exc) from exc

    def _create_directory_structure(self, root: Path) -> None:
        """Create ``cmd/``, ``template/`` and ``static/`` under the root."""
        for d in PROJECT_SUBDIRS:
            p = root / d
            try:
                p.mkdir()
            except OSError as exc:
                raise DirectoryCreationError(p, exc) from exc

    # -- File rendering ----------------------------------------------------

    def _render_app_files(self, root: Path, ctx: dict[str, Any]) -> None:
        """Write every non-optional store entry in table order."""
        for entry in APP_FILES:
            self.written.append(self._write_entry(root, entry, ctx))

    def _write_entry(self, root: Path, entry: TemplateEntry, ctx: dict[str, Any]) -> Path:
        out = root / entry.target
        if entry.rendered:
            return self.renderer.render_to_file(entry.source, out, ctx)
        return self.renderer.copy_to_file(entry.source, out)

    def _create_database_file(self, root: Path) -> None:
        """Create the zero-length ``<name>.db`` placeholder."""
        path = root / self.request.db_filename
        try:
            with path.open("xb"):
                pass
        except OSError as exc:
            raise FileWriteError(path, exc) from exc
        self.written.append(path)

    # -- Cleanup -----------------------------------------------------------

    def _remove_partial(self, root: Path) -> None:
        """Remove a partially generated project root created by this run."""
        try:
            shutil.rmtree(root)
        except OSError as exc:
            print_warning(f"Could not remove partially generated project {root}: {exc}")
        self.written = []
