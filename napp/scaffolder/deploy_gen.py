"""Makefile and Dockerfile generation for the scaffolded project.

Both files name the compiled server binary after the project, so they are
rendered from ``Makefile.j2`` and ``Dockerfile.j2`` with the ``binary_name``
placeholder.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .store import DEPLOY_FILES
from .templates import TemplateRenderer


class DeployGenerator:
    """Generates the optional build and container files."""

    _LABELS: dict[str, str] = {
        "makefile": "build",
        "dockerfile": "container",
    }

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def generate_all(
        self,
        output_dir: Path,
        context: dict[str, Any],
        features: set[str],
    ) -> dict[str, Path]:
        """Write every deployment file enabled in *features*.

        Args:
            output_dir: Project root directory.
            context: Template rendering context (must include ``binary_name``).
            features: Enabled optional outputs, e.g. ``{"makefile", "dockerfile"}``.

        Returns:
            Mapping of descriptive label to written path, e.g.
            ``{"build": Path(".../Makefile"), "container": Path(".../Dockerfile")}``.
        """
        result: dict[str, Path] = {}
        for entry in DEPLOY_FILES:
            if entry.feature not in features:
                continue
            path = self.renderer.render_to_file(
                entry.source, output_dir / entry.target, context
            )
            result[self._LABELS[entry.feature]] = path
        return result

    def generate_makefile(self, output_dir: Path, context: dict[str, Any]) -> Path:
        """Write only the Makefile."""
        return self.generate_all(output_dir, context, {"makefile"})["build"]

    def generate_dockerfile(self, output_dir: Path, context: dict[str, Any]) -> Path:
        """Write only the Dockerfile."""
        return self.generate_all(output_dir, context, {"dockerfile"})["container"]
