"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads the bundled templates from
the ``napp/scaffolder/templates/`` directory and renders them with the
project context.  The bundled HTML bodies are Go ``html/template`` files that
use ``{{ ... }}`` themselves, so napp's own placeholders use ``[[ name ]]``
(blocks ``[% ... %]``, comments ``[# ... #]``) and every placeholder is named.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    select_autoescape,
)

from napp.project import to_db_filename, to_title_case, to_upper_snake_case

from .errors import FileWriteError


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders bundled templates for project scaffolding.

    Rendering is strict: a placeholder missing from the context raises
    ``jinja2.UndefinedError`` instead of producing an empty string.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            variable_start_string="[[",
            variable_end_string="]]",
            block_start_string="[%",
            block_end_string="%]",
            comment_start_string="[#",
            comment_end_string="#]",
        )
        self.env.filters["upper_snake_case"] = to_upper_snake_case
        self.env.filters["title_case"] = to_title_case
        self.env.filters["db_filename"] = to_db_filename

    # -- Rendering ----------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"cmd/main.go.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    def read_verbatim(self, template_path: str) -> str:
        """Return the raw body of a bundled file without rendering it.

        Raises ``jinja2.TemplateNotFound`` if the file is not bundled.
        """
        source, _filename, _uptodate = self.env.loader.get_source(self.env, template_path)
        return source

    # -- File output ---------------------------------------------------------

    def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        The output file must not exist yet.  Template errors (missing file,
        undefined placeholder) are reported as ``FileWriteError`` for the
        output path.  Returns the output path.
        """
        out = Path(output_path)
        try:
            content = self.render(template_path, context)
        except TemplateError as exc:
            raise FileWriteError(out, exc) from exc
        _write_file(out, content)
        return out

    def copy_to_file(self, template_path: str, output_path: str | Path) -> Path:
        """Copy a bundled file to *output_path* unchanged."""
        out = Path(output_path)
        try:
            content = self.read_verbatim(template_path)
        except TemplateError as exc:
            raise FileWriteError(out, exc) from exc
        _write_file(out, content)
        return out

    # -- Utility -------------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of every bundled file under *prefix*.

        Paths are relative to the template root directory and use forward
        slashes.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*")
            if p.is_file()
        )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str) -> None:
    """Create *path* exclusively and write *content* to it."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("x", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except OSError as exc:
        raise FileWriteError(path, exc) from exc
