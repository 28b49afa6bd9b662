"""Tests for the template renderer.

Covers:
- Named placeholders with the ``[[ ]]`` delimiters
- Go template syntax passes through untouched
- Strict undefined placeholders
- Custom filters
- Verbatim reads and copies
- Exclusive file creation and error wrapping
- Bundled template listing
"""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from napp.scaffolder.errors import FileWriteError
from napp.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def renderer() -> TemplateRenderer:
    """Renderer over the bundled templates."""
    return TemplateRenderer()


@pytest.fixture
def custom_renderer(tmp_path: Path) -> TemplateRenderer:
    """Renderer over a small template directory built for the test."""
    template_dir = tmp_path / "templates"
    (template_dir / "nested").mkdir(parents=True)
    (template_dir / "greeting.txt.j2").write_text("Hello [[ name ]]!\n", encoding="utf-8")
    (template_dir / "nested" / "raw.txt").write_text("[[ not rendered ]]", encoding="utf-8")
    return TemplateRenderer(template_dir)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRender:
    def test_named_placeholder(self, custom_renderer):
        assert custom_renderer.render("greeting.txt.j2", {"name": "napp"}) == "Hello napp!\n"

    def test_trailing_newline_kept(self, custom_renderer):
        assert custom_renderer.render("greeting.txt.j2", {"name": "x"}).endswith("\n")

    def test_go_template_syntax_untouched(self, renderer):
        out = renderer.render_string('{{ define "index" }}[[ title ]]{{ end }}', {"title": "My App"})
        assert out == '{{ define "index" }}My App{{ end }}'

    def test_missing_placeholder_raises(self, custom_renderer):
        with pytest.raises(UndefinedError):
            custom_renderer.render("greeting.txt.j2", {})

    def test_repeated_placeholder(self, renderer):
        out = renderer.render_string("[[ t ]]-[[ t ]]-[[ t ]]", {"t": "A"})
        assert out == "A-A-A"

    def test_filters(self, renderer):
        out = renderer.render_string(
            "[[ n | upper_snake_case ]] [[ n | title_case ]] [[ n | db_filename ]]",
            {"n": "my-app"},
        )
        assert out == "MY_APP My App my-app.db"

    def test_missing_template(self, renderer):
        with pytest.raises(TemplateNotFound):
            renderer.render("does/not/exist.j2", {})


# ---------------------------------------------------------------------------
# Verbatim
# ---------------------------------------------------------------------------


class TestVerbatim:
    def test_read_verbatim_skips_rendering(self, custom_renderer):
        assert custom_renderer.read_verbatim("nested/raw.txt") == "[[ not rendered ]]"

    def test_read_verbatim_missing(self, custom_renderer):
        with pytest.raises(TemplateNotFound):
            custom_renderer.read_verbatim("nope.txt")

    def test_copy_to_file(self, custom_renderer, tmp_path: Path):
        out = custom_renderer.copy_to_file("nested/raw.txt", tmp_path / "out" / "raw.txt")
        assert out.read_text(encoding="utf-8") == "[[ not rendered ]]"

    def test_bundled_static_files_match_source(self, renderer):
        for name in ("static/htmx.min.js", "static/twcolors.min.css", "static/styles.css"):
            source = (renderer.template_dir / name).read_text(encoding="utf-8")
            assert renderer.read_verbatim(name) == source


# ---------------------------------------------------------------------------
# File output
# ---------------------------------------------------------------------------


class TestRenderToFile:
    def test_writes_file(self, custom_renderer, tmp_path: Path):
        out = custom_renderer.render_to_file(
            "greeting.txt.j2", tmp_path / "greeting.txt", {"name": "file"}
        )
        assert out == tmp_path / "greeting.txt"
        assert out.read_text(encoding="utf-8") == "Hello file!\n"

    def test_refuses_existing_file(self, custom_renderer, tmp_path: Path):
        target = tmp_path / "greeting.txt"
        target.write_text("keep me", encoding="utf-8")
        with pytest.raises(FileWriteError) as exc_info:
            custom_renderer.render_to_file("greeting.txt.j2", target, {"name": "x"})
        assert exc_info.value.path == target
        assert target.read_text(encoding="utf-8") == "keep me"

    def test_undefined_placeholder_wrapped(self, custom_renderer, tmp_path: Path):
        target = tmp_path / "greeting.txt"
        with pytest.raises(FileWriteError) as exc_info:
            custom_renderer.render_to_file("greeting.txt.j2", target, {})
        assert isinstance(exc_info.value.reason, UndefinedError)
        assert not target.exists()

    def test_missing_template_wrapped(self, custom_renderer, tmp_path: Path):
        with pytest.raises(FileWriteError):
            custom_renderer.copy_to_file("missing.txt", tmp_path / "missing.txt")


# ---------------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------------


class TestListTemplates:
    def test_custom(self, custom_renderer):
        assert custom_renderer.list_templates() == ["greeting.txt.j2", "nested/raw.txt"]

    def test_prefix(self, custom_renderer):
        assert custom_renderer.list_templates("nested") == ["nested/raw.txt"]

    def test_unknown_prefix(self, custom_renderer):
        assert custom_renderer.list_templates("nope") == []

    def test_bundled(self, renderer):
        templates = renderer.list_templates()
        assert "cmd/main.go.j2" in templates
        assert "static/htmx.min.js" in templates
        assert "Dockerfile.j2" in templates
