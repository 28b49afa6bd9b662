"""The fixed table of bundled files that make up a new project.

Each ``TemplateEntry`` maps one bundled source file to its output path inside
the project root.  Entries are written in table order; directory creation is
handled by the generator before any entry is written.
"""

from __future__ import annotations

from dataclasses import dataclass


PROJECT_SUBDIRS: tuple[str, ...] = ("cmd", "template", "static")


@dataclass(frozen=True)
class TemplateEntry:
    """One bundled file and where it goes in the generated project."""

    source: str
    target: str
    rendered: bool = True
    feature: str | None = None

    @property
    def optional(self) -> bool:
        return self.feature is not None


# Core application files, rendered or copied in this order.
APP_FILES: tuple[TemplateEntry, ...] = (
    TemplateEntry("cmd/main.go.j2", "cmd/main.go"),
    TemplateEntry("template/index.html.j2", "template/index.html"),
    TemplateEntry("template/dashboard.html.j2", "template/dashboard.html"),
    TemplateEntry("static/htmx.min.js", "static/htmx.min.js", rendered=False),
    TemplateEntry("static/twcolors.min.css", "static/twcolors.min.css", rendered=False),
    TemplateEntry("static/styles.css", "static/styles.css", rendered=False),
    TemplateEntry("gitignore.j2", ".gitignore"),
    TemplateEntry("env.j2", ".env"),
)

# Build and deployment files, each behind a feature flag.
DEPLOY_FILES: tuple[TemplateEntry, ...] = (
    TemplateEntry("Makefile.j2", "Makefile", feature="makefile"),
    TemplateEntry("Dockerfile.j2", "Dockerfile", feature="dockerfile"),
)

TEMPLATE_STORE: tuple[TemplateEntry, ...] = APP_FILES + DEPLOY_FILES


def entries_for(features: set[str]) -> list[TemplateEntry]:
    """Return every store entry that is enabled for *features*."""
    return [e for e in TEMPLATE_STORE if e.feature is None or e.feature in features]
