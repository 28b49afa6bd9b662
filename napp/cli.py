"""napp command-line interface.

Usage::

    napp init my-app
    napp init my-app --output ~/code --no-dockerfile
    napp i my-app --dry-run
    napp --version
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape

from napp import __version__
from napp.config import Config
from napp.project import ArgumentError, NoArgumentsError, ProjectRequest, validate_arguments
from napp.scaffolder import ProjectGenerator, ScaffoldError
from napp.utils import (
    console,
    format_size,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    relative_to_root,
)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        print_error(f"Oops! {message}")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    """Build the ``napp`` argument parser."""
    parser = _ArgumentParser(
        prog="napp",
        usage="napp [command] [command options]",
        description=(
            "A command line tool that bootstraps Go, HTMX and SQLite web\n"
            "applications and Dockerises them for ease of deployment."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  napp init my-app\n"
            "  napp init my-app --output ~/code --no-dockerfile\n"
        ),
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"napp v{__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="command")
    init = subparsers.add_parser(
        "init",
        aliases=["i"],
        usage="napp init <project-name> [options]",
        help="Initialise a new napp project ready for development",
        description="Initialise a new napp project ready for development.",
    )
    init.add_argument(
        "names",
        nargs="*",
        metavar="project-name",
        help="Name of the project: lowercase letters, digits and hyphens",
    )
    init.add_argument(
        "--output", "-o",
        default=None,
        help="Directory in which the project folder is created (default: .)",
    )
    init.add_argument(
        "--secret",
        default=None,
        help="Placeholder cookie store secret written to .env (default: secret)",
    )
    init.add_argument(
        "--no-makefile",
        action="store_true",
        help="Do not write a Makefile",
    )
    init.add_argument(
        "--no-dockerfile",
        action="store_true",
        help="Do not write a Dockerfile",
    )
    init.add_argument(
        "--dry-run",
        action="store_true",
        help="List the files that would be created and exit",
    )
    init.add_argument(
        "--verbose",
        action="store_true",
        help="Print a table of written files",
    )
    return parser


def _load_config(args: argparse.Namespace) -> Config:
    """Layer command-line flags on top of ``NAPP_*`` environment settings."""
    return Config.from_env().with_overrides(
        output_dir=Path(args.output) if args.output else None,
        session_secret=args.secret,
        include_makefile=False if args.no_makefile else None,
        include_dockerfile=False if args.no_dockerfile else None,
        verbose=True if args.verbose else None,
    )


def _print_plan(generator: ProjectGenerator, root: Path) -> None:
    console.print(f"Dry run: would create [bold]{escape(str(root))}[/bold] with:")
    for rel in generator.planned_files():
        console.print(f"  {rel}")
    if root.exists():
        print_warning(f"{root} already exists, a real run would fail.")


def _print_next_steps(request: ProjectRequest) -> None:
    print_success(f"Successfully created {request.name}, next steps:")
    console.print(f"cd {request.name}")
    console.print("go mod init <path/your-project>")
    console.print("go mod tidy")
    console.print("go run cmd/main.go")


def _print_written(generator: ProjectGenerator, root: Path) -> None:
    rows = {
        relative_to_root(path, root): format_size(path.stat().st_size)
        for path in generator.written
    }
    print_summary_table(rows, title=f"Files written to {root}")


def run_init(args: argparse.Namespace) -> None:
    """Validate the ``init`` arguments and materialise the project."""
    try:
        request = validate_arguments(args.names)
        config = _load_config(args)
    except ArgumentError as exc:
        print_error(str(exc))
        sys.exit(1)
    except ValidationError as exc:
        print_error(f"Oops! Invalid configuration: {exc}")
        sys.exit(1)

    generator = ProjectGenerator(request, config)
    root = config.project_root(request.name)

    if args.dry_run:
        _print_plan(generator, root)
        return

    try:
        root = generator.generate()
    except ScaffoldError as exc:
        print_error(str(exc))
        sys.exit(1)

    if config.verbose:
        _print_written(generator, root)
    _print_next_steps(request)


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``napp`` and ``python -m napp``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        print_error(str(NoArgumentsError()))
        parser.print_usage(sys.stderr)
        sys.exit(1)

    run_init(args)


if __name__ == "__main__":
    main()
