"""Exceptions raised while materialising a project."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every failure while generating a project."""


class DirectoryExistsError(ScaffoldError):
    """Raised when the project root directory already exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Oops! Directory {path} already exists")


class DirectoryCreationError(ScaffoldError):
    """Raised when a project directory cannot be created."""

    def __init__(self, path: Path, reason: OSError) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"error creating directory {path}: {reason}")


class FileWriteError(ScaffoldError):
    """Raised when an output file cannot be created or written."""

    def __init__(self, path: Path, reason: Exception) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"error writing {path}: {reason}")
