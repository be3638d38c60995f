"""Exceptions raised while scaffolding components.

Every failure the generator can surface derives from ``ScaffoldError`` so the
CLI needs a single top-level handler.  ``PathAlreadyExistsError`` is the one
kind that handler singles out: it means nothing was written and the user only
has to pick another name or remove the folder.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class InvalidArgumentsError(ScaffoldError):
    """Raised when the command-line input cannot describe a generation run."""


class PathAlreadyExistsError(ScaffoldError):
    """Raised when a target component folder (or index file) already exists."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Folder already exists at {self.path}")


class DuplicateComponentError(ScaffoldError):
    """Raised when two requested names resolve to the same folder or output file."""

    def __init__(self, path: str | Path, names: list[str]) -> None:
        self.path = Path(path)
        self.names = list(names)
        super().__init__(
            f"Components {', '.join(repr(n) for n in self.names)} "
            f"all resolve to {self.path}"
        )


class LayoutError(ScaffoldError):
    """Raised when a path does not contain the expected layout segment."""

    def __init__(self, path: str | Path, segment: str) -> None:
        self.path = Path(path)
        self.segment = segment
        super().__init__(f"No '{segment}' directory found in path {self.path}")


class FilesystemError(ScaffoldError):
    """Raised when creating a directory or writing a file fails."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")
