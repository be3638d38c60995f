"""Shared pytest fixtures for the shared-scaffold test suite.

Provides reusable fixtures for:
- A temporary React project root with ``src/components``
- A ``Config`` rooted at that project
- A factory for ``GenerationRequest`` objects
- Filesystem doubles that fail or record calls
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from shared_scaffold.config import Config
from shared_scaffold.errors import FilesystemError
from shared_scaffold.models import GenerationFlags, GenerationRequest
from shared_scaffold.scaffolder.filesystem import AsyncFileSystem


# ---------------------------------------------------------------------------
# Paths & configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project root containing an empty ``src/components`` folder."""
    root = tmp_path / "app"
    (root / "src" / "components").mkdir(parents=True)
    yield root


@pytest.fixture
def config(project_root: Path) -> Config:
    return Config(root_dir=project_root)


@pytest.fixture
def components_dir(project_root: Path) -> Path:
    return project_root / "src" / "components"


@pytest.fixture
def make_request(project_root: Path) -> Callable[..., GenerationRequest]:
    """Build a ``GenerationRequest`` rooted at the project: ``make_request("src/components/button", functional=True)``."""

    def _make(*names: str, **flags: Any) -> GenerationRequest:
        return GenerationRequest(
            component_names=list(names),
            base_path=project_root,
            flags=GenerationFlags(**flags),
        )

    return _make


# ---------------------------------------------------------------------------
# Filesystem doubles
# ---------------------------------------------------------------------------

class RecordingFileSystem(AsyncFileSystem):
    """Real filesystem that records every call as ``(operation, path)``."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Path]] = []

    async def exists(self, path: Path) -> bool:
        self.calls.append(("exists", Path(path)))
        return await super().exists(path)

    async def make_dirs(self, path: Path) -> Path:
        self.calls.append(("make_dirs", Path(path)))
        return await super().make_dirs(path)

    async def write_text(self, path: Path, content: str) -> Path:
        self.calls.append(("write_text", Path(path)))
        return await super().write_text(path, content)


class FailingWriteFileSystem(AsyncFileSystem):
    """Real filesystem whose writes fail for names ending in *suffix*."""

    def __init__(self, suffix: str) -> None:
        self.suffix = suffix

    async def write_text(self, path: Path, content: str) -> Path:
        if str(path).endswith(self.suffix):
            raise FilesystemError(path, "Permission denied")
        return await super().write_text(path, content)


class FailingMkdirFileSystem(AsyncFileSystem):
    async def make_dirs(self, path: Path) -> Path:
        raise FilesystemError(path, "Read-only file system")


@pytest.fixture
def recording_fs() -> RecordingFileSystem:
    return RecordingFileSystem()


@pytest.fixture
def failing_write_fs() -> Callable[[str], FailingWriteFileSystem]:
    """Factory: ``failing_write_fs(".native.js")`` fails every write to such files."""
    return FailingWriteFileSystem


@pytest.fixture
def failing_mkdir_fs() -> FailingMkdirFileSystem:
    return FailingMkdirFileSystem()
