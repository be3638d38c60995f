"""Asynchronous filesystem primitives used by the generator.

Blocking ``pathlib`` calls are pushed onto worker threads with
``asyncio.to_thread`` so the event loop never blocks.  ``OSError`` is
re-raised as ``FilesystemError`` carrying the offending path.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from shared_scaffold.errors import FilesystemError


class AsyncFileSystem:
    """Existence check, directory creation and file writes, all awaitable."""

    encoding = "utf-8"

    async def exists(self, path: Path) -> bool:
        return await asyncio.to_thread(Path(path).exists)

    async def make_dirs(self, path: Path) -> Path:
        """Create *path* and its parents; an existing directory is not an error."""
        target = Path(path)
        try:
            await asyncio.to_thread(target.mkdir, parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(target, exc.strerror or str(exc)) from exc
        return target

    async def write_text(self, path: Path, content: str) -> Path:
        target = Path(path)
        try:
            await asyncio.to_thread(_write_file, target, content, self.encoding)
        except OSError as exc:
            raise FilesystemError(target, exc.strerror or str(exc)) from exc
        return target


def _write_file(path: Path, content: str, encoding: str) -> None:
    """Synchronous helper: write content, refusing to replace an existing file."""
    with path.open("x", encoding=encoding) as handle:
        handle.write(content)
