"""Main scaffolding orchestrator.

Takes a ``GenerationRequest`` and materialises every requested component:

1. resolve each component folder next to the first positional argument,
2. build every artifact list up front so layout errors surface before I/O,
3. reject names that share a folder or an output file, and folders or
   outside files (containers) that already exist,
4. per component, create the directories, then write all files concurrently.

Components run concurrently with each other and are joined at the end.
Failed writes are collected as ``WriteOutcome`` entries; ``run`` raises
``FilesystemError`` for the first one.  Nothing is rolled back.
"""

from __future__ import annotations

import asyncio
import time
from pathlib import Path
from typing import Optional

from shared_scaffold.config import Config
from shared_scaffold.errors import (
    DuplicateComponentError,
    FilesystemError,
    PathAlreadyExistsError,
)
from shared_scaffold.models import (
    ArtifactSpec,
    ComponentName,
    ComponentResult,
    GenerationRequest,
    RunResult,
    WriteOutcome,
)

from .builder import build_artifacts, build_folder_index, directories_for
from .filesystem import AsyncFileSystem
from .resolver import resolve_component_name, resolve_parent_folder


class ComponentGenerator:
    """Generates react-shared component folders.

    Attributes:
        config: Project layout and naming configuration.
        fs: Asynchronous filesystem used for every check, mkdir and write.
    """

    def __init__(self, config: Config, fs: Optional[AsyncFileSystem] = None) -> None:
        self.config = config
        self.fs = fs or AsyncFileSystem()

    # -- Public API --------------------------------------------------------

    async def run(self, request: GenerationRequest) -> RunResult:
        """Generate what *request* asks for and raise on the first failed write."""
        if request.flags.create_index:
            result = await self.generate_index(request)
        else:
            result = await self.generate(request)
        result.raise_for_failure()
        return result

    async def generate(self, request: GenerationRequest) -> RunResult:
        """Generate one folder per requested component.

        Raises:
            DuplicateComponentError: Two names resolve to the same folder or file.
            PathAlreadyExistsError: A component folder or container file already exists.
            LayoutError: A container was requested outside a components folder.
        """
        started = time.monotonic()
        plans = [
            (name, directory, build_artifacts(name, directory, request.flags, self.config))
            for name, directory in self.resolve_targets(request)
        ]
        _check_duplicates(plans)
        await self._check_not_existing(
            [directory for _, directory, _ in plans]
            + [a.path for _, directory, artifacts in plans for a in artifacts
               if directory not in a.path.parents]
        )

        components = await asyncio.gather(
            *(self._generate_component(name, directory, artifacts)
              for name, directory, artifacts in plans)
        )
        return RunResult(
            components=list(components),
            elapsed_seconds=time.monotonic() - started,
        )

    async def generate_index(self, request: GenerationRequest) -> RunResult:
        """Write an ``index.js`` re-exporting every requested folder.

        The index lands in the parent of the first positional argument.

        Raises:
            PathAlreadyExistsError: The index file already exists.
        """
        started = time.monotonic()
        directory = resolve_parent_folder(request.base_path / request.first_argument)
        folders = [resolve_component_name(arg).raw for arg in request.component_names]
        artifact = build_folder_index(folders, directory, self.config)

        await self._check_not_existing([artifact.path])
        component = await self._generate_component(
            ComponentName(raw=artifact.relative_file_name), directory, [artifact]
        )
        return RunResult(
            components=[component],
            elapsed_seconds=time.monotonic() - started,
        )

    def resolve_targets(self, request: GenerationRequest) -> list[tuple[ComponentName, Path]]:
        """Pair each requested name with its destination folder.

        Every folder is created beside the first positional argument, so
        ``src/components/button input`` yields ``src/components/button`` and
        ``src/components/input``.
        """
        parent = resolve_parent_folder(request.base_path / request.first_argument)
        targets = []
        for arg in request.component_names:
            name = resolve_component_name(arg)
            targets.append((name, parent / name.raw))
        return targets

    # -- Pipeline steps ----------------------------------------------------

    async def _check_not_existing(self, paths: list[Path]) -> None:
        found = await asyncio.gather(*(self.fs.exists(p) for p in paths))
        for path, exists in zip(paths, found):
            if exists:
                raise PathAlreadyExistsError(path)

    async def _generate_component(
        self, name: ComponentName, directory: Path, artifacts: list[ArtifactSpec]
    ) -> ComponentResult:
        """Create the component's directories, then write its files concurrently."""
        result = ComponentResult(name=name.raw, directory=directory)
        try:
            await asyncio.gather(
                *(self.fs.make_dirs(d) for d in directories_for(artifacts))
            )
        except FilesystemError as exc:
            result.outcomes = [
                WriteOutcome(path=a.path, success=False, error=exc.message)
                for a in artifacts
            ]
            return result

        result.outcomes = list(
            await asyncio.gather(*(self._write(a) for a in artifacts))
        )
        return result

    async def _write(self, artifact: ArtifactSpec) -> WriteOutcome:
        try:
            await self.fs.write_text(artifact.path, artifact.rendered_content)
        except FilesystemError as exc:
            return WriteOutcome(path=artifact.path, success=False, error=exc.message)
        return WriteOutcome(path=artifact.path)


def _check_duplicates(
    plans: list[tuple[ComponentName, Path, list[ArtifactSpec]]],
) -> None:
    folders: dict[Path, list[str]] = {}
    files: dict[Path, list[str]] = {}
    for name, directory, artifacts in plans:
        folders.setdefault(directory, []).append(name.raw)
        for artifact in artifacts:
            files.setdefault(artifact.path, []).append(name.raw)
    for seen in (folders, files):
        for path, names in seen.items():
            if len(names) > 1:
                raise DuplicateComponentError(path, names)
