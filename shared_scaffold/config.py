"""shared-scaffold configuration.

Describes the conventions of the target React project: which directory name
holds components, where containers live, what the shared render file is
called, and which extensions each artifact gets.  All settings are Pydantic
v2 models so they can be validated at construction time and serialised to or
from JSON and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class ProjectLayout(BaseModel):
    """Directory and file-name conventions of the target project."""

    components_dir: str = Field(
        default="components",
        min_length=1,
        description="Directory segment that anchors component paths",
    )
    containers_dir: str = Field(
        default="containers",
        min_length=1,
        description="Directory segment that replaces components_dir for container files",
    )
    tests_dir: str = Field(default="__tests__", min_length=1)
    shared_name: str = Field(
        default="Render",
        min_length=1,
        description="Base name of the shared web/native render files",
    )
    container_import_prefix: str = Field(
        default="../../",
        description="Relative ascent prepended to container import paths",
    )
    index_file_name: str = Field(default="index.js", min_length=1)


class FileExtensions(BaseModel):
    """File extensions for each artifact group (without leading dots for infixes)."""

    index: str = Field(default="js")
    web: str = Field(default="jsx")
    native: str = Field(default="native.js")
    test: str = Field(default="test")
    stories: str = Field(default="stories")


class Config(BaseModel):
    """Global shared-scaffold configuration.

    Created once by the CLI and passed to the generator; nothing reads it
    from module state.
    """

    root_dir: Path = Field(default_factory=Path.cwd)
    layout: ProjectLayout = Field(default_factory=ProjectLayout)
    extensions: FileExtensions = Field(default_factory=FileExtensions)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON.

        Args:
            path: The JSON file to read.

        Returns:
            A validated ``Config`` instance.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            SHARED_SCAFFOLD_ROOT, SHARED_SCAFFOLD_COMPONENTS_DIR,
            SHARED_SCAFFOLD_CONTAINERS_DIR, SHARED_SCAFFOLD_TESTS_DIR,
            SHARED_SCAFFOLD_SHARED_NAME.
        """
        layout_kwargs: dict[str, Any] = {}
        if os.environ.get("SHARED_SCAFFOLD_COMPONENTS_DIR"):
            layout_kwargs["components_dir"] = os.environ["SHARED_SCAFFOLD_COMPONENTS_DIR"]
        if os.environ.get("SHARED_SCAFFOLD_CONTAINERS_DIR"):
            layout_kwargs["containers_dir"] = os.environ["SHARED_SCAFFOLD_CONTAINERS_DIR"]
        if os.environ.get("SHARED_SCAFFOLD_TESTS_DIR"):
            layout_kwargs["tests_dir"] = os.environ["SHARED_SCAFFOLD_TESTS_DIR"]
        if os.environ.get("SHARED_SCAFFOLD_SHARED_NAME"):
            layout_kwargs["shared_name"] = os.environ["SHARED_SCAFFOLD_SHARED_NAME"]

        root = os.environ.get("SHARED_SCAFFOLD_ROOT")
        return cls(
            root_dir=Path(root).resolve() if root else Path.cwd(),
            layout=ProjectLayout(**layout_kwargs),
        )
