"""Pydantic v2 models describing a generation run.

A ``GenerationRequest`` is parsed once from the command line and never
mutated.  Each requested component expands into a list of ``ArtifactSpec``
objects, and writing each artifact yields exactly one ``WriteOutcome``.
Outcomes are grouped per component (``ComponentResult``) and per run
(``RunResult``).
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from shared_scaffold.errors import FilesystemError
from shared_scaffold.utils import capitalize_first_letter


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ArtifactKind(str, Enum):
    """Every kind of file the generator knows how to render."""
    INDEX = "index"
    WEB_COMPONENT = "web_component"
    NATIVE_COMPONENT = "native_component"
    CONTAINER = "container"
    TEST_WEB = "test_web"
    TEST_NATIVE = "test_native"
    STORYBOOK_COMPONENT = "storybook_component"
    STORYBOOK_TEST = "storybook_test"
    FOLDER_INDEX = "folder_index"


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

class GenerationFlags(BaseModel):
    """Boolean switches taken from the command line."""

    model_config = ConfigDict(frozen=True)

    with_container: bool = Field(default=False, description="Also emit a redux container file")
    no_test: bool = Field(default=False, description="Skip the __tests__ files")
    react_native: bool = Field(default=False, description="Treat the native render file as primary")
    create_index: bool = Field(default=False, description="Emit an index-of-folders file instead")
    functional: bool = Field(default=False, description="Use the functional web template")
    uppercase: bool = Field(default=False, description="Capitalize test file names")
    storybook: bool = Field(default=False, description="Also emit Storybook story and test")
    legacy_casing: bool = Field(
        default=False,
        description="Reproduce the old first-element-untouched file-name casing",
    )


class GenerationRequest(BaseModel):
    """One invocation of the generator."""

    model_config = ConfigDict(frozen=True)

    component_names: list[str] = Field(..., min_length=1, description="Positional CLI arguments")
    base_path: Path = Field(..., description="Absolute directory the arguments are relative to")
    flags: GenerationFlags = Field(default_factory=GenerationFlags)

    @field_validator("base_path")
    @classmethod
    def _must_be_absolute(cls, value: Path) -> Path:
        if not value.is_absolute():
            raise ValueError(f"base_path must be absolute, got {value}")
        return value

    @property
    def first_argument(self) -> str:
        """The first positional argument, echoed in the success message."""
        return self.component_names[0]


class ComponentName(BaseModel):
    """A component name as typed plus its capitalized identifier form."""

    model_config = ConfigDict(frozen=True)

    raw: str

    @computed_field  # type: ignore[misc]
    @property
    def capitalized(self) -> str:
        return capitalize_first_letter(self.raw)

    def __str__(self) -> str:
        return self.raw


# ---------------------------------------------------------------------------
# Artifacts and outcomes
# ---------------------------------------------------------------------------

class ArtifactSpec(BaseModel):
    """One file to materialise: where it goes and what it contains."""

    kind: ArtifactKind
    path: Path = Field(..., description="Absolute destination path")
    rendered_content: str = Field(default="")

    @property
    def relative_file_name(self) -> str:
        return self.path.name

    @property
    def directory(self) -> Path:
        return self.path.parent


class WriteOutcome(BaseModel):
    """Result of writing a single artifact."""

    path: Path
    success: bool = True
    error: Optional[str] = None


class ComponentResult(BaseModel):
    """Aggregated outcomes for one component."""

    name: str
    directory: Path
    outcomes: list[WriteOutcome] = Field(default_factory=list)

    @computed_field  # type: ignore[misc]
    @property
    def succeeded(self) -> bool:
        return all(o.success for o in self.outcomes)

    @property
    def first_failure(self) -> Optional[WriteOutcome]:
        return next((o for o in self.outcomes if not o.success), None)


class RunResult(BaseModel):
    """Aggregated outcomes for a whole invocation."""

    components: list[ComponentResult] = Field(default_factory=list)
    elapsed_seconds: float = Field(default=0.0, ge=0.0)

    @computed_field  # type: ignore[misc]
    @property
    def succeeded(self) -> bool:
        return all(c.succeeded for c in self.components)

    @property
    def first_failure(self) -> Optional[WriteOutcome]:
        for component in self.components:
            failure = component.first_failure
            if failure is not None:
                return failure
        return None

    @property
    def written_paths(self) -> list[Path]:
        return [o.path for c in self.components for o in c.outcomes if o.success]

    def raise_for_failure(self) -> None:
        """Raise ``FilesystemError`` for the first failed write, if any."""
        failure = self.first_failure
        if failure is not None:
            raise FilesystemError(failure.path, failure.error or "write failed")
