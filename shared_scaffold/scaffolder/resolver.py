"""Component name, file name and destination path resolution.

Everything here is pure path arithmetic: no filesystem access.  Paths are
handled segment by segment with ``pathlib`` so trailing separators and
nested paths behave the same on every platform, and the layout anchor
(``components`` by default) must match a whole directory name.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path, PurePath
from typing import Optional, Sequence

from shared_scaffold.config import ProjectLayout
from shared_scaffold.errors import LayoutError
from shared_scaffold.models import ArtifactKind, ComponentName
from shared_scaffold.utils import capitalize_first_letter


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------

def resolve_component_name(arg: str) -> ComponentName:
    """Return the last path segment of *arg* as a ``ComponentName``.

    ``"src/components/button/"`` and ``"src\\components\\button"`` both
    resolve to ``button``.
    """
    segments = [s for s in arg.replace("\\", "/").split("/") if s]
    return ComponentName(raw=segments[-1] if segments else "")


def resolve_parent_folder(path: str | Path) -> Path:
    """Strip the trailing segment of *path* to get its containing directory."""
    return Path(path).parent


# ---------------------------------------------------------------------------
# Layout anchors
# ---------------------------------------------------------------------------

def _anchor_index(parts: Sequence[str], segment: str) -> Optional[int]:
    for i, part in enumerate(parts):
        if part == segment:
            return i
    return None


def _relative_to_root(path: Path, root: Optional[Path]) -> tuple[Path, Path]:
    """Split *path* into ``(root, remainder)`` so anchors are only searched below *root*."""
    if root is not None:
        try:
            return root, path.relative_to(root)
        except ValueError:
            pass
    return Path(), path


def resolve_container_import_path(
    component_path: str | Path, layout: ProjectLayout
) -> str:
    """Build the import path a container file uses to reach the component.

    Finds the first segment equal to ``layout.components_dir`` and returns
    everything from there on, prefixed with ``layout.container_import_prefix``::

        resolve_container_import_path("src/components/forms/button", layout)
        -> "../../components/forms/button"

    Raises:
        LayoutError: If the anchor segment does not appear in the path.
    """
    parts = PurePath(component_path).parts
    index = _anchor_index(parts, layout.components_dir)
    if index is None:
        raise LayoutError(component_path, layout.components_dir)
    prefix = layout.container_import_prefix
    if prefix and not prefix.endswith("/"):
        prefix += "/"
    return prefix + "/".join(parts[index:])


def resolve_containers_dir(
    parent: str | Path, layout: ProjectLayout, root: Optional[Path] = None
) -> Path:
    """Swap the first ``components`` segment of *parent* for ``containers``.

    When *root* is given only the part of *parent* below it is searched, so a
    ``components`` directory above the project root is never rewritten.

    Raises:
        LayoutError: If the anchor segment does not appear in the path.
    """
    base, rel = _relative_to_root(Path(parent), root)
    parts = list(rel.parts)
    index = _anchor_index(parts, layout.components_dir)
    if index is None:
        raise LayoutError(parent, layout.components_dir)
    parts[index] = layout.containers_dir
    return base.joinpath(*parts)


# ---------------------------------------------------------------------------
# File-name casing
# ---------------------------------------------------------------------------

class CasingPolicy(str, Enum):
    """How an artifact's file name is cased."""
    ALWAYS = "always"
    NEVER = "never"
    FLAG = "flag"


DEFAULT_CASING: dict[ArtifactKind, CasingPolicy] = {
    ArtifactKind.INDEX: CasingPolicy.ALWAYS,
    ArtifactKind.WEB_COMPONENT: CasingPolicy.ALWAYS,
    ArtifactKind.NATIVE_COMPONENT: CasingPolicy.ALWAYS,
    ArtifactKind.CONTAINER: CasingPolicy.ALWAYS,
    ArtifactKind.STORYBOOK_COMPONENT: CasingPolicy.ALWAYS,
    ArtifactKind.TEST_WEB: CasingPolicy.FLAG,
    ArtifactKind.TEST_NATIVE: CasingPolicy.FLAG,
    ArtifactKind.STORYBOOK_TEST: CasingPolicy.FLAG,
    ArtifactKind.FOLDER_INDEX: CasingPolicy.NEVER,
}


def apply_casing(file_name: str, policy: CasingPolicy, uppercase: bool) -> str:
    """Return *file_name* cased according to *policy* and the ``--uppercase`` flag."""
    if policy is CasingPolicy.ALWAYS or (policy is CasingPolicy.FLAG and uppercase):
        return capitalize_first_letter(file_name)
    return file_name


def legacy_file_names(names: Sequence[str]) -> list[str]:
    """Old casing rule: the first name is left as typed, the rest are capitalized."""
    return [
        name if i == 0 else capitalize_first_letter(name)
        for i, name in enumerate(names)
    ]
