"""Enumerates the artifacts to write for one component.

``build_artifacts`` decides which files a component gets from the request
flags, names each file according to the casing policy, binds it to a
template function, and returns the rendered ``ArtifactSpec`` list.  Nothing
here touches the filesystem.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

from shared_scaffold.config import Config
from shared_scaffold.models import ArtifactKind, ArtifactSpec, ComponentName, GenerationFlags

from .resolver import (
    DEFAULT_CASING,
    CasingPolicy,
    apply_casing,
    legacy_file_names,
    resolve_container_import_path,
    resolve_containers_dir,
)
from .templates import (
    create_component_container_file,
    create_index,
    create_index_for_folders,
    create_react_component,
    create_react_functional_component,
    create_react_native_component,
    create_storybook_component,
    create_storybook_test,
    create_test,
)

# (kind, uncased file name, content factory)
_Entry = tuple[ArtifactKind, str, Callable[[], str]]


def build_artifacts(
    name: ComponentName,
    component_dir: Path,
    flags: GenerationFlags,
    config: Config,
) -> list[ArtifactSpec]:
    """Return every artifact for *name*, rendered and placed under *component_dir*.

    Order: index, render files (native first when ``flags.react_native``),
    story, then the ``__tests__`` group, then the container.
    """
    layout = config.layout
    ext = config.extensions
    shared = layout.shared_name
    tests_upper = _test_imports_capitalized(flags)

    def web_render() -> str:
        if flags.functional:
            return create_react_functional_component(shared)
        return create_react_component(shared)

    component_entries: list[_Entry] = [
        (ArtifactKind.INDEX, f"{name.raw}.{ext.index}",
         lambda: create_index(name.capitalized, shared)),
        (ArtifactKind.WEB_COMPONENT, f"{shared}.{ext.web}", web_render),
        (ArtifactKind.NATIVE_COMPONENT, f"{shared}.{ext.native}",
         lambda: create_react_native_component(shared)),
    ]
    if flags.storybook:
        component_entries.append(
            (ArtifactKind.STORYBOOK_COMPONENT, f"{shared}.{ext.stories}.{ext.web}",
             lambda: create_storybook_component(name.raw, shared))
        )

    artifacts = _materialise(component_entries, component_dir, flags)
    if flags.react_native:
        artifacts.sort(key=lambda a: _NATIVE_FIRST.get(a.kind, 0))

    if not flags.no_test:
        test_entries: list[_Entry] = [
            (ArtifactKind.TEST_WEB, f"{name.raw}.{ext.test}.{ext.web}",
             lambda: create_test(name.raw, tests_upper)),
            (ArtifactKind.TEST_NATIVE, f"{name.raw}.{ext.test}.{ext.native}",
             lambda: create_test(name.raw, tests_upper)),
        ]
        if flags.storybook:
            test_entries.append(
                (ArtifactKind.STORYBOOK_TEST,
                 f"{name.raw}.{ext.stories}.{ext.test}.{ext.index}",
                 lambda: create_storybook_test(name.raw, shared))
            )
        artifacts.extend(
            _materialise(test_entries, component_dir / layout.tests_dir, flags)
        )

    if flags.with_container:
        artifacts.append(_container_artifact(name, component_dir, flags, config))

    return artifacts


def build_folder_index(
    folders: Sequence[str], directory: Path, config: Config
) -> ArtifactSpec:
    """Return the single ``index.js`` artifact re-exporting *folders*."""
    return ArtifactSpec(
        kind=ArtifactKind.FOLDER_INDEX,
        path=directory / config.layout.index_file_name,
        rendered_content=create_index_for_folders(folders),
    )


def directories_for(artifacts: Sequence[ArtifactSpec]) -> list[Path]:
    """Unique parent directories of *artifacts*, in first-seen order."""
    seen: dict[Path, None] = {}
    for artifact in artifacts:
        seen.setdefault(artifact.directory, None)
    return list(seen)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_NATIVE_FIRST: dict[ArtifactKind, int] = {
    ArtifactKind.INDEX: 0,
    ArtifactKind.NATIVE_COMPONENT: 1,
    ArtifactKind.WEB_COMPONENT: 2,
    ArtifactKind.STORYBOOK_COMPONENT: 3,
}


def _test_imports_capitalized(flags: GenerationFlags) -> bool:
    """Whether test files import ``../<Name>`` rather than ``../<name>``."""
    if flags.legacy_casing:
        # Legacy tests always import the capitalized name, whatever the index is called.
        return True
    policy = DEFAULT_CASING[ArtifactKind.INDEX]
    return policy is CasingPolicy.ALWAYS or (policy is CasingPolicy.FLAG and flags.uppercase)


def _file_names(entries: Sequence[_Entry], flags: GenerationFlags) -> list[str]:
    raw_names = [file_name for _, file_name, _ in entries]
    if flags.legacy_casing:
        return legacy_file_names(raw_names)
    return [
        apply_casing(file_name, DEFAULT_CASING[kind], flags.uppercase)
        for kind, file_name, _ in entries
    ]


def _materialise(
    entries: Sequence[_Entry], directory: Path, flags: GenerationFlags
) -> list[ArtifactSpec]:
    return [
        ArtifactSpec(kind=kind, path=directory / file_name, rendered_content=render())
        for (kind, _, render), file_name in zip(entries, _file_names(entries, flags))
    ]


def _container_artifact(
    name: ComponentName, component_dir: Path, flags: GenerationFlags, config: Config
) -> ArtifactSpec:
    layout = config.layout
    ext = config.extensions
    root = config.root_dir

    containers_dir = resolve_containers_dir(component_dir.parent, layout, root)

    try:
        relative_dir = component_dir.relative_to(root)
    except ValueError:
        relative_dir = component_dir
    index_stem = name.raw if flags.legacy_casing else name.capitalized
    import_path = f"{resolve_container_import_path(relative_dir, layout)}/{index_stem}"

    if flags.legacy_casing:
        file_name = f"{name.raw}.{ext.index}"
    else:
        file_name = f"{name.capitalized}Container.{ext.index}"

    return ArtifactSpec(
        kind=ArtifactKind.CONTAINER,
        path=containers_dir / file_name,
        rendered_content=create_component_container_file(name.capitalized, import_path),
    )
