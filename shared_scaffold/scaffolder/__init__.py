"""Component scaffolder -- templates, path resolution, file sets and orchestration."""

from shared_scaffold.scaffolder.builder import build_artifacts, build_folder_index
from shared_scaffold.scaffolder.filesystem import AsyncFileSystem
from shared_scaffold.scaffolder.generator import ComponentGenerator
from shared_scaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "AsyncFileSystem",
    "ComponentGenerator",
    "TemplateRenderer",
    "build_artifacts",
    "build_folder_index",
]
