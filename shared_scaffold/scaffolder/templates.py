"""Jinja2 template rendering for component scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``shared_scaffold/scaffolder/templates/`` directory, plus one pure function
per artifact kind.  Callers pass names already in the casing they want in
file paths; templates only capitalize where JavaScript identifiers require
it.  Rendering never validates names: odd input produces odd output.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from shared_scaffold.utils import capitalize_first_letter


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for component scaffolding.

    The renderer loads ``.j2`` template files from a configurable
    template directory.  It holds no per-render state, so a single instance
    can serve any number of concurrent callers.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["capitalize_first"] = capitalize_first_letter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"index.js.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


_renderer = TemplateRenderer()


# ---------------------------------------------------------------------------
# Render components
# ---------------------------------------------------------------------------

def create_react_component(component_name: str) -> str:
    """Create a ``PureComponent`` class for the web render file."""
    return _renderer.render("component.jsx.j2", {"component_name": component_name})


def create_react_functional_component(component_name: str) -> str:
    """Create a stateless functional component for the web render file."""
    return _renderer.render(
        "functional_component.jsx.j2", {"component_name": component_name}
    )


def create_react_native_component(component_name: str) -> str:
    """Create a React Native ``PureComponent`` class rendering ``View``/``Text``."""
    return _renderer.render(
        "native_component.js.j2", {"component_name": component_name}
    )


# ---------------------------------------------------------------------------
# Wiring files
# ---------------------------------------------------------------------------

def create_component_container_file(name: str, import_path: str) -> str:
    """Create a react-redux container connecting *name*.

    *import_path* is substituted verbatim into the import statement.
    """
    return _renderer.render(
        "container.js.j2", {"name": name, "import_path": import_path}
    )


def create_index(component_name: str, shared_name: str) -> str:
    """Create the index file that wraps *shared_name* and exports it through ``injectIntl``."""
    return _renderer.render(
        "index.js.j2",
        {"component_name": component_name, "shared_name": shared_name},
    )


def create_index_for_folders(folders: Sequence[str]) -> str:
    """Create an index importing each folder and re-exporting them together.

    Every export entry except the last is followed by a comma.
    """
    return _renderer.render("folder_index.js.j2", {"folders": list(folders)})


# ---------------------------------------------------------------------------
# Tests and stories
# ---------------------------------------------------------------------------

def create_test(component_name: str, upper_case: bool) -> str:
    """Create a snapshot test for the component.

    The test imports ``../<Name>`` when *upper_case* is ``True`` and
    ``../<component_name>`` otherwise.
    """
    return _renderer.render(
        "test.jsx.j2",
        {"component_name": component_name, "upper_case": upper_case},
    )


def create_storybook_component(component_name: str, shared_name: str) -> str:
    return _renderer.render(
        "stories.jsx.j2",
        {"component_name": component_name, "shared_name": shared_name},
    )


def create_storybook_test(component_name: str, shared_name: str) -> str:
    return _renderer.render(
        "stories_test.js.j2",
        {"component_name": component_name, "shared_name": shared_name},
    )
