"""Command-line entry point for shared-scaffold.

Usage::

    shared-scaffold src/components/button
    shared-scaffold src/components/button input select --withcontainer -f
    shared-scaffold src/components/button input --createindex
"""

from __future__ import annotations

import argparse
import asyncio
import re
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError
from rich.markup import escape

from shared_scaffold import __version__
from shared_scaffold.config import Config
from shared_scaffold.errors import InvalidArgumentsError, PathAlreadyExistsError, ScaffoldError
from shared_scaffold.models import GenerationFlags, GenerationRequest, RunResult
from shared_scaffold.scaffolder import ComponentGenerator
from shared_scaffold.scaffolder.resolver import resolve_component_name
from shared_scaffold.utils import (
    create_progress,
    format_duration,
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
)

_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shared-scaffold",
        description="Scaffold react-shared components (web + native render files, tests, containers)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  shared-scaffold src/components/button\n"
            "  shared-scaffold src/components/button input --withcontainer -f\n"
            "  shared-scaffold src/components/button input --createindex\n"
        ),
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Component path; further names are created beside the first one",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--withcontainer", action="store_true",
                        help="Creates a Container File for the Component")
    parser.add_argument("--notest", action="store_true", help="No test file")
    parser.add_argument("--reactnative", action="store_true",
                        help="Creates React Native components")
    parser.add_argument("--createindex", action="store_true",
                        help="Creates index.js file for multiple component imports")
    parser.add_argument("-f", "--functional", action="store_true",
                        help="Creates React stateless functional component")
    parser.add_argument("-u", "--uppercase", action="store_true",
                        help="Component test files start on uppercase letter")
    parser.add_argument("--storybook", action="store_true",
                        help="Also creates a Storybook story and its snapshot test")
    parser.add_argument("--legacy-casing", action="store_true",
                        help="Keep the first file name of each group in its typed case")
    parser.add_argument("--config", type=Path, default=None,
                        help="JSON file with layout settings (default: environment)")
    return parser


def flags_from_args(args: argparse.Namespace) -> GenerationFlags:
    return GenerationFlags(
        with_container=args.withcontainer,
        no_test=args.notest,
        react_native=args.reactnative,
        create_index=args.createindex,
        functional=args.functional,
        uppercase=args.uppercase,
        storybook=args.storybook,
        legacy_casing=args.legacy_casing,
    )


def validate_arguments(
    paths: Sequence[str], flags: GenerationFlags, base_path: Path | None = None
) -> None:
    """Reject input that cannot describe a generation run.

    Raises:
        InvalidArgumentsError: No path was given, *base_path* is not an
            existing directory, or a name is not a valid JavaScript identifier.
    """
    if not paths:
        raise InvalidArgumentsError("You must provide at least one component path")
    if base_path is not None and not base_path.is_dir():
        raise InvalidArgumentsError(f"Project root is not an existing directory: {base_path}")

    for arg in paths:
        name = resolve_component_name(arg).raw
        if not name:
            raise InvalidArgumentsError(f"Cannot derive a component name from {arg!r}")
        if not _JS_IDENTIFIER.match(name):
            raise InvalidArgumentsError(
                f"Component name {name!r} is not a valid JavaScript identifier"
            )

    if flags.create_index:
        ignored = [
            option
            for option, enabled in (
                ("--withcontainer", flags.with_container),
                ("--notest", flags.no_test),
                ("--functional", flags.functional),
                ("--storybook", flags.storybook),
            )
            if enabled
        ]
        if ignored:
            print_warning(f"Ignored with --createindex: {', '.join(ignored)}")


def load_config(path: Path | None) -> Config:
    if path is None:
        return Config.from_env()
    return Config.load(path)


def report(request: GenerationRequest, result: RunResult, root: Path) -> None:
    """Print the success summary for a finished run."""
    rows: dict[str, str] = {}
    for component in result.components:
        files = []
        for outcome in component.outcomes:
            try:
                files.append(str(outcome.path.relative_to(root)))
            except ValueError:
                files.append(str(outcome.path))
        rows[component.name] = "\n".join(files)

    print_info(f"Created new React components at: {escape(request.first_argument)}")
    print_summary_table(rows, title="Generated files")
    print_info(f"Finished in {format_duration(result.elapsed_seconds)}")
    print_success("Success!")


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``shared-scaffold`` and ``python -m shared_scaffold``."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValidationError) as exc:
        print_error(f"Could not load configuration: {escape(str(exc))}")
        return 1

    flags = flags_from_args(args)
    root = config.root_dir.resolve()

    try:
        validate_arguments(args.paths, flags, root)
        request = GenerationRequest(component_names=args.paths, base_path=root, flags=flags)
        generator = ComponentGenerator(config.model_copy(update={"root_dir": root}))
        with create_progress() as progress:
            progress.add_task("Creating components files...", total=None)
            result = asyncio.run(generator.run(request))
    except PathAlreadyExistsError as exc:
        print_error(escape(f"Folder already exists at {exc.path}"))
        return 1
    except ScaffoldError as exc:
        print_error(escape(str(exc)))
        return 1

    report(request, result, root)
    return 0
