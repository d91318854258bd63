"""Main CLI application."""

from __future__ import annotations

import io
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.errors import IssueKitError
from ..core.models import RenderTask
from ..data import json_encode, yaml_to_json_safe
from ..filesystem import paths, read_file, write_private
from ..rendering import engine
from ..settings import get_settings
from .parsers import parse_data_file

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="issuekit",
    help="Support utilities for the issue tracker CLI.",
    no_args_is_help=True,
)


def _fail(error: IssueKitError) -> typer.Exit:
    typer.echo(f"error: {error}", err=True)
    return typer.Exit(code=1)


@app.callback()
def configure(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Configure logging for every command."""
    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


@app.command()
def render(
    template: Annotated[Path, typer.Argument(help="Template file to render.")],
    data: Annotated[
        Optional[Path],
        typer.Option(
            "--data",
            help="YAML or JSON file providing the template data.",
            metavar="FILE",
        ),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write the result to FILE (owner-only permissions) instead of stdout.",
            metavar="FILE",
        ),
    ] = None,
) -> None:
    """Render a template with the issuekit function library."""
    task = RenderTask(template_path=template, data_path=data, output_path=output)
    context = parse_data_file(task.data_path)
    logger.debug(f"Rendering {task.template_path}")

    try:
        if task.output_path is None:
            engine.render_file(task.template_path, context, sys.stdout)
            return
        buffer = io.StringIO()
        engine.render_file(task.template_path, context, buffer)
        write_private(task.output_path, buffer.getvalue())
    except IssueKitError as e:
        raise _fail(e) from e

    logger.info(f"Rendered {task.template_path} → {task.output_path}")


@app.command()
def find(
    name: Annotated[str, typer.Argument(help="File name to look for.")],
    show_all: Annotated[
        bool,
        typer.Option("--all", help="Print every match instead of the closest one."),
    ] = False,
) -> None:
    """Locate NAME in the current directory, its ancestors or the home directory."""
    if show_all:
        matches = paths.find_parent_paths(name)
        if not matches:
            typer.echo(f"error: {name} not found in parent directory hierarchy", err=True)
            raise typer.Exit(code=1)
        for match in matches:
            typer.echo(str(match))
        return

    try:
        typer.echo(str(paths.find_closest_parent_path(name)))
    except IssueKitError as e:
        raise _fail(e) from e


@app.command()
def normalize(
    source: Annotated[Path, typer.Argument(help="YAML file to normalize.")],
) -> None:
    """Print a YAML document as JSON with blank values removed."""
    try:
        typer.echo(json_encode(yaml_to_json_safe(read_file(source))), nl=False)
    except IssueKitError as e:
        raise _fail(e) from e


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
