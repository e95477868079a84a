"""
NWL command line interface.

Commands:
- build: Compile every routed page of a project
- compile: Compile one page or document file
- new: Create a project skeleton
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from ._version import get_version
from .core.errors import NwlError
from .project import build_project, compile_file, scaffold_project

LOG_LEVEL_ENV = "NWL_LOG_LEVEL"

console = Console()
error_console = Console(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging once; `--verbose` wins over NWL_LOG_LEVEL."""
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"nwl {get_version()}")
        raise typer.Exit()


app = typer.Typer(
    help="NWL – compile YAML page descriptions into React components",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """NWL CLI main callback for global options."""
    configure_logging(verbose)


@app.command()
def build(
    project_dir: Path = typer.Argument(Path("."), help="Project directory containing nwl.yaml"),
) -> None:
    """
    Build a project: one component per route, the router, and the stylesheet.

    Examples:
        nwl build
        nwl build my-site
    """
    console.print(f"Building NWL project in [bold]{escape(str(project_dir))}[/bold]")
    if not project_dir.is_dir():
        error_console.print(f"[red]Build error:[/red] directory not found: {escape(str(project_dir))}")
        raise typer.Exit(code=1)

    try:
        result = build_project(project_dir)
    except NwlError as e:
        error_console.print(f"[red]Build error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    for path in result.files_created:
        console.print(f"  [dim]wrote[/dim] {escape(str(path))}")
    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {escape(warning)}")
    console.print("[green]Build successful![/green]")


@app.command(name="compile")
def compile_command(
    file: Path = typer.Argument(..., help="Page or multi-page document YAML file"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write to this file"),
) -> None:
    """
    Compile a single page file to component source.

    Prints to stdout unless --output is given.
    """
    try:
        source = compile_file(file)
    except NwlError as e:
        error_console.print(f"[red]Compilation error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    if output is None:
        typer.echo(source, nl=False)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(source, encoding="utf-8")
    except OSError as e:
        error_console.print(f"[red]Compilation error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e
    console.print(f"[green]Compiled to[/green] {escape(str(output))}")


@app.command()
def new(
    name: str = typer.Argument(..., help="Project name (also the directory name)"),
    location: Path = typer.Option(Path("."), "--location", "-l", help="Parent directory"),
) -> None:
    """Create a new project skeleton."""
    target = location / name
    try:
        files = scaffold_project(target, name)
    except NwlError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    console.print(f"[green]Created project[/green] {escape(name)} in {escape(str(target))}")
    for path in files:
        console.print(f"  {escape(str(path.relative_to(target)))}")
    console.print(f"\nNext: cd {escape(str(target))} && nwl build")


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
