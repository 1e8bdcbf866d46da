"""CLI app definition and command registration."""

import os
from dataclasses import replace
from typing import Annotated

import typer

from vergen import __version__
from vergen.config import (
    DEFAULT_DIRTY_SUFFIX,
    DEFAULT_PACKAGE_NAME,
    DEFAULT_TIMEOUT,
    VALID_LANGUAGES,
    GeneratorConfig,
)
from vergen.generator import create_file
from vergen.utils import CommandError, log


def _version_callback(value: bool):
    if value:
        typer.echo(__version__)
        raise typer.Exit()


app = typer.Typer(
    help="Generate a source file with version constants from git.",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit.", callback=_version_callback, is_eager=True),
    ] = False,
) -> None:
    """Build-version constants generator."""


# ============================================
# Commands
# ============================================


@app.command()
def generate(
    output: Annotated[
        str, typer.Argument(help="File to write. Defaults to <package-name>/<package-name>.<ext>")
    ] = "",
    dirty_suffix: Annotated[
        str, typer.Option(help="Appended to the version when there are uncommitted changes")
    ] = DEFAULT_DIRTY_SUFFIX,
    ignore: Annotated[
        list[str] | None,
        typer.Option(help="Extra filename substring whose changes don't make the build dirty (repeatable). The output file is always ignored"),
    ] = None,
    timeout: Annotated[
        float, typer.Option(help="Seconds to wait for each git command before killing it")
    ] = DEFAULT_TIMEOUT,
    package_name: Annotated[
        str, typer.Option(help="Package name used in the generated file")
    ] = DEFAULT_PACKAGE_NAME,
    language: Annotated[
        str, typer.Option(help=f"Output language: {', '.join(VALID_LANGUAGES)}")
    ] = "go",
    repo_dir: Annotated[
        str, typer.Option(help="Run git against this directory instead of the current one")
    ] = "",
) -> None:
    """Write the version file from 'git describe --tags', HEAD and the dirty state."""
    try:
        config = GeneratorConfig(
            dirty_suffix=dirty_suffix,
            timeout=timeout,
            package_name=package_name,
            language=language,
            repo_dir=repo_dir,
        )
    except ValueError as exc:
        log(f"ERROR: {exc}", style="bold red")
        raise typer.Exit(code=2)

    path = output or config.default_output_path()
    if ignore:
        config = replace(config, ignore_files=(os.path.basename(path), *ignore))

    try:
        create_file(path, config)
    except (CommandError, OSError) as exc:
        log(f"FATAL: {exc}", style="bold red")
        raise typer.Exit(code=1)

    log(f"Wrote {path}", style="green")
