"""CLI command implementations"""

import logging
from typing import Annotated

import typer

from stanley.cli.prompts import ask_kind, ask_title
from stanley.core.models import KIND_SPECS, ContentRecord
from stanley.core.write import write_content
from stanley.errors import IOFailure


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def new_cmd(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output")] = False,
    ):
    """Create a new note or post under ./content, pre-filled with draft front matter."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    kind = ask_kind()
    title = ask_title()

    record = ContentRecord.create(kind, title)
    try:
        path = write_content(record)
    except IOFailure as e:
        _fail("could not write the file", e)
    typer.echo(f"Wrote {path.as_posix()}")


def kinds_cmd():
    """List content kinds with their directory, template and taxonomy."""
    for kind, spec in KIND_SPECS.items():
        typer.echo(f"{kind.value}: {spec.subdir}/  {spec.template}.html  {spec.taxonomy}")
