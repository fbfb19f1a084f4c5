"""Interactive prompts for choosing a content kind and a title"""

from typing import Sequence

import typer

from stanley.core.models import ContentKind
from stanley.errors import UnreachableSelection


KIND_OPTIONS: list[ContentKind] = [ContentKind.note, ContentKind.post]


def select(prompt: str, options: Sequence[str], default: int = 0) -> int:
    """Show a numbered menu and return the 0-based index of the chosen option.

    Re-prompts until the answer is one of the listed numbers.
    """
    for i, option in enumerate(options, start=1):
        typer.echo(f"  {i}) {option}")
    while True:
        choice = typer.prompt(prompt, default=default + 1, type=int)
        if 1 <= choice <= len(options):
            return choice - 1
        typer.echo(f"Error: {choice} is not one of 1-{len(options)}.", err=True)


def kind_from_index(index: int) -> ContentKind:
    if not 0 <= index < len(KIND_OPTIONS):
        raise UnreachableSelection(index)
    return KIND_OPTIONS[index]


def ask_kind() -> ContentKind:
    index = select("Do you want a note or a post", [k.label for k in KIND_OPTIONS])
    return kind_from_index(index)


def ask_title() -> str:
    """Free-text title; empty input is accepted."""
    return typer.prompt("What is the title?", default="", show_default=False)
