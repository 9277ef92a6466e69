"""Note-taking commands.

    - that: append a note to today's file, merging any tags into its header
"""

from __future__ import annotations

import typer
from rich.markup import escape

from til.core import notes_impl
from til.core.console import console
from til.core.paths import find_root_dir, resolve_note_path
from til.core.result import Err, Ok


def split_tags(raw: list[str] | None) -> list[str]:
    """Flatten repeated, comma-delimited ``--tags`` values."""
    tags: list[str] = []
    for value in raw or []:
        tags.extend(item.strip() for item in value.split(",") if item.strip())
    return tags


def that(
    ctx: typer.Context,
    content: str = typer.Argument(..., help="The thing you learned."),
    tags: list[str] = typer.Option(
        None, "--tags", "-t", help="Comma-separated tags to add to today's header (repeatable)."
    ),
) -> None:
    """Store a note entry in today's file."""
    state = ctx.obj
    tag_list = split_tags(tags)

    match find_root_dir(state.config.notes_dir).and_then(resolve_note_path):
        case Err(err):
            console.print(f"[red]{escape(str(err))}[/red]")
            raise typer.Exit(code=1)
        case Ok(note_path):
            pass

    state.logger.debug("Appending to %s (tags: %s)", note_path, tag_list or "none")

    match notes_impl.append_entry(note_path, content, tag_list):
        case Err(err):
            console.print(f"[red]{escape(str(err))}[/red]")
            raise typer.Exit(code=1)
        case Ok(_):
            console.print(f"[green]Noted in[/green] {note_path}")
