# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from keepsake.terminal.custom_typer import AliasedTyperGroup
from keepsake.terminal.util import fail, get_journal
from keepsake.view.entry import deleted_entries_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_deleted(ctx: typer.Context) -> None:
    """
    List deleted entries that can still be restored.
    """
    deleted_entries_view(get_journal(ctx).deleted_entries.list_deleted())


@app.command("restore, r", no_args_is_help=True)
def restore(ctx: typer.Context, id: str) -> None:
    """
    Put a deleted entry back into the journal.
    """
    if not get_journal(ctx).deleted_entries.restore(id):
        fail(f"No deleted entry with id {id}")
    typer.echo(f"Restored {id}")


@app.command("purge, p", no_args_is_help=True)
def purge(ctx: typer.Context, id: str) -> None:
    """
    Permanently delete one entry from the trash.
    """
    if not get_journal(ctx).deleted_entries.purge(id):
        fail(f"No deleted entry with id {id}")
    typer.echo(f"Permanently deleted {id}")


@app.command("empty, e")
def empty(
    ctx: typer.Context,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    """
    Permanently delete everything in the trash.
    """
    if not yes:
        typer.confirm("Permanently delete all entries in the trash?", abort=True)
    get_journal(ctx).deleted_entries.purge_all()
    typer.echo("Trash emptied")
