# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from keepsake.terminal.custom_typer import AliasedTyperGroup
from keepsake.terminal.util import fail, get_journal
from keepsake.view.settings import reminders_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    ctx: typer.Context,
    time_of_day: Annotated[str, typer.Argument(metavar="HH:MM")],
    title: Annotated[
        str, typer.Option("--title", "-t")
    ] = "Time to write in your journal",
) -> None:
    """
    Add a daily reminder.
    """
    reminder = get_journal(ctx).reminders.create(title, time_of_day)
    typer.echo(f"Added reminder {reminder['id']} at {reminder['time']}")


@app.command("list, ls")
def list_reminders(ctx: typer.Context) -> None:
    reminders_view(get_journal(ctx).reminders.list_all())


@app.command("modify, m", no_args_is_help=True)
def modify(
    ctx: typer.Context,
    id: str,
    time_of_day: Annotated[Optional[str], typer.Option("--time", "-tm")] = None,
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    enabled: Annotated[
        Optional[bool], typer.Option("--enable/--disable", "-e/-d")
    ] = None,
) -> None:
    """
    Change a reminder. Fields not given are left as they are.
    """
    fields: dict[str, object] = {}
    if time_of_day is not None:
        fields["time"] = time_of_day
    if title is not None:
        fields["title"] = title
    if enabled is not None:
        fields["enabled"] = enabled
    if not get_journal(ctx).reminders.update(id, fields):
        fail(f"No reminder with id {id}")
    typer.echo(f"Updated reminder {id}")


@app.command("delete, d", no_args_is_help=True)
def delete(ctx: typer.Context, id: str) -> None:
    if not get_journal(ctx).reminders.delete(id):
        fail(f"No reminder with id {id}")
    typer.echo(f"Deleted reminder {id}")


@app.command("due, du")
def due(ctx: typer.Context) -> None:
    """
    Show reminders due this minute. Run once a minute, e.g. from cron.
    """
    for reminder in get_journal(ctx).reminders.due_now():
        typer.echo(reminder["title"])
