# SPDX-License-Identifier: MIT

from typing import Annotated

import pendulum
import typer
from rich import box
from rich.console import Console
from rich.table import Table

from keepsake.service.offline import drain
from keepsake.terminal.custom_typer import AliasedTyperGroup
from keepsake.terminal.util import get_journal
from keepsake.time import format_local_datetime
from keepsake.view.header import header

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("status, st")
def status(ctx: typer.Context) -> None:
    """
    Show connectivity, the offline flag and the queue size.
    """
    queue = get_journal(ctx).offline_queue
    header("offline")
    typer.echo(f" online: {'yes' if queue.is_online() else 'no'}")
    typer.echo(f" offline mode: {'on' if queue.is_offline() else 'off'}")
    typer.echo(f" pending entries: {len(queue.pending())}")


@app.command("mode, m")
def mode(
    ctx: typer.Context,
    offline: Annotated[bool, typer.Option("--on/--off")] = True,
) -> None:
    """
    Turn offline mode on or off. New entries are queued while it is on.
    """
    get_journal(ctx).offline_queue.set_offline(offline)
    typer.echo(f"Offline mode {'on' if offline else 'off'}")


@app.command("queue, q")
def queue(ctx: typer.Context) -> None:
    """List queued entries."""
    header("offline queue")
    queue_table = Table(box=box.SIMPLE)
    queue_table.add_column("id", no_wrap=True)
    queue_table.add_column("queued")
    queue_table.add_column("title")
    queue_table.add_column("synced")
    for item in get_journal(ctx).offline_queue.list_items():
        queue_table.add_row(
            item["id"],
            format_local_datetime(
                pendulum.from_timestamp(item["timestamp"] / 1000)
            ),
            str(item["data"].get("title", "")),
            "✓" if item["synced"] else "",
        )
    Console().print(queue_table)


@app.command("drain, d")
def drain_queue(ctx: typer.Context) -> None:
    """
    Merge queued entries into the journal if a connection is available.
    """
    journal = get_journal(ctx)
    if not journal.offline_queue.is_online():
        typer.echo("Still offline, nothing merged")
        raise typer.Exit(1)
    created = drain(journal.offline_queue, journal.entries)
    typer.echo(f"Merged {len(created)} entries")


@app.command("clear, c")
def clear(ctx: typer.Context) -> None:
    """Discard the offline queue."""
    get_journal(ctx).offline_queue.clear()
    typer.echo("Offline queue cleared")
