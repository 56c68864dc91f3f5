# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from keepsake.repository.configuration import CONFIGURATION_REPO
from keepsake.service.share import resolve, share_url
from keepsake.terminal.custom_typer import AliasedTyperGroup
from keepsake.terminal.parse import parse_duration
from keepsake.terminal.util import fail, get_journal
from keepsake.view.entry import single_entry_report
from keepsake.view.settings import share_links_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("create, c", no_args_is_help=True)
def create(
    ctx: typer.Context,
    entry_id: str,
    expires_in: Annotated[
        Optional[pendulum.Duration],
        typer.Option(
            "--expires-in",
            "-x",
            parser=parse_duration,
            help="e.g. 30m, 12h, 7d, 2w; never expires when omitted",
        ),
    ] = None,
) -> None:
    """
    Create a read-only share link for an entry.
    """
    journal = get_journal(ctx)
    if journal.entries.get(entry_id) is None:
        fail(f"No entry with id {entry_id}")
    link = journal.share_links.create(entry_id, expires_in)
    origin = CONFIGURATION_REPO.get_config()["share_origin"]
    typer.echo(share_url(origin, link["code"]))


@app.command("list, ls")
def list_links(
    ctx: typer.Context,
    entry_id: Annotated[Optional[str], typer.Option("--entry", "-e")] = None,
) -> None:
    """
    List share links, including expired ones.
    """
    share_links = get_journal(ctx).share_links
    links = (
        share_links.list_by_entry(entry_id)
        if entry_id is not None
        else share_links.list_all()
    )
    share_links_view(CONFIGURATION_REPO.get_config()["share_origin"], links)


@app.command("delete, d", no_args_is_help=True)
def delete(ctx: typer.Context, id: str) -> None:
    if not get_journal(ctx).share_links.delete(id):
        fail(f"No share link with id {id}")
    typer.echo(f"Deleted share link {id}")


@app.command("resolve, r", no_args_is_help=True)
def resolve_code(ctx: typer.Context, code: str) -> None:
    """
    Show the entry behind a share code.
    """
    journal = get_journal(ctx)
    entry = resolve(journal.share_links, journal.entries, code.upper())
    if entry is None:
        fail(f"Share link {code} is unknown, expired, or its entry was deleted")
    single_entry_report(entry)
