# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import click
import pendulum
import typer

from keepsake import time
from keepsake.model.entry import MOODS, Mood
from keepsake.service.entry import delete_entry
from keepsake.service.filter import filter_entries, sort_by_date
from keepsake.template.entry import get_entry_draft_template
from keepsake.terminal.custom_typer import AliasedTyperGroup
from keepsake.terminal.parse import edit_text, parse_date, parse_datetime
from keepsake.terminal.util import fail, get_journal
from keepsake.view.entry import entries_view, single_entry_report, tags_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATETIME_HELP = (
    "valid inputs: YYYY-MM-DD HH:mm, (H)H:mm, now, today, yesterday, "
    "or day offset like -1"
)
MOOD_CHOICE = click.Choice(MOODS)


@app.command("add, a")
def add(
    ctx: typer.Context,
    title: Annotated[str, typer.Option("--title", "-t")],
    content: Annotated[
        Optional[str],
        typer.Option("--content", "-c", help="opens $EDITOR when omitted"),
    ] = None,
    date: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--date", "-d", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    mood: Annotated[
        Optional[str], typer.Option("--mood", "-m", click_type=MOOD_CHOICE)
    ] = None,
    rating: Annotated[
        Optional[int], typer.Option("--rating", "-r", min=1, max=5)
    ] = None,
    tags: Annotated[
        Optional[list[str]],
        typer.Option("--tag", "-tg", help="accepts multiple tag options"),
    ] = None,
    favorite: Annotated[bool, typer.Option("--favorite", "-f")] = False,
    images: Annotated[
        Optional[list[str]],
        typer.Option("--image", "-i", help="data URI or URL, accepts multiple"),
    ] = None,
) -> None:
    """
    Write a new journal entry.
    """
    journal = get_journal(ctx)

    if content is None:
        content = edit_text()
        if content is None:
            raise typer.Exit(0)

    draft = get_entry_draft_template()
    draft["title"] = title
    draft["content"] = content
    draft["favorite"] = favorite
    draft["mood"] = cast(Optional[Mood], mood)
    draft["rating"] = rating
    draft["images"] = images
    if date is not None:
        draft["date"] = date
    if tags is not None:
        draft["tags"] = tags

    if journal.offline_queue.is_offline():
        item = journal.offline_queue.enqueue(draft)
        typer.echo(f"Offline: queued entry {item['id']} for later sync")
        return

    entry = journal.entries.create(draft)
    single_entry_report(entry)


@app.command("list, ls")
def list_entries(
    ctx: typer.Context,
    query: Annotated[Optional[str], typer.Option("--query", "-q")] = None,
    favorites: Annotated[bool, typer.Option("--favorites", "-f")] = False,
    mood: Annotated[
        Optional[str], typer.Option("--mood", "-m", click_type=MOOD_CHOICE)
    ] = None,
    rating: Annotated[
        Optional[int], typer.Option("--rating", "-r", min=1, max=5)
    ] = None,
    tag: Annotated[Optional[str], typer.Option("--tag", "-tg")] = None,
    day: Annotated[
        Optional[str],
        typer.Option("--day", "-d", help="YYYY-MM-DD, today, yesterday or offset"),
    ] = None,
    oldest_first: Annotated[bool, typer.Option("--oldest-first")] = False,
    no_wrap: Annotated[bool, typer.Option("--no-wrap")] = False,
) -> None:
    """
    List entries, newest first.
    """
    journal = get_journal(ctx)

    calendar_day = parse_date(day)
    if calendar_day is not None:
        entries = journal.entries.on_day(calendar_day)
    else:
        entries = journal.entries.list_all()

    entries = filter_entries(
        entries,
        query=query,
        favorites_only=favorites,
        mood=cast(Optional[Mood], mood),
        rating=rating,
        tag=tag,
    )
    entries = sort_by_date(entries, newest_first=not oldest_first)
    entries_view("favorites" if favorites else "entries", entries, no_wrap)


@app.command("show, sh", no_args_is_help=True)
def show(ctx: typer.Context, id: str) -> None:
    """
    Show one entry in full.
    """
    entry = get_journal(ctx).entries.get(id)
    if entry is None:
        fail(f"No entry with id {id}")
    single_entry_report(entry)


@app.command("modify, m", no_args_is_help=True)
def modify(
    ctx: typer.Context,
    id: str,
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    content: Annotated[Optional[str], typer.Option("--content", "-c")] = None,
    edit: Annotated[
        bool, typer.Option("--edit", "-e", help="edit content in $EDITOR")
    ] = False,
    date: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--date", "-d", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    mood: Annotated[
        Optional[str], typer.Option("--mood", "-m", click_type=MOOD_CHOICE)
    ] = None,
    rating: Annotated[
        Optional[int], typer.Option("--rating", "-r", min=1, max=5)
    ] = None,
    add_tags: Annotated[
        Optional[list[str]],
        typer.Option("--add-tag", "-at", help="accepts multiple tag options"),
    ] = None,
    remove_tag_list: Annotated[
        Optional[list[str]],
        typer.Option("--remove-tag", "-rt", help="accepts multiple tag options"),
    ] = None,
    add_images: Annotated[
        Optional[list[str]], typer.Option("--add-image", "-ai")
    ] = None,
    remove_mood: Annotated[bool, typer.Option("--remove-mood", "-rm")] = False,
    remove_rating: Annotated[bool, typer.Option("--remove-rating", "-rr")] = False,
    remove_images: Annotated[bool, typer.Option("--remove-images", "-ri")] = False,
) -> None:
    """
    Change fields of an entry. Fields not given are left as they are.
    """
    journal = get_journal(ctx)
    entry = journal.entries.get(id)
    if entry is None:
        fail(f"No entry with id {id}")

    fields: dict[str, object] = {}
    if title is not None:
        fields["title"] = title
    if edit:
        edited = edit_text(entry["content"])
        if edited is not None:
            fields["content"] = edited
    elif content is not None:
        fields["content"] = content
    if date is not None:
        fields["date"] = date
    if mood is not None:
        fields["mood"] = mood
    if rating is not None:
        fields["rating"] = rating
    if add_tags is not None or remove_tag_list is not None:
        tags = list(entry["tags"])
        for tag in add_tags or []:
            if tag not in tags:
                tags.append(tag)
        fields["tags"] = [tag for tag in tags if tag not in (remove_tag_list or [])]
    if add_images is not None:
        fields["images"] = list(entry.get("images") or []) + add_images

    if remove_mood:
        fields["mood"] = None
    if remove_rating:
        fields["rating"] = None
    if remove_images:
        fields["images"] = None

    journal.entries.update(id, fields)
    updated = journal.entries.get(id)
    if updated is not None:
        single_entry_report(updated)


@app.command("favorite, f", no_args_is_help=True)
def favorite(
    ctx: typer.Context,
    id: str,
    off: Annotated[bool, typer.Option("--off", help="remove from favorites")] = False,
) -> None:
    """
    Mark an entry as a favorite.
    """
    if not get_journal(ctx).entries.update(id, {"favorite": not off}):
        fail(f"No entry with id {id}")
    typer.echo(f"{'Unfavorited' if off else 'Favorited'} {id}")


@app.command("delete, d", no_args_is_help=True)
def delete(ctx: typer.Context, id: str) -> None:
    """
    Delete an entry. It can be restored from the trash.
    """
    journal = get_journal(ctx)
    deleted = delete_entry(journal.entries, journal.deleted_entries, id)
    if deleted is None:
        fail(f"No entry with id {id}")
    typer.echo(f"Moved entry {id} to trash as {deleted['id']}")


@app.command("search, s", no_args_is_help=True)
def search(
    ctx: typer.Context,
    query: Annotated[str, typer.Argument(help="Search query string")],
    no_wrap: Annotated[bool, typer.Option("--no-wrap")] = False,
) -> None:
    """
    Search titles, content and tags.
    """
    entries = get_journal(ctx).entries.search(query)
    entries_view(f"search: {query}", sort_by_date(entries), no_wrap)


@app.command("tags, tg")
def tags(ctx: typer.Context) -> None:
    """
    List every tag in use.
    """
    tags_view(get_journal(ctx).entries.all_tags())


@app.command("range, rg", no_args_is_help=True)
def date_range(
    ctx: typer.Context,
    start: Annotated[
        pendulum.DateTime, typer.Argument(parser=parse_datetime, help=DATETIME_HELP)
    ],
    end: Annotated[
        Optional[pendulum.DateTime],
        typer.Argument(parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
) -> None:
    """
    List entries dated between two moments, both inclusive.
    """
    if end is None:
        end = time.now_utc()
    entries = get_journal(ctx).entries.by_date_range(start, end)
    entries_view("range", sort_by_date(entries))
