# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from keepsake.model.deleted_entry import DeletedEntry
from keepsake.model.entry import Entry
from keepsake.time import (
    format_local_date,
    format_local_datetime,
)
from keepsake.view.header import header
from keepsake.view.util import format_mood, format_rating, format_tags, truncate


def entries_view(report_name: str, entries: list[Entry], no_wrap: bool = False) -> None:
    header(report_name)

    entries_table = Table(box=box.SIMPLE)
    entries_table.add_column("id", no_wrap=True)
    entries_table.add_column("date")
    entries_table.add_column("", no_wrap=True)
    entries_table.add_column("title", no_wrap=no_wrap, overflow="ellipsis")
    entries_table.add_column("mood")
    entries_table.add_column("rating")
    entries_table.add_column("tags", no_wrap=no_wrap, overflow="ellipsis")

    for entry in entries:
        entries_table.add_row(
            entry["id"],
            format_local_date(entry["date"]),
            "♥" if entry["favorite"] else "",
            entry["title"],
            format_mood(entry.get("mood")),
            format_rating(entry.get("rating")),
            format_tags(entry["tags"]),
        )

    console = Console()
    console.print(entries_table)


def single_entry_report(entry: Entry) -> None:
    header("entry")

    entry_table = Table(box=box.SIMPLE)
    entry_table.add_column("property")
    entry_table.add_column("value")

    entry_table.add_row("id", entry["id"])
    entry_table.add_row("date", format_local_datetime(entry["date"]))
    entry_table.add_row("title", entry["title"])
    entry_table.add_row("content", entry["content"])
    entry_table.add_row("mood", format_mood(entry.get("mood")))
    entry_table.add_row("rating", format_rating(entry.get("rating")))
    entry_table.add_row("tags", format_tags(entry["tags"]))
    entry_table.add_row("favorite", "yes" if entry["favorite"] else "no")
    images = entry.get("images") or []
    entry_table.add_row("images", "\n".join(truncate(image) for image in images))

    console = Console()
    console.print(entry_table)


def deleted_entries_view(deleted_entries: list[DeletedEntry]) -> None:
    header("trash")

    deleted_table = Table(box=box.SIMPLE)
    deleted_table.add_column("id", no_wrap=True)
    deleted_table.add_column("deleted")
    deleted_table.add_column("entry date")
    deleted_table.add_column("title")

    for deleted in deleted_entries:
        deleted_table.add_row(
            deleted["id"],
            format_local_datetime(deleted["deleted_at"]),
            format_local_date(deleted["entry"]["date"]),
            deleted["entry"]["title"],
        )

    console = Console()
    console.print(deleted_table)


def tags_view(tags: list[str]) -> None:
    header("tags")
    console = Console()
    for tag in tags:
        console.print(f" {tag}")
