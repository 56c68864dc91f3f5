# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from keepsake.model.entry import Entry


def __substring_match(query: str, text: Optional[str]) -> bool:
    """
    Case-insensitive substring match. An empty query matches any text.
    """
    if text is None:
        return False
    return query.lower() in text.lower()


def entry_matches(entry: Entry, query: str) -> bool:
    """
    Check if an entry's title, content or any tag contains the query.

    Args:
        entry: The entry to search
        query: The search query string

    Returns:
        True if entry matches query, False otherwise
    """
    if __substring_match(query, entry["title"]):
        return True
    if __substring_match(query, entry["content"]):
        return True
    for tag in entry["tags"]:
        if __substring_match(query, tag):
            return True
    return False


def search_entries(query: str, entries: list[Entry]) -> list[Entry]:
    return [entry for entry in entries if entry_matches(entry, query)]


def filter_by_date_range(
    entries: list[Entry], start: pendulum.DateTime, end: pendulum.DateTime
) -> list[Entry]:
    """Entries dated within [start, end], both bounds inclusive."""
    return [entry for entry in entries if start <= entry["date"] <= end]


def filter_by_tag(entries: list[Entry], tag: str) -> list[Entry]:
    return [entry for entry in entries if tag in entry["tags"]]
