# SPDX-License-Identifier: MIT

from typing import Optional

from keepsake.model.entry import Entry, Mood
from keepsake.service.search import filter_by_tag, search_entries


def filter_entries(
    entries: list[Entry],
    query: Optional[str] = None,
    favorites_only: bool = False,
    mood: Optional[Mood] = None,
    rating: Optional[int] = None,
    tag: Optional[str] = None,
) -> list[Entry]:
    """
    Narrow entries the way the list and favorites views do.

    A blank query means no search; the repository's own search treats an
    empty query as matching everything.
    """
    filtered = entries
    if query is not None and query.strip() != "":
        filtered = search_entries(query, filtered)
    if favorites_only:
        filtered = [entry for entry in filtered if entry["favorite"]]
    if mood is not None:
        filtered = [entry for entry in filtered if entry.get("mood") == mood]
    if rating is not None:
        filtered = [entry for entry in filtered if entry.get("rating") == rating]
    if tag is not None:
        filtered = filter_by_tag(filtered, tag)
    return filtered


def sort_by_date(entries: list[Entry], newest_first: bool = True) -> list[Entry]:
    return sorted(entries, key=lambda entry: entry["date"], reverse=newest_first)
