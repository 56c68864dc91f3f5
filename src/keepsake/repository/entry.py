# SPDX-License-Identifier: MIT

import datetime
import logging
from copy import deepcopy
from typing import Any, Mapping, Optional, cast

import pendulum

from keepsake import configuration, time
from keepsake.exceptions import InvalidEntryError
from keepsake.model.entity_id import EntityId, generate_entity_id
from keepsake.model.entry import MAX_RATING, MIN_RATING, MOODS, Entry, EntryDraft
from keepsake.repository.document import load_collection, save_document
from keepsake.service.search import (
    filter_by_date_range,
    filter_by_tag,
    search_entries,
)
from keepsake.storage import Storage

logger = logging.getLogger(__name__)

# Optional fields are omitted from the stored document when unset
OPTIONAL_FIELDS = ("mood", "rating", "images")


def serialize_entry(entry: Mapping[str, Any]) -> dict[str, Any]:
    serializable_entry = dict(deepcopy(entry))
    serializable_entry["date"] = time.to_iso(serializable_entry["date"])
    for field in OPTIONAL_FIELDS:
        if field in serializable_entry and serializable_entry[field] is None:
            del serializable_entry[field]
    return serializable_entry


def deserialize_entry(raw_entry: Mapping[str, Any]) -> Entry:
    deserializable_entry = dict(deepcopy(raw_entry))
    deserializable_entry["date"] = time.from_iso(deserializable_entry["date"])
    deserializable_entry.setdefault("tags", [])
    deserializable_entry.setdefault("favorite", False)
    return cast(Entry, deserializable_entry)


def validate_entry(entry: Mapping[str, Any]) -> None:
    """Raise InvalidEntryError unless the entry has a storable shape."""
    for field in ("title", "content"):
        if not isinstance(entry.get(field), str):
            raise InvalidEntryError(f"Entry {field} must be a string")
    if not isinstance(entry.get("date"), datetime.datetime):
        raise InvalidEntryError("Entry date must be a datetime")

    mood = entry.get("mood")
    if mood is not None and mood not in MOODS:
        raise InvalidEntryError(
            f"Unknown mood '{mood}'", detail=f"expected one of {', '.join(MOODS)}"
        )

    rating = entry.get("rating")
    if rating is not None:
        if isinstance(rating, bool) or not isinstance(rating, int):
            raise InvalidEntryError("Entry rating must be an integer")
        if not MIN_RATING <= rating <= MAX_RATING:
            raise InvalidEntryError(
                f"Entry rating must be between {MIN_RATING} and {MAX_RATING}"
            )

    tags = entry.get("tags")
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        raise InvalidEntryError("Entry tags must be a list of strings")

    if not isinstance(entry.get("favorite"), bool):
        raise InvalidEntryError("Entry favorite flag must be a boolean")

    images = entry.get("images")
    if images is not None and (
        not isinstance(images, list)
        or not all(isinstance(image, str) for image in images)
    ):
        raise InvalidEntryError("Entry images must be a list of strings")


def _merge_serialized(
    raw_entry: dict[str, Any], fields: Mapping[str, Any]
) -> dict[str, Any]:
    updated = dict(raw_entry)
    for field, value in fields.items():
        if field in OPTIONAL_FIELDS and value is None:
            updated.pop(field, None)
        elif field == "date":
            updated["date"] = time.to_iso(value)
        else:
            updated[field] = deepcopy(value)
    return updated


class EntryRepository:
    """
    The live entry collection.

    Every operation reads the whole collection from storage and, when it
    changes something, writes the whole collection back.
    """

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    def __load_data(self) -> list[dict[str, Any]]:
        return load_collection(self._storage, configuration.ENTRIES_KEY)

    def __save_data(self, raw_entries: list[dict[str, Any]]) -> None:
        save_document(self._storage, configuration.ENTRIES_KEY, raw_entries)

    def list_all(self) -> list[Entry]:
        return [deserialize_entry(raw_entry) for raw_entry in self.__load_data()]

    def get(self, id: EntityId) -> Optional[Entry]:
        for raw_entry in self.__load_data():
            if raw_entry.get("id") == id:
                return deserialize_entry(raw_entry)
        return None

    def create(self, draft: EntryDraft) -> Entry:
        entry = cast(dict[str, Any], deepcopy(dict(draft)))
        entry.pop("id", None)
        validate_entry(entry)

        # Deduplicate tags
        entry["tags"] = list(dict.fromkeys(entry["tags"]))

        raw_entries = self.__load_data()
        existing_ids = {raw_entry.get("id") for raw_entry in raw_entries}
        entry_id = generate_entity_id()
        while entry_id in existing_ids:
            entry_id = generate_entity_id()
        entry["id"] = entry_id

        serializable_entry = serialize_entry(entry)
        raw_entries.append(serializable_entry)
        self.__save_data(raw_entries)

        logger.info(f"Created entry {entry_id}")
        return deserialize_entry(serializable_entry)

    def update(self, id: EntityId, fields: Mapping[str, Any]) -> bool:
        """
        Shallow-merge fields into an entry. Fields not given are left
        untouched. Returns False when no entry has the id.
        """
        if "id" in fields and fields["id"] != id:
            raise InvalidEntryError("Entry id cannot be changed")

        raw_entries = self.__load_data()
        for index, raw_entry in enumerate(raw_entries):
            if raw_entry.get("id") != id:
                continue
            merged = deserialize_entry(raw_entry) | cast(Entry, dict(fields))
            validate_entry(merged)
            raw_entries[index] = _merge_serialized(raw_entry, fields)
            self.__save_data(raw_entries)
            logger.info(f"Updated entry {id}")
            return True

        logger.debug(f"Update skipped, no entry {id}")
        return False

    def delete(self, id: EntityId) -> bool:
        """
        Remove an entry from the live collection. Archiving it first is the
        caller's job.
        """
        raw_entries = self.__load_data()
        remaining = [
            raw_entry for raw_entry in raw_entries if raw_entry.get("id") != id
        ]
        if len(remaining) == len(raw_entries):
            logger.debug(f"Delete skipped, no entry {id}")
            return False
        self.__save_data(remaining)
        logger.info(f"Deleted entry {id}")
        return True

    def reinsert(self, entry: Entry) -> None:
        """Append an existing entry, keeping its id."""
        validate_entry(entry)
        raw_entries = self.__load_data()
        raw_entries.append(serialize_entry(entry))
        self.__save_data(raw_entries)

    def replace_raw(self, raw_entries: list[dict[str, Any]]) -> None:
        """Overwrite the whole collection with already-serialized entries."""
        self.__save_data(raw_entries)
        logger.info(f"Replaced entry collection ({len(raw_entries)} entries)")

    def export_raw(self) -> list[dict[str, Any]]:
        """The stored documents, as they would appear in a backup file."""
        return self.__load_data()

    def search(self, query: str) -> list[Entry]:
        return search_entries(query, self.list_all())

    def by_date_range(
        self, start: datetime.datetime, end: datetime.datetime
    ) -> list[Entry]:
        """Bounds are inclusive. Naive bounds are read as local time."""
        return filter_by_date_range(
            self.list_all(), time.to_utc(start), time.to_utc(end)
        )

    def by_tag(self, tag: str) -> list[Entry]:
        return filter_by_tag(self.list_all(), tag)

    def on_day(self, day: pendulum.Date) -> list[Entry]:
        start, end = time.local_day_bounds(day)
        return self.by_date_range(start, end)

    def favorites(self) -> list[Entry]:
        return [entry for entry in self.list_all() if entry["favorite"]]

    def all_tags(self) -> list[str]:
        tags: set[str] = set()
        for entry in self.list_all():
            tags.update(entry["tags"])
        return sorted(tags)
