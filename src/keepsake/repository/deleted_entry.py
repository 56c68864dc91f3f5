# SPDX-License-Identifier: MIT

import logging
from typing import Any

from keepsake import configuration, time
from keepsake.model.deleted_entry import DeletedEntry
from keepsake.model.entity_id import EntityId, generate_entity_id
from keepsake.model.entry import Entry
from keepsake.repository.document import load_collection, save_document
from keepsake.repository.entry import (
    EntryRepository,
    deserialize_entry,
    serialize_entry,
    validate_entry,
)
from keepsake.storage import Storage

logger = logging.getLogger(__name__)


class DeletedEntryRepository:
    """
    Short-term undo buffer for deleted entries, kept apart from backups.
    """

    def __init__(self, storage: Storage, entries: EntryRepository) -> None:
        self._storage = storage
        self._entries = entries

    def __load_data(self) -> list[dict[str, Any]]:
        return load_collection(self._storage, configuration.DELETED_ENTRIES_KEY)

    def __save_data(self, raw_deleted: list[dict[str, Any]]) -> None:
        save_document(self._storage, configuration.DELETED_ENTRIES_KEY, raw_deleted)

    def __convert_for_serialization(self, deleted: DeletedEntry) -> dict[str, Any]:
        return {
            "id": deleted["id"],
            "entry": serialize_entry(deleted["entry"]),
            "deletedAt": time.to_iso(deleted["deleted_at"]),
        }

    def __convert_for_deserialization(self, raw: dict[str, Any]) -> DeletedEntry:
        return {
            "id": raw["id"],
            "entry": deserialize_entry(raw["entry"]),
            "deleted_at": time.from_iso(raw["deletedAt"]),
        }

    def archive_on_delete(self, entry: Entry) -> DeletedEntry:
        validate_entry(entry)
        deleted: DeletedEntry = {
            "id": generate_entity_id(),
            "entry": entry,
            "deleted_at": time.now_utc(),
        }
        serializable = self.__convert_for_serialization(deleted)

        raw_deleted = self.__load_data()
        raw_deleted.append(serializable)
        self.__save_data(raw_deleted)

        logger.info(f"Archived entry {entry['id']} as {deleted['id']}")
        return self.__convert_for_deserialization(serializable)

    def list_deleted(self) -> list[DeletedEntry]:
        return [self.__convert_for_deserialization(raw) for raw in self.__load_data()]

    def restore(self, deleted_id: EntityId) -> bool:
        """
        Put an archived entry back into the live collection with its original
        id. Returns False when no archived record has the id.
        """
        raw_deleted = self.__load_data()
        for index, raw in enumerate(raw_deleted):
            if raw.get("id") != deleted_id:
                continue
            entry = deserialize_entry(raw["entry"])
            self._entries.reinsert(entry)
            del raw_deleted[index]
            self.__save_data(raw_deleted)
            logger.info(f"Restored entry {entry['id']} from {deleted_id}")
            return True
        return False

    def purge(self, deleted_id: EntityId) -> bool:
        raw_deleted = self.__load_data()
        remaining = [raw for raw in raw_deleted if raw.get("id") != deleted_id]
        if len(remaining) == len(raw_deleted):
            return False
        self.__save_data(remaining)
        logger.info(f"Permanently deleted {deleted_id}")
        return True

    def purge_all(self) -> None:
        self._storage.remove(configuration.DELETED_ENTRIES_KEY)
        logger.info("Cleared deleted entries")
