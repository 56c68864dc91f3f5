# SPDX-License-Identifier: MIT

import logging
from typing import Callable, cast

from keepsake import configuration, time
from keepsake.model.entity_id import EntityId, generate_entity_id
from keepsake.model.entry import EntryDraft
from keepsake.model.offline import OfflineQueueItem
from keepsake.repository.document import (
    load_collection,
    load_document,
    save_document,
)
from keepsake.repository.entry import serialize_entry, validate_entry
from keepsake.storage import Storage

logger = logging.getLogger(__name__)


class OfflineQueueRepository:
    """
    Entries written while offline, waiting to be merged into the journal.
    Nothing drains the queue automatically.
    """

    def __init__(self, storage: Storage, connectivity: Callable[[], bool]) -> None:
        self._storage = storage
        self._connectivity = connectivity

    def __load_data(self) -> list[OfflineQueueItem]:
        return cast(
            list[OfflineQueueItem],
            load_collection(self._storage, configuration.OFFLINE_QUEUE_KEY),
        )

    def __save_data(self, items: list[OfflineQueueItem]) -> None:
        save_document(self._storage, configuration.OFFLINE_QUEUE_KEY, items)

    def enqueue(self, draft: EntryDraft) -> OfflineQueueItem:
        """
        Queue an entry draft for a later drain. The draft is validated like a
        direct create and kept in its stored form, without an id.
        """
        payload = dict(draft)
        payload.pop("id", None)
        validate_entry(payload)
        item: OfflineQueueItem = {
            "id": generate_entity_id(),
            "data": serialize_entry(payload),
            "timestamp": time.now_epoch_ms(),
            "synced": False,
        }
        items = self.__load_data()
        items.append(item)
        self.__save_data(items)
        logger.info(f"Queued offline entry {item['id']}")
        return item

    def list_items(self) -> list[OfflineQueueItem]:
        return self.__load_data()

    def pending(self) -> list[OfflineQueueItem]:
        return [item for item in self.__load_data() if not item["synced"]]

    def mark_synced(self, id: EntityId) -> bool:
        items = self.__load_data()
        for item in items:
            if item["id"] == id:
                item["synced"] = True
                self.__save_data(items)
                return True
        return False

    def remove_synced(self) -> None:
        items = self.__load_data()
        remaining = [item for item in items if not item["synced"]]
        if len(remaining) != len(items):
            self.__save_data(remaining)

    def clear(self) -> None:
        self._storage.remove(configuration.OFFLINE_QUEUE_KEY)

    def is_online(self) -> bool:
        return self._connectivity()

    def set_offline(self, offline: bool) -> None:
        save_document(self._storage, configuration.OFFLINE_STATUS_KEY, offline)

    def is_offline(self) -> bool:
        return bool(load_document(self._storage, configuration.OFFLINE_STATUS_KEY))
