# SPDX-License-Identifier: MIT

import functools
from typing import Callable, Optional

from keepsake import configuration
from keepsake.repository.credential import CredentialRepository
from keepsake.repository.deleted_entry import DeletedEntryRepository
from keepsake.repository.entry import EntryRepository
from keepsake.repository.offline_queue import OfflineQueueRepository
from keepsake.repository.pin import PinRepository
from keepsake.repository.reminder import ReminderRepository
from keepsake.repository.share_link import ShareLinkRepository
from keepsake.repository.theme import ThemeRepository
from keepsake.service.offline import probe_connectivity
from keepsake.storage import FileStorage, Storage


class Journal:
    """
    Every store, sharing one storage adapter.

    Construct one per process and pass it to whatever needs the stores;
    separate instances over separate storage never see each other's data.
    """

    def __init__(
        self,
        storage: Storage,
        connectivity: Optional[Callable[[], bool]] = None,
    ) -> None:
        self.storage = storage
        self.entries = EntryRepository(storage)
        self.deleted_entries = DeletedEntryRepository(storage, self.entries)
        self.credentials = CredentialRepository(storage)
        self.pin = PinRepository(storage)
        self.theme = ThemeRepository(storage)
        self.reminders = ReminderRepository(storage)
        self.share_links = ShareLinkRepository(storage)
        self.offline_queue = OfflineQueueRepository(
            storage, connectivity if connectivity is not None else lambda: True
        )


def open_journal(config: configuration.Configuration) -> Journal:
    """Open the journal stored under the configured data path."""
    storage = FileStorage(
        configuration.DATA_PATH, quota_bytes=config["storage_quota_bytes"]
    )
    connectivity = functools.partial(
        probe_connectivity,
        config["connectivity_host"],
        config["connectivity_port"],
    )
    return Journal(storage, connectivity=connectivity)
