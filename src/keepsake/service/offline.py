# SPDX-License-Identifier: MIT

import logging
import socket

from keepsake.model.entry import Entry
from keepsake.repository.entry import EntryRepository, deserialize_entry
from keepsake.repository.offline_queue import OfflineQueueRepository

logger = logging.getLogger(__name__)


def probe_connectivity(host: str, port: int, timeout: float = 1.5) -> bool:
    """Report whether a TCP connection to host:port can be opened."""
    try:
        with socket.create_connection((host, port), timeout=timeout):
            return True
    except OSError:
        return False


def drain(queue: OfflineQueueRepository, entries: EntryRepository) -> list[Entry]:
    """
    Merge pending offline entries into the journal.

    Does nothing while offline. Each item becomes a new entry with a fresh
    id; merged items are marked synced and then dropped from the queue. An
    item that cannot be read as an entry is logged and left pending.
    """
    if not queue.is_online():
        logger.info("Offline, leaving queue untouched")
        return []

    created: list[Entry] = []
    for item in queue.pending():
        payload = dict(item["data"])
        payload.pop("id", None)
        try:
            draft = deserialize_entry(payload)
            created.append(entries.create(draft))  # type: ignore[arg-type]
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping unreadable offline item {item['id']}: {e!r}")
            continue
        queue.mark_synced(item["id"])

    queue.remove_synced()
    if created:
        logger.info(f"Merged {len(created)} offline entries")
    return created
