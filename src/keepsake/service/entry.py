# SPDX-License-Identifier: MIT

from typing import Optional

from keepsake.model.deleted_entry import DeletedEntry
from keepsake.model.entity_id import EntityId
from keepsake.repository.deleted_entry import DeletedEntryRepository
from keepsake.repository.entry import EntryRepository


def delete_entry(
    entries: EntryRepository,
    deleted_entries: DeletedEntryRepository,
    id: EntityId,
) -> Optional[DeletedEntry]:
    """
    Archive an entry, then remove it from the live collection.

    Returns the archive record, or None when no entry has the id.
    """
    entry = entries.get(id)
    if entry is None:
        return None
    deleted = deleted_entries.archive_on_delete(entry)
    entries.delete(id)
    return deleted
