# SPDX-License-Identifier: MIT

from typing import Any, TypedDict

from keepsake.model.entity_id import EntityId


class OfflineQueueItem(TypedDict):
    id: EntityId
    data: dict[str, Any]  # Entry payload, serialized form
    timestamp: int  # Epoch milliseconds
    synced: bool
