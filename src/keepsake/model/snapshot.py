# SPDX-License-Identifier: MIT

from typing import Any, TypedDict


class Snapshot(TypedDict):
    """Backup file layout. Entries are kept in their serialized form."""

    timestamp: str
    data: list[dict[str, Any]]
