# SPDX-License-Identifier: MIT

"""
Whole-collection backup and restore.

The backup file is ``{"timestamp": <ISO-8601>, "data": [<entry>, ...]}``,
pretty-printed with two-space indentation. Backups made by the browser
journal import unchanged. Restoring replaces the live collection and never
touches the deleted-entry buffer.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import pendulum

from keepsake import time
from keepsake.model.snapshot import Snapshot
from keepsake.repository.entry import (
    EntryRepository,
    deserialize_entry,
    validate_entry,
)

logger = logging.getLogger(__name__)


def export_snapshot(entries: EntryRepository) -> str:
    snapshot: Snapshot = {
        "timestamp": time.to_iso(time.now_utc()),
        "data": entries.export_raw(),
    }
    return json.dumps(snapshot, indent=2, ensure_ascii=False)


def __validate_snapshot_data(data: Any) -> bool:
    if not isinstance(data, list):
        return False
    seen_ids: set[str] = set()
    for raw_entry in data:
        if not isinstance(raw_entry, dict) or not isinstance(raw_entry.get("id"), str):
            return False
        if raw_entry["id"] in seen_ids:
            return False
        seen_ids.add(raw_entry["id"])
        validate_entry(deserialize_entry(raw_entry))
    return True


def import_snapshot(entries: EntryRepository, text: str) -> bool:
    """
    Replace the live collection with a backup's entries.

    Returns False, without touching storage, when the text is not JSON or
    its ``data`` field is missing, not a list, or holds a malformed entry.
    """
    try:
        snapshot = json.loads(text)
        if not isinstance(snapshot, dict) or not __validate_snapshot_data(
            snapshot.get("data")
        ):
            logger.warning("Backup rejected: missing or invalid data field")
            return False
    except (ValueError, KeyError, TypeError) as e:
        logger.warning(f"Backup rejected: {e}")
        return False

    entries.replace_raw(snapshot["data"])
    logger.info(f"Restored backup from {snapshot.get('timestamp')}")
    return True


def backup_filename(now: Optional[pendulum.DateTime] = None) -> str:
    if now is None:
        now = time.now_utc()
    return f"journal-backup-{now.in_tz('UTC').format('YYYY-MM-DD')}.json"


def write_backup(entries: EntryRepository, directory: Path) -> Path:
    path = Path(directory).expanduser() / backup_filename()
    path.write_text(export_snapshot(entries), encoding="utf-8")
    logger.info(f"Wrote backup to {path}")
    return path
