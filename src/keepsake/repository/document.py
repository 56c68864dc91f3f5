# SPDX-License-Identifier: MIT

import json
import logging
from typing import Any

from keepsake.exceptions import CorruptStorageError
from keepsake.storage import Storage

logger = logging.getLogger(__name__)


def load_document(storage: Storage, key: str) -> Any:
    """
    Decode the JSON document stored under a key.

    Returns None when the key is absent or storage is unavailable.
    """
    stored = storage.read(key)
    if stored is None:
        logger.debug(f"No document under '{key}'")
        return None
    try:
        return json.loads(stored)
    except json.JSONDecodeError as e:
        raise CorruptStorageError(key, detail=str(e)) from e


def load_collection(storage: Storage, key: str) -> list[Any]:
    data = load_document(storage, key)
    if data is None:
        return []
    if not isinstance(data, list):
        raise CorruptStorageError(key, detail="expected a JSON array")
    return data


def save_document(storage: Storage, key: str, data: Any) -> None:
    logger.debug(f"Writing document '{key}'")
    storage.write(key, json.dumps(data, ensure_ascii=False))
