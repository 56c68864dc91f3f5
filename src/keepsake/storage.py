# SPDX-License-Identifier: MIT

"""Key-value persistence adapters. Each key holds one JSON document."""

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Optional, Protocol

from keepsake.exceptions import StorageFullError, StorageWriteError

logger = logging.getLogger(__name__)

_KEY_P = re.compile(r"^[A-Za-z0-9._-]+$")


class Storage(Protocol):
    """Interface for reading and writing string documents by key."""

    def read(self, key: str) -> Optional[str]:
        """Read the document under a key. Returns None if absent or unavailable."""
        ...

    def write(self, key: str, value: str) -> None:
        """Write/overwrite the document under a key."""
        ...

    def remove(self, key: str) -> None:
        """Remove the document under a key. Absent keys are ignored."""
        ...


class MemoryStorage:
    """
    In-process storage.

    Implements Storage protocol. Nothing survives the process.
    """

    def __init__(self, quota_bytes: Optional[int] = None):
        self.quota_bytes = quota_bytes
        self._data: dict[str, str] = {}

    def read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        if self.quota_bytes is not None:
            required = _size_of(value) + sum(
                _size_of(v) for k, v in self._data.items() if k != key
            )
            if required > self.quota_bytes:
                logger.error(f"Write of '{key}' rejected: storage quota exceeded")
                raise StorageFullError(key, required, self.quota_bytes)
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)


class FileStorage:
    """
    Directory-backed storage.

    Implements Storage protocol. Each key gets a ``<key>.json`` file; writes
    are staged in a temporary file and renamed into place.
    """

    def __init__(self, directory: Path | str, quota_bytes: Optional[int] = None):
        self.directory = Path(directory).expanduser()
        self.quota_bytes = quota_bytes

    def _path_for_key(self, key: str) -> Path:
        if not _KEY_P.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        path = self._path_for_key(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning(f"Storage unavailable reading '{key}': {e}")
            return None

    def write(self, key: str, value: str) -> None:
        path = self._path_for_key(key)
        if self.quota_bytes is not None:
            required = _size_of(value) + self._used_bytes(exclude=path)
            if required > self.quota_bytes:
                logger.error(f"Write of '{key}' rejected: storage quota exceeded")
                raise StorageFullError(key, required, self.quota_bytes)

        tmp_name: Optional[str] = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.directory, prefix=f".{key}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as tmp_file:
                tmp_file.write(value)
            os.replace(tmp_name, path)
        except OSError as e:
            logger.error(f"Write of '{key}' rejected: {e}")
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageWriteError(key, detail=str(e)) from e

    def remove(self, key: str) -> None:
        path = self._path_for_key(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageWriteError(key, detail=str(e)) from e

    def _used_bytes(self, exclude: Path) -> int:
        try:
            return sum(
                p.stat().st_size
                for p in self.directory.glob("*.json")
                if p != exclude
            )
        except OSError:
            return 0


def _size_of(value: str) -> int:
    return len(value.encode("utf-8"))
