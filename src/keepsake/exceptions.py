# SPDX-License-Identifier: MIT

"""
Exception classes shared by the journal stores.

Not-found conditions are never raised; stores answer them with ``False``
or ``None``.
"""

from typing import Optional


class KeepsakeError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, detail: Optional[str] = None):
        self.message = message
        self.detail = detail
        super().__init__(message)


class StorageError(KeepsakeError):
    """Raised when the key-value storage cannot complete an operation."""


class StorageWriteError(StorageError):
    """Raised when the backing store rejects a write."""

    def __init__(self, key: str, detail: Optional[str] = None):
        self.key = key
        super().__init__(message=f"Failed to write '{key}'", detail=detail)


class StorageFullError(StorageWriteError):
    """Raised when a write would exceed the configured storage quota."""

    def __init__(self, key: str, required: int, quota: int):
        self.required = required
        self.quota = quota
        super().__init__(
            key,
            detail=f"{required} bytes needed, quota is {quota} bytes",
        )


class CorruptStorageError(StorageError):
    """Raised when a stored document cannot be decoded."""

    def __init__(self, key: str, detail: Optional[str] = None):
        self.key = key
        super().__init__(message=f"Stored data under '{key}' is corrupt", detail=detail)


class ValidationError(KeepsakeError, ValueError):
    """Raised when a record handed to a store has an invalid shape."""


class InvalidEntryError(ValidationError):
    pass


class InvalidSettingsError(ValidationError):
    pass


class InvalidReminderError(ValidationError):
    pass
