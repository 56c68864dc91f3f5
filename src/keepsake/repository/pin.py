# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional

from keepsake import configuration, security, time
from keepsake.exceptions import CorruptStorageError
from keepsake.model.pin import PINSettings
from keepsake.repository.document import load_document, save_document
from keepsake.storage import Storage

logger = logging.getLogger(__name__)


class PinRepository:
    """
    Session-unlock PIN, independent of the password user. With no PIN set,
    or a disabled one, the gate is open.
    """

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    def __load_data(self) -> Optional[PINSettings]:
        raw_settings = load_document(self._storage, configuration.PIN_KEY)
        if raw_settings is None:
            return None
        try:
            settings: PINSettings = {
                "enabled": raw_settings["enabled"],
                # Documents written by the browser journal use "pin"
                "pin_hash": (
                    raw_settings.get("pinHash") or raw_settings.get("pin") or ""
                ),
                "created_at": time.from_iso(raw_settings["createdAt"]),
            }
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise CorruptStorageError(configuration.PIN_KEY, detail=repr(e)) from e
        if not isinstance(settings["enabled"], bool):
            raise CorruptStorageError(
                configuration.PIN_KEY, detail="enabled flag is not a boolean"
            )
        return settings

    def __save_data(self, settings: PINSettings) -> None:
        raw_settings: dict[str, Any] = {
            "enabled": settings["enabled"],
            "pinHash": settings["pin_hash"],
            "createdAt": time.to_iso(settings["created_at"]),
        }
        save_document(self._storage, configuration.PIN_KEY, raw_settings)

    def get_settings(self) -> Optional[PINSettings]:
        return self.__load_data()

    def set_pin(self, pin: str) -> None:
        self.__save_data(
            {
                "enabled": True,
                "pin_hash": security.hash_secret(pin),
                "created_at": time.now_utc(),
            }
        )
        logger.info("PIN set")

    def verify(self, pin: str) -> bool:
        settings = self.__load_data()
        if settings is None or not settings["enabled"]:
            return True
        if not security.verify_secret(pin, settings["pin_hash"]):
            return False
        if security.needs_rehash(settings["pin_hash"]):
            logger.warning("Upgrading PIN hash")
            settings["pin_hash"] = security.hash_secret(pin)
            self.__save_data(settings)
        return True

    def disable(self) -> None:
        settings = self.__load_data()
        if settings is not None:
            settings["enabled"] = False
            self.__save_data(settings)
            logger.info("PIN disabled")

    def is_enabled(self) -> bool:
        settings = self.__load_data()
        return settings is not None and settings["enabled"]
