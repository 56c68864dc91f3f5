# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional

from keepsake import configuration, security, time
from keepsake.exceptions import CorruptStorageError
from keepsake.model.entity_id import generate_entity_id
from keepsake.model.user import User
from keepsake.repository.document import load_document, save_document
from keepsake.storage import Storage

logger = logging.getLogger(__name__)


class CredentialRepository:
    """The single local user. Registering again replaces the previous user."""

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    def __load_data(self) -> Optional[User]:
        raw_user = load_document(self._storage, configuration.AUTH_KEY)
        if raw_user is None:
            return None
        try:
            return {
                "id": raw_user["id"],
                # Documents written by the browser journal use "password"
                "password_hash": (
                    raw_user.get("passwordHash") or raw_user.get("password") or ""
                ),
                "created_at": time.from_iso(raw_user["createdAt"]),
            }
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise CorruptStorageError(configuration.AUTH_KEY, detail=repr(e)) from e

    def __save_data(self, user: User) -> None:
        raw_user: dict[str, Any] = {
            "id": user["id"],
            "passwordHash": user["password_hash"],
            "createdAt": time.to_iso(user["created_at"]),
        }
        save_document(self._storage, configuration.AUTH_KEY, raw_user)

    def current_user(self) -> Optional[User]:
        return self.__load_data()

    def is_registered(self) -> bool:
        return self.__load_data() is not None

    def register(self, password: str) -> User:
        user: User = {
            "id": generate_entity_id(),
            "password_hash": security.hash_secret(password),
            "created_at": time.now_utc(),
        }
        self.__save_data(user)
        logger.info(f"Registered user {user['id']}")
        return user

    def login(self, password: str) -> bool:
        user = self.__load_data()
        if user is None:
            return False
        if not security.verify_secret(password, user["password_hash"]):
            return False
        if security.needs_rehash(user["password_hash"]):
            logger.warning(f"Upgrading password hash for user {user['id']}")
            user["password_hash"] = security.hash_secret(password)
            self.__save_data(user)
        return True

    def logout(self) -> None:
        self._storage.remove(configuration.AUTH_KEY)

    def change_password(self, old_password: str, new_password: str) -> bool:
        user = self.__load_data()
        if user is None or not security.verify_secret(
            old_password, user["password_hash"]
        ):
            return False
        user["password_hash"] = security.hash_secret(new_password)
        self.__save_data(user)
        logger.info(f"Changed password for user {user['id']}")
        return True
