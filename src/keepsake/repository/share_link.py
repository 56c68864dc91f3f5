# SPDX-License-Identifier: MIT

import logging
import secrets
import string
from typing import Any, Optional

import pendulum

from keepsake import configuration, time
from keepsake.model.entity_id import EntityId, generate_entity_id
from keepsake.model.share_link import ShareLink
from keepsake.repository.document import load_collection, save_document
from keepsake.storage import Storage

logger = logging.getLogger(__name__)

SHARE_CODE_ALPHABET = string.digits + string.ascii_uppercase
SHARE_CODE_LENGTH = 6


def generate_share_code() -> str:
    return "".join(
        secrets.choice(SHARE_CODE_ALPHABET) for _ in range(SHARE_CODE_LENGTH)
    )


class ShareLinkRepository:
    """
    Read-only share links. Links reference entries by id only; deleting an
    entry leaves its links in place, and expired links stay listed until
    deleted.
    """

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    def __load_data(self) -> list[dict[str, Any]]:
        return load_collection(self._storage, configuration.SHARE_LINKS_KEY)

    def __save_data(self, raw_links: list[dict[str, Any]]) -> None:
        save_document(self._storage, configuration.SHARE_LINKS_KEY, raw_links)

    def __convert_for_serialization(self, link: ShareLink) -> dict[str, Any]:
        raw_link: dict[str, Any] = {
            "id": link["id"],
            "entryId": link["entry_id"],
            "code": link["code"],
            "createdAt": time.to_iso(link["created_at"]),
        }
        if link["expires_at"] is not None:
            raw_link["expiresAt"] = time.to_iso(link["expires_at"])
        return raw_link

    def __convert_for_deserialization(self, raw: dict[str, Any]) -> ShareLink:
        return {
            "id": raw["id"],
            "entry_id": raw["entryId"],
            "code": raw["code"],
            "created_at": time.from_iso(raw["createdAt"]),
            "expires_at": time.from_iso_optional(raw.get("expiresAt")),
        }

    def create(
        self, entry_id: EntityId, ttl: Optional[pendulum.Duration] = None
    ) -> ShareLink:
        raw_links = self.__load_data()
        existing_codes = {raw.get("code") for raw in raw_links}
        code = generate_share_code()
        while code in existing_codes:
            code = generate_share_code()

        now = time.now_utc()
        link: ShareLink = {
            "id": generate_entity_id(),
            "entry_id": entry_id,
            "code": code,
            "created_at": now,
            "expires_at": now + ttl if ttl else None,
        }
        serializable = self.__convert_for_serialization(link)
        raw_links.append(serializable)
        self.__save_data(raw_links)

        logger.info(f"Created share link {code} for entry {entry_id}")
        return self.__convert_for_deserialization(serializable)

    def list_all(self) -> list[ShareLink]:
        return [self.__convert_for_deserialization(raw) for raw in self.__load_data()]

    def list_by_entry(self, entry_id: EntityId) -> list[ShareLink]:
        return [link for link in self.list_all() if link["entry_id"] == entry_id]

    def get_by_code(self, code: str) -> Optional[ShareLink]:
        for link in self.list_all():
            if link["code"] == code:
                return link
        return None

    def delete(self, id: EntityId) -> bool:
        raw_links = self.__load_data()
        remaining = [raw for raw in raw_links if raw.get("id") != id]
        if len(remaining) == len(raw_links):
            return False
        self.__save_data(remaining)
        logger.info(f"Deleted share link {id}")
        return True
