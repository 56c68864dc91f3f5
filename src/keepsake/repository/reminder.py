# SPDX-License-Identifier: MIT

import logging
import re
from typing import Any, Mapping, Optional

import pendulum

from keepsake import configuration, time
from keepsake.exceptions import InvalidReminderError
from keepsake.model.entity_id import EntityId, generate_entity_id
from keepsake.model.reminder import Reminder
from keepsake.repository.document import load_collection, save_document
from keepsake.storage import Storage

logger = logging.getLogger(__name__)

_TIME_P = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def validate_reminder_time(value: Any) -> None:
    if not isinstance(value, str) or not _TIME_P.match(value):
        raise InvalidReminderError(
            f"Reminder time must be in HH:MM format, got {value!r}"
        )


def validate_reminder(reminder: Mapping[str, Any]) -> None:
    """Raise InvalidReminderError unless the reminder has a storable shape."""
    if not isinstance(reminder.get("title"), str):
        raise InvalidReminderError("Reminder title must be a string")
    if not isinstance(reminder.get("enabled"), bool):
        raise InvalidReminderError("Reminder enabled flag must be a boolean")
    validate_reminder_time(reminder.get("time"))


class ReminderRepository:
    """Daily writing reminders. Independent of entries."""

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    def __load_data(self) -> list[dict[str, Any]]:
        return load_collection(self._storage, configuration.REMINDERS_KEY)

    def __save_data(self, raw_reminders: list[dict[str, Any]]) -> None:
        save_document(self._storage, configuration.REMINDERS_KEY, raw_reminders)

    def __convert_for_serialization(
        self, reminder: Mapping[str, Any]
    ) -> dict[str, Any]:
        return {
            "id": reminder["id"],
            "title": reminder["title"],
            "time": reminder["time"],
            "enabled": reminder["enabled"],
            "createdAt": time.to_iso(reminder["created_at"]),
        }

    def __convert_for_deserialization(self, raw: dict[str, Any]) -> Reminder:
        return {
            "id": raw["id"],
            "title": raw["title"],
            "time": raw["time"],
            "enabled": raw["enabled"],
            "created_at": time.from_iso(raw["createdAt"]),
        }

    def create(self, title: str, time_of_day: str) -> Reminder:
        reminder: Reminder = {
            "id": generate_entity_id(),
            "title": title,
            "time": time_of_day,
            "enabled": True,
            "created_at": time.now_utc(),
        }
        validate_reminder(reminder)
        serializable = self.__convert_for_serialization(reminder)

        raw_reminders = self.__load_data()
        raw_reminders.append(serializable)
        self.__save_data(raw_reminders)

        logger.info(f"Created reminder {reminder['id']} at {time_of_day}")
        return self.__convert_for_deserialization(serializable)

    def list_all(self) -> list[Reminder]:
        return [self.__convert_for_deserialization(raw) for raw in self.__load_data()]

    def update(self, id: EntityId, fields: Mapping[str, Any]) -> bool:
        if "id" in fields and fields["id"] != id:
            raise InvalidReminderError("Reminder id cannot be changed")

        raw_reminders = self.__load_data()
        for index, raw in enumerate(raw_reminders):
            if raw.get("id") != id:
                continue
            merged = self.__convert_for_deserialization(raw) | dict(fields)
            validate_reminder(merged)
            raw_reminders[index] = self.__convert_for_serialization(merged)
            self.__save_data(raw_reminders)
            return True
        return False

    def delete(self, id: EntityId) -> bool:
        raw_reminders = self.__load_data()
        remaining = [raw for raw in raw_reminders if raw.get("id") != id]
        if len(remaining) == len(raw_reminders):
            return False
        self.__save_data(remaining)
        logger.info(f"Deleted reminder {id}")
        return True

    def due_now(self, now: Optional[pendulum.DateTime] = None) -> list[Reminder]:
        """
        Enabled reminders whose time is exactly the current local minute.
        Callers must check once per minute boundary or they will miss some.
        """
        if now is None:
            now = time.now_utc()
        current_time = time.format_local_clock(now)
        return [
            reminder
            for reminder in self.list_all()
            if reminder["enabled"] and reminder["time"] == current_time
        ]
