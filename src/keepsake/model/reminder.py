# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from keepsake.model.entity_id import EntityId


class Reminder(TypedDict):
    id: EntityId
    title: str
    time: str  # HH:MM, local wall clock
    enabled: bool
    created_at: pendulum.DateTime
