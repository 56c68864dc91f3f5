# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from keepsake.model.entity_id import EntityId


class User(TypedDict):
    id: EntityId
    password_hash: str
    created_at: pendulum.DateTime
