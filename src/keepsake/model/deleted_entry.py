# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from keepsake.model.entity_id import EntityId
from keepsake.model.entry import Entry


class DeletedEntry(TypedDict):
    id: EntityId  # Distinct from the wrapped entry's id
    entry: Entry
    deleted_at: pendulum.DateTime
