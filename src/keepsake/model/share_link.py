# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from keepsake.model.entity_id import EntityId


class ShareLink(TypedDict):
    id: EntityId
    entry_id: EntityId  # Weak reference, not cascaded on entry deletion
    code: str
    created_at: pendulum.DateTime
    expires_at: Optional[pendulum.DateTime]
