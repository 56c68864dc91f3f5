# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class PINSettings(TypedDict):
    enabled: bool
    pin_hash: str
    created_at: pendulum.DateTime
