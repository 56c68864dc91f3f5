# SPDX-License-Identifier: MIT

"""Record ids are random UUID4 strings, the form browser backups carry."""

import uuid

EntityId = str


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())
