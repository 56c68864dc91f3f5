# SPDX-License-Identifier: MIT

from keepsake.model.entry import EntryDraft
from keepsake.time import now_utc


def get_entry_draft_template() -> EntryDraft:
    return {
        "date": now_utc(),
        "title": "",
        "content": "",
        "mood": None,
        "tags": [],
        "favorite": False,
        "rating": None,
        "images": None,
    }
