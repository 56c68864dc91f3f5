"""Shared fixtures: journals over in-memory and on-disk storage."""

import pendulum
import pytest

from keepsake.journal import Journal
from keepsake.model.entry import EntryDraft
from keepsake.storage import FileStorage, MemoryStorage


def make_draft(
    title="Day 1",
    content="Went to work.",
    date=None,
    tags=None,
    **fields,
) -> EntryDraft:
    draft = {
        "date": date or pendulum.datetime(2024, 3, 1, 9, 30, tz="UTC"),
        "title": title,
        "content": content,
        "tags": tags if tags is not None else [],
        "favorite": False,
    }
    draft.update(fields)
    return draft  # type: ignore[return-value]


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def journal(storage):
    return Journal(storage)


@pytest.fixture
def file_journal(tmp_path):
    return Journal(FileStorage(tmp_path / "data"))
