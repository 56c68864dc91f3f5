# SPDX-License-Identifier: MIT

from typing import Literal, NotRequired, Optional, TypedDict, get_args

import pendulum

from keepsake.model.entity_id import EntityId

Mood = Literal["amazing", "good", "okay", "bad", "terrible"]

MOODS: tuple[str, ...] = get_args(Mood)

MIN_RATING = 1
MAX_RATING = 5


class Entry(TypedDict):
    id: EntityId
    date: pendulum.DateTime  # When the entry was written
    title: str
    content: str
    mood: NotRequired[Optional[Mood]]
    tags: list[str]
    favorite: bool
    rating: NotRequired[Optional[int]]  # 1..5
    images: NotRequired[Optional[list[str]]]  # data URIs or URLs


class EntryDraft(TypedDict):
    """An entry before the repository has assigned its id."""

    date: pendulum.DateTime
    title: str
    content: str
    mood: NotRequired[Optional[Mood]]
    tags: list[str]
    favorite: bool
    rating: NotRequired[Optional[int]]
    images: NotRequired[Optional[list[str]]]
