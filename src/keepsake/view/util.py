# SPDX-License-Identifier: MIT

from typing import Optional

MOOD_EMOJI = {
    "amazing": "🤩",
    "good": "😊",
    "okay": "😐",
    "bad": "😞",
    "terrible": "😢",
}


def format_tags(tags: Optional[list[str]]) -> str:
    if not tags:
        return ""
    return ", ".join(tags)


def format_mood(mood: Optional[str]) -> str:
    if mood is None:
        return ""
    return f"{MOOD_EMOJI.get(mood, '')} {mood}".strip()


def format_rating(rating: Optional[int]) -> str:
    if rating is None:
        return ""
    return "★" * rating + "☆" * (5 - rating)


def truncate(text: str, length: int = 60) -> str:
    single_line = " ".join(text.split())
    if len(single_line) <= length:
        return single_line
    return single_line[: length - 1] + "…"
