# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import pendulum
import typer

from keepsake import time

_ISO_DATE_P = re.compile(r"^\d{4}-\d{2}-\d{2}")
_CLOCK_P = re.compile(r"^(\d{1,2}):(\d{2})$")
_DAY_OFFSET_P = re.compile(r"^[+-]?\d+$")
_DURATION_P = re.compile(r"^(\d+)([mhdw])$")

_NAMED_DAYS = {"today": 0, "t": 0, "yesterday": -1, "y": -1}
_DURATION_UNITS = {"m": "minutes", "h": "hours", "d": "days", "w": "weeks"}


def _relative_day(text: str) -> Optional[pendulum.Date]:
    """today/t, yesterday/y, or a signed day offset from today."""
    if text in _NAMED_DAYS:
        offset = _NAMED_DAYS[text]
    elif _DAY_OFFSET_P.match(text):
        offset = int(text)
    else:
        return None
    return pendulum.today("local").add(days=offset).date()


def parse_datetime(value: Optional[str | int]) -> Optional[pendulum.DateTime]:
    """
    Read a moment from the command line, as UTC.

    Accepts YYYY-MM-DD with an optional time, (H)H:mm today, now/n, or any
    day parse_date accepts (at local midnight).
    """
    if value is None:
        return None
    text = str(value).strip()

    if _ISO_DATE_P.match(text):
        try:
            return time.parse_local_to_utc(text)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")
    if text in ("now", "n"):
        return time.now_utc()

    clock_match = _CLOCK_P.match(text)
    if clock_match:
        hour, minute = (int(group) for group in clock_match.groups())
        if hour > 23 or minute > 59:
            raise typer.BadParameter(f"'{text}' is not a time of day")
        return pendulum.today("local").at(hour, minute).in_tz("UTC")

    day = _relative_day(text)
    if day is None:
        raise typer.BadParameter(f"Cannot read '{text}' as a date or time")
    return pendulum.local(day.year, day.month, day.day).in_tz("UTC")


def parse_date(value: Optional[str]) -> Optional[pendulum.Date]:
    """Read a calendar day: YYYY-MM-DD, today/t, yesterday/y or a day offset."""
    if value is None:
        return None
    text = value.strip()
    if _ISO_DATE_P.match(text):
        try:
            return pendulum.parse(text, exact=True)  # type: ignore[return-value]
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")
    day = _relative_day(text)
    if day is None:
        raise typer.BadParameter(f"Cannot read '{text}' as a day")
    return day


def parse_duration(value: Optional[str]) -> Optional[pendulum.Duration]:
    """Read a duration such as 30m, 12h, 7d or 2w."""
    if value is None:
        return None
    duration_match = _DURATION_P.match(value.strip())
    if not duration_match:
        raise typer.BadParameter(
            f"Duration must look like 30m, 12h, 7d or 2w, got '{value}'"
        )
    amount, unit = duration_match.groups()
    return pendulum.duration(**{_DURATION_UNITS[unit]: int(amount)})


def edit_text(initial_text: Optional[str] = None) -> Optional[str]:
    """
    Let the user write text in $EDITOR. Returns None when the editor was
    closed without saving or the text is blank.
    """
    edited = click.edit(initial_text or "", extension=".md")
    if edited is None or not edited.strip():
        return None
    return edited.rstrip("\n")
