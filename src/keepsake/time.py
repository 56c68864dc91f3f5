# SPDX-License-Identifier: MIT

"""
Clock and timestamp helpers.

Stored timestamps are UTC ISO-8601 strings with millisecond precision and a
trailing ``Z``, the format browser backups use. Anything shown to the user is
converted to the local timezone first.
"""

import datetime
from typing import Optional, cast

import pendulum

ISO_FORMAT = "YYYY-MM-DD[T]HH:mm:ss.SSS[Z]"


def now_utc() -> pendulum.DateTime:
    return pendulum.now(tz="UTC")


def now_epoch_ms() -> int:
    return int(now_utc().timestamp() * 1000)


def to_utc(value: datetime.datetime) -> pendulum.DateTime:
    """Convert any datetime to UTC. Naive values are taken as local time."""
    if not isinstance(value, pendulum.DateTime):
        value = pendulum.instance(value, tz=pendulum.local_timezone())
    return value.in_tz("UTC")


def to_iso(value: datetime.datetime) -> str:
    return to_utc(value).format(ISO_FORMAT)


def from_iso(text: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(text))


def from_iso_optional(text: Optional[str]) -> Optional[pendulum.DateTime]:
    return from_iso(text) if text is not None else None


def parse_local_to_utc(text: str) -> pendulum.DateTime:
    """Parse user input, reading a value without an offset as local time."""
    parsed = cast(pendulum.DateTime, pendulum.parse(text, tz=pendulum.local_timezone()))
    return parsed.in_tz("UTC")


def format_local_date(value: pendulum.DateTime) -> str:
    return value.in_tz("local").format("ddd YYYY-MM-DD")


def format_local_datetime(value: pendulum.DateTime) -> str:
    return value.in_tz("local").format("ddd DD MMM YYYY HH:mm")


def format_local_datetime_optional(value: Optional[pendulum.DateTime]) -> str:
    return format_local_datetime(value) if value is not None else ""


def format_local_clock(value: pendulum.DateTime) -> str:
    """The local wall-clock minute as ``HH:mm``, the form reminders use."""
    return value.in_tz("local").format("HH:mm")


def local_day_bounds(day: pendulum.Date) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """First and last instant of a local calendar day, in UTC."""
    start = pendulum.local(day.year, day.month, day.day)
    return start.in_tz("UTC"), start.end_of("day").in_tz("UTC")
