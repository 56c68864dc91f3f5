# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from keepsake.configuration import Configuration
from keepsake.model.pin import PINSettings
from keepsake.model.reminder import Reminder
from keepsake.model.share_link import ShareLink
from keepsake.model.theme import ThemeSettings
from keepsake.service.share import is_expired, share_url
from keepsake.service.theme import FONT_SIZE_PX, palette_for
from keepsake.time import (
    format_local_datetime,
    format_local_datetime_optional,
)
from keepsake.view.header import header


def theme_view(settings: ThemeSettings) -> None:
    header("theme")

    palette = palette_for(settings)
    theme_table = Table(box=box.SIMPLE)
    theme_table.add_column("setting", style="cyan")
    theme_table.add_column("value", style="magenta")
    theme_table.add_row("theme", settings["theme"])
    theme_table.add_row("font family", settings["font_family"])
    theme_table.add_row(
        "font size",
        f"{settings['font_size']} ({FONT_SIZE_PX[settings['font_size']]}px)",
    )
    theme_table.add_row("custom color", settings.get("custom_color") or "None")
    theme_table.add_row("primary", palette["primary"])
    theme_table.add_row("secondary", palette["secondary"])
    theme_table.add_row("accent", palette["accent"])

    console = Console()
    console.print(theme_table)


def pin_view(settings: Optional[PINSettings]) -> None:
    header("pin")
    console = Console()
    if settings is None:
        console.print(" No PIN configured")
    elif settings["enabled"]:
        since = format_local_datetime(settings["created_at"])
        console.print(f" ✓ Enabled since {since}")
    else:
        console.print(" ✗ Disabled")


def reminders_view(reminders: list[Reminder]) -> None:
    header("reminders")

    reminders_table = Table(box=box.SIMPLE)
    reminders_table.add_column("id", no_wrap=True)
    reminders_table.add_column("time")
    reminders_table.add_column("title")
    reminders_table.add_column("enabled")

    for reminder in sorted(reminders, key=lambda r: r["time"]):
        reminders_table.add_row(
            reminder["id"],
            reminder["time"],
            reminder["title"],
            "✓" if reminder["enabled"] else "✗",
        )

    console = Console()
    console.print(reminders_table)


def share_links_view(origin: str, links: list[ShareLink]) -> None:
    header("share links")

    links_table = Table(box=box.SIMPLE)
    links_table.add_column("id", no_wrap=True)
    links_table.add_column("entry", no_wrap=True)
    links_table.add_column("url")
    links_table.add_column("expires")

    for link in links:
        expires = format_local_datetime_optional(link["expires_at"])
        if is_expired(link):
            expires = f"[red]{expires} (expired)[/red]"
        links_table.add_row(
            link["id"],
            link["entry_id"],
            share_url(origin, link["code"]),
            expires,
        )

    console = Console()
    console.print(links_table)


def configuration_view(
    config: Configuration, config_path: Path, data_path: Path
) -> None:
    header("config")

    quota = config.get("storage_quota_bytes")
    rows = [
        ("config file", str(config_path)),
        ("data directory", str(config.get("data_path") or data_path)),
        ("share origin", config["share_origin"]),
        ("storage quota", f"{quota} bytes" if quota is not None else "unlimited"),
        (
            "connectivity probe",
            f"{config['connectivity_host']}:{config['connectivity_port']}",
        ),
        ("log level", config["log_level"]),
    ]
    config_table = Table(box=box.SIMPLE, show_header=False)
    config_table.add_column("setting", style="cyan")
    config_table.add_column("value", style="magenta")
    for name, value in rows:
        config_table.add_row(name, value)

    Console().print(config_table)
