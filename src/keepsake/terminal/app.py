# SPDX-License-Identifier: MIT

import logging
import sys
from typing import Annotated, Optional

import typer
from rich.console import Console

from keepsake import configuration
from keepsake.exceptions import KeepsakeError
from keepsake.journal import open_journal
from keepsake.repository.configuration import CONFIGURATION_REPO
from keepsake.terminal import (
    auth,
    backup,
    entry,
    offline,
    pin,
    reminder,
    share,
    theme,
    trash,
)
from keepsake.terminal import configuration as configuration_commands
from keepsake.terminal.custom_typer import OrderedAliasedTyperGroup

logger = logging.getLogger(__name__)

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Keepsake - a personal journal in the CLI",
    no_args_is_help=True,
)
app.add_typer(entry.app, name="entry, e", help="Write, browse and search entries")
app.add_typer(trash.app, name="trash, tr", help="Restore or purge deleted entries")
app.add_typer(backup.app, name="backup, b", help="Export and import backups")
app.add_typer(auth.app, name="auth, a", help="Password protection")
app.add_typer(pin.app, name="pin, p", help="PIN lock")
app.add_typer(theme.app, name="theme, th", help="Theme settings")
app.add_typer(reminder.app, name="reminder, r", help="Writing reminders")
app.add_typer(share.app, name="share, s", help="Read-only share links")
app.add_typer(offline.app, name="offline, o", help="Offline queue")
app.add_typer(configuration_commands.app, name="config, c", help="Configuration")


def resolve_log_level(name: Optional[str]) -> str:
    """The configured level name, or the default when it is not one we know."""
    if isinstance(name, str) and name.upper() in configuration.LOG_LEVELS:
        return name.upper()
    return configuration.DEFAULT_LOG_LEVEL


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """
    Keepsake - a personal journal in the CLI

    Global options that apply to all commands.
    """
    configured_level = None
    if ctx.obj is None:
        config = CONFIGURATION_REPO.get_config()
        configured_level = config["log_level"]
        ctx.obj = open_journal(config)
    resolved_level = resolve_log_level(configured_level)
    log_level = "DEBUG" if verbose else resolved_level

    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        level=log_level,
    )
    if configured_level is not None and resolved_level != str(configured_level).upper():
        logger.warning(
            f"Unknown log_level {configured_level!r} in configuration, "
            f"using {resolved_level}"
        )


def run() -> None:
    try:
        app()
    except KeepsakeError as e:
        console = Console(stderr=True)
        console.print(f"[red]{e.message}[/red]")
        if e.detail:
            console.print(f"[red]{e.detail}[/red]")
        sys.exit(1)
