# SPDX-License-Identifier: MIT

from typing import NoReturn

import typer
from rich.console import Console

from keepsake.journal import Journal

err_console = Console(stderr=True)


def get_journal(ctx: typer.Context) -> Journal:
    journal = ctx.obj
    if not isinstance(journal, Journal):
        raise RuntimeError("journal was not opened")
    return journal


def fail(message: str) -> NoReturn:
    err_console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)
