# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from keepsake.service.backup import export_snapshot, import_snapshot, write_backup
from keepsake.terminal.custom_typer import AliasedTyperGroup
from keepsake.terminal.util import fail, get_journal

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("export, e")
def export(
    ctx: typer.Context,
    directory: Annotated[
        Optional[Path],
        typer.Option(
            "--dir",
            "-d",
            file_okay=False,
            help="write journal-backup-YYYY-MM-DD.json here instead of stdout",
        ),
    ] = None,
) -> None:
    """
    Export every entry as a JSON backup.
    """
    journal = get_journal(ctx)
    if directory is None:
        typer.echo(export_snapshot(journal.entries))
        return
    path = write_backup(journal.entries, directory)
    typer.echo(f"Backup written to {path}")


@app.command("import, i", no_args_is_help=True)
def import_(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False)],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    """
    Replace every entry with the contents of a backup file.
    """
    if not yes:
        typer.confirm("This replaces all current entries. Continue?", abort=True)
    if not import_snapshot(get_journal(ctx).entries, path.read_text(encoding="utf-8")):
        fail(f"{path} is not a valid journal backup")
    typer.echo(f"Restored backup from {path}")
