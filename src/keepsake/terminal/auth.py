# SPDX-License-Identifier: MIT

import typer

from keepsake.terminal.custom_typer import AliasedTyperGroup
from keepsake.terminal.util import fail, get_journal

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

MIN_PASSWORD_LENGTH = 6


@app.command("register, r")
def register(
    ctx: typer.Context,
    password: str = typer.Option(
        ..., prompt=True, confirmation_prompt=True, hide_input=True
    ),
) -> None:
    """
    Set the journal password, replacing any existing one.
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        fail(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    user = get_journal(ctx).credentials.register(password)
    typer.echo(f"Registered {user['id']}")


@app.command("login, l")
def login(
    ctx: typer.Context,
    password: str = typer.Option(..., prompt=True, hide_input=True),
) -> None:
    """
    Check the journal password.
    """
    credentials = get_journal(ctx).credentials
    if not credentials.is_registered():
        fail("No password registered")
    if not credentials.login(password):
        fail("Incorrect password")
    typer.echo("Logged in")


@app.command("logout, lo")
def logout(ctx: typer.Context) -> None:
    """
    Forget the registered password.
    """
    get_journal(ctx).credentials.logout()
    typer.echo("Logged out")


@app.command("passwd, p")
def passwd(
    ctx: typer.Context,
    old_password: str = typer.Option(..., prompt=True, hide_input=True),
    new_password: str = typer.Option(
        ..., prompt=True, confirmation_prompt=True, hide_input=True
    ),
) -> None:
    """
    Change the journal password.
    """
    if len(new_password) < MIN_PASSWORD_LENGTH:
        fail(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if not get_journal(ctx).credentials.change_password(old_password, new_password):
        fail("Incorrect password")
    typer.echo("Password changed")
