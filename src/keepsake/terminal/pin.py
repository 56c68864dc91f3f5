# SPDX-License-Identifier: MIT

import re

import typer

from keepsake.terminal.custom_typer import AliasedTyperGroup
from keepsake.terminal.util import fail, get_journal
from keepsake.view.settings import pin_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

_PIN_P = re.compile(r"^\d{4,6}$")


@app.command("set, s")
def set_pin(
    ctx: typer.Context,
    pin: str = typer.Option(
        ..., prompt=True, confirmation_prompt=True, hide_input=True
    ),
) -> None:
    """
    Lock the journal with a 4 to 6 digit PIN.
    """
    if not _PIN_P.match(pin):
        fail("PIN must be 4 to 6 digits")
    get_journal(ctx).pin.set_pin(pin)
    typer.echo("PIN set")


@app.command("verify, v")
def verify(
    ctx: typer.Context,
    pin: str = typer.Option(..., prompt=True, hide_input=True),
) -> None:
    """
    Unlock with the PIN. Always succeeds when no PIN is enabled.
    """
    if not get_journal(ctx).pin.verify(pin):
        fail("Incorrect PIN")
    typer.echo("Unlocked")


@app.command("disable, d")
def disable(ctx: typer.Context) -> None:
    """
    Turn the PIN lock off.
    """
    get_journal(ctx).pin.disable()
    typer.echo("PIN disabled")


@app.command("status, st")
def status(ctx: typer.Context) -> None:
    pin_view(get_journal(ctx).pin.get_settings())
