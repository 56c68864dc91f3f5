# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import click
import typer

from keepsake.model.theme import (
    FONT_FAMILIES,
    FONT_SIZES,
    THEMES,
    FontFamily,
    FontSize,
    Theme,
)
from keepsake.terminal.custom_typer import AliasedTyperGroup
from keepsake.terminal.util import get_journal
from keepsake.view.header import header
from keepsake.view.settings import theme_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view(ctx: typer.Context) -> None:
    """Display current theme settings."""
    theme_view(get_journal(ctx).theme.get_settings())


@app.command("set, s")
def set_theme(
    ctx: typer.Context,
    theme: Annotated[
        Optional[str],
        typer.Option("--theme", "-t", click_type=click.Choice(THEMES)),
    ] = None,
    font_family: Annotated[
        Optional[str],
        typer.Option("--font-family", "-ff", click_type=click.Choice(FONT_FAMILIES)),
    ] = None,
    font_size: Annotated[
        Optional[str],
        typer.Option("--font-size", "-fs", click_type=click.Choice(FONT_SIZES)),
    ] = None,
    custom_color: Annotated[
        Optional[str], typer.Option("--custom-color", "-cc")
    ] = None,
    remove_custom_color: Annotated[
        bool, typer.Option("--remove-custom-color", "-rcc")
    ] = False,
) -> None:
    """
    Change theme settings. Settings not given are left as they are.
    """
    repository = get_journal(ctx).theme
    settings = repository.get_settings()

    if theme is not None:
        settings["theme"] = cast(Theme, theme)
    if font_family is not None:
        settings["font_family"] = cast(FontFamily, font_family)
    if font_size is not None:
        settings["font_size"] = cast(FontSize, font_size)
    if custom_color is not None:
        settings["custom_color"] = custom_color
    if remove_custom_color:
        settings["custom_color"] = None

    repository.save_settings(settings)
    theme_view(settings)


@app.command("presets, p")
def presets(ctx: typer.Context) -> None:
    """List the built-in palettes."""
    header("themes")
    for preset in get_journal(ctx).theme.presets():
        typer.echo(f" {preset}")
