# SPDX-License-Identifier: MIT

from typing import Optional

import click
import typer.core


def command_names(registered_name: str) -> list[str]:
    """Split a name registered as ``"list, ls"`` into its aliases."""
    return [name.strip() for name in registered_name.split(",")]


class AliasedTyperGroup(typer.core.TyperGroup):
    """
    Typer group whose commands are registered under a comma-separated name
    and can be invoked by any part of it, e.g. ``entry list`` or ``e ls``.
    """

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.resolve_alias(cmd_name))

    def resolve_alias(self, cmd_name: str) -> str:
        for registered_name in self.commands:
            if cmd_name in command_names(registered_name):
                return registered_name
        return cmd_name


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Top-level group that lists command groups in workflow order."""

    GROUP_ORDER = [
        "entry, e",
        "trash, tr",
        "backup, b",
        "auth, a",
        "pin, p",
        "theme, th",
        "reminder, r",
        "share, s",
        "offline, o",
        "config, c",
    ]

    def list_commands(self, ctx: click.Context) -> list[str]:
        rank = {name: index for index, name in enumerate(self.GROUP_ORDER)}
        return sorted(self.commands, key=lambda name: rank.get(name, len(rank)))
