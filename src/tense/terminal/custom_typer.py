# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer
import typer.core

ALIAS_SEPARATOR = re.compile(r" ?, ?")


def command_aliases(name: Optional[str]) -> list[str]:
    """Split a registered name like "activity, a" into its aliases."""
    if not name:
        return []
    return ALIAS_SEPARATOR.split(name)


class AliasedTyperGroup(typer.core.TyperGroup):
    """Group whose commands are registered as "name, alias" and reachable by either"""

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.registered_name(cmd_name))

    def registered_name(self, cmd_name: str) -> str:
        for name, cmd in self.commands.items():
            if cmd_name in command_aliases(cmd.name):
                return name
        return cmd_name

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        name = name if name is not None else cmd.name
        registered = self.registered_name(name or "")
        # An alias of a command that is already registered
        if registered in self.commands and registered != name:
            return
        super().add_command(cmd, name)


class OrderedTyperGroup(AliasedTyperGroup):
    """Aliased group listing the top-level commands in a fixed order"""

    COMMAND_ORDER = [
        "activity, a",
        "quick, q",
        "stats, s",
        "calendar, cal",
        "config, c",
        "data, d",
    ]

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in self.COMMAND_ORDER if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]
