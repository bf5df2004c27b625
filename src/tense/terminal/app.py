# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from tense.terminal import activity, configuration, data, quick_action, statistics
from tense.terminal.calendar import calendar
from tense.terminal.custom_typer import OrderedTyperGroup
from tense.view import state as view_state

app = typer.Typer(
    cls=OrderedTyperGroup,
    help="Tense - Track how you spend your time",
    no_args_is_help=True,
)
app.add_typer(activity.app, name="activity, a")
app.add_typer(quick_action.app, name="quick, q")
app.add_typer(statistics.app, name="stats, s")
app.command(name="calendar, cal")(calendar)
app.add_typer(configuration.app, name="config, c")
app.add_typer(data.app, name="data, d")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    Tense - Track how you spend your time

    Global options that apply to all commands.
    """
    view_state.set_show_header(not no_header)


def run() -> None:
    app()
