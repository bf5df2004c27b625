# SPDX-License-Identifier: MIT

import logging
from contextlib import contextmanager
from typing import Iterator

import typer
from rich.console import Console

from tense.errors import TenseError
from tense.initialize import initialize
from tense.stores import Stores

LOGGER = logging.getLogger(__name__)

error_console = Console(stderr=True)


def get_stores(ctx: typer.Context) -> Stores:
    """
    The stores of this invocation, built on first use unless the caller
    already placed them on the root context object.
    """
    root = ctx.find_root()
    if root.obj is None:
        root.obj = initialize()
    stores: Stores = root.obj

    # Reading the collection loads it and sets load_error
    stores.activity_repo.get_all_activities()
    load_error = stores.activity_repo.load_error
    if load_error is not None and not getattr(root, "_load_error_shown", False):
        root._load_error_shown = True  # type: ignore[attr-defined]
        error_console.print(
            f"[yellow]Stored activities could not be read ({load_error}); "
            "continuing with an empty collection.[/yellow]"
        )
    return stores


@contextmanager
def report_errors() -> Iterator[None]:
    """Turn tense errors into a message and exit code 1."""
    try:
        yield
    except TenseError as e:
        LOGGER.info("Command failed: %s", e)
        error_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
