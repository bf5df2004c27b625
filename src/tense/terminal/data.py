# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from tense.service.settings import reset_all_data, sync_with_cloud
from tense.service.transfer import export_activities, import_activities
from tense.terminal.context import get_stores, report_errors
from tense.terminal.custom_typer import AliasedTyperGroup
from tense.time import datetime_to_display_local_datetime_str_optional

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("export, e")
def export(
    ctx: typer.Context,
    directory: Annotated[
        Optional[Path],
        typer.Option(
            "--directory",
            "-dir",
            file_okay=False,
            help="target directory, defaults to the configured export path",
        ),
    ] = None,
) -> None:
    """
    write every activity to a timestamped backup file
    """
    stores = get_stores(ctx)
    with report_errors():
        file_path = export_activities(
            stores.activity_repo,
            directory if directory is not None else stores.export_path,
        )

    console = Console()
    console.print(f"[green]Exported activities to {file_path}[/green]")


@app.command("import, i", no_args_is_help=True)
def import_(
    ctx: typer.Context,
    file_path: Annotated[Path, typer.Argument(exists=True, dir_okay=False)],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """
    replace every activity with the contents of a backup file
    """
    stores = get_stores(ctx)
    if not yes:
        typer.confirm("Replace all stored activities?", abort=True)

    with report_errors():
        count = import_activities(stores.activity_repo, file_path)

    console = Console()
    console.print(f"[green]Imported {count} activities[/green]")


@app.command("sync, s")
def sync(ctx: typer.Context) -> None:
    """
    record a cloud sync when it is enabled
    """
    stores = get_stores(ctx)
    with report_errors():
        synced = sync_with_cloud(stores.config_repo)

    console = Console()
    if not synced:
        console.print("Cloud sync is disabled, enable it with: config set --cloud-sync")
        return
    last_sync = datetime_to_display_local_datetime_str_optional(
        stores.config_repo.get_settings()["last_sync"]
    )
    console.print(f"[green]Synced at {last_sync}[/green]")


@app.command("reset-all, ra")
def reset_all(
    ctx: typer.Context,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """
    delete every activity and restore the default settings
    """
    stores = get_stores(ctx)
    if not yes:
        typer.confirm("Delete all activities and reset settings?", abort=True)

    with report_errors():
        reset_all_data(stores.config_repo, stores.activity_repo)

    console = Console()
    console.print("[green]All data reset[/green]")
