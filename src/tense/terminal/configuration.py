# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from tense import configuration
from tense.terminal.context import get_stores, report_errors
from tense.terminal.custom_typer import AliasedTyperGroup
from tense.time import datetime_to_display_local_datetime_str_optional

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


def _settings_table(settings: configuration.Settings, title: Optional[str] = None) -> Table:
    table = Table(title=title, show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("theme", settings["theme"])
    table.add_row(
        "default_activity_duration", f"{settings['default_activity_duration']} min"
    )
    table.add_row("enable_notifications", _enabled(settings["enable_notifications"]))
    table.add_row("enable_auto_stop", _enabled(settings["enable_auto_stop"]))
    table.add_row("auto_stop_duration", f"{settings['auto_stop_duration']} min")
    table.add_row(
        "enable_haptic_feedback", _enabled(settings["enable_haptic_feedback"])
    )
    table.add_row("enable_sounds", _enabled(settings["enable_sounds"]))
    table.add_row("enable_cloud_sync", _enabled(settings["enable_cloud_sync"]))
    table.add_row(
        "last_sync",
        datetime_to_display_local_datetime_str_optional(settings["last_sync"])
        or "Never",
    )
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row(
        "export_path",
        settings.get("export_path") or str(configuration.EXPORT_PATH),
    )
    return table


@app.command("view, v")
def view(ctx: typer.Context) -> None:
    """Display current settings."""
    stores = get_stores(ctx)
    console = Console()
    console.print(_settings_table(stores.config_repo.get_settings()))


@app.command("set, s")
def set(
    ctx: typer.Context,
    theme: Annotated[
        Optional[str],
        typer.Option("--theme", help="One of: " + ", ".join(configuration.THEMES)),
    ] = None,
    default_activity_duration: Annotated[
        Optional[int],
        typer.Option(
            "--default-activity-duration",
            help="Default length of a new activity in minutes",
        ),
    ] = None,
    enable_notifications: Annotated[
        Optional[bool],
        typer.Option("--notifications/--no-notifications"),
    ] = None,
    enable_auto_stop: Annotated[
        Optional[bool],
        typer.Option(
            "--auto-stop/--no-auto-stop",
            help="Enable/disable stopping long running activities",
        ),
    ] = None,
    auto_stop_duration: Annotated[
        Optional[int],
        typer.Option(
            "--auto-stop-duration",
            help="Minutes after which a running activity is stopped",
        ),
    ] = None,
    enable_haptic_feedback: Annotated[
        Optional[bool],
        typer.Option("--haptic-feedback/--no-haptic-feedback"),
    ] = None,
    enable_sounds: Annotated[
        Optional[bool],
        typer.Option("--sounds/--no-sounds"),
    ] = None,
    enable_cloud_sync: Annotated[
        Optional[bool],
        typer.Option("--cloud-sync/--no-cloud-sync"),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory for the data files, used from the next run on",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Use the default data directory"),
    ] = False,
    export_path: Annotated[
        Optional[str],
        typer.Option("--export-path", help="Directory export files are written to"),
    ] = None,
    remove_export_path: Annotated[
        bool,
        typer.Option("--remove-export-path", help="Use the default export directory"),
    ] = False,
) -> None:
    """
    Update settings.
    """
    stores = get_stores(ctx)

    with report_errors():
        stores.config_repo.update_settings(
            theme=theme,
            default_activity_duration=default_activity_duration,
            enable_notifications=enable_notifications,
            enable_auto_stop=enable_auto_stop,
            auto_stop_duration=auto_stop_duration,
            enable_haptic_feedback=enable_haptic_feedback,
            enable_sounds=enable_sounds,
            enable_cloud_sync=enable_cloud_sync,
            data_path=data_path,
            remove_data_path=remove_data_path,
            export_path=export_path,
            remove_export_path=remove_export_path,
        )

    console = Console()
    console.print("[green]Settings updated successfully![/green]\n")
    console.print(
        _settings_table(stores.config_repo.get_settings(), title="Updated Settings")
    )


@app.command("reset, r")
def reset(
    ctx: typer.Context,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """Restore every setting to its default."""
    stores = get_stores(ctx)
    if not yes:
        typer.confirm("Reset all settings to their defaults?", abort=True)

    with report_errors():
        stores.config_repo.reset_settings()

    console = Console()
    console.print("[green]Settings restored to defaults[/green]")
