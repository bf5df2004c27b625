# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table

from tense.model.activity import Activity, activity_duration
from tense.model.category import RECURRING_PATTERN_LABELS
from tense.time import (
    datetime_to_display_local_datetime_str,
    datetime_to_display_local_datetime_str_optional,
    seconds_to_display_str,
)
from tense.view.header import header
from tense.view.util import activity_state, category_text, format_tags, short_id


def activities_report(
    report_name: str,
    activities: list[Activity],
    current_activity: Optional[Activity] = None,
    columns: list[str] = [
        "id",
        "state",
        "title",
        "category",
        "start",
        "end",
        "duration",
        "tags",
    ],
    now: Optional[pendulum.DateTime] = None,
) -> None:
    header(report_name, current_activity)

    activities_table = Table(box=box.SIMPLE)
    for column in columns:
        activities_table.add_column(column)

    total_seconds = 0.0
    for activity in activities:
        duration = activity_duration(activity, now)
        if activity["end"] is not None:
            total_seconds += duration

        row: list[object] = []
        for column in columns:
            if column == "id":
                row.append(short_id(activity["id"]))
            elif column == "state":
                row.append(activity_state(activity))
            elif column == "category":
                row.append(category_text(activity["category"]))
            elif column == "start":
                row.append(datetime_to_display_local_datetime_str(activity["start"]))
            elif column == "end":
                row.append(
                    datetime_to_display_local_datetime_str_optional(activity["end"])
                    or ""
                )
            elif column == "duration":
                row.append(seconds_to_display_str(duration))
            elif column == "tags":
                row.append(format_tags(activity["tags"]))
            elif column == "title":
                row.append(activity["title"])
            else:
                value = activity.get(column)
                row.append("" if value is None else str(value))
        activities_table.add_row(*row)  # type: ignore[arg-type]

    if "duration" in columns and activities:
        total_row: list[object] = ["" for _ in columns]
        total_row[columns.index("duration")] = (
            f"[bold]{seconds_to_display_str(total_seconds)}[/bold]"
        )
        activities_table.add_row(*total_row)  # type: ignore[arg-type]

    console = Console()
    console.print(activities_table)


def single_activity_report(
    activity: Activity,
    current_activity: Optional[Activity] = None,
    now: Optional[pendulum.DateTime] = None,
) -> None:
    header("activity", current_activity)

    activity_table = Table(box=box.SIMPLE)
    activity_table.add_column("property")
    activity_table.add_column("value")

    activity_table.add_row("id", activity["id"] or "")
    activity_table.add_row("title", activity["title"])
    activity_table.add_row("description", activity["description"] or "")
    activity_table.add_row("category", category_text(activity["category"]))
    activity_table.add_row(
        "start", datetime_to_display_local_datetime_str(activity["start"])
    )
    activity_table.add_row(
        "end",
        datetime_to_display_local_datetime_str_optional(activity["end"])
        or "in progress",
    )
    activity_table.add_row(
        "duration", seconds_to_display_str(activity_duration(activity, now))
    )
    recurrence = ""
    if activity["is_recurring"] and activity["recurring_pattern"] is not None:
        recurrence = RECURRING_PATTERN_LABELS[activity["recurring_pattern"]]
    activity_table.add_row("recurring", recurrence)
    activity_table.add_row("tags", format_tags(activity["tags"]))

    console = Console()
    console.print(activity_table)
