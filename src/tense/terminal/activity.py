# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from tense.model.category import ActivityCategory, RecurringPattern
from tense.query.activity import (
    activities_for_category,
    activities_for_date,
    activities_for_date_range,
)
from tense.template.activity import get_activity_template
from tense.terminal.context import get_stores, report_errors
from tense.terminal.custom_typer import AliasedTyperGroup
from tense.terminal.parse import parse_datetime, resolve_entity_id
from tense.time import now_utc
from tense.view import activity as activity_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATETIME_HELP = (
    "valid inputs: YYYY-MM-DD HH:mm, (H)H:mm, now, today, yesterday, tomorrow, "
    "or day offset like 1, -1"
)


@app.command("add, a", no_args_is_help=True)
def add(
    ctx: typer.Context,
    title: str,
    category: Annotated[
        ActivityCategory, typer.Option("--category", "-c")
    ] = ActivityCategory.OTHER,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--start", "-s", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    end: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--end", "-e", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    recurring: Annotated[
        Optional[RecurringPattern],
        typer.Option("--recurring", "-r", help="marks the activity as recurring"),
    ] = None,
    tags: Annotated[
        Optional[list[str]],
        typer.Option("--tag", "-t", help="accepts multiple tag options"),
    ] = None,
) -> None:
    """
    log an activity, finished when an end is given
    """
    stores = get_stores(ctx)

    activity = get_activity_template(start if start is not None else now_utc())
    activity["title"] = title
    activity["category"] = category
    activity["description"] = description
    activity["end"] = end
    activity["is_recurring"] = recurring is not None
    activity["recurring_pattern"] = recurring
    activity["tags"] = tags if tags is not None else []

    with report_errors():
        id = stores.activity_repo.add_activity(activity)

    activity_report.single_activity_report(
        stores.activity_repo.get_activity(id), stores.activity_repo.current_activity
    )


@app.command("start, s", no_args_is_help=True)
def start(
    ctx: typer.Context,
    title: str,
    category: Annotated[
        ActivityCategory, typer.Option("--category", "-c")
    ] = ActivityCategory.OTHER,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
) -> None:
    """
    start tracking an activity now, stopping the current one
    """
    stores = get_stores(ctx)

    with report_errors():
        activity = stores.activity_repo.start_activity(title, category, description)

    activity_report.single_activity_report(activity, activity)


@app.command("stop, x")
def stop(ctx: typer.Context) -> None:
    """
    stop the current activity
    """
    stores = get_stores(ctx)

    with report_errors():
        stopped = stores.activity_repo.stop_current_activity()

    if stopped is None:
        typer.echo("No activity in progress")
        return
    activity_report.single_activity_report(stopped)


@app.command("current, c")
def current(ctx: typer.Context) -> None:
    """
    show the activity in progress
    """
    stores = get_stores(ctx)
    current_activity = stores.activity_repo.current_activity
    if current_activity is None:
        typer.echo("No activity in progress")
        return
    activity_report.single_activity_report(current_activity, current_activity)


@app.command("show, sh", no_args_is_help=True)
def show(ctx: typer.Context, id: str) -> None:
    """
    show one activity
    """
    stores = get_stores(ctx)
    activity_id = resolve_entity_id(id, _all_ids(ctx))
    activity_report.single_activity_report(
        stores.activity_repo.get_activity(activity_id),
        stores.activity_repo.current_activity,
    )


@app.command("modify, m", no_args_is_help=True)
def modify(
    ctx: typer.Context,
    id: str,
    title: Annotated[Optional[str], typer.Option("--title", "-ti")] = None,
    category: Annotated[
        Optional[ActivityCategory], typer.Option("--category", "-c")
    ] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--start", "-s", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    end: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--end", "-e", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    recurring: Annotated[
        Optional[RecurringPattern], typer.Option("--recurring", "-r")
    ] = None,
    add_tags: Annotated[
        Optional[list[str]],
        typer.Option("--add-tag", "-at", help="accepts multiple tag options"),
    ] = None,
    remove_tag_list: Annotated[
        Optional[list[str]],
        typer.Option("--remove-tag", "-rt", help="accepts multiple tag options"),
    ] = None,
    remove_description: Annotated[
        bool, typer.Option("--remove-description", "-rd")
    ] = False,
    remove_end: Annotated[bool, typer.Option("--remove-end", "-re")] = False,
    remove_recurring: Annotated[
        bool, typer.Option("--remove-recurring", "-rr")
    ] = False,
    remove_tags: Annotated[bool, typer.Option("--remove-tags", "-rtgs")] = False,
) -> None:
    """
    modify an activity
    """
    stores = get_stores(ctx)
    activity_id = resolve_entity_id(id, _all_ids(ctx))
    activity = stores.activity_repo.get_activity(activity_id)

    if title is not None:
        activity["title"] = title
    if category is not None:
        activity["category"] = category
    if description is not None:
        activity["description"] = description
    if start is not None:
        activity["start"] = start
    if end is not None:
        activity["end"] = end
    if recurring is not None:
        activity["is_recurring"] = True
        activity["recurring_pattern"] = recurring
    if add_tags is not None:
        activity["tags"] = activity["tags"] + add_tags
    if remove_tag_list is not None:
        activity["tags"] = [t for t in activity["tags"] if t not in remove_tag_list]

    if remove_description:
        activity["description"] = None
    if remove_end:
        activity["end"] = None
    if remove_recurring:
        activity["is_recurring"] = False
        activity["recurring_pattern"] = None
    if remove_tags:
        activity["tags"] = []

    with report_errors():
        stores.activity_repo.update_activity(activity)

    activity_report.single_activity_report(
        stores.activity_repo.get_activity(activity_id),
        stores.activity_repo.current_activity,
    )


@app.command("delete, d", no_args_is_help=True)
def delete(ctx: typer.Context, id: str) -> None:
    """
    delete an activity
    """
    stores = get_stores(ctx)
    activity_id = resolve_entity_id(id, _all_ids(ctx))

    with report_errors():
        stores.activity_repo.delete_activity(activity_id)

    typer.echo(f"Deleted activity {activity_id}")


@app.command("list, ls")
def list_activities(
    ctx: typer.Context,
    date: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--date", "-dt", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--from", "-f", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    end: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--to", "-to", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    category: Annotated[
        Optional[ActivityCategory], typer.Option("--category", "-c")
    ] = None,
) -> None:
    """
    list the activities of a day (today by default) or of a date range
    """
    stores = get_stores(ctx)
    activities = stores.activity_repo.get_all_activities()

    if start is not None or end is not None:
        range_start = (
            start if start is not None else pendulum.datetime(1970, 1, 1, tz="UTC")
        )
        range_end = end if end is not None else now_utc()
        activities = activities_for_date_range(activities, range_start, range_end)
        report_name = "activities in range"
    else:
        day = date if date is not None else now_utc()
        activities = activities_for_date(activities, day)
        report_name = f"activities: {day.in_tz('local').format('YYYY-MM-DD ddd')}"

    if category is not None:
        activities = activities_for_category(activities, category)

    activity_report.activities_report(
        report_name, activities, stores.activity_repo.current_activity
    )


def _all_ids(ctx: typer.Context) -> list[str]:
    return [
        activity["id"]
        for activity in get_stores(ctx).activity_repo.get_all_activities()
        if activity["id"] is not None
    ]
