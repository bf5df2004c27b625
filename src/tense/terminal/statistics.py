# SPDX-License-Identifier: MIT

from enum import Enum
from typing import Annotated, Optional

import pendulum
import typer

from tense.model.category import ActivityCategory, category_label
from tense.model.statistics import DateRange
from tense.query.activity import get_time_range_boundaries
from tense.service import statistics
from tense.terminal.context import get_stores, report_errors
from tense.terminal.custom_typer import AliasedTyperGroup
from tense.terminal.parse import parse_datetime
from tense.time import datetime_to_display_local_date_str, seconds_to_display_str
from tense.view import statistics as statistics_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


class RangeOption(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


RangeAnnotation = Annotated[
    RangeOption, typer.Option("--range", "-r", help="calendar period to report on")
]
ReferenceAnnotation = Annotated[
    Optional[pendulum.DateTime],
    typer.Option(
        "--date",
        "-dt",
        parser=parse_datetime,
        help="any moment inside the period, defaults to now",
    ),
]


def _resolve_range(
    time_range: RangeOption, reference: Optional[pendulum.DateTime]
) -> tuple[str, DateRange]:
    date_range = get_time_range_boundaries(time_range.value, reference)
    start, end = date_range
    if time_range == RangeOption.DAY:
        name = datetime_to_display_local_date_str(start)
    else:
        name = (
            f"{time_range.value} {datetime_to_display_local_date_str(start)}"
            f" - {datetime_to_display_local_date_str(end)}"
        )
    return name, date_range


@app.command("summary, s")
def summary(
    ctx: typer.Context,
    time_range: RangeAnnotation = RangeOption.WEEK,
    reference: ReferenceAnnotation = None,
) -> None:
    """
    totals for a period
    """
    activities = get_stores(ctx).activity_repo.get_all_activities()
    range_name, date_range = _resolve_range(time_range, reference)

    statistics_report.summary_report(
        range_name,
        statistics.total_time_in_range(activities, date_range),
        statistics.total_activities_in_range(activities, date_range),
        statistics.average_activity_duration(activities, date_range),
        statistics.most_active_day(activities, date_range),
        statistics.most_used_category(activities, date_range),
    )


@app.command("categories, c")
def categories(
    ctx: typer.Context,
    time_range: RangeAnnotation = RangeOption.WEEK,
    reference: ReferenceAnnotation = None,
) -> None:
    """
    time per category with its share of the period
    """
    activities = get_stores(ctx).activity_repo.get_all_activities()
    range_name, date_range = _resolve_range(time_range, reference)
    statistics_report.category_report(
        range_name, statistics.category_stats_with_percentages(activities, date_range)
    )


@app.command("hours, h")
def hours(
    ctx: typer.Context,
    time_range: RangeAnnotation = RangeOption.WEEK,
    reference: ReferenceAnnotation = None,
) -> None:
    """
    time per hour of the day
    """
    activities = get_stores(ctx).activity_repo.get_all_activities()
    range_name, date_range = _resolve_range(time_range, reference)
    statistics_report.hourly_report(
        range_name, statistics.daily_pattern(activities, date_range)
    )


@app.command("weekdays, w")
def weekdays(
    ctx: typer.Context,
    time_range: RangeAnnotation = RangeOption.MONTH,
    reference: ReferenceAnnotation = None,
) -> None:
    """
    time per day of the week
    """
    activities = get_stores(ctx).activity_repo.get_all_activities()
    range_name, date_range = _resolve_range(time_range, reference)
    statistics_report.weekly_report(
        range_name, statistics.weekly_pattern(activities, date_range)
    )


@app.command("average, a", no_args_is_help=True)
def average(
    ctx: typer.Context,
    category: ActivityCategory,
    days: Annotated[
        int, typer.Option("--days", "-d", help="length of the trailing window")
    ] = 7,
) -> None:
    """
    average daily time spent on a category over the last days
    """
    activities = get_stores(ctx).activity_repo.get_all_activities()
    with report_errors():
        average_time = statistics.average_daily_time_for_category(
            activities, category, days
        )
    typer.echo(
        f"{category_label(category)}: {seconds_to_display_str(average_time)} per day"
        f" over the last {days} days"
    )


@app.command("overview, o")
def overview(ctx: typer.Context) -> None:
    """
    all-time totals and favorite categories
    """
    activities = get_stores(ctx).activity_repo.get_all_activities()
    statistics_report.overview_report(
        statistics.total_time_logged(activities),
        len(activities),
        statistics.days_of_usage(activities),
        statistics.favorite_categories(activities),
    )
