# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from tense.model.activity import Activity
from tense.model.category import ActivityCategory
from tense.model.statistics import DateRange, TimeRange
from tense.time import datetime_to_local_date_str, is_same_local_day


def sort_by_start(activities: list[Activity]) -> list[Activity]:
    return sorted(activities, key=lambda activity: activity["start"])


def activities_for_date(
    activities: list[Activity], date: pendulum.DateTime | pendulum.Date
) -> list[Activity]:
    """
    Activities whose start falls on the local calendar day of date.

    An activity running past midnight belongs to the day it started on.
    """
    if not isinstance(date, pendulum.DateTime):
        date = pendulum.datetime(date.year, date.month, date.day, tz="local")
    return sort_by_start(
        [activity for activity in activities if is_same_local_day(activity["start"], date)]
    )


def activities_for_date_range(
    activities: list[Activity], start: pendulum.DateTime, end: pendulum.DateTime
) -> list[Activity]:
    """Activities whose start lies in [start, end], both ends inclusive."""
    return sort_by_start(
        [activity for activity in activities if start <= activity["start"] <= end]
    )


def activities_in_range(
    activities: list[Activity], date_range: Optional[DateRange]
) -> list[Activity]:
    if date_range is None:
        return sort_by_start(activities)
    start, end = date_range
    return activities_for_date_range(activities, start, end)


def activities_for_category(
    activities: list[Activity], category: ActivityCategory
) -> list[Activity]:
    return sort_by_start(
        [activity for activity in activities if activity["category"] == category]
    )


def open_activities(activities: list[Activity]) -> list[Activity]:
    return sort_by_start([activity for activity in activities if activity["end"] is None])


def days_with_activities(activities: list[Activity]) -> set[str]:
    """Local 'YYYY-MM-DD' identifiers of every day on which an activity started."""
    return {datetime_to_local_date_str(activity["start"]) for activity in activities}


def get_time_range_boundaries(
    time_range: TimeRange,
    reference: Optional[pendulum.DateTime] = None,
) -> DateRange:
    """
    Get the inclusive start and end of the local calendar period containing
    reference, for the day, week (Monday first), month or year time range.
    """
    local_time = (reference if reference is not None else pendulum.now()).in_tz(
        "local"
    )

    if time_range == "day":
        start = local_time.start_of("day")
        end = local_time.end_of("day")
    elif time_range == "week":
        start = local_time.start_of("week")
        end = local_time.end_of("week")
    elif time_range == "month":
        start = local_time.start_of("month")
        end = local_time.end_of("month")
    elif time_range == "year":
        start = local_time.start_of("year")
        end = local_time.end_of("year")
    else:
        raise ValueError(f"Unknown time range: {time_range}")

    return start.in_tz("UTC"), end.in_tz("UTC")


def get_trailing_days_range(
    days: int, now: Optional[pendulum.DateTime] = None
) -> DateRange:
    end = now if now is not None else pendulum.now("UTC")
    return end.subtract(days=days), end
