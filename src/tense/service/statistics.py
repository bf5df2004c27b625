# SPDX-License-Identifier: MIT

from collections import Counter
from typing import Optional

import pendulum

from tense.errors import ValidationError
from tense.model.activity import Activity, completed_duration
from tense.model.category import ActivityCategory
from tense.model.statistics import CategoryStat, DateRange, HourStat, WeekdayStat
from tense.query.activity import (
    activities_in_range,
    days_with_activities,
    get_trailing_days_range,
)
from tense.time import WEEKDAY_NAMES, local_hour, local_weekday


def _completed_total(activities: list[Activity]) -> float:
    total = 0.0
    for activity in activities:
        duration = completed_duration(activity)
        if duration is not None:
            total += duration
    return total


def total_time_for_category(
    activities: list[Activity],
    category: ActivityCategory,
    date_range: Optional[DateRange] = None,
) -> float:
    """
    Seconds spent on category, optionally limited to activities starting in
    date_range. Activities still in progress are not counted.
    """
    return _completed_total(
        [
            activity
            for activity in activities_in_range(activities, date_range)
            if activity["category"] == category
        ]
    )


def average_daily_time_for_category(
    activities: list[Activity],
    category: ActivityCategory,
    days: int = 7,
    now: Optional[pendulum.DateTime] = None,
) -> float:
    """
    Total time for category over the trailing window of days, divided by days.

    The divisor is always days, whether or not every day has an activity.
    """
    if days < 1:
        raise ValidationError("Number of days must be at least 1")
    date_range = get_trailing_days_range(days, now)
    return total_time_for_category(activities, category, date_range) / days


def category_stats(
    activities: list[Activity], date_range: Optional[DateRange] = None
) -> list[CategoryStat]:
    """
    Per-category totals for activities starting in date_range, sorted by total
    time descending. Categories without any activity are left out.

    total_time only counts completed activities while count includes the ones
    in progress, so average_time is total_time / count.
    """
    in_range = activities_in_range(activities, date_range)

    stats: list[CategoryStat] = []
    for category in ActivityCategory:
        category_activities = [a for a in in_range if a["category"] == category]
        if not category_activities:
            continue
        total_time = _completed_total(category_activities)
        count = len(category_activities)
        stats.append(
            {
                "category": category,
                "total_time": total_time,
                "count": count,
                "average_time": total_time / count,
                "percentage": 0.0,
            }
        )

    # sorted() is stable, ties keep category declaration order
    return sorted(stats, key=lambda stat: stat["total_time"], reverse=True)


def category_stats_with_percentages(
    activities: list[Activity], date_range: Optional[DateRange] = None
) -> list[CategoryStat]:
    stats = category_stats(activities, date_range)
    total_time = sum(stat["total_time"] for stat in stats)
    for stat in stats:
        stat["percentage"] = (
            stat["total_time"] / total_time * 100 if total_time > 0 else 0.0
        )
    return stats


def _hours_spanned(start_hour: int, end_hour: int) -> list[int]:
    if end_hour >= start_hour:
        return list(range(start_hour, end_hour + 1))
    # Crossed midnight: wrap around through hour 0
    return list(range(start_hour, 24)) + list(range(0, end_hour + 1))


def daily_pattern(
    activities: list[Activity], date_range: Optional[DateRange] = None
) -> list[HourStat]:
    """
    Time per local hour of the day, 24 rows from hour 0.

    Each completed activity splits its duration evenly over every hour from
    its start hour to its end hour inclusive. This approximates the real
    overlap; an activity from 9:50 to 10:10 puts half of its 20 minutes in
    each hour. Activities still in progress are left out.
    """
    hour_totals = [0.0] * 24

    for activity in activities_in_range(activities, date_range):
        duration = completed_duration(activity)
        if duration is None or activity["end"] is None:
            continue
        hours = _hours_spanned(local_hour(activity["start"]), local_hour(activity["end"]))
        share = duration / len(hours)
        for hour in hours:
            hour_totals[hour] += share

    return [{"hour": hour, "total_time": hour_totals[hour]} for hour in range(24)]


def weekly_pattern(
    activities: list[Activity], date_range: Optional[DateRange] = None
) -> list[WeekdayStat]:
    """
    Time per weekday, 7 rows from Sunday.

    The full duration of a completed activity goes to the weekday it started
    on, even when it runs past midnight.
    """
    weekday_totals = [0.0] * 7

    for activity in activities_in_range(activities, date_range):
        duration = completed_duration(activity)
        if duration is None:
            continue
        weekday_totals[local_weekday(activity["start"])] += duration

    return [
        {
            "weekday": weekday,
            "weekday_name": WEEKDAY_NAMES[weekday],
            "total_time": weekday_totals[weekday],
        }
        for weekday in range(7)
    ]


def most_active_day(
    activities: list[Activity], date_range: Optional[DateRange] = None
) -> Optional[WeekdayStat]:
    """First weekday, from Sunday, with the highest total; None without any time."""
    best: Optional[WeekdayStat] = None
    for stat in weekly_pattern(activities, date_range):
        if best is None or stat["total_time"] > best["total_time"]:
            best = stat
    if best is None or best["total_time"] <= 0:
        return None
    return best


def most_used_category(
    activities: list[Activity], date_range: Optional[DateRange] = None
) -> Optional[ActivityCategory]:
    stats = category_stats(activities, date_range)
    if not stats:
        return None
    return stats[0]["category"]


def total_time_in_range(
    activities: list[Activity], date_range: Optional[DateRange] = None
) -> float:
    return _completed_total(activities_in_range(activities, date_range))


def total_activities_in_range(
    activities: list[Activity], date_range: Optional[DateRange] = None
) -> int:
    return len(activities_in_range(activities, date_range))


def average_activity_duration(
    activities: list[Activity], date_range: Optional[DateRange] = None
) -> float:
    completed = [
        activity
        for activity in activities_in_range(activities, date_range)
        if activity["end"] is not None
    ]
    if not completed:
        return 0.0
    return _completed_total(completed) / len(completed)


def total_time_logged(activities: list[Activity]) -> float:
    return _completed_total(activities)


def days_of_usage(activities: list[Activity]) -> int:
    return len(days_with_activities(activities))


def favorite_categories(
    activities: list[Activity], limit: int = 5
) -> list[ActivityCategory]:
    """Categories with the most activities, most used first."""
    counts = Counter(ActivityCategory(activity["category"]) for activity in activities)
    order = {category: index for index, category in enumerate(ActivityCategory)}
    ranked = sorted(counts.items(), key=lambda item: (-item[1], order[item[0]]))
    return [category for category, _ in ranked[:limit]]
