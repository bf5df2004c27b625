import pytest

from tense.errors import ValidationError
from tense.model.category import ActivityCategory
from tense.service.statistics import (
    average_activity_duration,
    average_daily_time_for_category,
    category_stats,
    category_stats_with_percentages,
    daily_pattern,
    days_of_usage,
    favorite_categories,
    most_active_day,
    most_used_category,
    total_activities_in_range,
    total_time_for_category,
    total_time_in_range,
    total_time_logged,
    weekly_pattern,
)


@pytest.fixture
def work_day(make_activity, at):
    return [
        make_activity(
            "Planning", at(2024, 5, 15, 9), at(2024, 5, 15, 10), ActivityCategory.WORK
        ),
        make_activity(
            "Review", at(2024, 5, 15, 14), at(2024, 5, 15, 14, 30), ActivityCategory.WORK
        ),
        make_activity(
            "Lunch", at(2024, 5, 15, 12), at(2024, 5, 15, 12, 30), ActivityCategory.FOOD
        ),
    ]


def test_total_time_for_category(work_day):
    assert total_time_for_category(work_day, ActivityCategory.WORK) == 5400
    assert total_time_for_category(work_day, ActivityCategory.SLEEP) == 0


def test_total_time_for_category_in_range(work_day, at):
    morning = (at(2024, 5, 15, 0), at(2024, 5, 15, 11))
    assert total_time_for_category(work_day, ActivityCategory.WORK, morning) == 3600


def test_in_progress_activities_do_not_count(make_activity, at):
    running = [
        make_activity("Still going", at(2024, 5, 15, 9), category=ActivityCategory.WORK),
        make_activity("Also going", at(2024, 5, 15, 22), category=ActivityCategory.SLEEP),
    ]

    pattern = daily_pattern(running)
    assert len(pattern) == 24
    assert [stat["hour"] for stat in pattern] == list(range(24))
    assert all(stat["total_time"] == 0 for stat in pattern)
    assert total_time_in_range(running) == 0
    assert total_activities_in_range(running) == 2


def test_average_daily_time_for_category(make_activity, at):
    activities = [
        make_activity(
            "Run", at(2024, 5, 13, 7), at(2024, 5, 13, 8, 30), ActivityCategory.EXERCISE
        ),
        make_activity(
            "Old run", at(2024, 5, 1, 7), at(2024, 5, 1, 8), ActivityCategory.EXERCISE
        ),
    ]
    average = average_daily_time_for_category(
        activities, ActivityCategory.EXERCISE, days=7, now=at(2024, 5, 15, 20)
    )
    assert average == pytest.approx(90 * 60 / 7)


def test_average_daily_time_requires_a_day(work_day):
    with pytest.raises(ValidationError):
        average_daily_time_for_category(work_day, ActivityCategory.WORK, days=0)


def test_category_stats(work_day, make_activity, at):
    activities = work_day + [
        make_activity("Open", at(2024, 5, 15, 16), category=ActivityCategory.WORK)
    ]
    stats = category_stats(activities)

    assert [stat["category"] for stat in stats] == [
        ActivityCategory.WORK,
        ActivityCategory.FOOD,
    ]
    work = stats[0]
    assert work["total_time"] == 5400
    assert work["count"] == 3
    assert work["average_time"] == 1800


def test_category_stats_ties_keep_category_order(make_activity, at):
    stats = category_stats(
        [
            make_activity(
                "Nap", at(2024, 5, 15, 13), at(2024, 5, 15, 14), ActivityCategory.SLEEP
            ),
            make_activity(
                "Code", at(2024, 5, 15, 9), at(2024, 5, 15, 10), ActivityCategory.WORK
            ),
        ]
    )
    assert [stat["category"] for stat in stats] == [
        ActivityCategory.WORK,
        ActivityCategory.SLEEP,
    ]


def test_percentages_sum_to_hundred(work_day):
    stats = category_stats_with_percentages(work_day)
    assert sum(stat["percentage"] for stat in stats) == pytest.approx(100)
    assert stats[0]["percentage"] == pytest.approx(75)


def test_percentages_are_zero_without_completed_time(make_activity, at):
    stats = category_stats_with_percentages(
        [make_activity("Open", at(2024, 5, 15, 9), category=ActivityCategory.WORK)]
    )
    assert [stat["percentage"] for stat in stats] == [0.0]
    assert category_stats_with_percentages([]) == []


def test_daily_pattern_splits_across_hours(make_activity, at):
    pattern = daily_pattern(
        [make_activity("Call", at(2024, 5, 15, 9, 50), at(2024, 5, 15, 10, 10))]
    )
    assert pattern[9]["total_time"] == 600
    assert pattern[10]["total_time"] == 600
    assert sum(stat["total_time"] for stat in pattern) == 1200


def test_daily_pattern_wraps_past_midnight(make_activity, at):
    pattern = daily_pattern(
        [make_activity("Party", at(2024, 5, 15, 23), at(2024, 5, 16, 1))]
    )
    assert pattern[23]["total_time"] == 2400
    assert pattern[0]["total_time"] == 2400
    assert pattern[1]["total_time"] == 2400
    assert pattern[12]["total_time"] == 0


def test_weekly_pattern(work_day, make_activity, at):
    activities = work_day + [
        make_activity("Hike", at(2024, 5, 19, 8), at(2024, 5, 19, 12))
    ]
    pattern = weekly_pattern(activities)

    assert [stat["weekday_name"] for stat in pattern][:2] == ["Sunday", "Monday"]
    assert pattern[0]["total_time"] == 4 * 3600
    assert pattern[3]["weekday_name"] == "Wednesday"
    assert pattern[3]["total_time"] == 7200


def test_most_active_day(work_day):
    best = most_active_day(work_day)
    assert best is not None
    assert best["weekday"] == 3
    assert most_active_day([]) is None


def test_most_used_category(work_day):
    assert most_used_category(work_day) == ActivityCategory.WORK
    assert most_used_category([]) is None


def test_average_activity_duration(work_day, make_activity, at):
    activities = work_day + [make_activity("Open", at(2024, 5, 15, 18))]
    assert average_activity_duration(activities) == pytest.approx(7200 / 3)
    assert average_activity_duration([]) == 0


def test_profile_figures(work_day, make_activity, at):
    activities = work_day + [
        make_activity(
            "Dinner", at(2024, 5, 14, 19), at(2024, 5, 14, 20), ActivityCategory.FOOD
        ),
        make_activity(
            "Brunch", at(2024, 5, 12, 11), at(2024, 5, 12, 12), ActivityCategory.FOOD
        ),
    ]

    assert total_time_logged(activities) == 7200 + 7200
    assert days_of_usage(activities) == 3
    assert favorite_categories(activities) == [
        ActivityCategory.FOOD,
        ActivityCategory.WORK,
    ]
    assert favorite_categories(activities, limit=1) == [ActivityCategory.FOOD]
