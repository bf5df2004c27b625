import pendulum

from tense.model.category import ActivityCategory
from tense.query.activity import (
    activities_for_category,
    activities_for_date,
    activities_for_date_range,
    activities_in_range,
    days_with_activities,
    get_time_range_boundaries,
    get_trailing_days_range,
    open_activities,
    sort_by_start,
)


def test_activities_for_date_uses_start_day(make_activity, at):
    late = make_activity("Late show", at(2024, 5, 15, 23, 30), at(2024, 5, 16, 0, 30))
    morning = make_activity("Coffee", at(2024, 5, 15, 7), at(2024, 5, 15, 7, 15))
    next_day = make_activity("Standup", at(2024, 5, 16, 9), at(2024, 5, 16, 9, 15))
    activities = [late, next_day, morning]

    on_15th = activities_for_date(activities, at(2024, 5, 15, 12))
    on_16th = activities_for_date(activities, pendulum.date(2024, 5, 16))

    assert [a["title"] for a in on_15th] == ["Coffee", "Late show"]
    assert [a["title"] for a in on_16th] == ["Standup"]


def test_activities_for_date_range_is_inclusive(make_activity, at):
    first = make_activity("At start", at(2024, 5, 13, 0))
    last = make_activity("At end", at(2024, 5, 15, 0))
    outside = make_activity("After", at(2024, 5, 15, 0, 1))

    in_range = activities_for_date_range(
        [outside, last, first], at(2024, 5, 13, 0), at(2024, 5, 15, 0)
    )

    assert [a["title"] for a in in_range] == ["At start", "At end"]


def test_activities_in_range_without_range_returns_everything(make_activity, at):
    activities = [
        make_activity("Second", at(2024, 5, 15, 10)),
        make_activity("First", at(2024, 5, 15, 9)),
    ]
    assert [a["title"] for a in activities_in_range(activities, None)] == [
        "First",
        "Second",
    ]


def test_category_and_open_filters(make_activity, at):
    work = make_activity("Code", at(2024, 5, 15, 9), category=ActivityCategory.WORK)
    food = make_activity(
        "Lunch", at(2024, 5, 15, 12), at(2024, 5, 15, 13), ActivityCategory.FOOD
    )

    assert activities_for_category([work, food], ActivityCategory.FOOD) == [food]
    assert open_activities([work, food]) == [work]


def test_sort_by_start(make_activity, at):
    later = make_activity("Later", at(2024, 5, 15, 18))
    earlier = make_activity("Earlier", at(2024, 5, 14, 18))
    assert sort_by_start([later, earlier]) == [earlier, later]


def test_days_with_activities(make_activity, at):
    activities = [
        make_activity("A", at(2024, 5, 14, 8)),
        make_activity("B", at(2024, 5, 15, 8)),
        make_activity("C", at(2024, 5, 15, 22)),
    ]
    assert days_with_activities(activities) == {"2024-05-14", "2024-05-15"}
    assert days_with_activities([]) == set()


def test_time_range_boundaries(at):
    reference = at(2024, 5, 15, 12)

    day_start, day_end = get_time_range_boundaries("day", reference)
    assert day_start == at(2024, 5, 15)
    assert day_end.in_tz("local").format("YYYY-MM-DD HH:mm:ss") == "2024-05-15 23:59:59"

    week_start, week_end = get_time_range_boundaries("week", reference)
    assert week_start == at(2024, 5, 13)
    assert week_end.in_tz("local").to_date_string() == "2024-05-19"

    month_start, month_end = get_time_range_boundaries("month", reference)
    assert month_start == at(2024, 5, 1)
    assert month_end.in_tz("local").to_date_string() == "2024-05-31"

    year_start, year_end = get_time_range_boundaries("year", reference)
    assert year_start == at(2024, 1, 1)
    assert year_end.in_tz("local").to_date_string() == "2024-12-31"


def test_trailing_days_range(at):
    now = at(2024, 5, 15, 20)
    start, end = get_trailing_days_range(7, now)
    assert end == now
    assert start == at(2024, 5, 8, 20)
