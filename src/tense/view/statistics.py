# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from tense.model.category import ActivityCategory, category_label
from tense.model.statistics import CategoryStat, HourStat, WeekdayStat
from tense.time import seconds_to_display_str
from tense.view.header import header
from tense.view.util import category_text, percentage_bar


def summary_report(
    range_name: str,
    total_time: float,
    total_activities: int,
    average_duration: float,
    most_active_day: Optional[WeekdayStat],
    most_used_category: Optional[ActivityCategory],
) -> None:
    header(f"statistics: {range_name}")

    summary_table = Table(box=box.SIMPLE, show_header=False)
    summary_table.add_column("metric", style="cyan")
    summary_table.add_column("value")

    summary_table.add_row("total time", seconds_to_display_str(total_time))
    summary_table.add_row("activities", str(total_activities))
    summary_table.add_row("average duration", seconds_to_display_str(average_duration))
    summary_table.add_row(
        "most active day",
        most_active_day["weekday_name"] if most_active_day is not None else "-",
    )
    summary_table.add_row(
        "most used category",
        category_label(most_used_category) if most_used_category is not None else "-",
    )

    console = Console()
    console.print(summary_table)


def category_report(range_name: str, stats: list[CategoryStat]) -> None:
    header(f"categories: {range_name}")

    category_table = Table(box=box.SIMPLE)
    category_table.add_column("category")
    category_table.add_column("total", justify="right")
    category_table.add_column("count", justify="right")
    category_table.add_column("average", justify="right")
    category_table.add_column("share", justify="right")
    category_table.add_column("")

    for stat in stats:
        category_table.add_row(
            category_text(stat["category"]),
            seconds_to_display_str(stat["total_time"]),
            str(stat["count"]),
            seconds_to_display_str(stat["average_time"]),
            f"{stat['percentage']:.1f}%",
            percentage_bar(stat["percentage"]),
        )

    console = Console()
    console.print(category_table)


def hourly_report(range_name: str, stats: list[HourStat]) -> None:
    header(f"hours: {range_name}")

    peak = max((stat["total_time"] for stat in stats), default=0.0)

    hourly_table = Table(box=box.SIMPLE)
    hourly_table.add_column("hour")
    hourly_table.add_column("time", justify="right")
    hourly_table.add_column("")

    for stat in stats:
        share = stat["total_time"] / peak * 100 if peak > 0 else 0.0
        hourly_table.add_row(
            f"{stat['hour']:02d}:00",
            f"{int(stat['total_time']) // 60}m",
            percentage_bar(share),
        )

    console = Console()
    console.print(hourly_table)


def weekly_report(range_name: str, stats: list[WeekdayStat]) -> None:
    header(f"weekdays: {range_name}")

    peak = max((stat["total_time"] for stat in stats), default=0.0)

    weekly_table = Table(box=box.SIMPLE)
    weekly_table.add_column("weekday")
    weekly_table.add_column("time", justify="right")
    weekly_table.add_column("")

    for stat in stats:
        share = stat["total_time"] / peak * 100 if peak > 0 else 0.0
        weekly_table.add_row(
            stat["weekday_name"],
            seconds_to_display_str(stat["total_time"]),
            percentage_bar(share),
        )

    console = Console()
    console.print(weekly_table)


def overview_report(
    total_time: float,
    total_activities: int,
    days_of_usage: int,
    favorite_categories: list[ActivityCategory],
) -> None:
    header("overview")

    overview_table = Table(box=box.SIMPLE, show_header=False)
    overview_table.add_column("metric", style="cyan")
    overview_table.add_column("value")

    overview_table.add_row("time logged", seconds_to_display_str(total_time))
    overview_table.add_row("activities", str(total_activities))
    overview_table.add_row("days of usage", str(days_of_usage))

    console = Console()
    console.print(overview_table)

    if favorite_categories:
        favorites_table = Table(box=box.SIMPLE)
        favorites_table.add_column("#")
        favorites_table.add_column("favorite categories")
        for rank, category in enumerate(favorite_categories, start=1):
            favorites_table.add_row(str(rank), category_text(category))
        console.print(favorites_table)
