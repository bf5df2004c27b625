# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from tense.view.header import header


def build_month_table(month_start: pendulum.DateTime, marked_days: set[str]) -> Table:
    """
    Build a month grid, Monday first, where days in marked_days (local
    'YYYY-MM-DD' identifiers) carry a dot under the day number.
    """
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    for day_name in ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]:
        table.add_column(day_name, justify="center")

    month_start = month_start.start_of("month")
    today = pendulum.now("local").start_of("day")

    # Pendulum's day_of_week: Monday = 0, Tuesday = 1, ..., Sunday = 6
    current_date = month_start.subtract(days=int(month_start.day_of_week))
    week_cells: list[Text] = []

    for _ in range(42):  # 6 weeks max (6 * 7 = 42 days)
        cell_content = Text()
        if current_date.month == month_start.month:
            if current_date.start_of("day") == today:
                cell_content.append(
                    f"{current_date.day:2d}", style="bold black on bright_cyan"
                )
            else:
                cell_content.append(f"{current_date.day:2d}", style="bold")
            marker = "•" if current_date.to_date_string() in marked_days else " "
            cell_content.append(f"\n{marker}", style="dark_orange")
        week_cells.append(cell_content)

        if len(week_cells) == 7:
            table.add_row(*week_cells)
            week_cells = []
            if current_date.add(days=1) > month_start.end_of("month"):
                break
        current_date = current_date.add(days=1)

    return table


def month_report(month_start: pendulum.DateTime, marked_days: set[str]) -> None:
    header(month_start.format("MMMM YYYY"))
    console = Console()
    console.print(build_month_table(month_start, marked_days))
