# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from tense.query.activity import activities_for_date, days_with_activities
from tense.terminal.context import get_stores
from tense.terminal.parse import parse_datetime
from tense.view import activity as activity_report
from tense.view.calendar import month_report


def calendar(
    ctx: typer.Context,
    month: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--month",
            "-m",
            parser=parse_datetime,
            help="any date in the month to show, defaults to today",
        ),
    ] = None,
    show_day: Annotated[
        bool,
        typer.Option("--show-day", "-sd", help="also list the activities of that day"),
    ] = False,
) -> None:
    """
    month calendar marking the days with activities
    """
    stores = get_stores(ctx)
    activities = stores.activity_repo.get_all_activities()
    reference = (month if month is not None else pendulum.now("UTC")).in_tz("local")

    month_report(reference.start_of("month"), days_with_activities(activities))

    if show_day:
        activity_report.activities_report(
            f"activities: {reference.format('YYYY-MM-DD ddd')}",
            activities_for_date(activities, reference),
            stores.activity_repo.current_activity,
        )
