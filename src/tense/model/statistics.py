# SPDX-License-Identifier: MIT

from typing import Literal, TypeAlias, TypedDict

import pendulum

from tense.model.category import ActivityCategory

TimeRange = Literal["day", "week", "month", "year"]

DateRange: TypeAlias = tuple[pendulum.DateTime, pendulum.DateTime]


class CategoryStat(TypedDict):
    category: ActivityCategory
    total_time: float  # seconds, completed activities only
    count: int  # all matching activities, in progress included
    average_time: float
    percentage: float


class HourStat(TypedDict):
    hour: int
    total_time: float


class WeekdayStat(TypedDict):
    weekday: int  # Sunday = 0
    weekday_name: str
    total_time: float
