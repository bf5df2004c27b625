# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum

WEEKDAY_NAMES = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("UTC").isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    parsed = pendulum.parse(datetime)
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"not a datetime: {datetime}")
    return parsed


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def datetime_from_str_utc(datetime: str) -> pendulum.DateTime:
    pendulum_date_time = cast(pendulum.DateTime, pendulum.parse(datetime))
    pendulum_date_time = pendulum_date_time.set(tz="local")
    pendulum_date_time = pendulum_date_time.in_tz("UTC")
    return pendulum_date_time


def datetime_to_display_local_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD ddd")


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def datetime_to_display_local_datetime_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_local_datetime_str(datetime)


def datetime_to_display_local_time_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("HH:mm")


def datetime_to_local_date_str(datetime: pendulum.DateTime) -> str:
    """Convert a pendulum.DateTime to a local date string in 'YYYY-MM-DD' format."""
    return datetime.in_tz("local").format("YYYY-MM-DD")


def local_hour(datetime: pendulum.DateTime) -> int:
    return datetime.in_tz("local").hour


def local_weekday(datetime: pendulum.DateTime) -> int:
    """Weekday of the local calendar day, Sunday = 0 through Saturday = 6."""
    # pendulum numbers Monday = 0 ... Sunday = 6
    return (int(datetime.in_tz("local").day_of_week) + 1) % 7


def is_same_local_day(left: pendulum.DateTime, right: pendulum.DateTime) -> bool:
    return datetime_to_local_date_str(left) == datetime_to_local_date_str(right)


def seconds_to_display_str(seconds: float) -> str:
    """Render a number of seconds as "1h 30m", or "45m" below one hour."""
    hours = int(seconds) // 3600
    minutes = int(seconds) % 3600 // 60
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"
