# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from tense.model.entity_id import EntityId
from tense.time import datetime_from_str_utc


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = str(datetime_param)

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return datetime_from_str_utc(datetime)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match (H)H:mm format (time only, use today's date)
    time_match = re.match(r"^(\d{1,2}):(\d{2})$", datetime)
    if time_match:
        hour = int(time_match.group(1))
        minute = int(time_match.group(2))

        if hour < 0 or hour > 23:
            raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
        if minute < 0 or minute > 59:
            raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

        # Create datetime with today's date in local timezone, then convert to UTC
        pendulum_date_time = pendulum.today("local").set(
            hour=hour, minute=minute, second=0, microsecond=0
        )
        return pendulum_date_time.in_tz("UTC")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", datetime):
        days_offset = int(datetime)
        pendulum_date_time = pendulum.today("local").add(days=days_offset)
        return pendulum_date_time.in_tz("UTC")

    if datetime == "now" or datetime == "n":
        return pendulum.now("UTC")
    if datetime == "today" or datetime == "t":
        return pendulum.today("local").in_tz("UTC")
    if datetime == "yesterday" or datetime == "y":
        return pendulum.yesterday("local").in_tz("UTC")
    if datetime == "tomorrow" or datetime == "o":
        return pendulum.tomorrow("local").in_tz("UTC")
    raise typer.BadParameter("Incorrect datetime format")


def resolve_entity_id(id_prefix: str, ids: list[EntityId]) -> EntityId:
    """Find the one stored id starting with id_prefix."""
    matches = [entity_id for entity_id in ids if entity_id.startswith(id_prefix)]
    if len(matches) == 0:
        raise typer.BadParameter(f"No entry with id {id_prefix}")
    if len(matches) > 1:
        raise typer.BadParameter(f"Id {id_prefix} is ambiguous, use more characters")
    return matches[0]


def parse_position(position: int, count: int) -> int:
    """Convert a 1-based list position to an index."""
    if position < 1 or position > count:
        raise typer.BadParameter(f"Position must be between 1 and {count}")
    return position - 1
