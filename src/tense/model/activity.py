# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from tense.model.category import ActivityCategory, RecurringPattern
from tense.model.entity_id import EntityId


class Activity(TypedDict):
    id: Optional[EntityId]
    title: str
    description: Optional[str]
    start: pendulum.DateTime
    end: Optional[pendulum.DateTime]  # None while in progress
    category: ActivityCategory
    is_recurring: bool
    recurring_pattern: Optional[RecurringPattern]
    tags: list[str]


def activity_duration(
    activity: Activity, now: Optional[pendulum.DateTime] = None
) -> float:
    """Seconds between start and end, or between start and now while in progress."""
    end = activity["end"]
    if end is None:
        end = now if now is not None else pendulum.now("UTC")
    return (end - activity["start"]).total_seconds()


def completed_duration(activity: Activity) -> Optional[float]:
    """Duration in seconds of a finished activity, None while in progress."""
    if activity["end"] is None:
        return None
    return (activity["end"] - activity["start"]).total_seconds()


def is_in_progress(activity: Activity) -> bool:
    return activity["end"] is None
