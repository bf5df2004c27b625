# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from tense.model.activity import Activity
from tense.model.category import ActivityCategory, RecurringPattern
from tense.model.entity_id import generate_entity_id


def get_sample_activities(now: Optional[pendulum.DateTime] = None) -> list[Activity]:
    """Activities shown on first launch: today, yesterday and two days ago."""
    today = (now if now is not None else pendulum.now("local")).in_tz("local")
    yesterday = today.subtract(days=1)
    two_days_ago = today.subtract(days=2)

    def at(day: pendulum.DateTime, hour: int, minute: int = 0) -> pendulum.DateTime:
        return day.set(hour=hour, minute=minute, second=0, microsecond=0).in_tz("UTC")

    return [
        {
            "id": generate_entity_id(),
            "title": "Work - Team meeting",
            "description": "Weekly meeting with the development team",
            "start": at(today, 9),
            "end": at(today, 10, 30),
            "category": ActivityCategory.WORK,
            "is_recurring": True,
            "recurring_pattern": RecurringPattern.WEEKLY,
            "tags": [],
        },
        {
            "id": generate_entity_id(),
            "title": "Breakfast",
            "description": None,
            "start": at(today, 7, 30),
            "end": at(today, 8),
            "category": ActivityCategory.FOOD,
            "is_recurring": True,
            "recurring_pattern": RecurringPattern.DAILY,
            "tags": [],
        },
        {
            "id": generate_entity_id(),
            "title": "Exercise - Running",
            "description": "Morning run in the park",
            "start": at(yesterday, 6),
            "end": at(yesterday, 7),
            "category": ActivityCategory.EXERCISE,
            "is_recurring": False,
            "recurring_pattern": None,
            "tags": [],
        },
        {
            "id": generate_entity_id(),
            "title": "Reading - Programming book",
            "description": None,
            "start": at(two_days_ago, 21),
            "end": at(two_days_ago, 22),
            "category": ActivityCategory.EDUCATION,
            "is_recurring": False,
            "recurring_pattern": None,
            "tags": [],
        },
    ]
