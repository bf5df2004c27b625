# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from tense.model.activity import Activity
from tense.model.category import ActivityCategory
from tense.time import now_utc


def get_activity_template(start: Optional[pendulum.DateTime] = None) -> Activity:
    return {
        "id": None,
        "title": "",
        "description": None,
        "start": start if start is not None else now_utc(),
        "end": None,
        "category": ActivityCategory.OTHER,
        "is_recurring": False,
        "recurring_pattern": None,
        "tags": [],
    }
