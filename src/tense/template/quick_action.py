# SPDX-License-Identifier: MIT

from tense.model.category import ActivityCategory
from tense.model.entity_id import generate_entity_id
from tense.model.quick_action import QuickAction

DEFAULT_QUICK_ACTIONS: list[tuple[str, ActivityCategory]] = [
    ("Work", ActivityCategory.WORK),
    ("Sleep", ActivityCategory.SLEEP),
    ("Eat", ActivityCategory.FOOD),
    ("Exercise", ActivityCategory.EXERCISE),
    ("Socialize", ActivityCategory.SOCIAL),
    ("Hobby", ActivityCategory.HOBBY),
]


def get_default_quick_actions() -> list[QuickAction]:
    return [
        {
            "id": generate_entity_id(),
            "title": title,
            "category": category,
            "is_default": True,
        }
        for title, category in DEFAULT_QUICK_ACTIONS
    ]
