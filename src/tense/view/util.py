# SPDX-License-Identifier: MIT

from typing import Optional

from rich.text import Text

from tense.model.activity import Activity, is_in_progress
from tense.model.category import CATEGORY_INFO, ActivityCategory
from tense.model.entity_id import EntityId

SHORT_ID_LENGTH = 8


def short_id(entity_id: Optional[EntityId]) -> str:
    if entity_id is None:
        return ""
    return entity_id[:SHORT_ID_LENGTH]


def format_tags(tags: Optional[list[str]]) -> str:
    """Format a list of tags as a comma-separated string without brackets or quotes."""
    if tags is None or len(tags) == 0:
        return ""
    return ", ".join(tags)


def category_text(category: ActivityCategory) -> Text:
    info = CATEGORY_INFO[ActivityCategory(category)]
    return Text(f"{info.icon} {info.label}", style=info.color)


def activity_state(activity: Activity) -> str:
    if is_in_progress(activity):
        return ">"
    return " "


def percentage_bar(percentage: float, width: int = 20) -> str:
    filled = round(percentage / 100 * width)
    return "█" * filled + "·" * (width - filled)
