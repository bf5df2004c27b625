# SPDX-License-Identifier: MIT

from enum import Enum
from typing import NamedTuple

from tense.errors import ValidationError


class ActivityCategory(str, Enum):
    WORK = "work"
    SLEEP = "sleep"
    FOOD = "food"
    EXERCISE = "exercise"
    SOCIAL = "social"
    HOBBY = "hobby"
    TRANSPORT = "transport"
    HEALTH = "health"
    EDUCATION = "education"
    ENTERTAINMENT = "entertainment"
    HOUSEHOLD = "household"
    PERSONAL = "personal"
    OTHER = "other"


class RecurringPattern(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    WEEKDAYS = "weekdays"
    WEEKENDS = "weekends"


class CategoryInfo(NamedTuple):
    label: str
    icon: str
    color: str  # rich color name


CATEGORY_INFO: dict[ActivityCategory, CategoryInfo] = {
    ActivityCategory.WORK: CategoryInfo("Work", "💼", "blue"),
    ActivityCategory.SLEEP: CategoryInfo("Sleep", "🛏", "purple"),
    ActivityCategory.FOOD: CategoryInfo("Food", "🍴", "dark_orange"),
    ActivityCategory.EXERCISE: CategoryInfo("Exercise", "🏃", "green"),
    ActivityCategory.SOCIAL: CategoryInfo("Social", "👥", "deep_pink"),
    ActivityCategory.HOBBY: CategoryInfo("Hobby", "🎮", "yellow"),
    ActivityCategory.TRANSPORT: CategoryInfo("Transport", "🚗", "grey50"),
    ActivityCategory.HEALTH: CategoryInfo("Health", "✚", "red"),
    ActivityCategory.EDUCATION: CategoryInfo("Education", "📖", "slate_blue1"),
    ActivityCategory.ENTERTAINMENT: CategoryInfo(
        "Entertainment", "📺", "spring_green"
    ),
    ActivityCategory.HOUSEHOLD: CategoryInfo("Household", "🏠", "orange4"),
    ActivityCategory.PERSONAL: CategoryInfo("Personal", "👤", "cyan"),
    ActivityCategory.OTHER: CategoryInfo("Other", "●", "bright_black"),
}

RECURRING_PATTERN_LABELS: dict[RecurringPattern, str] = {
    RecurringPattern.DAILY: "Daily",
    RecurringPattern.WEEKLY: "Weekly",
    RecurringPattern.MONTHLY: "Monthly",
    RecurringPattern.WEEKDAYS: "Weekdays",
    RecurringPattern.WEEKENDS: "Weekends",
}


def category_label(category: ActivityCategory) -> str:
    return CATEGORY_INFO[category].label


def parse_category(value: str | ActivityCategory) -> ActivityCategory:
    try:
        return ActivityCategory(value)
    except ValueError:
        raise ValidationError(f"Unknown category: {value}") from None
