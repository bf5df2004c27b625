# SPDX-License-Identifier: MIT

import datetime
from typing import Any, Optional

import pendulum
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CSafeLoader as SafeLoader
except ImportError:
    from yaml import Dumper, SafeLoader  # type: ignore[assignment]

from tense import time
from tense.errors import SerializationError
from tense.model.activity import Activity
from tense.model.category import ActivityCategory, RecurringPattern
from tense.model.quick_action import QuickAction

ACTIVITIES_KEY = "activities"
QUICK_ACTIONS_KEY = "quick_actions"


def activity_to_dict(activity: Activity) -> dict[str, Any]:
    return {
        "id": activity["id"],
        "title": activity["title"],
        "description": activity["description"],
        "start": time.datetime_to_iso_str(activity["start"]),
        "end": time.datetime_to_iso_str_optional(activity["end"]),
        "category": ActivityCategory(activity["category"]).value,
        "is_recurring": activity["is_recurring"],
        "recurring_pattern": (
            RecurringPattern(activity["recurring_pattern"]).value
            if activity["recurring_pattern"] is not None
            else None
        ),
        "tags": list(activity["tags"]),
    }


def activity_from_dict(raw: Any) -> Activity:
    if not isinstance(raw, dict):
        raise SerializationError(f"activity record is not a mapping: {raw!r}")
    try:
        title = raw["title"]
        if not isinstance(title, str):
            raise SerializationError(f"activity title is not a string: {title!r}")
        is_recurring = bool(raw.get("is_recurring", False))
        raw_pattern = raw.get("recurring_pattern")
        tags = raw.get("tags") or []
        if not isinstance(tags, list):
            raise SerializationError(f"activity tags are not a list: {tags!r}")
        return {
            "id": _id_from_raw(raw.get("id")),
            "title": title,
            "description": raw.get("description"),
            "start": _datetime_from_raw(raw["start"]),
            "end": (
                _datetime_from_raw(raw["end"]) if raw.get("end") is not None else None
            ),
            "category": ActivityCategory(raw.get("category", "other")),
            "is_recurring": is_recurring,
            "recurring_pattern": (
                RecurringPattern(raw_pattern)
                if is_recurring and raw_pattern is not None
                else None
            ),
            "tags": [str(tag) for tag in tags],
        }
    except (KeyError, ValueError, TypeError) as e:
        raise SerializationError(f"malformed activity record: {e}") from e


def _id_from_raw(value: Any) -> Optional[str]:
    # a blank id is assigned a fresh one on insert
    if value is None or str(value).strip() == "":
        return None
    return str(value)


def _datetime_from_raw(value: Any) -> pendulum.DateTime:
    # unquoted timestamps in hand-written files arrive as datetime objects
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value, tz="UTC")
    return time.datetime_from_str(str(value))


def quick_action_to_dict(quick_action: QuickAction) -> dict[str, Any]:
    return {
        "id": quick_action["id"],
        "title": quick_action["title"],
        "category": ActivityCategory(quick_action["category"]).value,
        "is_default": quick_action["is_default"],
    }


def quick_action_from_dict(raw: Any) -> QuickAction:
    if not isinstance(raw, dict):
        raise SerializationError(f"quick action record is not a mapping: {raw!r}")
    try:
        return {
            "id": _id_from_raw(raw.get("id")),
            "title": str(raw["title"]),
            "category": ActivityCategory(raw["category"]),
            "is_default": bool(raw.get("is_default", False)),
        }
    except (KeyError, ValueError, TypeError) as e:
        raise SerializationError(f"malformed quick action record: {e}") from e


def dump_activities(activities: list[Activity]) -> str:
    return dump(
        {ACTIVITIES_KEY: [activity_to_dict(activity) for activity in activities]},
        Dumper=Dumper,
        allow_unicode=True,
        sort_keys=False,
    )


def parse_activities(text: str, allow_empty: bool = True) -> list[Activity]:
    """
    Parse a serialized activity collection.

    Accepts the mapping written by dump_activities or a bare list of records.
    Raises SerializationError on anything else, including an empty document
    when allow_empty is False.
    """
    records = _parse_records(text, ACTIVITIES_KEY, allow_empty)
    return [activity_from_dict(record) for record in records]


def dump_quick_actions(quick_actions: list[QuickAction]) -> str:
    return dump(
        {
            QUICK_ACTIONS_KEY: [
                quick_action_to_dict(quick_action) for quick_action in quick_actions
            ]
        },
        Dumper=Dumper,
        allow_unicode=True,
        sort_keys=False,
    )


def parse_quick_actions(text: str) -> Optional[list[QuickAction]]:
    """Parse persisted quick actions, None for an empty document."""
    if load_document(text) is None:
        return None
    records = _parse_records(text, QUICK_ACTIONS_KEY, allow_empty=False)
    return [quick_action_from_dict(record) for record in records]


def load_document(text: str) -> Any:
    try:
        return load(text, Loader=SafeLoader)
    except YAMLError as e:
        raise SerializationError(f"invalid document: {e}") from e


def _parse_records(text: str, key: str, allow_empty: bool) -> list[Any]:
    document = load_document(text)
    if document is None:
        if allow_empty:
            return []
        raise SerializationError("document is empty")
    if isinstance(document, dict):
        if key not in document:
            raise SerializationError(f"document has no '{key}' entry")
        document = document[key]
        if document is None:
            return []
    if not isinstance(document, list):
        raise SerializationError(f"'{key}' is not a list")
    return document
