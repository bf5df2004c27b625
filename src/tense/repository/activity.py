# SPDX-License-Identifier: MIT

import logging
import threading
from copy import deepcopy
from pathlib import Path
from typing import Callable, Optional

import pendulum

from tense.errors import NotFoundError, SerializationError, ValidationError
from tense.model.activity import Activity
from tense.model.category import ActivityCategory, parse_category
from tense.model.entity_id import EntityId, generate_entity_id
from tense.repository.serialization import dump_activities, parse_activities
from tense.template.activity import get_activity_template
from tense.time import now_utc

LOGGER = logging.getLogger(__name__)


class ActivityRepository:
    """
    Canonical, ordered activity collection persisted as a single YAML blob.

    Every mutation rewrites the whole file. Reads hand out deep copies, so
    callers never hold a reference into the stored list.
    """

    def __init__(
        self,
        path: Path,
        sample_factory: Optional[Callable[[], list[Activity]]] = None,
    ) -> None:
        self.path = path
        self._sample_factory = sample_factory
        self._activities: Optional[list[Activity]] = None
        self._current_id: Optional[EntityId] = None
        self._lock = threading.RLock()
        self.load_error: Optional[SerializationError] = None

    @property
    def activities(self) -> list[Activity]:
        with self._lock:
            if self._activities is None:
                self.__load_data()
            if self._activities is None:
                raise ValueError()
            return self._activities

    def __load_data(self) -> None:
        self._activities = []
        self.load_error = None

        if not self.path.is_file():
            if self._sample_factory is not None:
                self._activities = self._sample_factory()
                LOGGER.info("Seeded %d sample activities", len(self._activities))
            return

        try:
            self._activities = parse_activities(self.path.read_text(encoding="utf-8"))
        except (SerializationError, OSError) as e:
            self.load_error = (
                e
                if isinstance(e, SerializationError)
                else SerializationError(f"unable to read {self.path}: {e}")
            )
            LOGGER.error(
                "Unable to load activities from %s, starting empty: %s", self.path, e
            )
            self._activities = []
            return

        for activity in self._activities:
            if activity["id"] is None:
                activity["id"] = generate_entity_id()
        self.__recover_current()

    def __recover_current(self) -> None:
        # The latest-started open activity becomes current
        self._current_id = None
        open_activities = [a for a in self.activities if a["end"] is None]
        if open_activities:
            latest = max(open_activities, key=lambda a: a["start"])
            self._current_id = latest["id"]

    def save(self) -> None:
        """Overwrite the persisted blob with the full collection."""
        with self._lock:
            text = dump_activities(self.activities)
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.write_text(text, encoding="utf-8")
            except OSError as e:
                LOGGER.error("Unable to save activities to %s: %s", self.path, e)
                raise SerializationError(
                    f"unable to save activities to {self.path}: {e}"
                ) from e

    def clear(self) -> None:
        """Drop every activity and remove the persisted blob."""
        with self._lock:
            self._activities = []
            self._current_id = None
            try:
                self.path.unlink(missing_ok=True)
            except OSError as e:
                LOGGER.error("Unable to remove activities at %s: %s", self.path, e)
                raise SerializationError(
                    f"unable to remove activities at {self.path}: {e}"
                ) from e
            LOGGER.info("Cleared persisted activities at %s", self.path)

    def __validate(self, activity: Activity) -> None:
        if activity["title"].strip() == "":
            raise ValidationError("Activity title must not be empty")
        if activity["end"] is not None and activity["end"] < activity["start"]:
            raise ValidationError("Activity end must not be before its start")

    def __normalize(self, activity: Activity) -> Activity:
        normalized = deepcopy(activity)
        normalized["category"] = parse_category(normalized["category"])
        if not normalized["is_recurring"]:
            normalized["recurring_pattern"] = None
        # Deduplicate tags
        normalized["tags"] = list(dict.fromkeys(normalized["tags"]))
        return normalized

    def __index_of(self, id: EntityId) -> Optional[int]:
        for index, activity in enumerate(self.activities):
            if activity["id"] == id:
                return index
        return None

    def add_activity(self, activity: Activity) -> EntityId:
        """
        Append an activity and return its id.

        An open-ended activity becomes current when it is the latest-started
        open one, the same rule applied when the file is loaded.
        """
        self.__validate(activity)
        with self._lock:
            new_activity = self.__normalize(activity)
            if new_activity["id"] is None:
                new_activity["id"] = generate_entity_id()
            elif self.__index_of(new_activity["id"]) is not None:
                raise ValidationError(
                    f"Activity with id {new_activity['id']} already exists"
                )
            self.activities.append(new_activity)
            if new_activity["end"] is None:
                self.__recover_current()
            self.save()
            return new_activity["id"]

    def update_activity(self, activity: Activity) -> None:
        if activity["id"] is None:
            raise NotFoundError("Activity has no id")
        self.__validate(activity)
        with self._lock:
            index = self.__index_of(activity["id"])
            if index is None:
                raise NotFoundError(f"No activity with id {activity['id']}")
            self.activities[index] = self.__normalize(activity)
            if activity["end"] is not None and self._current_id == activity["id"]:
                self._current_id = None
            self.save()

    def delete_activity(self, id: EntityId) -> bool:
        with self._lock:
            index = self.__index_of(id)
            if index is None:
                return False
            del self.activities[index]
            if self._current_id == id:
                self._current_id = None
            self.save()
            return True

    def start_activity(
        self,
        title: str,
        category: ActivityCategory,
        description: Optional[str] = None,
        now: Optional[pendulum.DateTime] = None,
    ) -> Activity:
        """Stop the current activity, if any, and open a new one at now."""
        start = now if now is not None else now_utc()
        activity = get_activity_template(start)
        activity["title"] = title
        activity["category"] = category
        activity["description"] = description
        self.__validate(activity)

        with self._lock:
            self.stop_current_activity(start)
            id = self.add_activity(activity)
            self._current_id = id
            return self.get_activity(id)

    def stop_current_activity(
        self, now: Optional[pendulum.DateTime] = None
    ) -> Optional[Activity]:
        with self._lock:
            if self._activities is None:
                self.__load_data()
            if self._current_id is None:
                return None
            index = self.__index_of(self._current_id)
            self._current_id = None
            if index is None:
                return None
            stopped = self.activities[index]
            end = now if now is not None else now_utc()
            # An end before the start would give a negative duration
            stopped["end"] = max(end, stopped["start"])
            self.save()
            return deepcopy(stopped)

    @property
    def current_activity(self) -> Optional[Activity]:
        with self._lock:
            if self._activities is None:
                self.__load_data()
            if self._current_id is None:
                return None
            index = self.__index_of(self._current_id)
            if index is None:
                return None
            return deepcopy(self.activities[index])

    def get_all_activities(self) -> list[Activity]:
        with self._lock:
            return deepcopy(self.activities)

    def get_activity(self, id: EntityId) -> Activity:
        with self._lock:
            index = self.__index_of(id)
            if index is None:
                raise NotFoundError(f"No activity with id {id}")
            return deepcopy(self.activities[index])

    def replace_all_activities(self, activities: list[Activity]) -> None:
        """Swap the whole collection, used by import."""
        for activity in activities:
            self.__validate(activity)
        ids = [a["id"] for a in activities if a["id"] is not None]
        if len(set(ids)) != len(ids):
            duplicates = ", ".join(sorted({id for id in ids if ids.count(id) > 1}))
            raise ValidationError(f"Duplicate activity ids: {duplicates}")
        with self._lock:
            self._activities = [self.__normalize(a) for a in activities]
            for activity in self._activities:
                if activity["id"] is None:
                    activity["id"] = generate_entity_id()
            self.__recover_current()
            self.save()
