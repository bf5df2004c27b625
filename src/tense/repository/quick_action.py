# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Optional

from tense.errors import NotFoundError, SerializationError, ValidationError
from tense.model.category import ActivityCategory, parse_category
from tense.model.entity_id import EntityId, generate_entity_id
from tense.model.quick_action import QuickAction
from tense.repository.serialization import dump_quick_actions, parse_quick_actions
from tense.template.quick_action import get_default_quick_actions

LOGGER = logging.getLogger(__name__)


class QuickActionRepository:
    def __init__(self, path: Path) -> None:
        self.path = path
        self._quick_actions: Optional[list[QuickAction]] = None

    @property
    def quick_actions(self) -> list[QuickAction]:
        if self._quick_actions is None:
            self.__load_data()
        if self._quick_actions is None:
            raise ValueError()
        return self._quick_actions

    def __load_data(self) -> None:
        loaded: Optional[list[QuickAction]] = None
        if self.path.is_file():
            try:
                loaded = parse_quick_actions(self.path.read_text(encoding="utf-8"))
            except (SerializationError, OSError) as e:
                LOGGER.error(
                    "Unable to load quick actions from %s, restoring defaults: %s",
                    self.path,
                    e,
                )

        if loaded is None:
            self._quick_actions = get_default_quick_actions()
            self.save()
            return
        for quick_action in loaded:
            if quick_action["id"] is None:
                quick_action["id"] = generate_entity_id()
        self._quick_actions = loaded

    def save(self) -> None:
        text = dump_quick_actions(self.quick_actions)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding="utf-8")
        except OSError as e:
            LOGGER.error("Unable to save quick actions to %s: %s", self.path, e)
            raise SerializationError(
                f"unable to save quick actions to {self.path}: {e}"
            ) from e

    def __index_of(self, id: EntityId) -> Optional[int]:
        for index, quick_action in enumerate(self.quick_actions):
            if quick_action["id"] == id:
                return index
        return None

    def add_quick_action(self, title: str, category: ActivityCategory) -> QuickAction:
        if title.strip() == "":
            raise ValidationError("Quick action title must not be empty")
        quick_action: QuickAction = {
            "id": generate_entity_id(),
            "title": title.strip(),
            "category": parse_category(category),
            "is_default": False,
        }
        self.quick_actions.append(quick_action)
        self.save()
        return deepcopy(quick_action)

    def update_quick_action(self, quick_action: QuickAction) -> None:
        """Replace title and category; the default flag always stays as stored."""
        if quick_action["title"].strip() == "":
            raise ValidationError("Quick action title must not be empty")
        index = (
            self.__index_of(quick_action["id"])
            if quick_action["id"] is not None
            else None
        )
        if index is None:
            raise NotFoundError(f"No quick action with id {quick_action['id']}")
        stored = self.quick_actions[index]
        stored["title"] = quick_action["title"].strip()
        stored["category"] = parse_category(quick_action["category"])
        self.save()

    def delete_quick_action(self, id: EntityId) -> bool:
        index = self.__index_of(id)
        if index is None:
            return False
        if not self.can_delete(self.quick_actions[index]):
            LOGGER.warning("Refusing to delete default quick action %s", id)
            return False
        del self.quick_actions[index]
        self.save()
        return True

    def move_quick_action(self, from_index: int, to_index: int) -> None:
        count = len(self.quick_actions)
        if not 0 <= from_index < count or not 0 <= to_index < count:
            raise ValidationError(
                f"Quick action positions must be between 0 and {count - 1}"
            )
        if from_index == to_index:
            return
        quick_action = self.quick_actions.pop(from_index)
        self.quick_actions.insert(to_index, quick_action)
        self.save()

    def can_delete(self, quick_action: QuickAction) -> bool:
        return not quick_action["is_default"]

    def get_all_quick_actions(self) -> list[QuickAction]:
        return deepcopy(self.quick_actions)

    def get_quick_action(self, id: EntityId) -> QuickAction:
        index = self.__index_of(id)
        if index is None:
            raise NotFoundError(f"No quick action with id {id}")
        return deepcopy(self.quick_actions[index])

    def get_custom_quick_actions(self) -> list[QuickAction]:
        return [qa for qa in deepcopy(self.quick_actions) if not qa["is_default"]]

    def get_default_quick_actions(self) -> list[QuickAction]:
        return [qa for qa in deepcopy(self.quick_actions) if qa["is_default"]]
