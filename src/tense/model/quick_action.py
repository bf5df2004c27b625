# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from tense.model.category import ActivityCategory
from tense.model.entity_id import EntityId


class QuickAction(TypedDict):
    id: Optional[EntityId]
    title: str
    category: ActivityCategory
    is_default: bool
