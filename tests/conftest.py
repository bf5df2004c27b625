from typing import Callable, Optional

import pendulum
import pytest

from tense.model.activity import Activity
from tense.model.category import ActivityCategory
from tense.stores import Stores, build_stores
from tense.template.activity import get_activity_template


@pytest.fixture
def stores(tmp_path) -> Stores:
    return build_stores(
        config_path=tmp_path / "config" / "config.yaml",
        data_path=tmp_path / "data",
        export_path=tmp_path / "exports",
    )


@pytest.fixture
def make_activity() -> Callable[..., Activity]:
    def _make_activity(
        title: str,
        start: pendulum.DateTime,
        end: Optional[pendulum.DateTime] = None,
        category: ActivityCategory = ActivityCategory.OTHER,
        id: Optional[str] = None,
    ) -> Activity:
        activity = get_activity_template(start)
        activity["id"] = id
        activity["title"] = title
        activity["end"] = end
        activity["category"] = category
        return activity

    return _make_activity


def local(year: int, month: int, day: int, hour: int = 0, minute: int = 0):
    return pendulum.datetime(year, month, day, hour, minute, tz="local")


@pytest.fixture
def at() -> Callable[..., pendulum.DateTime]:
    """Build local datetimes, 2024-05-15 is a Wednesday."""
    return local
