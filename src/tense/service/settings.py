# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from tense.repository.activity import ActivityRepository
from tense.repository.configuration import ConfigurationRepository
from tense.time import now_utc

LOGGER = logging.getLogger(__name__)


def reset_all_data(
    config_repo: ConfigurationRepository, activity_repo: ActivityRepository
) -> None:
    """Restore every setting to its default and drop all stored activities."""
    activity_repo.clear()
    config_repo.reset_settings()
    LOGGER.info("All data reset")


def sync_with_cloud(
    config_repo: ConfigurationRepository,
    now: Optional[pendulum.DateTime] = None,
) -> bool:
    """
    Record a sync when cloud sync is enabled.

    No data leaves the machine; only last_sync is updated. Returns whether a
    sync was recorded.
    """
    if not config_repo.get_settings()["enable_cloud_sync"]:
        return False
    config_repo.update_settings(last_sync=now if now is not None else now_utc())
    LOGGER.info("Cloud sync recorded")
    return True
