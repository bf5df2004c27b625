# SPDX-License-Identifier: MIT

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from tense import configuration
from tense.repository.activity import ActivityRepository
from tense.stores import Stores, build_stores
from tense.template.sample import get_sample_activities

LOGGER = logging.getLogger(__name__)


def configure_logging(log_file: Optional[Path] = None, level: int = logging.INFO) -> None:
    log_file = log_file if log_file is not None else configuration.LOG_FILE_PATH
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(log_file, maxBytes=1024 * 1024, backupCount=3)
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    )
    root = logging.getLogger("tense")
    root.setLevel(level)
    root.addHandler(handler)


def initialize() -> Stores:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    stores = build_stores()
    if stores.config_repo.get_settings()["first_launch"]:
        stores.activity_repo = ActivityRepository(
            stores.activity_repo.path, sample_factory=get_sample_activities
        )
        __complete_first_launch(stores)

    return stores


def __complete_first_launch(stores: Stores) -> None:
    # Persist the sample activities and default quick actions right away
    if not stores.activity_repo.path.is_file():
        stores.activity_repo.save()
    stores.quick_action_repo.get_all_quick_actions()
    stores.config_repo.update_settings(first_launch=False)
    LOGGER.info("First launch completed, data stored in %s", configuration.DATA_PATH)
