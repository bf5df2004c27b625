# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from tense import configuration
from tense.model.activity import Activity
from tense.repository.activity import ActivityRepository
from tense.repository.configuration import ConfigurationRepository
from tense.repository.quick_action import QuickActionRepository


@dataclass
class Stores:
    """The repositories of one running application, handed to each consumer."""

    config_repo: ConfigurationRepository
    activity_repo: ActivityRepository
    quick_action_repo: QuickActionRepository
    export_path: Path


def build_stores(
    config_path: Optional[Path] = None,
    data_path: Optional[Path] = None,
    export_path: Optional[Path] = None,
    sample_factory: Optional[Callable[[], list[Activity]]] = None,
) -> Stores:
    data_path = data_path if data_path is not None else configuration.DATA_PATH
    return Stores(
        config_repo=ConfigurationRepository(
            config_path if config_path is not None else configuration.APP_CONFIG_PATH
        ),
        activity_repo=ActivityRepository(
            data_path / "activities.yaml", sample_factory=sample_factory
        ),
        quick_action_repo=QuickActionRepository(data_path / "quick_actions.yaml"),
        export_path=export_path if export_path is not None else configuration.EXPORT_PATH,
    )
