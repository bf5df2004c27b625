# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, NotRequired, Optional, TypedDict

import pendulum
from yaml import YAMLError, load

try:
    from yaml import CSafeLoader as SafeLoader
except ImportError:
    from yaml import SafeLoader  # type: ignore[assignment]
import platformdirs

APP_NAME = "tense"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"
LOG_PATH = platformdirs.user_log_path(APP_NAME)
LOG_FILE_PATH = LOG_PATH / "tense.log"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
EXPORT_PATH: Path = platformdirs.user_documents_path()

Theme = Literal["system", "light", "dark"]
THEMES: list[str] = ["system", "light", "dark"]


class Settings(TypedDict):
    theme: Theme
    default_activity_duration: int  # minutes
    enable_notifications: bool
    enable_auto_stop: bool
    auto_stop_duration: int  # minutes
    enable_haptic_feedback: bool
    enable_sounds: bool
    first_launch: bool
    enable_cloud_sync: bool
    last_sync: Optional[pendulum.DateTime]
    data_path: NotRequired[Optional[str]]
    export_path: NotRequired[Optional[str]]


def get_default_settings() -> Settings:
    return {
        "theme": "system",
        "default_activity_duration": 60,
        "enable_notifications": True,
        "enable_auto_stop": False,
        "auto_stop_duration": 120,
        "enable_haptic_feedback": True,
        "enable_sounds": True,
        "first_launch": True,
        "enable_cloud_sync": False,
        "last_sync": None,
        "data_path": None,
        "export_path": None,
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH

    DATA_PATH = data_path


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are instantiated.
    """
    global EXPORT_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    try:
        config = load(APP_CONFIG_PATH.read_text(), Loader=SafeLoader)
    except YAMLError:
        return
    if not isinstance(config, dict):
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))

    export_path_setting = config.get("export_path")
    if export_path_setting is not None:
        EXPORT_PATH = Path(export_path_setting)
