# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

import pendulum
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CSafeLoader as SafeLoader
except ImportError:
    from yaml import Dumper, SafeLoader  # type: ignore[assignment]

from tense import configuration, time
from tense.errors import SerializationError, ValidationError

LOGGER = logging.getLogger(__name__)


class ConfigurationRepository:
    def __init__(self, path: Path) -> None:
        self.path = path
        self._config: Optional[configuration.Settings] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Settings:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        raw: Any = None
        if self.path.is_file():
            try:
                raw = load(self.path.read_text(encoding="utf-8"), Loader=SafeLoader)
            except (YAMLError, OSError) as e:
                LOGGER.error(
                    "Unable to read settings from %s, using defaults: %s", self.path, e
                )
        if not isinstance(raw, dict):
            raw = {}

        # Fill in keys missing from older files with their defaults
        config = configuration.get_default_settings()
        for key in config:
            if key in raw:
                config[key] = raw[key]  # type: ignore[literal-required]
        if config["theme"] not in configuration.THEMES:
            config["theme"] = "system"
        try:
            config["last_sync"] = time.datetime_from_str_optional(
                str(raw["last_sync"]) if raw.get("last_sync") is not None else None
            )
        except ValueError:
            LOGGER.warning("Ignoring unreadable last_sync value %r", raw["last_sync"])
            config["last_sync"] = None
        self._config = config

    def __save_data(self, config: configuration.Settings) -> None:
        serializable_config = cast(dict[str, Any], deepcopy(config))
        serializable_config["last_sync"] = time.datetime_to_iso_str_optional(
            config["last_sync"]
        )
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                dump(serializable_config, Dumper=Dumper, sort_keys=False),
                encoding="utf-8",
            )
        except OSError as e:
            raise SerializationError(
                f"unable to save settings to {self.path}: {e}"
            ) from e

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_settings(self) -> configuration.Settings:
        return deepcopy(self.config)

    def update_settings(
        self,
        theme: Optional[str] = None,
        default_activity_duration: Optional[int] = None,
        enable_notifications: Optional[bool] = None,
        enable_auto_stop: Optional[bool] = None,
        auto_stop_duration: Optional[int] = None,
        enable_haptic_feedback: Optional[bool] = None,
        enable_sounds: Optional[bool] = None,
        first_launch: Optional[bool] = None,
        enable_cloud_sync: Optional[bool] = None,
        last_sync: Optional[pendulum.DateTime] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        export_path: Optional[str] = None,
        remove_export_path: bool = False,
    ) -> None:
        if theme is not None and theme not in configuration.THEMES:
            raise ValidationError(
                f"Invalid theme: {theme}. Valid options: {', '.join(configuration.THEMES)}"
            )
        if default_activity_duration is not None and default_activity_duration < 1:
            raise ValidationError("Default activity duration must be positive")
        if auto_stop_duration is not None and auto_stop_duration < 1:
            raise ValidationError("Auto-stop duration must be positive")

        self.is_dirty = True

        if theme is not None:
            self.config["theme"] = theme  # type: ignore[typeddict-item]
        if default_activity_duration is not None:
            self.config["default_activity_duration"] = default_activity_duration
        if enable_notifications is not None:
            self.config["enable_notifications"] = enable_notifications
        if enable_auto_stop is not None:
            self.config["enable_auto_stop"] = enable_auto_stop
        if auto_stop_duration is not None:
            self.config["auto_stop_duration"] = auto_stop_duration
        if enable_haptic_feedback is not None:
            self.config["enable_haptic_feedback"] = enable_haptic_feedback
        if enable_sounds is not None:
            self.config["enable_sounds"] = enable_sounds
        if first_launch is not None:
            self.config["first_launch"] = first_launch
        if enable_cloud_sync is not None:
            self.config["enable_cloud_sync"] = enable_cloud_sync
        if last_sync is not None:
            self.config["last_sync"] = last_sync
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if export_path is not None:
            self.config["export_path"] = export_path
        if remove_export_path:
            self.config["export_path"] = None

        self.flush()

    def reset_settings(self) -> None:
        """Restore every key to its default, keeping where the data lives."""
        defaults = configuration.get_default_settings()
        defaults["data_path"] = self.config.get("data_path")
        defaults["export_path"] = self.config.get("export_path")
        defaults["first_launch"] = False
        self._config = defaults
        self.is_dirty = True
        self.flush()
        LOGGER.info("Settings restored to defaults")
