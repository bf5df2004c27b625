# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Optional

import pendulum

from tense.errors import SerializationError
from tense.repository.activity import ActivityRepository
from tense.repository.serialization import dump_activities, parse_activities
from tense.time import now_utc

LOGGER = logging.getLogger(__name__)

EXPORT_FILE_PREFIX = "tense_backup_"


def get_export_file_name(now: Optional[pendulum.DateTime] = None) -> str:
    moment = now if now is not None else now_utc()
    return f"{EXPORT_FILE_PREFIX}{moment.int_timestamp}.yaml"


def export_activities(
    activity_repo: ActivityRepository,
    directory: Path,
    now: Optional[pendulum.DateTime] = None,
) -> Path:
    """
    Write the full activity collection to a timestamped file in directory.

    The snapshot is taken under the repository lock so a concurrent mutation
    cannot tear the exported collection.
    """
    activities = activity_repo.get_all_activities()
    file_path = directory / get_export_file_name(now)
    try:
        directory.mkdir(parents=True, exist_ok=True)
        file_path.write_text(dump_activities(activities), encoding="utf-8")
    except OSError as e:
        LOGGER.error("Export to %s failed: %s", file_path, e)
        raise SerializationError(f"unable to write export file {file_path}: {e}") from e

    LOGGER.info("Exported %d activities to %s", len(activities), file_path)
    return file_path


def import_activities(activity_repo: ActivityRepository, file_path: Path) -> int:
    """
    Replace every stored activity with the contents of file_path.

    The file is read and parsed completely before anything is replaced; on
    failure SerializationError is raised and the collection is left as it was.
    Records sharing an id raise ValidationError, also without any change.
    Returns the number of imported activities.
    """
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        LOGGER.error("Import from %s failed: %s", file_path, e)
        raise SerializationError(f"unable to read import file {file_path}: {e}") from e

    try:
        activities = parse_activities(text, allow_empty=False)
    except SerializationError as e:
        LOGGER.error("Import from %s failed: %s", file_path, e)
        raise

    activity_repo.replace_all_activities(activities)
    LOGGER.info("Imported %d activities from %s", len(activities), file_path)
    return len(activities)
