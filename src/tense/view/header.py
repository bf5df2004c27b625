# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from tense.model.activity import Activity
from tense.time import datetime_to_display_local_time_str
from tense.view.state import get_show_header


def header(
    sub_header: Optional[str] = None, current_activity: Optional[Activity] = None
) -> None:
    """Print the application header with the activity in progress, if any.

    Args:
        sub_header: Optional sub-header text to display
        current_activity: The activity currently being tracked
    """
    if not get_show_header():
        return

    print(Padding("[dark_orange]tense[/dark_orange]", (1, 0, 0, 1)))
    if sub_header is not None:
        print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
    if current_activity is not None:
        since = datetime_to_display_local_time_str(current_activity["start"])
        print(
            Padding(
                f"[plum1]now: {current_activity['title']} (since {since})[/plum1]",
                (0, 1),
            )
        )
