# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from tense.model.quick_action import QuickAction
from tense.view.header import header
from tense.view.util import category_text


def quick_actions_report(quick_actions: list[QuickAction]) -> None:
    header("quick actions")

    quick_actions_table = Table(box=box.SIMPLE)
    quick_actions_table.add_column("#")
    quick_actions_table.add_column("title")
    quick_actions_table.add_column("category")
    quick_actions_table.add_column("default")

    for position, quick_action in enumerate(quick_actions, start=1):
        quick_actions_table.add_row(
            str(position),
            quick_action["title"],
            category_text(quick_action["category"]),
            "✓" if quick_action["is_default"] else "",
        )

    console = Console()
    console.print(quick_actions_table)
