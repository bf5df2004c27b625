# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from tense.model.category import ActivityCategory
from tense.terminal.context import get_stores, report_errors
from tense.terminal.custom_typer import AliasedTyperGroup
from tense.terminal.parse import parse_position
from tense.view import activity as activity_report
from tense.view.quick_action import quick_actions_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_quick_actions(
    ctx: typer.Context,
    custom: Annotated[
        bool, typer.Option("--custom", "-cu", help="only user-defined entries")
    ] = False,
) -> None:
    """
    list quick actions by position
    """
    stores = get_stores(ctx)
    quick_actions = (
        stores.quick_action_repo.get_custom_quick_actions()
        if custom
        else stores.quick_action_repo.get_all_quick_actions()
    )
    quick_actions_report(quick_actions)


@app.command("add, a", no_args_is_help=True)
def add(
    ctx: typer.Context,
    title: str,
    category: Annotated[
        ActivityCategory, typer.Option("--category", "-c")
    ] = ActivityCategory.OTHER,
) -> None:
    """
    add a quick action to the end of the list
    """
    stores = get_stores(ctx)
    with report_errors():
        stores.quick_action_repo.add_quick_action(title, category)
    quick_actions_report(stores.quick_action_repo.get_all_quick_actions())


@app.command("modify, m", no_args_is_help=True)
def modify(
    ctx: typer.Context,
    position: int,
    title: Annotated[Optional[str], typer.Option("--title", "-ti")] = None,
    category: Annotated[
        Optional[ActivityCategory], typer.Option("--category", "-c")
    ] = None,
) -> None:
    """
    modify the quick action at a position
    """
    stores = get_stores(ctx)
    quick_actions = stores.quick_action_repo.get_all_quick_actions()
    quick_action = quick_actions[parse_position(position, len(quick_actions))]

    if title is not None:
        quick_action["title"] = title
    if category is not None:
        quick_action["category"] = category

    with report_errors():
        stores.quick_action_repo.update_quick_action(quick_action)
    quick_actions_report(stores.quick_action_repo.get_all_quick_actions())


@app.command("delete, d", no_args_is_help=True)
def delete(ctx: typer.Context, position: int) -> None:
    """
    delete a custom quick action, defaults stay
    """
    stores = get_stores(ctx)
    quick_actions = stores.quick_action_repo.get_all_quick_actions()
    quick_action = quick_actions[parse_position(position, len(quick_actions))]

    if quick_action["id"] is None or not stores.quick_action_repo.delete_quick_action(
        quick_action["id"]
    ):
        typer.echo(f"Default quick action '{quick_action['title']}' cannot be deleted")
        return
    quick_actions_report(stores.quick_action_repo.get_all_quick_actions())


@app.command("move, mv", no_args_is_help=True)
def move(ctx: typer.Context, position: int, new_position: int) -> None:
    """
    move a quick action to a new position
    """
    stores = get_stores(ctx)
    count = len(stores.quick_action_repo.get_all_quick_actions())
    from_index = parse_position(position, count)
    to_index = parse_position(new_position, count)

    with report_errors():
        stores.quick_action_repo.move_quick_action(from_index, to_index)
    quick_actions_report(stores.quick_action_repo.get_all_quick_actions())


@app.command("start, s", no_args_is_help=True)
def start(ctx: typer.Context, position: int) -> None:
    """
    start an activity from the quick action at a position
    """
    stores = get_stores(ctx)
    quick_actions = stores.quick_action_repo.get_all_quick_actions()
    quick_action = quick_actions[parse_position(position, len(quick_actions))]

    with report_errors():
        activity = stores.activity_repo.start_activity(
            quick_action["title"], quick_action["category"]
        )
    activity_report.single_activity_report(activity, activity)
