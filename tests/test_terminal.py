import pytest
from typer.testing import CliRunner

from tense.model.category import ActivityCategory
from tense.terminal.app import app

runner = CliRunner()


@pytest.fixture
def invoke(stores):
    def _invoke(*args: str):
        return runner.invoke(app, list(args), obj=stores, env={"COLUMNS": "200"})

    return _invoke


def test_add_finished_activity(invoke, stores, at):
    result = invoke(
        "activity",
        "add",
        "Write report",
        "--category",
        "work",
        "--start",
        "2024-05-15 09:00",
        "--end",
        "2024-05-15 10:30",
        "--tag",
        "writing",
    )

    assert result.exit_code == 0, result.output
    activities = stores.activity_repo.get_all_activities()
    assert len(activities) == 1
    assert activities[0]["category"] == ActivityCategory.WORK
    assert activities[0]["start"] == at(2024, 5, 15, 9)
    assert activities[0]["end"] == at(2024, 5, 15, 10, 30)
    assert activities[0]["tags"] == ["writing"]


def test_add_rejects_end_before_start(invoke, stores):
    result = invoke(
        "a", "add", "Backwards", "-s", "2024-05-15 10:00", "-e", "2024-05-15 09:00"
    )

    assert result.exit_code == 1
    assert stores.activity_repo.get_all_activities() == []


def test_start_and_stop(invoke, stores):
    result = invoke("a", "start", "Run", "-c", "exercise")
    assert result.exit_code == 0, result.output
    current = stores.activity_repo.current_activity
    assert current is not None
    assert current["title"] == "Run"

    result = invoke("a", "stop")
    assert result.exit_code == 0, result.output
    assert stores.activity_repo.current_activity is None
    assert stores.activity_repo.get_all_activities()[0]["end"] is not None

    result = invoke("a", "stop")
    assert result.exit_code == 0
    assert "No activity in progress" in result.output


def test_start_with_empty_title_fails(invoke, stores):
    result = invoke("activity", "start", "   ")

    assert result.exit_code == 1
    assert stores.activity_repo.get_all_activities() == []


def test_modify_and_delete_by_id_prefix(invoke, stores, make_activity, at):
    activity_id = stores.activity_repo.add_activity(
        make_activity("Draft", at(2024, 5, 15, 9), at(2024, 5, 15, 10))
    )

    result = invoke("a", "modify", activity_id[:8], "--title", "Final", "-c", "work")
    assert result.exit_code == 0, result.output
    modified = stores.activity_repo.get_activity(activity_id)
    assert modified["title"] == "Final"
    assert modified["category"] == ActivityCategory.WORK

    result = invoke("a", "delete", activity_id[:8])
    assert result.exit_code == 0, result.output
    assert stores.activity_repo.get_all_activities() == []


def test_list_for_date(invoke, stores, make_activity, at):
    stores.activity_repo.add_activity(
        make_activity("Standup", at(2024, 5, 15, 9), at(2024, 5, 15, 9, 15))
    )
    stores.activity_repo.add_activity(
        make_activity("Retro", at(2024, 5, 16, 9), at(2024, 5, 16, 10))
    )

    result = invoke("activity", "list", "--date", "2024-05-15")

    assert result.exit_code == 0, result.output
    assert "Standup" in result.output
    assert "Retro" not in result.output


def test_quick_actions(invoke, stores):
    result = invoke("quick", "list")
    assert result.exit_code == 0, result.output
    assert "Socialize" in result.output

    result = invoke("q", "add", "Guitar", "-c", "hobby")
    assert result.exit_code == 0, result.output
    titles = [qa["title"] for qa in stores.quick_action_repo.get_all_quick_actions()]
    assert titles[-1] == "Guitar"

    result = invoke("q", "move", "7", "1")
    assert result.exit_code == 0, result.output
    titles = [qa["title"] for qa in stores.quick_action_repo.get_all_quick_actions()]
    assert titles[0] == "Guitar"

    result = invoke("q", "delete", "2")
    assert result.exit_code == 0, result.output
    assert "cannot be deleted" in result.output
    assert len(stores.quick_action_repo.get_all_quick_actions()) == 7

    result = invoke("q", "delete", "1")
    assert result.exit_code == 0, result.output
    assert len(stores.quick_action_repo.get_all_quick_actions()) == 6


def test_quick_action_start(invoke, stores):
    result = invoke("q", "start", "1")

    assert result.exit_code == 0, result.output
    current = stores.activity_repo.current_activity
    assert current is not None
    assert current["title"] == "Work"
    assert current["category"] == ActivityCategory.WORK


def test_quick_action_bad_position(invoke):
    result = invoke("q", "start", "42")
    assert result.exit_code != 0


def test_statistics_commands(invoke, stores, make_activity, at):
    stores.activity_repo.add_activity(
        make_activity(
            "Planning", at(2024, 5, 15, 9), at(2024, 5, 15, 10), ActivityCategory.WORK
        )
    )

    for command in ["summary", "categories", "hours", "weekdays"]:
        result = invoke("stats", command, "--range", "week", "--date", "2024-05-15")
        assert result.exit_code == 0, result.output

    result = invoke("s", "average", "work", "--days", "0")
    assert result.exit_code == 1

    result = invoke("s", "overview")
    assert result.exit_code == 0, result.output
    assert "1h 0m" in result.output


def test_calendar(invoke, stores, make_activity, at):
    stores.activity_repo.add_activity(
        make_activity("Standup", at(2024, 5, 15, 9), at(2024, 5, 15, 9, 15))
    )

    result = invoke("cal", "--month", "2024-05-15", "--show-day")

    assert result.exit_code == 0, result.output
    assert "May 2024" in result.output
    assert "•" in result.output
    assert "Standup" in result.output


def test_config_set_and_reset(invoke, stores):
    result = invoke("config", "set", "--theme", "dark", "--no-sounds")
    assert result.exit_code == 0, result.output
    settings = stores.config_repo.get_settings()
    assert settings["theme"] == "dark"
    assert settings["enable_sounds"] is False

    result = invoke("config", "set", "--theme", "neon")
    assert result.exit_code == 1
    assert stores.config_repo.get_settings()["theme"] == "dark"

    result = invoke("c", "reset", "--yes")
    assert result.exit_code == 0, result.output
    assert stores.config_repo.get_settings()["theme"] == "system"


def test_export_and_import(invoke, stores, make_activity, at, tmp_path):
    stores.activity_repo.add_activity(
        make_activity("Backup me", at(2024, 5, 15, 9), at(2024, 5, 15, 10))
    )

    result = invoke("data", "export")
    assert result.exit_code == 0, result.output
    exported = list((tmp_path / "exports").glob("tense_backup_*.yaml"))
    assert len(exported) == 1

    stores.activity_repo.clear()
    result = invoke("d", "import", str(exported[0]), "--yes")
    assert result.exit_code == 0, result.output
    assert [a["title"] for a in stores.activity_repo.get_all_activities()] == [
        "Backup me"
    ]


def test_malformed_import_fails_without_changes(invoke, stores, make_activity, at, tmp_path):
    stores.activity_repo.add_activity(make_activity("Keep me", at(2024, 5, 15, 9)))
    before = stores.activity_repo.get_all_activities()
    broken = tmp_path / "broken.yaml"
    broken.write_text("activities: [ {broken", encoding="utf-8")

    result = invoke("data", "import", str(broken), "--yes")

    assert result.exit_code == 1
    assert stores.activity_repo.get_all_activities() == before


def test_sync_and_reset_all(invoke, stores, make_activity, at):
    result = invoke("data", "sync")
    assert result.exit_code == 0, result.output
    assert "disabled" in result.output

    stores.config_repo.update_settings(enable_cloud_sync=True)
    result = invoke("data", "sync")
    assert result.exit_code == 0, result.output
    assert stores.config_repo.get_settings()["last_sync"] is not None

    stores.activity_repo.add_activity(make_activity("Doomed", at(2024, 5, 15, 9)))
    result = invoke("data", "reset-all", "--yes")
    assert result.exit_code == 0, result.output
    assert stores.activity_repo.get_all_activities() == []
    assert stores.config_repo.get_settings()["enable_cloud_sync"] is False


def test_no_header_option(invoke):
    with_header = invoke("quick", "list")
    without_header = invoke("--no-header", "quick", "list")

    assert "quick actions" in with_header.output
    assert "quick actions" not in without_header.output
