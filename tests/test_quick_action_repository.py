import pytest

from tense.errors import NotFoundError, ValidationError
from tense.model.category import ActivityCategory
from tense.repository.quick_action import QuickActionRepository


def _titles(repo: QuickActionRepository) -> list[str]:
    return [quick_action["title"] for quick_action in repo.get_all_quick_actions()]


def test_seeds_defaults_on_first_load(tmp_path):
    path = tmp_path / "quick_actions.yaml"
    repo = QuickActionRepository(path)

    assert _titles(repo) == ["Work", "Sleep", "Eat", "Exercise", "Socialize", "Hobby"]
    assert all(qa["is_default"] for qa in repo.get_all_quick_actions())
    assert path.is_file()
    assert _titles(QuickActionRepository(path)) == _titles(repo)


def test_corrupt_file_restores_defaults(tmp_path):
    path = tmp_path / "quick_actions.yaml"
    path.write_text("quick_actions: {not: a list}", encoding="utf-8")

    assert len(QuickActionRepository(path).get_all_quick_actions()) == 6


def test_add_custom_quick_action(tmp_path):
    repo = QuickActionRepository(tmp_path / "quick_actions.yaml")
    added = repo.add_quick_action("  Guitar  ", ActivityCategory.HOBBY)

    assert added["title"] == "Guitar"
    assert added["is_default"] is False
    assert _titles(repo)[-1] == "Guitar"
    assert [qa["title"] for qa in repo.get_custom_quick_actions()] == ["Guitar"]
    assert len(repo.get_default_quick_actions()) == 6


def test_add_rejects_empty_title_and_unknown_category(tmp_path):
    repo = QuickActionRepository(tmp_path / "quick_actions.yaml")
    with pytest.raises(ValidationError):
        repo.add_quick_action(" ", ActivityCategory.WORK)
    with pytest.raises(ValidationError):
        repo.add_quick_action("Nap", "napping")  # type: ignore[arg-type]


def test_default_quick_action_cannot_be_deleted(tmp_path):
    repo = QuickActionRepository(tmp_path / "quick_actions.yaml")
    default = repo.get_all_quick_actions()[0]

    assert repo.can_delete(default) is False
    assert repo.delete_quick_action(default["id"]) is False
    assert len(repo.get_all_quick_actions()) == 6


def test_custom_quick_action_can_be_deleted(tmp_path):
    repo = QuickActionRepository(tmp_path / "quick_actions.yaml")
    added = repo.add_quick_action("Meditate", ActivityCategory.HEALTH)

    assert repo.delete_quick_action(added["id"]) is True
    assert "Meditate" not in _titles(repo)
    assert repo.delete_quick_action("missing") is False


def test_update_keeps_default_flag(tmp_path):
    repo = QuickActionRepository(tmp_path / "quick_actions.yaml")
    quick_action = repo.get_all_quick_actions()[0]
    quick_action["title"] = "Office"
    quick_action["is_default"] = False
    repo.update_quick_action(quick_action)

    stored = repo.get_quick_action(quick_action["id"])
    assert stored["title"] == "Office"
    assert stored["is_default"] is True


def test_update_unknown_raises(tmp_path):
    repo = QuickActionRepository(tmp_path / "quick_actions.yaml")
    with pytest.raises(NotFoundError):
        repo.update_quick_action(
            {
                "id": "missing",
                "title": "Ghost",
                "category": ActivityCategory.OTHER,
                "is_default": False,
            }
        )


def test_move_quick_action(tmp_path):
    path = tmp_path / "quick_actions.yaml"
    repo = QuickActionRepository(path)
    repo.move_quick_action(0, 2)

    assert _titles(repo)[:3] == ["Sleep", "Eat", "Work"]
    assert _titles(QuickActionRepository(path))[:3] == ["Sleep", "Eat", "Work"]

    repo.move_quick_action(5, 0)
    assert _titles(repo)[0] == "Hobby"


def test_move_out_of_range_raises(tmp_path):
    repo = QuickActionRepository(tmp_path / "quick_actions.yaml")
    with pytest.raises(ValidationError):
        repo.move_quick_action(0, 6)
    with pytest.raises(ValidationError):
        repo.move_quick_action(-1, 0)


def test_loaded_quick_action_without_id_gets_one(tmp_path):
    path = tmp_path / "quick_actions.yaml"
    path.write_text(
        "quick_actions:\n  - title: Garden\n    category: hobby\n    is_default: false\n",
        encoding="utf-8",
    )
    quick_action = QuickActionRepository(path).get_all_quick_actions()[0]

    assert quick_action["title"] == "Garden"
    assert quick_action["id"] is not None
    assert quick_action["id"] != "None"
