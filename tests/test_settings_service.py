from tense.service.settings import reset_all_data, sync_with_cloud


def test_reset_all_data(stores, make_activity, at):
    stores.activity_repo.add_activity(make_activity("Code", at(2024, 5, 15, 9)))
    stores.config_repo.update_settings(theme="dark", first_launch=False)

    reset_all_data(stores.config_repo, stores.activity_repo)

    assert stores.activity_repo.get_all_activities() == []
    assert not stores.activity_repo.path.exists()
    assert stores.config_repo.get_settings()["theme"] == "system"
    assert stores.config_repo.get_settings()["first_launch"] is False


def test_sync_disabled_does_nothing(stores, at):
    assert sync_with_cloud(stores.config_repo, now=at(2024, 5, 15, 9)) is False
    assert stores.config_repo.get_settings()["last_sync"] is None


def test_sync_records_last_sync(stores, at):
    stores.config_repo.update_settings(enable_cloud_sync=True)

    assert sync_with_cloud(stores.config_repo, now=at(2024, 5, 15, 9)) is True
    assert stores.config_repo.get_settings()["last_sync"] == at(2024, 5, 15, 9)
