import json
import logging

from scicalc.storage import PersistedPreferences, StateStore


def test_missing_file_loads_nothing(tmp_path):
    assert StateStore(tmp_path / "missing.json").load() is None


def test_saved_record_has_exactly_two_fields(tmp_path):
    store = StateStore(tmp_path / "nested" / "state.json")
    assert store.save(PersistedPreferences(memory=1.5, dark_mode=False))

    assert json.loads(store.path.read_text()) == {"memory": 1.5, "isDarkMode": False}
    loaded = store.load()
    assert loaded.memory == 1.5
    assert loaded.dark_mode is False


def test_unknown_fields_are_ignored(tmp_path):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"memory": 3, "isDarkMode": True, "extra": 1}))
    assert StateStore(path).load() == PersistedPreferences(memory=3, dark_mode=True)


def test_incomplete_or_malformed_records(tmp_path, caplog):
    path = tmp_path / "state.json"
    store = StateStore(path)

    for content in ('{"memory": 3}', '{"memory": "lots", "isDarkMode": true}', "null", "[1, 2", ""):
        path.write_text(content)
        with caplog.at_level(logging.WARNING, logger="scicalc.storage"):
            assert store.load() is None

    assert "Error loading calculator state" in caplog.text


def test_save_failure_is_reported_not_raised(tmp_path, caplog):
    store = StateStore(tmp_path)  # a directory cannot be written as a file
    with caplog.at_level(logging.WARNING, logger="scicalc.storage"):
        assert store.save(PersistedPreferences(memory=0, dark_mode=True)) is False
    assert "Error saving calculator state" in caplog.text


def test_non_finite_memory_is_not_written(tmp_path, caplog):
    path = tmp_path / "state.json"
    store = StateStore(path)
    store.save(PersistedPreferences(memory=2, dark_mode=True))

    with caplog.at_level(logging.WARNING, logger="scicalc.storage"):
        assert store.save(PersistedPreferences(memory=float("inf"), dark_mode=False)) is False
    assert "Error saving calculator state" in caplog.text

    assert json.loads(path.read_text()) == {"memory": 2.0, "isDarkMode": True}
