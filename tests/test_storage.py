"""Unit tests for client key-value storage."""

import pytest

from cssbattle.storage import (
    InMemoryStorage,
    JsonFileStorage,
    NullStorage,
    get_json_item,
    set_json_item,
)


@pytest.fixture(params=['memory', 'file'])
def storage(request, tmp_path):
    if request.param == 'memory':
        return InMemoryStorage()
    return JsonFileStorage(tmp_path / 'state.json')


class TestStorageContract:
    """Behaviour shared by the stores that keep values."""

    def test_get_missing(self, storage):
        assert storage.get_item('theme') is None

    def test_set_and_get(self, storage):
        storage.set_item('theme', 'dark')
        assert storage.get_item('theme') == 'dark'

    def test_overwrite(self, storage):
        storage.set_item('language', 'fr')
        storage.set_item('language', 'ar')
        assert storage.get_item('language') == 'ar'

    def test_remove(self, storage):
        storage.set_item('theme', 'dark')
        storage.remove_item('theme')
        assert storage.get_item('theme') is None

    def test_remove_missing_is_noop(self, storage):
        storage.remove_item('never-set')

    def test_clear(self, storage):
        storage.set_item('a', '1')
        storage.set_item('b', '2')
        storage.clear()
        assert storage.get_item('a') is None
        assert storage.get_item('b') is None


class TestNullStorage:
    def test_keeps_nothing(self):
        storage = NullStorage()
        storage.set_item('theme', 'dark')
        assert storage.get_item('theme') is None
        storage.remove_item('theme')
        storage.clear()


class TestJsonFileStorage:
    """Tests for the on-disk store."""

    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / 'state.json'
        JsonFileStorage(path).set_item('theme', 'dark')
        assert JsonFileStorage(path).get_item('theme') == 'dark'

    def test_malformed_file_reads_as_empty(self, tmp_path):
        path = tmp_path / 'state.json'
        path.write_text('{not json')
        assert JsonFileStorage(path).get_item('theme') is None

    def test_non_object_file_reads_as_empty(self, tmp_path):
        path = tmp_path / 'state.json'
        path.write_text('["theme"]')
        assert JsonFileStorage(path).get_item('theme') is None

    def test_unwritable_location_does_not_raise(self, tmp_path):
        blocker = tmp_path / 'blocker'
        blocker.write_text('')
        storage = JsonFileStorage(blocker / 'state.json')
        storage.set_item('theme', 'dark')
        assert storage.get_item('theme') is None


class TestJsonItems:
    def test_round_trip(self):
        storage = InMemoryStorage()
        set_json_item(storage, 'last_import', {'record_count': 2})
        assert get_json_item(storage, 'last_import') == {'record_count': 2}

    def test_missing(self):
        assert get_json_item(InMemoryStorage(), 'last_import') is None

    def test_undecodable(self):
        storage = InMemoryStorage()
        storage.set_item('last_import', 'not json')
        assert get_json_item(storage, 'last_import') is None
