"""Unit tests for JSON file helpers."""

import json

import pytest
from pydantic import ValidationError

from cssbattle.schemas import ImportConfig
from cssbattle.utils import load_json, load_json_safe, save_json


class TestLoadJson:
    def test_validates_against_schema(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text(json.dumps({'groups': [{'value': 'DD101', 'label': 'DD101', 'category': 'DEV'}]}))

        config = load_json(path, schema=ImportConfig)
        assert isinstance(config, ImportConfig)
        assert [group.value for group in config.groups] == ['DD101']

    def test_schema_mismatch_raises(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text(json.dumps({'groups': 'DD101'}))
        with pytest.raises(ValidationError):
            load_json(path, schema=ImportConfig)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_json(tmp_path / 'absent.json')


class TestLoadJsonSafe:
    def test_malformed_returns_default(self, tmp_path):
        path = tmp_path / 'state.json'
        path.write_text('{not json')
        assert load_json_safe(path, default={}) == {}

    def test_missing_returns_default(self, tmp_path):
        assert load_json_safe(tmp_path / 'absent.json', default={}) == {}


class TestSaveJson:
    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / 'out' / 'nested' / 'data.json'
        save_json(path, {'name': 'Sara Benali'})
        assert json.loads(path.read_text()) == {'name': 'Sara Benali'}

    def test_model_is_dumped(self, tmp_path):
        path = tmp_path / 'config.json'
        save_json(path, ImportConfig(groups=[]))
        assert json.loads(path.read_text())['groups'] == []
