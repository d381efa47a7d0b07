import json
from pathlib import Path

import pytest

from media_purge.base.exceptions import ConfigLoadError
from media_purge.services.config_manager import (
    CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE, AppConfig, ConfigManager,
)


def write_config(tmp_path, data):
    path = tmp_path / 'config.json'
    path.write_text(json.dumps(data), encoding='utf-8')
    return path


class TestLoadConfig:

    def test_reads_airtable_credentials(self, tmp_path):
        path = write_config(tmp_path, {'airtable': {'baseId': 'app123', 'token': 'pat456'}})

        config = ConfigManager.load_config(path)

        assert config == AppConfig(base_id='app123', token='pat456')
        assert config.table == 'Generation'
        assert config.page_size == 1000
        assert config.downloads_dir == Path('downloads')

    def test_optional_overrides(self, tmp_path):
        path = write_config(tmp_path, {
            'airtable': {'baseId': 'app123', 'token': 'pat456', 'table': 'Runs'},
            'downloads_dir': 'out/downloads',
        })

        config = ConfigManager.load_config(path)

        assert config.table == 'Runs'
        assert config.downloads_dir == Path('out/downloads')

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigLoadError):
            ConfigManager.load_config(tmp_path / 'nope.json')

    def test_invalid_json(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text('{"airtable": ', encoding='utf-8')

        with pytest.raises(ConfigLoadError):
            ConfigManager.load_config(path)

    @pytest.mark.parametrize('data', [
        {},
        {'airtable': 'app123'},
        {'airtable': {'baseId': 'app123'}},
        {'airtable': {'token': 'pat456'}},
        {'airtable': {'baseId': '', 'token': 'pat456'}},
    ])
    def test_missing_credentials(self, tmp_path, data):
        path = write_config(tmp_path, data)

        with pytest.raises(ConfigLoadError):
            ConfigManager.load_config(path)


class TestResolveConfigPath:

    def test_default(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert ConfigManager.resolve_config_path() == Path(DEFAULT_CONFIG_FILE)

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, '/etc/purge.json')
        assert ConfigManager.resolve_config_path() == Path('/etc/purge.json')

    def test_explicit_path_wins(self, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, '/etc/purge.json')
        assert ConfigManager.resolve_config_path('local.json') == Path('local.json')


class TestActionDefinitions:

    def test_media_fields(self):
        assert ConfigManager.load_action_definitions('images')['field'] == 'Generated Images'
        assert ConfigManager.load_action_definitions('videos')['field'] == 'Generated_Videos'
        assert ConfigManager.load_action_definitions('local')['type'] == 'delete_archive'

    def test_unknown_action(self):
        with pytest.raises(ConfigLoadError):
            ConfigManager.load_action_definitions('audio')
