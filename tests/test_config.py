import logging

import pytest
import toml

from thirtydays.config import CONFIG_FILENAME, Config, ConfigurationError


def write_config(path, body):
    path.write_text(f'[thirtydays]\n{body}', encoding='utf-8')
    return path


class TestConfigDefaults:
    def test_missing_file_uses_defaults(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        config = Config()
        assert config.config_file == tmp_path / CONFIG_FILENAME
        assert config.LOCALE == 'en'
        assert config.DARK_MODE is False
        assert (config.WINDOW_WIDTH, config.WINDOW_HEIGHT) == (406, 762)
        assert config.CATALOG_FILE is None
        assert config.FONTS_DIR is None

    def test_get_unknown_key(self, tmp_path) -> None:
        config = Config(tmp_path / CONFIG_FILENAME)
        assert config.get('NOPE') is None
        assert config.get('NOPE', 3) == 3


class TestConfigLoading:
    def test_values_from_file(self, tmp_path) -> None:
        path = write_config(
            tmp_path / CONFIG_FILENAME,
            'LOCALE = "pt"\nDARK_MODE = true\nWINDOW_WIDTH = 500\n',
        )
        config = Config(path)
        assert config.LOCALE == 'pt'
        assert config.DARK_MODE is True
        assert config.WINDOW_WIDTH == 500
        assert config.WINDOW_HEIGHT == 762

    def test_directory_argument(self, tmp_path) -> None:
        write_config(tmp_path / CONFIG_FILENAME, 'LOCALE = "pt"\n')
        assert Config(tmp_path).LOCALE == 'pt'

    def test_relative_paths_resolve_against_config_folder(self, tmp_path) -> None:
        path = write_config(
            tmp_path / CONFIG_FILENAME,
            'CATALOG_FILE = "data/catalog.toml"\nASSETS_DIR = "/abs/images"\n',
        )
        config = Config(path)
        assert config.CATALOG_FILE == tmp_path / 'data' / 'catalog.toml'
        assert str(config.ASSETS_DIR) == '/abs/images'

    def test_invalid_toml(self, tmp_path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text('[thirtydays\nLOCALE = ', encoding='utf-8')
        with pytest.raises(ConfigurationError, match='Invalid TOML'):
            Config(path)

    def test_invalid_values_fall_back(self, tmp_path, caplog) -> None:
        path = write_config(
            tmp_path / CONFIG_FILENAME,
            'LOCALE = 3\nDARK_MODE = "yes"\nWINDOW_WIDTH = 5\n'
            'WINDOW_HEIGHT = true\nFONTS_DIR = 1\n',
        )
        with caplog.at_level(logging.WARNING):
            config = Config(path)

        assert config.LOCALE == 'en'
        assert config.DARK_MODE is False
        assert config.WINDOW_WIDTH == 406
        assert config.WINDOW_HEIGHT == 762
        assert config.FONTS_DIR is None
        assert 'Invalid WINDOW_WIDTH' in caplog.text
        assert 'Invalid DARK_MODE' in caplog.text


class TestConfigSave:
    def test_save_writes_section(self, tmp_path) -> None:
        path = tmp_path / CONFIG_FILENAME
        config = Config(path)
        config.set('LOCALE', 'pt')
        assert config.save() is config

        assert toml.load(path) == {'thirtydays': {'LOCALE': 'pt'}}
        assert Config(path).LOCALE == 'pt'
