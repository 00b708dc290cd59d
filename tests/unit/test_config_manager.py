"""Tests for config manager."""

import stat

import pytest

from devdb_cli.client.errors import UsageError
from devdb_cli.config.constants import DEFAULT_API_URL
from devdb_cli.config.manager import ConfigManager


class TestConfigManager:
    def test_load_missing_file(self, config_manager: ConfigManager):
        assert not config_manager.config_path.exists()
        assert config_manager.config.api_url is None

    def test_load_api_table(self, config_manager: ConfigManager):
        config_manager.config_path.write_text('[api]\nurl = "https://devdb.example.com/"\n')
        assert config_manager.config.api_url == "https://devdb.example.com"

    def test_malformed_toml_is_ignored(self, config_manager: ConfigManager):
        config_manager.config_path.write_text("[api\nurl = ")
        assert config_manager.config.api_url is None

    def test_wrong_shape_is_ignored(self, config_manager: ConfigManager):
        config_manager.config_path.write_text('api = "http://flat-value"\n')
        assert config_manager.config.api_url is None

    def test_invalid_stored_url_is_ignored(self, config_manager: ConfigManager):
        config_manager.config_path.write_text('[api]\nurl = "devdb.example.com"\n')
        assert config_manager.config.api_url is None

    def test_non_string_url_is_ignored(self, config_manager: ConfigManager):
        config_manager.config_path.write_text("[api]\nurl = 5000\n")
        assert config_manager.config.api_url is None

    def test_directory_instead_of_file_is_ignored(self, tmp_path):
        (tmp_path / "config.toml").mkdir()
        mgr = ConfigManager(config_path=tmp_path / "config.toml")
        assert mgr.config.api_url is None

    def test_set_api_url_and_reload(self, config_manager: ConfigManager):
        stored = config_manager.set_api_url("https://devdb.example.com/")
        assert stored == "https://devdb.example.com"
        mgr2 = ConfigManager(config_path=config_manager.config_path)
        assert mgr2.config.api_url == "https://devdb.example.com"

    def test_set_api_url_creates_parent_dir(self, tmp_path):
        mgr = ConfigManager(config_path=tmp_path / "nested" / "config.toml")
        mgr.set_api_url("http://devdb:5000")
        assert mgr.config_path.exists()
        mode = stat.S_IMODE(mgr.config_path.stat().st_mode)
        assert mode == 0o600
        assert list(mgr.config_path.parent.iterdir()) == [mgr.config_path]

    def test_set_invalid_api_url(self, config_manager: ConfigManager):
        with pytest.raises(UsageError, match="invalid API URL"):
            config_manager.set_api_url("devdb:5000")
        assert not config_manager.config_path.exists()

    def test_unset_api_url(self, config_manager: ConfigManager):
        config_manager.set_api_url("http://devdb:5000")
        assert config_manager.unset_api_url() is True
        mgr2 = ConfigManager(config_path=config_manager.config_path)
        assert mgr2.config.api_url is None

    def test_unset_when_nothing_stored(self, config_manager: ConfigManager):
        assert config_manager.unset_api_url() is False


class TestResolve:
    def test_flag_wins_over_config(self, config_manager: ConfigManager):
        config_manager.set_api_url("https://stored.example.com")
        settings = config_manager.resolve(api_url="http://flag.example.com:8080")
        assert settings.api_url == "http://flag.example.com:8080"
        assert settings.source == "flag"

    def test_config_used_without_flag(self, config_manager: ConfigManager):
        config_manager.set_api_url("https://stored.example.com")
        settings = config_manager.resolve()
        assert settings.api_url == "https://stored.example.com"
        assert settings.source == "config"

    def test_default_when_nothing_set(self, config_manager: ConfigManager):
        settings = config_manager.resolve()
        assert settings.api_url == DEFAULT_API_URL == "http://localhost:5000"
        assert settings.source == "default"

    def test_empty_flag_falls_through(self, config_manager: ConfigManager):
        config_manager.set_api_url("https://stored.example.com")
        assert config_manager.resolve(api_url="").api_url == "https://stored.example.com"
        assert config_manager.resolve(api_url="   ").source == "config"

    def test_malformed_config_falls_through_to_default(self, config_manager: ConfigManager):
        config_manager.config_path.write_text("not = [valid")
        assert config_manager.resolve().source == "default"

    def test_invalid_flag_raises(self, config_manager: ConfigManager):
        with pytest.raises(UsageError, match="invalid --api-url"):
            config_manager.resolve(api_url="localhost:5000")

    def test_flag_is_not_persisted(self, config_manager: ConfigManager):
        config_manager.resolve(api_url="http://flag.example.com")
        assert not config_manager.config_path.exists()

    def test_settings_carry_config_path(self, config_manager: ConfigManager):
        assert config_manager.resolve().config_path == config_manager.config_path

    def test_default_path_is_module_constant(self, isolated_config):
        assert ConfigManager().config_path == isolated_config
