"""Tests for the YAML configuration and first-run setup."""

import importlib

import pytest
import yaml
from typer.testing import CliRunner

from keepsake import configuration
from keepsake.journal import open_journal
from keepsake.repository.configuration import ConfigurationRepository
from keepsake.storage import FileStorage
from keepsake.terminal import configuration as configuration_commands
from keepsake.terminal.app import app

initialize = importlib.import_module("keepsake.initialize")
app_module = importlib.import_module("keepsake.terminal.app")


@pytest.fixture
def config_paths(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", tmp_path / "data")
    return config_dir


class TestConfigurationRepository:
    def test_defaults_without_file(self, config_paths):
        assert ConfigurationRepository().get_config() == (
            configuration.get_default_configuration()
        )

    def test_update_and_flush(self, config_paths):
        repository = ConfigurationRepository()
        repository.update_config(share_origin="https://journal.example", log_level="debug")
        assert repository.flush()
        assert not repository.flush()

        saved = yaml.safe_load(configuration.APP_CONFIG_PATH.read_text())
        assert saved["share_origin"] == "https://journal.example"
        assert saved["log_level"] == "DEBUG"

    def test_missing_keys_filled_with_defaults(self, config_paths):
        config_paths.mkdir()
        configuration.APP_CONFIG_PATH.write_text("share_origin: https://old.example\n")
        config = ConfigurationRepository().get_config()
        assert config["share_origin"] == "https://old.example"
        assert config["connectivity_port"] == configuration.DEFAULT_CONNECTIVITY_PORT

    def test_remove_storage_quota(self, config_paths):
        repository = ConfigurationRepository()
        repository.update_config(storage_quota_bytes=1024)
        assert repository.get_config()["storage_quota_bytes"] == 1024
        repository.update_config(remove_storage_quota=True)
        assert repository.get_config()["storage_quota_bytes"] is None

    def test_get_config_returns_a_copy(self, config_paths):
        repository = ConfigurationRepository()
        repository.get_config()["share_origin"] = "changed"
        assert repository.get_config()["share_origin"] == configuration.DEFAULT_SHARE_ORIGIN


class TestInitialize:
    def test_creates_config_and_data_directory(self, config_paths, tmp_path, monkeypatch):
        monkeypatch.setattr(initialize, "CONFIGURATION_REPO", ConfigurationRepository())
        initialize.initialize()
        assert configuration.APP_CONFIG_PATH.is_file()
        assert (tmp_path / "data").is_dir()

    def test_data_path_from_config(self, config_paths, tmp_path, monkeypatch):
        config_paths.mkdir()
        custom = tmp_path / "elsewhere"
        configuration.APP_CONFIG_PATH.write_text(f"data_path: {custom}\n")
        monkeypatch.setattr(initialize, "CONFIGURATION_REPO", ConfigurationRepository())

        initialize.initialize()

        assert configuration.DATA_PATH == custom
        assert custom.is_dir()


class TestOpenJournal:
    def test_uses_data_path_and_quota(self, config_paths, tmp_path):
        config = configuration.get_default_configuration()
        config["storage_quota_bytes"] = 2048
        journal = open_journal(config)

        assert isinstance(journal.storage, FileStorage)
        assert journal.storage.directory == tmp_path / "data"
        assert journal.storage.quota_bytes == 2048


class TestConfigCommands:
    @pytest.fixture
    def repository(self, config_paths, monkeypatch):
        repository = ConfigurationRepository()
        monkeypatch.setattr(configuration_commands, "CONFIGURATION_REPO", repository)
        return repository

    def test_view(self, repository, journal):
        result = CliRunner().invoke(app, ["config", "view"], obj=journal)
        assert result.exit_code == 0, result.output
        assert "share origin" in result.output
        assert "unlimited" in result.output

    def test_set(self, repository, journal):
        result = CliRunner().invoke(
            app,
            ["c", "s", "--storage-quota-bytes", "4096", "--log-level", "warning"],
            obj=journal,
        )
        assert result.exit_code == 0, result.output
        config = repository.get_config()
        assert config["storage_quota_bytes"] == 4096
        assert config["log_level"] == "WARNING"

    def test_set_rejects_unknown_log_level(self, repository, journal):
        result = CliRunner().invoke(
            app, ["config", "set", "--log-level", "chatty"], obj=journal
        )
        assert result.exit_code != 0
        assert repository.get_config()["log_level"] == configuration.DEFAULT_LOG_LEVEL


class TestLogLevel:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("info", "INFO"),
            ("ERROR", "ERROR"),
            ("verbose", "WARNING"),
            (None, "WARNING"),
            (10, "WARNING"),
        ],
    )
    def test_resolve_log_level(self, name, expected):
        assert app_module.resolve_log_level(name) == expected

    def test_unknown_level_in_config_file_falls_back(self, config_paths, monkeypatch):
        config_paths.mkdir()
        configuration.APP_CONFIG_PATH.write_text("log_level: verbose\n")
        repository = ConfigurationRepository()
        monkeypatch.setattr(app_module, "CONFIGURATION_REPO", repository)
        monkeypatch.setattr(configuration_commands, "CONFIGURATION_REPO", repository)

        result = CliRunner().invoke(app, ["config", "view"])

        assert result.exit_code == 0, result.output
        assert "verbose" in result.output
