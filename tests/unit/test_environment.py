"""Tests for runtime configuration."""
from holdem_showdown.config.environment import (
    Config, DevelopmentConfig, TestingConfig, get_config
)


def test_get_config_by_name():
    assert get_config("development") is DevelopmentConfig
    assert get_config("testing") is TestingConfig
    assert get_config("default") is Config


def test_unknown_name_falls_back_to_default():
    assert get_config("production") is Config


def test_environment_selects_config(monkeypatch):
    monkeypatch.setenv("HOLDEM_SHOWDOWN_ENV", "testing")
    assert get_config() is TestingConfig

    monkeypatch.delenv("HOLDEM_SHOWDOWN_ENV")
    assert get_config() is Config


def test_file_names():
    assert Config.PLAYERS_FILE == "players.json"
    assert Config.SETTINGS_FILE == "settings.json"
    assert TestingConfig.LOG_LEVEL == "DEBUG"
