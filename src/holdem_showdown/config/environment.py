"""Runtime configuration read from the environment."""

import os
from pathlib import Path


def _default_data_dir() -> str:
    return str(Path.home() / ".holdem_showdown")


class Config:
    """Base configuration class."""

    # Storage settings
    DATA_DIR = os.environ.get("HOLDEM_SHOWDOWN_DATA_DIR") or _default_data_dir()
    PLAYERS_FILE = "players.json"
    SETTINGS_FILE = "settings.json"

    # Logging settings
    LOG_LEVEL = os.environ.get("HOLDEM_SHOWDOWN_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class DevelopmentConfig(Config):
    """Development configuration."""

    LOG_LEVEL = os.environ.get("HOLDEM_SHOWDOWN_LOG_LEVEL", "DEBUG").upper()


class TestingConfig(Config):
    """Testing configuration."""

    LOG_LEVEL = "DEBUG"


config = {
    "default": Config,
    "development": DevelopmentConfig,
    "testing": TestingConfig,
}


def get_config(config_name: str | None = None) -> type[Config]:
    """Get configuration class by name, falling back to HOLDEM_SHOWDOWN_ENV."""
    if config_name is None:
        config_name = os.environ.get("HOLDEM_SHOWDOWN_ENV", "default")
    return config.get(config_name, Config)
