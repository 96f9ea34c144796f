"""JSON file storage for the player list and settings."""
import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

import jsonschema

from holdem_showdown.config.environment import Config, get_config
from holdem_showdown.config.settings import CardSize, Settings
from holdem_showdown.core.exceptions import ShowdownError
from holdem_showdown.game.player import Player

logger = logging.getLogger(__name__)

CARD_CODE_PATTERN = "^([2-9TJQKAtjqka][shdcSHDC])?$"

PLAYERS_SCHEMA = {
    "type": "array",
    "items": {
        "type": "object",
        "required": ["name", "cards"],
        "properties": {
            "name": {"type": "string", "minLength": 1},
            "cards": {
                "type": "array",
                "minItems": 2,
                "maxItems": 2,
                "items": {"type": "string", "pattern": CARD_CODE_PATTERN},
            },
        },
    },
}

SETTINGS_SCHEMA = {
    "type": "object",
    "properties": {
        "darkMode": {"type": "boolean"},
        "showCardSuits": {"type": "boolean"},
        "cardSize": {"enum": [size.value for size in CardSize]},
    },
}


class JsonStore:
    """
    Loads and saves the players and settings as JSON documents.

    Reading never fails: a missing file gives the defaults, and an
    unreadable or invalid one is logged and also gives the defaults.
    Writes propagate their errors.
    """

    def __init__(self, data_dir: Optional[Union[str, Path]] = None, config: Optional[type[Config]] = None):
        """
        Initialize the store.

        Args:
            data_dir: Directory holding the JSON files. Defaults to the
                      configured DATA_DIR.
            config: Configuration class, defaults to get_config()
        """
        self.config = config or get_config()
        self.data_dir = Path(data_dir) if data_dir is not None else Path(self.config.DATA_DIR)
        self.players_path = self.data_dir / self.config.PLAYERS_FILE
        self.settings_path = self.data_dir / self.config.SETTINGS_FILE

    def load_players(self) -> List[Player]:
        """Load the saved players, or an empty list."""
        data = self._read(self.players_path, PLAYERS_SCHEMA)
        if data is None:
            return []
        try:
            return [Player.from_json(item) for item in data]
        except ShowdownError as e:
            logger.warning(f"Failed to load players from {self.players_path}: {e}")
            return []

    def save_players(self, players: List[Player]) -> None:
        self._write(self.players_path, [player.to_json() for player in players])
        logger.debug(f"Saved {len(players)} players to {self.players_path}")

    def clear_players(self) -> None:
        """Remove the saved players."""
        if self.players_path.exists():
            self.players_path.unlink()
            logger.info(f"Removed {self.players_path}")

    def load_settings(self) -> Settings:
        """Load the saved settings, or the defaults."""
        data = self._read(self.settings_path, SETTINGS_SCHEMA)
        if data is None:
            return Settings()
        return Settings.from_json(data)

    def save_settings(self, settings: Settings) -> None:
        self._write(self.settings_path, settings.to_json())
        logger.debug(f"Saved settings to {self.settings_path}")

    def _read(self, path: Path, schema: dict) -> Optional[Any]:
        """Read and validate a JSON document; None when it is missing or bad."""
        if not path.exists():
            return None
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            jsonschema.validate(instance=data, schema=schema)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to read {path}: {e}")
            return None
        except jsonschema.ValidationError as e:
            logger.warning(f"Ignoring invalid data in {path}: {e.message}")
            return None
        return data

    def _write(self, path: Path, data: Any) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
