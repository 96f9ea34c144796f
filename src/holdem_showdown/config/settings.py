"""User settings for displaying the showdown."""
import logging
from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any, Dict

from holdem_showdown.core.exceptions import InvalidSettingsError

logger = logging.getLogger(__name__)


class CardSize(Enum):
    """Card sizes offered by the display settings."""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


# stored key -> attribute name
_JSON_KEYS = {
    "darkMode": "dark_mode",
    "showCardSuits": "show_card_suits",
    "cardSize": "card_size",
}


@dataclass(frozen=True)
class Settings:
    """
    Display settings persisted alongside the players.

    Attributes:
        dark_mode: Use the dark colour scheme in graphical front ends
        show_card_suits: Render suit symbols next to ranks
        card_size: Preferred card size; stored for front ends, the CLI
                   renders text and does not use it
    """
    dark_mode: bool = False
    show_card_suits: bool = True
    card_size: CardSize = CardSize.MEDIUM

    def __post_init__(self):
        for name in ("dark_mode", "show_card_suits"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidSettingsError(
                    f"Invalid value {getattr(self, name)!r} for {name}; expected true or false"
                )
        if not isinstance(self.card_size, CardSize):
            try:
                object.__setattr__(self, "card_size", CardSize(self.card_size))
            except ValueError:
                raise InvalidSettingsError(
                    f"Invalid card size {self.card_size!r}; "
                    f"expected one of {', '.join(s.value for s in CardSize)}"
                )

    def with_updates(self, **changes: Any) -> 'Settings':
        """Copy with some fields changed."""
        unknown = set(changes) - set(_JSON_KEYS.values())
        if unknown:
            raise InvalidSettingsError(f"Unknown settings: {', '.join(sorted(unknown))}")
        return replace(self, **changes)

    def to_json(self) -> Dict[str, Any]:
        """Convert to the stored settings shape."""
        values = asdict(self)
        values["card_size"] = self.card_size.value
        return {key: values[attr] for key, attr in _JSON_KEYS.items()}

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'Settings':
        """Create settings from the stored shape; missing keys keep their defaults."""
        kwargs = {attr: data[key] for key, attr in _JSON_KEYS.items() if key in data}
        ignored = set(data) - set(_JSON_KEYS)
        if ignored:
            logger.debug(f"Ignoring unknown settings keys: {sorted(ignored)}")
        return cls(**kwargs)


def parse_setting(name: str, value: str) -> Dict[str, Any]:
    """
    Convert a command-line setting such as ('show-card-suits', 'no') into a field update.

    Raises:
        InvalidSettingsError: If the name or value is not recognised
    """
    attr = name.replace("-", "_")
    if attr in ("dark_mode", "show_card_suits"):
        lowered = value.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return {attr: True}
        if lowered in ("0", "false", "no", "off"):
            return {attr: False}
        raise InvalidSettingsError(f"Expected a boolean for {name}, got {value!r}")
    if attr == "card_size":
        return {attr: value.strip().lower()}
    raise InvalidSettingsError(f"Unknown setting {name!r}")
