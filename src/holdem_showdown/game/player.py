from dataclasses import dataclass, field
from typing import List, Optional

from holdem_showdown.core.card import Card, card_code, parse_card
from holdem_showdown.core.exceptions import InvalidPlayerNameError

HOLE_CARDS = 2


def _empty_hole_cards() -> List[Optional[Card]]:
    return [None] * HOLE_CARDS


@dataclass
class Player:
    """
    Represents a player at the showdown.

    Attributes:
        name: Display name, non-empty
        cards: The two hole card slots; None marks a slot not yet chosen
    """

    name: str
    cards: List[Optional[Card]] = field(default_factory=_empty_hole_cards)

    def __post_init__(self):
        self.name = self.name.strip() if self.name else ''
        if not self.name:
            raise InvalidPlayerNameError("Please enter a valid player name.")
        if len(self.cards) != HOLE_CARDS:
            raise ValueError(f"A player holds exactly {HOLE_CARDS} card slots")

    @property
    def has_full_hand(self) -> bool:
        """Whether both hole cards have been chosen."""
        return all(card is not None for card in self.cards)

    def to_json(self) -> dict:
        """Convert to the stored player shape: {name, cards: [str, str]}."""
        return {
            "name": self.name,
            "cards": [card_code(card) for card in self.cards],
        }

    @classmethod
    def from_json(cls, data: dict) -> 'Player':
        """Create a player from its stored shape."""
        codes = list(data.get("cards") or [])
        codes += [''] * (HOLE_CARDS - len(codes))
        return cls(
            name=data.get("name", ''),
            cards=[parse_card(code) for code in codes[:HOLE_CARDS]],
        )
