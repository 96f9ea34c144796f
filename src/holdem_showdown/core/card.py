"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .exceptions import InvalidCardError


class Suit(Enum):
    """Card suits. Suits have no ranking in hold'em."""
    SPADES = 's'
    HEARTS = 'h'
    DIAMONDS = 'd'
    CLUBS = 'c'

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Unicode suit symbol used when rendering cards."""
        return _SUIT_SYMBOLS[self]

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)


_SUIT_SYMBOLS = {
    Suit.SPADES: '♠',
    Suit.HEARTS: '♥',
    Suit.DIAMONDS: '♦',
    Suit.CLUBS: '♣',
}


class Rank(Enum):
    """Card ranks, declared from lowest to highest."""
    TWO = '2'
    THREE = '3'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'
    TEN = 'T'
    JACK = 'J'
    QUEEN = 'Q'
    KING = 'K'
    ACE = 'A'

    def __str__(self) -> str:
        return self.value

    @property
    def numeric(self) -> int:
        """Poker value of the rank: 2 for a deuce up to 14 for an ace."""
        return _RANK_VALUES[self]

    @property
    def full_name(self) -> str:
        """Singular name, e.g. 'King'."""
        return _RANK_NAMES[self][0]

    @property
    def plural_name(self) -> str:
        """Plural name, e.g. 'Sixes'."""
        return _RANK_NAMES[self][1]

    @classmethod
    def from_numeric(cls, value: int) -> 'Rank':
        """Look up a rank by poker value. A value of 1 is the low ace."""
        if value == 1:
            return cls.ACE
        for rank, numeric in _RANK_VALUES.items():
            if numeric == value:
                return rank
        raise ValueError(f"No rank with value {value}")


_RANK_VALUES = {rank: index + 2 for index, rank in enumerate(Rank)}

_RANK_NAMES = {
    Rank.TWO: ('Two', 'Twos'),
    Rank.THREE: ('Three', 'Threes'),
    Rank.FOUR: ('Four', 'Fours'),
    Rank.FIVE: ('Five', 'Fives'),
    Rank.SIX: ('Six', 'Sixes'),
    Rank.SEVEN: ('Seven', 'Sevens'),
    Rank.EIGHT: ('Eight', 'Eights'),
    Rank.NINE: ('Nine', 'Nines'),
    Rank.TEN: ('Ten', 'Tens'),
    Rank.JACK: ('Jack', 'Jacks'),
    Rank.QUEEN: ('Queen', 'Queens'),
    Rank.KING: ('King', 'Kings'),
    Rank.ACE: ('Ace', 'Aces'),
}


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Cards are immutable values; two cards are equal when rank and suit match,
    so they can be collected in sets to track which cards are in use.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (clubs, diamonds, hearts, spades)
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        return f"{self.rank}{self.suit}"

    def display(self, show_suit: bool = True) -> str:
        """Human-facing form, e.g. 'A♠', or just the rank when suits are hidden."""
        if not show_suit:
            return str(self.rank)
        return f"{self.rank}{self.suit.symbol}"

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'As' for Ace of spades

        Returns:
            Card instance

        Raises:
            InvalidCardError: If string format is invalid
        """
        if len(card_str) != 2:
            raise InvalidCardError(f"Invalid card string: {card_str!r}")

        rank_str, suit_str = card_str[0], card_str[1]

        try:
            rank = next(r for r in Rank if r.value == rank_str.upper())
            suit = next(s for s in Suit if s.value == suit_str.lower())
        except StopIteration:
            raise InvalidCardError(f"Invalid rank or suit in: {card_str!r}")

        return cls(rank=rank, suit=suit)


def parse_card(code: Optional[str]) -> Optional[Card]:
    """
    Parse a two-character card code coming from the card picker.

    An empty or short code is an unfilled slot and parses to None.
    Anything else must be a valid card.

    Raises:
        InvalidCardError: If the code is malformed
    """
    if not code or len(code) < 2:
        return None
    return Card.from_string(code)


def card_code(card: Optional[Card]) -> str:
    """Inverse of parse_card: blank slots become ''."""
    return str(card) if card is not None else ''
