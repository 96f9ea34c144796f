"""Common types for poker evaluation."""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from holdem_showdown.core.card import Card


class HandCategory(Enum):
    """The ten standard hand categories, weakest first."""
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def display_name(self) -> str:
        return _CATEGORY_NAMES[self]


_CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: 'High Card',
    HandCategory.ONE_PAIR: 'Pair',
    HandCategory.TWO_PAIR: 'Two Pair',
    HandCategory.THREE_OF_A_KIND: 'Three of a Kind',
    HandCategory.STRAIGHT: 'Straight',
    HandCategory.FLUSH: 'Flush',
    HandCategory.FULL_HOUSE: 'Full House',
    HandCategory.FOUR_OF_A_KIND: 'Four of a Kind',
    HandCategory.STRAIGHT_FLUSH: 'Straight Flush',
    HandCategory.ROYAL_FLUSH: 'Royal Flush',
}


@dataclass(frozen=True)
class HandRanking:
    """
    Ranking data for a single five-card combination.

    Attributes:
        category: Hand category
        tiebreak: Ranks (2-14, 5 for the wheel's top card) that order hands
                  within the category, most significant first
    """
    category: HandCategory
    tiebreak: Tuple[int, ...]

    @property
    def key(self) -> Tuple[int, ...]:
        """Strength key; a larger key is a stronger hand."""
        return (self.category.value,) + self.tiebreak


@dataclass(frozen=True)
class EvaluatedHand:
    """
    A player's best five-card hand.

    Attributes:
        cards: The five cards making the hand, defining cards first
        ranking: Category and tie-break ranks
        description: Human-readable description, e.g. 'Two Pair, Aces over Kings'
    """
    cards: Tuple[Card, ...]
    ranking: HandRanking
    description: str

    @property
    def category(self) -> HandCategory:
        return self.ranking.category

    @property
    def key(self) -> Tuple[int, ...]:
        return self.ranking.key

    def __str__(self) -> str:
        cards_str = ' '.join(str(card) for card in self.cards)
        return f"{self.description} ({cards_str})"
