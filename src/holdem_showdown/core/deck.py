"""Deck implementation and used-card tracking."""
from typing import Iterable, List, Optional, Protocol, Sequence, Set

from .card import Card, Rank, Suit
from .exceptions import DuplicateCardError


class HasCards(Protocol):
    """Anything holding card slots, e.g. a player."""
    cards: Sequence[Optional[Card]]


class Deck:
    """
    The standard 52-card deck.

    The deck is never dealt from; it is the pool the card picker chooses
    from, so it only answers which cards are still available.

    Attributes:
        cards: All 52 cards, grouped by suit with ranks from ace down
    """

    SIZE = 52

    def __init__(self):
        """Initialize a full deck."""
        self.cards: List[Card] = []
        self._initialize_deck()

    def _initialize_deck(self) -> None:
        """Create the 52 cards in picker order."""
        for suit in Suit:
            for rank in reversed(list(Rank)):
                self.cards.append(Card(rank=rank, suit=suit))

    def available(self, used: Iterable[Card]) -> List[Card]:
        """
        Cards not yet assigned anywhere.

        Args:
            used: Cards already in use

        Returns:
            Remaining cards in deck order
        """
        used_set = set(used)
        return [card for card in self.cards if card not in used_set]

    def get_cards(self) -> List[Card]:
        """Get all cards in the deck."""
        return self.cards.copy()

    @property
    def size(self) -> int:
        """Number of cards in the deck."""
        return len(self.cards)


def used_cards(players: Iterable[HasCards], community: Iterable[Optional[Card]]) -> Set[Card]:
    """
    The union of every non-blank card held by a player or on the board.

    Args:
        players: Players whose hole cards count as used
        community: Community card slots, blanks allowed

    Returns:
        Set of cards currently assigned
    """
    used: Set[Card] = set()
    for player in players:
        used.update(card for card in player.cards if card is not None)
    used.update(card for card in community if card is not None)
    return used


def check_available(card: Card, used: Set[Card]) -> None:
    """
    Reject a card that is already in use.

    Raises:
        DuplicateCardError: If the card is in the used set
    """
    if card in used:
        raise DuplicateCardError(card)
