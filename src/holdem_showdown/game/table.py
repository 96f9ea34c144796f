"""Table implementation managing the cards chosen for a showdown."""
import logging
from typing import List, Optional, Set

from holdem_showdown.core.card import Card, card_code, parse_card
from holdem_showdown.core.deck import Deck, check_available, used_cards
from holdem_showdown.game.game_result import Result, ShowdownOutcome
from holdem_showdown.game.player import Player
from holdem_showdown.game.showdown import COMMUNITY_CARDS, evaluate

logger = logging.getLogger(__name__)


class ShowdownTable:
    """
    Mutable state of a showdown being set up.

    Players and community slots change as cards are picked; every
    assignment goes through the used-card check so a card can only be in
    one place. Evaluation works on the current state without changing it.

    Attributes:
        players: Players in seating order
        community: The five community card slots, None when not chosen
        results: Results of the last successful evaluation
    """

    def __init__(self, players: Optional[List[Player]] = None):
        """
        Create a table, seating copies of the given players.

        Raises:
            DuplicateCardError: If the given players share a card
        """
        self.players: List[Player] = []
        self.community: List[Optional[Card]] = [None] * COMMUNITY_CARDS
        self.results: List[Result] = []
        self.deck = Deck()
        for player in players or []:
            self._seat(player)

    def add_player(self, name: str) -> Player:
        """
        Seat a new player with no cards.

        Raises:
            InvalidPlayerNameError: If the name is empty after trimming
        """
        player = Player(name=name)
        self.players.append(player)
        logger.debug(f"Added player {player.name}")
        return player

    def remove_player(self, index: int) -> Player:
        """Remove a player; their cards become available again."""
        player = self.players.pop(index)
        logger.debug(f"Removed player {player.name}")
        return player

    def find_player(self, name: str) -> int:
        """
        Index of the first player with the given name.

        Raises:
            ValueError: If no player has that name
        """
        for index, player in enumerate(self.players):
            if player.name == name.strip():
                return index
        raise ValueError(f"No player named {name}")

    def set_player_card(self, player_index: int, card_index: int, code: Optional[str]) -> Optional[Card]:
        """
        Put a card into one of a player's hole card slots.

        A blank code clears the slot.

        Raises:
            InvalidCardError: If the code is malformed
            DuplicateCardError: If the card is already used elsewhere
        """
        player = self.players[player_index]
        card = self._checked_card(code, current=player.cards[card_index])
        player.cards[card_index] = card
        return card

    def set_community_card(self, index: int, code: Optional[str]) -> Optional[Card]:
        """
        Put a card into one of the community slots.

        A blank code clears the slot.

        Raises:
            InvalidCardError: If the code is malformed
            DuplicateCardError: If the card is already used elsewhere
        """
        card = self._checked_card(code, current=self.community[index])
        self.community[index] = card
        return card

    def set_community(self, codes: List[Optional[str]]) -> None:
        """
        Replace the whole board.

        Every card is checked against the players and the rest of the new
        board before anything changes; on error the old board stays.

        Raises:
            InvalidCardError: If a code is malformed
            DuplicateCardError: If a card is held by a player or repeated
        """
        if len(codes) > COMMUNITY_CARDS:
            raise ValueError(f"The board holds at most {COMMUNITY_CARDS} cards")
        board: List[Optional[Card]] = [None] * COMMUNITY_CARDS
        taken = used_cards(self.players, [])
        for index, code in enumerate(codes):
            card = parse_card(code)
            if card is not None:
                check_available(card, taken)
                taken.add(card)
            board[index] = card
        self.community = board

    def used_cards(self) -> Set[Card]:
        """All cards currently assigned to a player or the board."""
        return used_cards(self.players, self.community)

    def available_cards(self) -> List[Card]:
        """Cards the picker may still offer."""
        return self.deck.available(self.used_cards())

    def clear(self) -> None:
        """Remove all players, board cards and results."""
        self.players = []
        self.community = [None] * COMMUNITY_CARDS
        self.results = []
        logger.info("Table cleared")

    def evaluate(self) -> ShowdownOutcome:
        """Evaluate the current table, keeping the results when successful."""
        outcome = evaluate(self.players, self.community)
        if outcome.success:
            self.results = outcome.results
        return outcome

    def players_to_json(self) -> List[dict]:
        return [player.to_json() for player in self.players]

    @classmethod
    def from_json(cls, players: List[dict]) -> 'ShowdownTable':
        """
        Rebuild a table from stored players.

        Raises:
            DuplicateCardError: If the stored players share a card
        """
        return cls([Player.from_json(data) for data in players])

    def _seat(self, player: Player) -> None:
        self.add_player(player.name)
        seat = len(self.players) - 1
        for index, card in enumerate(player.cards):
            self.set_player_card(seat, index, card_code(card))

    def _checked_card(self, code: Optional[str], current: Optional[Card]) -> Optional[Card]:
        card = parse_card(code)
        if card is None or card == current:
            return card
        check_available(card, self.used_cards())
        return card
