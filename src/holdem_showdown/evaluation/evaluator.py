"""Main poker hand evaluation interface."""
from collections import Counter
from itertools import combinations
from typing import List, Optional, Sequence, Tuple
import logging

from holdem_showdown.core.card import Card, Rank
from holdem_showdown.core.exceptions import IncompleteHandError
from holdem_showdown.evaluation.hand_description import HandDescriber, describer
from holdem_showdown.evaluation.types import EvaluatedHand, HandCategory, HandRanking

logger = logging.getLogger(__name__)

HAND_SIZE = 5
HOLDEM_CARDS = 7

# A-2-3-4-5 with the ace playing low
WHEEL = (14, 5, 4, 3, 2)


class HandEvaluator:
    """
    Texas hold'em high-hand evaluation.

    Every five-card subset of the available cards is classified and the
    strongest one is kept. Strength keys compare category first and then
    the tie-break ranks position by position; suits never break ties.
    """

    def __init__(self, hand_describer: Optional[HandDescriber] = None):
        self.describer = hand_describer or describer

    def evaluate_five(self, cards: Sequence[Optional[Card]]) -> HandRanking:
        """
        Classify exactly five cards.

        Args:
            cards: Cards to classify

        Returns:
            HandRanking with category and tie-break ranks

        Raises:
            IncompleteHandError: If there are not five non-blank cards
        """
        self._validate_cards(cards, HAND_SIZE)

        values = sorted((card.rank.numeric for card in cards), reverse=True)
        counts = Counter(values)
        # (count, rank) pairs, biggest groups first, higher ranks first within a size
        groups = sorted(((count, value) for value, count in counts.items()), reverse=True)
        shape = [count for count, _ in groups]
        grouped_ranks = tuple(value for _, value in groups)

        is_flush = len({card.suit for card in cards}) == 1
        straight_high = self._straight_high(values)

        if is_flush and straight_high is not None:
            if straight_high == Rank.ACE.numeric:
                return HandRanking(HandCategory.ROYAL_FLUSH, (straight_high,))
            return HandRanking(HandCategory.STRAIGHT_FLUSH, (straight_high,))
        if shape == [4, 1]:
            return HandRanking(HandCategory.FOUR_OF_A_KIND, grouped_ranks)
        if shape == [3, 2]:
            return HandRanking(HandCategory.FULL_HOUSE, grouped_ranks)
        if is_flush:
            return HandRanking(HandCategory.FLUSH, tuple(values))
        if straight_high is not None:
            return HandRanking(HandCategory.STRAIGHT, (straight_high,))
        if shape == [3, 1, 1]:
            return HandRanking(HandCategory.THREE_OF_A_KIND, grouped_ranks)
        if shape == [2, 2, 1]:
            return HandRanking(HandCategory.TWO_PAIR, grouped_ranks)
        if shape == [2, 1, 1, 1]:
            return HandRanking(HandCategory.ONE_PAIR, grouped_ranks)
        return HandRanking(HandCategory.HIGH_CARD, tuple(values))

    def best_hand(self, cards: Sequence[Optional[Card]]) -> EvaluatedHand:
        """
        Find the best five-card hand among a player's seven cards.

        Args:
            cards: Two hole cards followed by five community cards

        Returns:
            EvaluatedHand for the strongest of the 21 combinations

        Raises:
            IncompleteHandError: If any card is blank or cards are missing
        """
        self._validate_cards(cards, HOLDEM_CARDS)

        best_cards: Tuple[Card, ...] = ()
        best_ranking: Optional[HandRanking] = None
        for subset in combinations(cards, HAND_SIZE):
            ranking = self.evaluate_five(subset)
            if best_ranking is None or ranking.key > best_ranking.key:
                best_cards, best_ranking = subset, ranking

        ordered = self._order_cards(best_cards, best_ranking)
        description = self.describer.describe_hand_detailed(best_ranking)
        logger.debug(f"Best hand from {' '.join(str(c) for c in cards)}: {description}")
        return EvaluatedHand(cards=ordered, ranking=best_ranking, description=description)

    def evaluate_hand(self, hole_cards: Sequence[Optional[Card]],
                      community_cards: Sequence[Optional[Card]]) -> EvaluatedHand:
        """Evaluate two hole cards against the five community cards."""
        if len(hole_cards) != 2 or any(card is None for card in hole_cards):
            raise IncompleteHandError("Hand requires 2 hole cards")
        return self.best_hand(list(hole_cards) + list(community_cards))

    def compare_hands(self, hand1: EvaluatedHand, hand2: EvaluatedHand) -> int:
        """
        Compare two evaluated hands.

        Returns:
            1 if hand1 wins, -1 if hand2 wins, 0 if tie
        """
        if hand1.key > hand2.key:
            return 1
        if hand1.key < hand2.key:
            return -1
        return 0

    def _validate_cards(self, cards: Sequence[Optional[Card]], required: int) -> None:
        """Ensure the hand has the required number of non-blank cards."""
        if len(cards) != required:
            raise IncompleteHandError(
                f"Evaluation requires exactly {required} cards, got {len(cards)}"
            )
        if any(card is None for card in cards):
            raise IncompleteHandError("Hand contains an unselected card")

    @staticmethod
    def _straight_high(values: List[int]) -> Optional[int]:
        """Top card of the straight formed by five descending ranks, if any."""
        if len(set(values)) != HAND_SIZE:
            return None
        if values[0] - values[-1] == HAND_SIZE - 1:
            return values[0]
        if tuple(values) == WHEEL:
            return 5
        return None

    @staticmethod
    def _order_cards(cards: Sequence[Card], ranking: HandRanking) -> Tuple[Card, ...]:
        """Order cards with the defining groups first, highest ranks first."""
        counts = Counter(card.rank for card in cards)
        ordered = sorted(cards, key=lambda c: (counts[c.rank], c.rank.numeric), reverse=True)
        is_wheel = (
            ranking.category in (HandCategory.STRAIGHT, HandCategory.STRAIGHT_FLUSH)
            and ranking.tiebreak == (5,)
        )
        if is_wheel:
            # the ace plays low
            ordered.append(ordered.pop(0))
        return tuple(ordered)


# Global instance
evaluator = HandEvaluator()
