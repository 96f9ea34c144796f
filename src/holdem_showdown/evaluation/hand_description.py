"""Human-readable descriptions for evaluated hands."""
from typing import Callable, Dict

from holdem_showdown.core.card import Rank
from holdem_showdown.evaluation.types import HandCategory, HandRanking


class HandDescriber:
    """Generates human-readable descriptions for poker hands."""

    def __init__(self):
        self._describers: Dict[HandCategory, Callable[[HandRanking], str]] = {
            HandCategory.ROYAL_FLUSH: self._describe_royal_flush,
            HandCategory.STRAIGHT_FLUSH: self._describe_straight_flush,
            HandCategory.FOUR_OF_A_KIND: self._describe_four_of_kind,
            HandCategory.FULL_HOUSE: self._describe_full_house,
            HandCategory.FLUSH: self._describe_flush,
            HandCategory.STRAIGHT: self._describe_straight,
            HandCategory.THREE_OF_A_KIND: self._describe_three_of_kind,
            HandCategory.TWO_PAIR: self._describe_two_pair,
            HandCategory.ONE_PAIR: self._describe_pair,
            HandCategory.HIGH_CARD: self._describe_high_card,
        }

    def describe_hand(self, ranking: HandRanking) -> str:
        """Get the category name only, e.g. 'Full House'."""
        return ranking.category.display_name

    def describe_hand_detailed(self, ranking: HandRanking) -> str:
        """Get a description naming the defining ranks, e.g. 'Full House, Aces over Kings'."""
        return self._describers[ranking.category](ranking)

    @staticmethod
    def _rank(value: int) -> Rank:
        return Rank.from_numeric(value)

    def _describe_royal_flush(self, ranking: HandRanking) -> str:
        return "Royal Flush"

    def _describe_straight_flush(self, ranking: HandRanking) -> str:
        highest_rank = self._rank(ranking.tiebreak[0])
        return f"{highest_rank.full_name}-high Straight Flush"

    def _describe_four_of_kind(self, ranking: HandRanking) -> str:
        return f"Four {self._rank(ranking.tiebreak[0]).plural_name}"

    def _describe_full_house(self, ranking: HandRanking) -> str:
        trips_rank, pair_rank = (self._rank(v) for v in ranking.tiebreak[:2])
        return f"Full House, {trips_rank.plural_name} over {pair_rank.plural_name}"

    def _describe_flush(self, ranking: HandRanking) -> str:
        highest_rank = self._rank(ranking.tiebreak[0])
        return f"{highest_rank.full_name}-high Flush"

    def _describe_straight(self, ranking: HandRanking) -> str:
        # the wheel's top card is the five
        highest_rank = self._rank(ranking.tiebreak[0])
        return f"{highest_rank.full_name}-high Straight"

    def _describe_three_of_kind(self, ranking: HandRanking) -> str:
        return f"Three {self._rank(ranking.tiebreak[0]).plural_name}"

    def _describe_two_pair(self, ranking: HandRanking) -> str:
        high_pair, low_pair = (self._rank(v) for v in ranking.tiebreak[:2])
        return f"Two Pair, {high_pair.plural_name} over {low_pair.plural_name}"

    def _describe_pair(self, ranking: HandRanking) -> str:
        return f"Pair of {self._rank(ranking.tiebreak[0]).plural_name}"

    def _describe_high_card(self, ranking: HandRanking) -> str:
        return f"{self._rank(ranking.tiebreak[0]).full_name} High"


describer = HandDescriber()
