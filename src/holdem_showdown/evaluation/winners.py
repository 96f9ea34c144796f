"""Determining the winning hand(s) of a showdown."""
from typing import List, Sequence

from holdem_showdown.evaluation.types import EvaluatedHand


def resolve_winners(hands: Sequence[EvaluatedHand]) -> List[EvaluatedHand]:
    """
    Find every hand that ties for the best strength key.

    Ties are split pots: all hands with the maximum key win and no further
    tie-break (such as suit) is applied.

    Args:
        hands: Evaluated hands of all players in the showdown

    Returns:
        The winning hands in input order; empty if there were no hands
    """
    if not hands:
        return []
    best_key = max(hand.key for hand in hands)
    return [hand for hand in hands if hand.key == best_key]


def winner_indices(hands: Sequence[EvaluatedHand]) -> List[int]:
    """Positions of the winning hands, so equal hands of different players stay distinct."""
    if not hands:
        return []
    best_key = max(hand.key for hand in hands)
    return [i for i, hand in enumerate(hands) if hand.key == best_key]
