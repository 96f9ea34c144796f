"""Showdown evaluation: validating the table and determining winners."""
import logging
from typing import Optional, Sequence

from holdem_showdown.core.card import Card
from holdem_showdown.core.exceptions import IncompleteHandError
from holdem_showdown.evaluation.evaluator import HandEvaluator, evaluator as default_evaluator
from holdem_showdown.evaluation.winners import winner_indices
from holdem_showdown.game.game_result import Result, ShowdownOutcome, ValidationErrorKind
from holdem_showdown.game.player import HOLE_CARDS, Player

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2
COMMUNITY_CARDS = 5

INSUFFICIENT_PLAYERS_MESSAGE = "At least 2 players are required to evaluate."
INCOMPLETE_COMMUNITY_MESSAGE = "Please select 5 community cards."
INCOMPLETE_HOLE_CARDS_MESSAGE = "Please ensure all players have 2 cards."


def evaluate(
    players: Sequence[Player],
    community: Sequence[Optional[Card]],
    hand_evaluator: Optional[HandEvaluator] = None,
) -> ShowdownOutcome:
    """
    Evaluate every player's best hand and mark the winner(s).

    Preconditions are checked in order and the first failure is returned:
    at least two players, five filled community slots, two hole cards for
    every player. Duplicate cards are not checked here; the table rejects
    them when they are assigned.

    Nothing passed in is modified.

    Args:
        players: Players in seating order
        community: The five community card slots
        hand_evaluator: Evaluator to use, defaults to the shared instance

    Returns:
        ShowdownOutcome with one Result per player, or the validation error
    """
    hand_evaluator = hand_evaluator or default_evaluator

    if len(players) < MIN_PLAYERS:
        return ShowdownOutcome.failure(
            ValidationErrorKind.INSUFFICIENT_PLAYERS, INSUFFICIENT_PLAYERS_MESSAGE
        )

    if len(community) != COMMUNITY_CARDS or any(card is None for card in community):
        return ShowdownOutcome.failure(
            ValidationErrorKind.INCOMPLETE_COMMUNITY, INCOMPLETE_COMMUNITY_MESSAGE
        )

    for player in players:
        if len(player.cards) != HOLE_CARDS or any(card is None for card in player.cards):
            return ShowdownOutcome.failure(
                ValidationErrorKind.INCOMPLETE_HOLE_CARDS, INCOMPLETE_HOLE_CARDS_MESSAGE
            )

    try:
        hands = [hand_evaluator.evaluate_hand(player.cards, community) for player in players]
    except IncompleteHandError as e:
        logger.warning(f"Hand could not be evaluated: {e}")
        return ShowdownOutcome.failure(
            ValidationErrorKind.INCOMPLETE_HOLE_CARDS, INCOMPLETE_HOLE_CARDS_MESSAGE
        )

    winning = set(winner_indices(hands))
    results = [
        Result(
            name=player.name,
            description=hand.description,
            is_winner=index in winning,
            hand=hand,
        )
        for index, (player, hand) in enumerate(zip(players, hands))
    ]

    logger.debug(f"Showdown winners: {[r.name for r in results if r.is_winner]}")
    return ShowdownOutcome(results=results)
