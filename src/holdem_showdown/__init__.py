"""Texas hold'em showdown evaluator."""

from holdem_showdown.core.card import Card, Rank, Suit, parse_card
from holdem_showdown.core.deck import Deck, used_cards
from holdem_showdown.evaluation.evaluator import HandEvaluator
from holdem_showdown.evaluation.types import EvaluatedHand, HandCategory
from holdem_showdown.evaluation.winners import resolve_winners
from holdem_showdown.game.game_result import Result, ShowdownOutcome, ValidationErrorKind
from holdem_showdown.game.player import Player
from holdem_showdown.game.showdown import evaluate
from holdem_showdown.game.table import ShowdownTable

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "parse_card",
    "Deck",
    "used_cards",
    "HandEvaluator",
    "EvaluatedHand",
    "HandCategory",
    "resolve_winners",
    "Result",
    "ShowdownOutcome",
    "ValidationErrorKind",
    "Player",
    "evaluate",
    "ShowdownTable",
]
