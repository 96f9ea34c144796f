"""Tests for the HandDescriber class."""
import pytest
from holdem_showdown.evaluation.evaluator import HandEvaluator
from holdem_showdown.evaluation.hand_description import HandDescriber

from tests.test_helpers import cards_from


@pytest.fixture
def describer():
    return HandDescriber()


@pytest.fixture
def evaluator():
    return HandEvaluator()


@pytest.mark.parametrize("cards,basic,detailed", [
    ("As Ks Qs Js Ts", "Royal Flush", "Royal Flush"),
    ("Kh Qh Jh Th 9h", "Straight Flush", "King-high Straight Flush"),
    ("5d 4d 3d 2d Ad", "Straight Flush", "Five-high Straight Flush"),
    ("Ah Ad Ac As Kh", "Four of a Kind", "Four Aces"),
    ("Ah Ac As Kh Kd", "Full House", "Full House, Aces over Kings"),
    ("Qh Qd Qc Jh Js", "Full House", "Full House, Queens over Jacks"),
    ("Ac Jc 9c 6c 3c", "Flush", "Ace-high Flush"),
    ("Th 9c 8d 7s 6h", "Straight", "Ten-high Straight"),
    ("5h 4c 3d 2s Ah", "Straight", "Five-high Straight"),
    ("6h 6d 6c Jh 9d", "Three of a Kind", "Three Sixes"),
    ("Ah Ad Kh Kc 9s", "Two Pair", "Two Pair, Aces over Kings"),
    ("Jh Jd Kh Qc 2s", "Pair", "Pair of Jacks"),
    ("Ah Qd Th 8c 5s", "High Card", "Ace High"),
    ("9h 7d 5h 3c 2s", "High Card", "Nine High"),
])
def test_high_hand_description(describer, evaluator, cards, basic, detailed):
    """Test basic and detailed hand descriptions."""
    ranking = evaluator.evaluate_five(cards_from(cards))
    assert describer.describe_hand(ranking) == basic
    assert describer.describe_hand_detailed(ranking) == detailed


def test_evaluated_hand_uses_detailed_description(evaluator):
    hand = evaluator.best_hand(cards_from("Ah Kd Ac Ks 2h 7c 9d"))
    assert hand.description == "Two Pair, Aces over Kings"
    assert str(hand).startswith("Two Pair, Aces over Kings (")
