"""Tests for deck implementation and used-card tracking."""
import pytest
from holdem_showdown.core.card import Card, Rank, Suit
from holdem_showdown.core.deck import Deck, check_available, used_cards
from holdem_showdown.core.exceptions import DuplicateCardError

from tests.test_helpers import cards_from, make_player


def test_deck_initialization():
    """Test basic deck creation."""
    deck = Deck()
    assert deck.size == 52
    assert len(set(deck.get_cards())) == 52


def test_deck_order():
    """Picker order: suits grouped, ace first."""
    cards = Deck().get_cards()
    assert cards[0] == Card(Rank.ACE, Suit.SPADES)
    assert cards[12] == Card(Rank.TWO, Suit.SPADES)
    assert cards[13] == Card(Rank.ACE, Suit.HEARTS)


def test_get_cards_returns_copy():
    deck = Deck()
    deck.get_cards().clear()
    assert deck.size == 52


def test_available_excludes_used():
    deck = Deck()
    used = set(cards_from("As Kd 2c"))
    remaining = deck.available(used)

    assert len(remaining) == 49
    assert not used & set(remaining)


def test_used_cards_collects_players_and_board():
    players = [make_player("Alice", "Ah Kh"), make_player("Bob", "2c --")]
    community = cards_from("Qh Jh -- -- --")

    used = used_cards(players, community)

    assert used == set(cards_from("Ah Kh 2c Qh Jh"))


def test_used_cards_empty_table():
    assert used_cards([], [None] * 5) == set()


def test_check_available_rejects_duplicates():
    used = set(cards_from("Ah Kh"))
    check_available(Card(Rank.QUEEN, Suit.HEARTS), used)

    with pytest.raises(DuplicateCardError) as exc_info:
        check_available(Card(Rank.ACE, Suit.HEARTS), used)
    assert exc_info.value.card == Card(Rank.ACE, Suit.HEARTS)
    assert "Ah" in str(exc_info.value)
