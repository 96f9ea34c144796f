"""Tests for the showdown table."""
import pytest
from holdem_showdown.core.card import Card, Rank, Suit
from holdem_showdown.core.exceptions import (
    DuplicateCardError, InvalidCardError, InvalidPlayerNameError
)
from holdem_showdown.game.game_result import ValidationErrorKind
from holdem_showdown.game.table import ShowdownTable

from tests.test_helpers import make_player


@pytest.fixture
def table():
    """Two players with hole cards and a full board."""
    table = ShowdownTable()
    table.add_player("Alice")
    table.add_player("Bob")
    table.set_player_card(0, 0, "Ah")
    table.set_player_card(0, 1, "Kh")
    table.set_player_card(1, 0, "2c")
    table.set_player_card(1, 1, "2d")
    table.set_community(["Qh", "Jh", "Th", "3s", "3c"])
    return table


def test_new_table_is_empty():
    table = ShowdownTable()
    assert table.players == []
    assert table.community == [None] * 5
    assert table.results == []
    assert len(table.available_cards()) == 52


def test_add_player_trims_name():
    table = ShowdownTable()
    player = table.add_player("  Carol  ")
    assert player.name == "Carol"
    assert player.cards == [None, None]


@pytest.mark.parametrize("name", ["", "   ", "\t"])
def test_add_player_rejects_empty_name(name):
    table = ShowdownTable()
    with pytest.raises(InvalidPlayerNameError):
        table.add_player(name)
    assert table.players == []


def test_used_and_available_cards(table):
    assert len(table.used_cards()) == 9
    available = table.available_cards()
    assert len(available) == 43
    assert Card(Rank.ACE, Suit.HEARTS) not in available


def test_duplicate_hole_card_rejected(table):
    table.add_player("Carol")
    with pytest.raises(DuplicateCardError):
        table.set_player_card(2, 0, "Ah")
    assert table.players[2].cards == [None, None]


def test_duplicate_community_card_rejected(table):
    with pytest.raises(DuplicateCardError):
        table.set_community_card(4, "2c")
    assert table.community[4] == Card(Rank.THREE, Suit.CLUBS)


def test_reassigning_same_card_is_allowed(table):
    table.set_player_card(0, 0, "Ah")
    assert table.players[0].cards[0] == Card(Rank.ACE, Suit.HEARTS)


def test_blank_code_clears_slot(table):
    table.set_community_card(2, "")
    assert table.community[2] is None
    # the cleared card can be picked again
    table.set_player_card(1, 0, "Th")
    assert table.players[1].cards[0] == Card(Rank.TEN, Suit.HEARTS)


def test_invalid_code_rejected(table):
    with pytest.raises(InvalidCardError):
        table.set_player_card(0, 0, "Zz")


def test_set_community_limits_board_size(table):
    with pytest.raises(ValueError):
        table.set_community(["9s", "9d", "8s", "8d", "7s", "7d"])


def test_remove_player_frees_cards(table):
    removed = table.remove_player(1)
    assert removed.name == "Bob"
    assert Card(Rank.TWO, Suit.CLUBS) in table.available_cards()


def test_find_player(table):
    assert table.find_player("Bob") == 1
    assert table.find_player(" Bob ") == 1
    with pytest.raises(ValueError):
        table.find_player("Dave")


def test_evaluate_keeps_results(table):
    outcome = table.evaluate()

    assert outcome.success
    assert table.results == outcome.results
    assert [r.is_winner for r in table.results] == [True, False]


def test_failed_evaluation_keeps_previous_results(table):
    table.evaluate()
    previous = table.results
    table.set_community_card(0, "")

    outcome = table.evaluate()

    assert outcome.error.kind == ValidationErrorKind.INCOMPLETE_COMMUNITY
    assert table.results == previous


def test_evaluate_does_not_change_table(table):
    players_before = table.players_to_json()
    community_before = list(table.community)
    table.evaluate()
    assert table.players_to_json() == players_before
    assert table.community == community_before


def test_clear(table):
    table.evaluate()
    table.clear()
    assert table.players == []
    assert table.community == [None] * 5
    assert table.results == []


def test_json_round_trip(table):
    data = table.players_to_json()
    assert data == [
        {"name": "Alice", "cards": ["Ah", "Kh"]},
        {"name": "Bob", "cards": ["2c", "2d"]},
    ]
    restored = ShowdownTable.from_json(data)
    assert restored.players == table.players
    assert restored.community == [None] * 5


def test_from_json_rejects_shared_cards():
    with pytest.raises(DuplicateCardError):
        ShowdownTable.from_json([
            {"name": "Alice", "cards": ["Ah", "Kh"]},
            {"name": "Bob", "cards": ["Ah", ""]},
        ])


def test_failed_set_community_keeps_board(table):
    board = list(table.community)

    with pytest.raises(DuplicateCardError):
        table.set_community(["9s", "Ah", "8s", "8d", "7s"])

    assert table.community == board


def test_set_community_rejects_repeated_card(table):
    board = list(table.community)

    with pytest.raises(DuplicateCardError):
        table.set_community(["9s", "9s"])

    assert table.community == board


def test_set_community_may_reuse_current_board_cards(table):
    table.set_community(["3c", "3s", "Th", "Jh", "Qh"])
    assert [str(card) for card in table.community] == ["3c", "3s", "Th", "Jh", "Qh"]


def test_table_copies_initial_players():
    alice = make_player("Alice", "Ah Kh")
    table = ShowdownTable([alice, make_player("Bob")])

    table.set_player_card(0, 0, "")

    assert alice.cards[0] == Card(Rank.ACE, Suit.HEARTS)
    assert table.players[0].cards[0] is None


def test_table_rejects_initial_players_sharing_cards():
    with pytest.raises(DuplicateCardError):
        ShowdownTable([make_player("Alice", "Ah Kh"), make_player("Bob", "Ah 2d")])
