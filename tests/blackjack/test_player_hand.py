import pytest

from twentyone.blackjack.bet import Bet
from twentyone.blackjack.player_hand import PlayerHand
from twentyone.common.card import Card, Rank, Suit
from twentyone.exceptions import InvalidActionError, InvalidArgumentError, InvalidStateError


@pytest.fixture
def bet():
    return Bet(10, "Alice")


def card(rank):
    return Card(Suit.SPADES, rank)


def test_new_player_hand_is_active(make_hand, bet):
    player_hand = PlayerHand(make_hand("5", "6"), bet)
    assert player_hand.is_active
    assert not player_hand.is_complete
    assert player_hand.hand_value == 11
    assert player_hand.card_count == 2


def test_requires_hand_and_bet(make_hand, bet):
    with pytest.raises(InvalidArgumentError):
        PlayerHand(None, bet)
    with pytest.raises(InvalidArgumentError):
        PlayerHand(make_hand("5"), None)


def test_bust_auto_completes(make_hand, bet):
    player_hand = PlayerHand(make_hand("K", "6"), bet)
    player_hand.add_card(card(Rank.NINE))
    assert player_hand.is_busted
    assert player_hand.is_complete
    assert not player_hand.is_active


def test_blackjack_auto_completes(make_hand, bet):
    player_hand = PlayerHand(make_hand("A"), bet)
    player_hand.add_card(card(Rank.KING))
    assert player_hand.is_blackjack
    assert player_hand.is_complete


def test_split_aces_complete_after_one_card(make_hand, bet):
    player_hand = PlayerHand(make_hand("A", is_split=True), bet)
    player_hand.add_card(card(Rank.FIVE))
    assert player_hand.is_complete
    assert player_hand.hand_value == 16


def test_ordinary_card_keeps_hand_open(make_hand, bet):
    player_hand = PlayerHand(make_hand("5", "6"), bet)
    player_hand.add_card(card(Rank.TWO))
    assert not player_hand.is_complete
    assert player_hand.can_receive_more_cards()


def test_cannot_add_to_complete_or_inactive_hand(make_hand, bet):
    complete = PlayerHand(make_hand("5", "6"), bet)
    complete.mark_as_complete()
    with pytest.raises(InvalidStateError):
        complete.add_card(card(Rank.TWO))

    inactive = PlayerHand(make_hand("5", "6"), Bet(10, "Alice"))
    inactive.mark_as_inactive()
    with pytest.raises(InvalidStateError):
        inactive.add_card(card(Rank.TWO))


def test_reactivate(make_hand, bet):
    player_hand = PlayerHand(make_hand("5", "6"), bet)
    player_hand.mark_as_inactive()
    player_hand.reactivate()
    assert player_hand.is_active

    player_hand.mark_as_complete()
    with pytest.raises(InvalidStateError):
        player_hand.reactivate()


def test_can_split_and_double(make_hand, bet):
    pair = PlayerHand(make_hand("8", "8"), bet)
    assert pair.can_split()
    assert pair.can_double_down()
    pair.mark_as_inactive()
    assert not pair.can_split()
    assert not pair.can_double_down()

    natural = PlayerHand(make_hand("A", "K"), Bet(10, "Alice"))
    assert not natural.can_double_down()


def test_double_down_completes_after_one_card(make_hand, bet):
    player_hand = PlayerHand(make_hand("5", "6"), bet)
    player_hand.apply_double_down(bet.create_double_down_bet())
    assert player_hand.is_doubled
    assert player_hand.bet.amount == 20
    assert not player_hand.can_double_down()

    player_hand.add_card(card(Rank.TWO))
    assert player_hand.is_complete
    assert player_hand.hand_value == 13


def test_double_down_requires_double_down_bet(make_hand, bet):
    player_hand = PlayerHand(make_hand("5", "6"), bet)
    with pytest.raises(InvalidArgumentError):
        player_hand.apply_double_down(bet.create_split_bet())


def test_double_down_refused_on_three_cards(make_hand, bet):
    player_hand = PlayerHand(make_hand("2", "3", "4"), bet)
    with pytest.raises(InvalidActionError):
        player_hand.apply_double_down(bet.create_double_down_bet())


def test_str(make_hand, bet):
    player_hand = PlayerHand(make_hand("8", "8", is_split=True), bet)
    text = str(player_hand)
    assert "Value: 16" in text
    assert "Status: Active" in text
    assert text.endswith("(Split)")
