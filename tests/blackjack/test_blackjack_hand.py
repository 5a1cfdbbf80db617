import pytest

from twentyone.blackjack.hand import BlackjackHand
from twentyone.common.card import Card, Rank, Suit


def test_empty_hand_value(make_hand):
    assert make_hand().value() == 0


@pytest.mark.parametrize(
    "ranks, expected",
    [
        (("2", "3"), 5),
        (("K", "Q"), 20),
        (("A", "K"), 21),
        (("A", "A"), 12),
        (("A", "A", "A"), 13),
        (("A", "A", "9"), 21),
        (("A", "5", "A", "K"), 17),
        (("10", "J", "Q"), 30),
    ],
)
def test_values(make_hand, ranks, expected):
    assert make_hand(*ranks).value() == expected


def test_soft_hand_becomes_hard(make_hand):
    hand = make_hand("A", "6")
    assert hand.value() == 17
    assert hand.is_soft

    hand.add_card(Card(Suit.CLUBS, Rank.FIVE))
    assert hand.value() == 12
    assert not hand.is_soft


def test_three_card_bust(make_hand):
    hand = make_hand("K", "Q", "5")
    assert hand.is_busted
    assert hand.value() == 25


def test_blackjack_requires_two_cards(make_hand):
    assert make_hand("A", "K").is_blackjack
    assert not make_hand("7", "7", "7").is_blackjack
    assert make_hand("7", "7", "7").value() == 21


def test_natural_is_not_reported_soft(make_hand):
    assert not make_hand("A", "K").is_soft


def test_split_hand_twenty_one_counts_as_blackjack(make_hand):
    hand = make_hand("A", "K", is_split=True)
    assert hand.is_split_hand
    assert hand.is_blackjack


def test_value_cache_tracks_mutation(make_hand):
    hand = make_hand("9")
    assert hand.value() == 9
    card = Card(Suit.HEARTS, Rank.EIGHT)
    hand.add_card(card)
    assert hand.get_value() == 17
    hand.remove_card(card)
    assert hand.value() == 9


def test_clear_resets_flags(make_hand):
    hand = make_hand("8", "8", is_split=True)
    hand.mark_as_complete()
    hand.clear()
    assert hand.value() == 0
    assert not hand.is_split_hand
    assert not hand.is_complete


def test_is_pair_uses_rank(make_hand):
    assert make_hand("8", "8").is_pair
    assert not make_hand("10", "K").is_pair
    assert not make_hand("8", "8", "8").is_pair


def test_split_aces_take_one_card(make_hand):
    hand = make_hand("A", is_split=True)
    assert hand.is_split_aces
    assert hand.can_receive_more_cards()
    hand.add_card(Card(Suit.HEARTS, Rank.SEVEN))
    assert not hand.can_receive_more_cards()


def test_can_receive_more_cards(make_hand):
    assert make_hand("5", "6").can_receive_more_cards()
    assert not make_hand("K", "Q", "5").can_receive_more_cards()
    assert not make_hand("A", "Q").can_receive_more_cards()
    hand = make_hand("5", "6")
    hand.mark_as_complete()
    assert not hand.can_receive_more_cards()


def test_mark_as_split_hand():
    hand = BlackjackHand()
    hand.mark_as_split_hand()
    assert hand.is_split


def test_repr_uses_class_name(make_hand):
    assert repr(BlackjackHand()) == "BlackjackHand([])"
