"""
Split bookkeeping helpers used by `MultiHandPlayer`.
"""

from typing import Tuple

from twentyone.blackjack.actor import Player
from twentyone.blackjack.bet import Bet
from twentyone.blackjack.hand import BlackjackHand
from twentyone.common.card import Rank
from twentyone.common.money import Amount
from twentyone.exceptions import InvalidActionError, InvalidArgumentError

DEFAULT_MAX_HANDS = 4


class SplitHandManager:
    """
    Knows how a pair is divided and what a split costs.

    :param max_hands: Most hands one player may hold (4 means three splits)
    """

    def __init__(self, max_hands: int = DEFAULT_MAX_HANDS):
        if max_hands < 1:
            raise InvalidArgumentError("A player must be allowed at least one hand.")
        self.max_hands = max_hands

    @property
    def max_splits(self) -> int:
        return self.max_hands - 1

    def can_split(self, hand: BlackjackHand) -> bool:
        return hand.is_pair

    def can_split_more(self, current_num_hands: int) -> bool:
        return current_num_hands < self.max_hands

    def split_hand(self, hand: BlackjackHand) -> Tuple[BlackjackHand, BlackjackHand]:
        """
        Divide a pair into two one-card hands, both marked as split.

        The original hand is left untouched.
        """
        if not self.can_split(hand):
            raise InvalidActionError(
                "Hand cannot be split. Must have exactly 2 cards of the same rank."
            )
        first_card, second_card = hand.cards
        return (
            BlackjackHand([first_card], is_split=True),
            BlackjackHand([second_card], is_split=True),
        )

    def is_split_aces_hand(self, hand: BlackjackHand) -> bool:
        """A split hand still waiting on the one card its ace is allowed."""
        return hand.is_split_hand and hand.card_count == 1 and hand.cards[0].rank == Rank.ACE

    def has_sufficient_funds_for_split(self, player: Player, amount: Amount) -> bool:
        return player.has_sufficient_funds(amount)

    def create_split_bet(self, bet: Bet) -> Bet:
        if bet is None:
            raise InvalidArgumentError("Cannot split without a bet.")
        return bet.create_split_bet()
