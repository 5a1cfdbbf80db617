"""
Turn sequencing across a player's hands.

`MultiHandPlayer` wraps a `Player` with an ordered list of `PlayerHand`
records and a cursor naming the hand that currently receives actions. Splits
insert the new hand directly after the one being split, so hands are always
played left to right. Once the cursor moves past the last hand the player's
turn is over.
"""

from typing import List, Optional, Sequence

from twentyone.blackjack.actor import Player
from twentyone.blackjack.bet import Bet, PayoutResult
from twentyone.blackjack.constants import DEFAULT_BLACKJACK_MULTIPLIER, BetType
from twentyone.blackjack.hand import BlackjackHand
from twentyone.blackjack.player_hand import PlayerHand
from twentyone.blackjack.rules import RuleEvaluator
from twentyone.blackjack.split import DEFAULT_MAX_HANDS, SplitHandManager
from twentyone.common.card import Card
from twentyone.common.money import Money
from twentyone.exceptions import (
    InsufficientFundsError,
    InvalidActionError,
    InvalidArgumentError,
    InvalidStateError,
)
from twentyone.log import get_logger

logger = get_logger("multi_hand")


def next_active_index(hands: Sequence[PlayerHand], index: int) -> int:
    """
    Index of the first active hand after ``index``.

    Returns ``len(hands)`` when no later hand is active, meaning the turn is over.
    """
    index += 1
    while index < len(hands) and not hands[index].is_active:
        index += 1
    return min(index, len(hands))


class MultiHandPlayer:
    """
    A player holding one or more hands in the current round.

    :param player: The bankroll owner; its active bet and hand become the first hand
    :param max_hands: Most hands the player may hold after splitting

    The first hand wraps the very `BlackjackHand` held as ``player.hand``, so the
    player's hand helpers keep reporting the opening hand while this object
    deals to it. Once seated, cards go through this object only; split hands are
    never visible through ``player.hand``.
    """

    def __init__(self, player: Player, max_hands: int = DEFAULT_MAX_HANDS):
        if player is None:
            raise InvalidArgumentError("A multi-hand player needs a player.")
        if max_hands < 1:
            raise InvalidArgumentError("A player must be allowed at least one hand.")
        self.player = player
        self.max_hands = max_hands
        self._hands: List[PlayerHand] = []
        self._current_index = 0

        if player.has_active_bet:
            self._hands.append(PlayerHand(player.hand, player.current_bet))

    @property
    def name(self) -> str:
        return self.player.name

    @property
    def bankroll(self) -> Money:
        return self.player.bankroll

    @property
    def hands(self) -> tuple:
        return tuple(self._hands)

    @property
    def hand_count(self) -> int:
        return len(self._hands)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_hand(self) -> Optional[PlayerHand]:
        if self._current_index < len(self._hands):
            return self._hands[self._current_index]
        return None

    @property
    def has_active_hands(self) -> bool:
        return any(h.is_active for h in self._hands)

    @property
    def all_hands_complete(self) -> bool:
        return all(h.is_complete for h in self._hands)

    @property
    def has_busted_hand(self) -> bool:
        return any(h.is_busted for h in self._hands)

    @property
    def has_blackjack_hand(self) -> bool:
        return any(h.is_blackjack for h in self._hands)

    def _require_current(self, what: str) -> PlayerHand:
        hand = self.current_hand
        if hand is None:
            raise InvalidStateError(f"No current hand to {what}.")
        return hand

    def add_hand(self, hand: BlackjackHand, bet: Bet) -> PlayerHand:
        if len(self._hands) >= self.max_hands:
            raise InvalidActionError(f"{self.name} already holds {self.max_hands} hands.")
        player_hand = PlayerHand(hand, bet)
        self._hands.append(player_hand)
        return player_hand

    def advance_to_next_hand(self) -> bool:
        """
        Pass the turn to the next active hand.

        :return: False once every hand has been played
        """
        current = self.current_hand
        if current is not None and current.is_active:
            current.mark_as_inactive()

        self._current_index = next_active_index(self._hands, self._current_index)
        return self._current_index < len(self._hands)

    def reset_to_first_hand(self) -> None:
        """Move the cursor back to the first hand and wake every unfinished hand."""
        self._current_index = 0
        for hand in self._hands:
            if not hand.is_complete:
                hand.reactivate()

    def _split_source_bet(self, bet: Bet) -> Bet:
        # Re-splits price the new hand off the opening bet, which stays standard.
        if bet.bet_type == BetType.STANDARD:
            return bet
        opening = self.player.current_bet
        if opening is None or opening.bet_type != BetType.STANDARD:
            raise InvalidStateError("No standard bet to derive a split bet from.")
        return opening

    def split_current_hand(self, manager: SplitHandManager) -> PlayerHand:
        """
        Split the current pair into two hands.

        The current record is replaced by the first half (keeping its bet), and the
        second half is inserted right after it with a new split bet funded from the
        player's bankroll.

        :return: The newly inserted hand
        """
        if manager is None:
            raise InvalidArgumentError("A split hand manager is required.")

        current = self._require_current("split")
        if not current.can_split() or not manager.can_split(current.hand):
            raise InvalidActionError("Current hand cannot be split.")
        limit = min(self.max_hands, manager.max_hands)
        if len(self._hands) >= limit:
            raise InvalidActionError(f"{self.name} has reached maximum splits.")

        stake = current.bet.amount
        if not manager.has_sufficient_funds_for_split(self.player, stake):
            raise InsufficientFundsError("Insufficient funds to split hand.")

        # Everything that can fail runs before the first mutation.
        split_bet = manager.create_split_bet(self._split_source_bet(current.bet))
        first_hand, second_hand = manager.split_hand(current.hand)
        self.player.deduct_funds(stake)

        index = self._current_index
        self._hands[index] = PlayerHand(first_hand, current.bet)
        new_hand = PlayerHand(second_hand, split_bet)
        self._hands.insert(index + 1, new_hand)

        logger.debug("%s split hand %d into %d hands", self.name, index, len(self._hands))
        return new_hand

    def double_down_current_hand(self) -> Bet:
        """
        Double the current hand's wager; the next card completes the hand.

        :return: The new double down bet now riding on the hand
        """
        current = self._require_current("double down")
        if not current.can_double_down():
            raise InvalidActionError("Current hand cannot be doubled down.")
        if current.is_split_hand or current.bet.bet_type != BetType.STANDARD:
            raise InvalidActionError("Doubling after a split is not allowed.")

        stake = current.bet.amount
        if not self.player.has_sufficient_funds(stake):
            raise InsufficientFundsError("Insufficient funds to double down.")

        opening = current.bet
        doubled = opening.create_double_down_bet()
        self.player.deduct_funds(stake)
        current.apply_double_down(doubled)
        if self.player.current_bet is opening:
            self.player.replace_current_bet(doubled)
        else:
            opening.settle()
        logger.debug("%s doubled down to %s", self.name, doubled.amount)
        return doubled

    def add_card_to_current_hand(self, card: Card) -> None:
        self._require_current("add card to").add_card(card)

    def complete_current_hand(self) -> None:
        self._require_current("complete").mark_as_complete()

    def settle_hands(
        self,
        dealer_hand: BlackjackHand,
        evaluator: RuleEvaluator,
        blackjack_multiplier: float = DEFAULT_BLACKJACK_MULTIPLIER,
    ) -> List[PayoutResult]:
        """
        Price every hand against the dealer, settle its bet and credit the bankroll.

        All payouts are priced before any bet is settled, so a failure leaves
        every hand and the bankroll untouched.
        """
        priced = []
        for hand in self._hands:
            result = evaluator.determine_result(hand.hand, dealer_hand)
            priced.append(
                PayoutResult(
                    bet=hand.bet,
                    result=result,
                    payout=hand.bet.calculate_payout(result, blackjack_multiplier),
                    total_return=hand.bet.calculate_total_return(result, blackjack_multiplier),
                )
            )

        for payout in priced:
            payout.bet.settle()
            if payout.total_return.is_positive:
                self.player.add_funds(payout.total_return)
            logger.debug("%s: %s", self.name, payout)
        return priced

    def total_bet_amount(self) -> Money:
        total = Money.zero(self.player.bankroll.currency)
        for hand in self._hands:
            total = total + hand.bet.amount
        return total

    def clear_all_hands(self) -> None:
        self._hands.clear()
        self._current_index = 0
        self.player.reset_for_new_round()

    def __str__(self) -> str:
        if not self._hands:
            return f"{self.name}: No hands"
        if len(self._hands) == 1:
            return f"{self.name}: {self._hands[0]}"
        hands_text = ", ".join(f"Hand {i + 1}: {h}" for i, h in enumerate(self._hands))
        return f"{self.name}: {hands_text}"
