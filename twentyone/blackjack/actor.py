"""
This module provides the `Player` class, the bankroll owner in a round of blackjack.

A `Player` keeps a name, a bankroll, the hand dealt at the start of the round
and the bet placed on it. Every wager it makes (the opening bet, the extra
stake for a split or a double down) is drawn from the bankroll, and
settlement pays the total return back into it.

Exceptions:
    - `InsufficientFundsError`: Raised when the bankroll cannot cover a wager.
    - `InvalidStateError`: Raised when betting or settling out of turn.
"""

from typing import Optional

from twentyone.blackjack.bet import Bet
from twentyone.blackjack.constants import DEFAULT_BLACKJACK_MULTIPLIER, BetType, GameResult
from twentyone.blackjack.hand import BlackjackHand
from twentyone.common.card import Card
from twentyone.common.money import Amount, Money
from twentyone.exceptions import (
    InsufficientFundsError,
    InvalidArgumentError,
    InvalidStateError,
)
from twentyone.log import get_logger

logger = get_logger("player")


class Player:
    """A player in a game of Blackjack."""

    def __init__(self, name: str, initial_bankroll: Amount = 0):
        """Creates a new player with the given name and bankroll."""
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError("Player name cannot be empty or whitespace.")
        bankroll = Money.of(initial_bankroll)
        if bankroll.is_negative:
            raise InvalidArgumentError("Initial bankroll cannot be negative.")

        self.name = name.strip()
        self.hand = BlackjackHand()
        self._bankroll = bankroll
        self._current_bet: Optional[Bet] = None

    @property
    def bankroll(self) -> Money:
        return self._bankroll

    @property
    def current_bet(self) -> Optional[Bet]:
        return self._current_bet

    @property
    def has_active_bet(self) -> bool:
        return self._current_bet is not None and self._current_bet.is_active

    def has_sufficient_funds(self, amount: Amount) -> bool:
        return self._bankroll >= Money.of(amount, self._bankroll.currency)

    def place_bet(self, amount: Amount, bet_type: BetType = BetType.STANDARD) -> Bet:
        """Place the opening bet for the round and take the stake from the bankroll."""
        amount = Money.of(amount, self._bankroll.currency)
        if not amount.is_positive:
            raise InvalidArgumentError("Bet amount must be positive.")
        if self.has_active_bet:
            raise InvalidStateError(f"{self.name} already has an active bet.")
        if not self.has_sufficient_funds(amount):
            raise InsufficientFundsError(
                f"Insufficient funds. Required: {amount}, Available: {self._bankroll}"
            )

        self._current_bet = Bet(amount, self.name, bet_type)
        self._bankroll = self._bankroll - amount
        logger.debug("%s placed %s", self.name, amount)
        return self._current_bet

    def add_funds(self, amount: Amount) -> None:
        amount = Money.of(amount, self._bankroll.currency)
        if not amount.is_positive:
            raise InvalidArgumentError("Amount to add must be positive.")
        self._bankroll = self._bankroll + amount

    def deduct_funds(self, amount: Amount) -> None:
        amount = Money.of(amount, self._bankroll.currency)
        if not amount.is_positive:
            raise InvalidArgumentError("Amount to deduct must be positive.")
        if not self.has_sufficient_funds(amount):
            raise InsufficientFundsError(
                f"Insufficient funds. Required: {amount}, Available: {self._bankroll}"
            )
        self._bankroll = self._bankroll - amount

    def update_bankroll(self, amount: Amount) -> None:
        """Apply a signed adjustment; the bankroll may not go negative."""
        new_bankroll = self._bankroll + Money.of(amount, self._bankroll.currency)
        if new_bankroll.is_negative:
            raise InsufficientFundsError(
                "Operation would result in negative bankroll. "
                f"Current: {self._bankroll}, Change: {amount}"
            )
        self._bankroll = new_bankroll

    def settle_bet(
        self, result: GameResult, blackjack_multiplier: float = DEFAULT_BLACKJACK_MULTIPLIER
    ) -> Money:
        """
        Settle the current bet and credit the total return.

        :return: The total return paid into the bankroll
        """
        if not self.has_active_bet:
            raise InvalidStateError(f"{self.name} has no active bet to settle.")

        bet = self._current_bet
        total_return = bet.calculate_total_return(result, blackjack_multiplier)
        bet.settle()
        if total_return.is_positive:
            self._bankroll = self._bankroll + total_return
        self._current_bet = None
        logger.debug("%s settled %s: %s returned", self.name, result, total_return)
        return total_return

    def replace_current_bet(self, bet: Bet) -> None:
        """
        Retire the current bet in favour of one derived from it, e.g. after doubling.

        The retired bet is settled so it can never be paid out.
        """
        if not self.has_active_bet:
            raise InvalidStateError(f"{self.name} has no active bet to replace.")
        if bet.is_settled:
            raise InvalidStateError("Cannot replace a bet with a settled bet.")
        previous = self._current_bet
        self._current_bet = bet
        previous.settle()

    def clear_bet(self) -> None:
        """Withdraw the current bet and refund the stake."""
        if not self.has_active_bet:
            raise InvalidStateError(f"{self.name} has no active bet to clear.")
        self._bankroll = self._bankroll + self._current_bet.amount
        self._current_bet = None

    def add_card(self, card: Card) -> None:
        self.hand.add_card(card)

    def reset_for_new_round(self) -> None:
        """Give the player a fresh hand and forget the round's bet."""
        self.hand = BlackjackHand()
        self._current_bet = None

    @property
    def hand_value(self) -> int:
        return self.hand.value()

    def is_busted(self) -> bool:
        return self.hand.is_busted

    def has_blackjack(self) -> bool:
        return self.hand.is_blackjack

    def has_soft_hand(self) -> bool:
        return self.hand.is_soft

    def __str__(self) -> str:
        return f"Player {self.name}: {self.hand} (Value: {self.hand_value}) (Bankroll: {self._bankroll})"

    def __repr__(self) -> str:
        return f"Player({self.name!r}, {self._bankroll!r})"
